"""
Unit-of-work boundary for use cases.
"""

from typing import Awaitable, Callable, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from forge.config.logging import get_logger
from forge.domain.exceptions.base import ForgeError
from forge.domain.exceptions.resource_error import ConflictError

logger = get_logger(__name__)

T = TypeVar("T")


class TransactionService:
    """Runs a read-check-write sequence as one database transaction."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def execute_in_transaction(self, operation: Callable[[], Awaitable[T]]) -> T:
        """
        Run ``operation`` and commit its writes, or roll everything back.

        Args:
            operation: Async callable doing the reads, checks and writes

        Returns:
            Whatever ``operation`` returned

        Raises:
            ForgeError: Rejections raised by the operation, re-raised as is
            ConflictError: If the commit loses a race on a versioned row or a
                unique constraint
        """
        try:
            result = await operation()
        except ForgeError as e:
            await self.session.rollback()
            logger.info("Transaction rejected", reason=e.reason, error=e.message)
            raise
        except Exception:
            await self.session.rollback()
            logger.error("Transaction failed", exc_info=True)
            raise

        try:
            await self.session.commit()
        except (IntegrityError, StaleDataError) as e:
            await self.session.rollback()
            logger.warning("Commit lost a concurrent update", error=str(e))
            raise ConflictError(
                "Resource was modified concurrently", reason="concurrent_update"
            ) from e

        logger.debug("Transaction committed")
        return result
