"""Earning ledger repository implementation."""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from forge.application.interfaces.repositories import EarningRepositoryInterface
from forge.domain.entities.earning import Earning
from forge.domain.exceptions.resource_error import ConflictError
from forge.infrastructure.database.models.earning import EarningModel


class EarningRepository(EarningRepositoryInterface):
    """Earning ledger repository. Rows are only ever inserted."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, earning: Earning) -> Earning:
        """Append an earning row."""
        earning_model = EarningModel(
            id=earning.id,
            plumber_id=earning.plumber_id,
            job_id=earning.job_id,
            amount=earning.amount,
            xp_awarded=earning.xp_awarded,
            created_at=earning.created_at,
            updated_at=earning.created_at,
        )

        self.db.add(earning_model)
        try:
            await self.db.flush()
        except IntegrityError as e:
            raise ConflictError(
                "Earning already recorded for this job", reason="earning_exists"
            ) from e

        return earning

    async def exists_for_job(self, plumber_id: UUID, job_id: UUID) -> bool:
        """Check if the plumber was already paid for the job."""
        stmt = select(func.count(EarningModel.id)).where(
            EarningModel.plumber_id == plumber_id, EarningModel.job_id == job_id
        )
        result = await self.db.execute(stmt)
        return result.scalar_one() > 0

    async def sum_amount(
        self, plumber_id: UUID, since: Optional[datetime] = None
    ) -> Decimal:
        """Sum the plumber's earnings created at or after ``since``."""
        stmt = select(func.sum(EarningModel.amount)).where(
            EarningModel.plumber_id == plumber_id
        )
        if since is not None:
            stmt = stmt.where(EarningModel.created_at >= since)

        result = await self.db.execute(stmt)
        total = result.scalar_one_or_none()
        return Decimal(str(total)) if total is not None else Decimal("0")
