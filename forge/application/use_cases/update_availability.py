"""Update availability use case."""

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from forge.application.interfaces.repositories import (
    PlumberProfileRepositoryInterface,
)
from forge.config.logging import get_logger
from forge.domain.exceptions.resource_error import NotFoundError
from forge.domain.exceptions.validation_error import ValidationError
from forge.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

logger = get_logger(__name__)


@dataclass
class UpdateAvailabilityRequest:
    """Request for toggling whether a plumber takes jobs."""

    plumber_id: UUID
    is_active: Any


class UpdateAvailabilityUseCase:
    """Use case for toggling plumber availability."""

    def __init__(
        self,
        profile_repo: PlumberProfileRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.profile_repo = profile_repo
        self.transaction_service = transaction_service

    async def execute(self, request: UpdateAvailabilityRequest) -> bool:
        """Set the profile's availability and return the stored value."""
        if not isinstance(request.is_active, bool):
            raise ValidationError(
                "is_active must be a boolean", reason="invalid_availability"
            )

        async def operation():
            profile = await self.profile_repo.get_by_user_id(request.plumber_id)
            if not profile:
                raise NotFoundError("plumber_profile", request.plumber_id)

            profile.is_active = request.is_active
            return await self.profile_repo.update(profile)

        profile = await self.transaction_service.execute_in_transaction(operation)

        logger.info(
            "Availability updated",
            plumber_id=str(request.plumber_id),
            is_active=profile.is_active,
        )
        return profile.is_active
