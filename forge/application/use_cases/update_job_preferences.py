"""Update job preferences use case."""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional
from uuid import UUID

from forge.application.interfaces.repositories import (
    PlumberProfileRepositoryInterface,
)
from forge.config.logging import get_logger
from forge.domain.entities.plumber_profile import (
    DEFAULT_MAX_DISTANCE_KM,
    WEEKDAYS,
    JobPreference,
)
from forge.domain.exceptions.resource_error import NotFoundError
from forge.domain.exceptions.validation_error import (
    InvalidFormatError,
    ValidationError,
)
from forge.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

logger = get_logger(__name__)

TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


@dataclass
class UpdateJobPreferencesRequest:
    """Request for replacing a plumber's job preferences."""

    plumber_id: UUID
    preferred_job_types: Optional[List[str]] = None
    max_distance_km: Optional[int] = None
    hours: Dict[str, Optional[str]] = field(default_factory=dict)


class UpdateJobPreferencesUseCase:
    """Use case for upserting plumber job preferences."""

    def __init__(
        self,
        profile_repo: PlumberProfileRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.profile_repo = profile_repo
        self.transaction_service = transaction_service

    async def execute(self, request: UpdateJobPreferencesRequest) -> JobPreference:
        """Create or overwrite every preference field."""
        hours = self._validate_hours(request.hours)

        # Zero and missing both mean "use the default radius"
        max_distance_km = request.max_distance_km or DEFAULT_MAX_DISTANCE_KM
        if max_distance_km < 0:
            raise ValidationError(
                "max_distance_km cannot be negative", reason="invalid_distance"
            )

        async def operation():
            profile = await self.profile_repo.get_by_user_id(request.plumber_id)
            if not profile:
                raise NotFoundError("plumber_profile", request.plumber_id)

            return await self.profile_repo.upsert_preferences(
                JobPreference(
                    plumber_profile_id=profile.id,
                    preferred_job_types=list(request.preferred_job_types or []),
                    max_distance_km=max_distance_km,
                    hours=hours,
                )
            )

        preference = await self.transaction_service.execute_in_transaction(operation)

        logger.info(
            "Job preferences updated",
            plumber_id=str(request.plumber_id),
            preferred_job_types=preference.preferred_job_types,
            max_distance_km=preference.max_distance_km,
        )
        return preference

    def _validate_hours(
        self, hours: Dict[str, Optional[str]]
    ) -> Dict[str, Optional[str]]:
        known = {f"{day}_{edge}" for day in WEEKDAYS for edge in ("start", "end")}
        validated = {}
        for key, value in (hours or {}).items():
            if key not in known:
                raise ValidationError(f"Unknown schedule field '{key}'")
            if value is not None and not TIME_PATTERN.match(value):
                raise InvalidFormatError(key, "HH:MM")
            validated[key] = value
        return validated
