"""Record earning use case."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import List
from uuid import UUID

from forge.application.interfaces.repositories import (
    BadgeRepositoryInterface,
    EarningRepositoryInterface,
    JobRepositoryInterface,
    PlumberProfileRepositoryInterface,
)
from forge.config.logging import get_logger
from forge.domain.entities.earning import Earning
from forge.domain.entities.plumber_profile import PlumberProfile, UnlockedBadge
from forge.domain.exceptions.resource_error import ConflictError, NotFoundError
from forge.domain.exceptions.state_error import InvalidStateError
from forge.domain.exceptions.validation_error import ValidationError
from forge.domain.value_objects.job_status import JobStatus
from forge.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from forge.infrastructure.monitoring.metrics import BADGES_UNLOCKED, EARNINGS_RECORDED

logger = get_logger(__name__)


@dataclass
class RecordEarningRequest:
    """Request for settling a completed job."""

    plumber_id: UUID
    job_id: UUID
    amount: Decimal


@dataclass
class RecordEarningResult:
    """Result of settling a job."""

    earning: Earning
    profile: PlumberProfile
    unlocked_badges: List[UnlockedBadge] = field(default_factory=list)


class RecordEarningUseCase:
    """
    Use case for settling a completed job.

    Appends the earning row, grants urgency-based XP, recomputes the level
    and unlocks any badge whose requirements are now met.
    """

    def __init__(
        self,
        profile_repo: PlumberProfileRepositoryInterface,
        job_repo: JobRepositoryInterface,
        earning_repo: EarningRepositoryInterface,
        badge_repo: BadgeRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.profile_repo = profile_repo
        self.job_repo = job_repo
        self.earning_repo = earning_repo
        self.badge_repo = badge_repo
        self.transaction_service = transaction_service

    async def execute(self, request: RecordEarningRequest) -> RecordEarningResult:
        """Record the earning and update the plumber's progression."""
        try:
            amount = Decimal(str(request.amount))
        except InvalidOperation:
            raise ValidationError("Amount must be a number", reason="invalid_amount")
        if not amount.is_finite() or amount <= 0:
            raise ValidationError("Amount must be positive", reason="invalid_amount")

        async def operation():
            profile = await self.profile_repo.get_by_user_id(
                request.plumber_id, with_details=True, for_update=True
            )
            if not profile:
                raise NotFoundError("plumber_profile", request.plumber_id)

            job = await self.job_repo.get_by_id(request.job_id, for_update=True)
            if not job:
                raise NotFoundError("job", request.job_id)
            if job.status != JobStatus.COMPLETED:
                raise InvalidStateError(
                    "Only completed jobs can be settled",
                    current_status=job.status.value,
                    reason="job_not_completed",
                )
            if job.assigned_to_id != request.plumber_id:
                raise InvalidStateError(
                    "Job is not assigned to this plumber",
                    current_status=job.status.value,
                    reason="job_not_assigned",
                )

            if await self.earning_repo.exists_for_job(request.plumber_id, job.id):
                raise ConflictError(
                    "Earning already recorded for this job", reason="earning_exists"
                )

            earning = await self.earning_repo.create(
                Earning(
                    plumber_id=request.plumber_id,
                    job_id=job.id,
                    amount=amount,
                    xp_awarded=job.urgency.xp_reward,
                )
            )

            profile.award_xp(earning.xp_awarded)
            updated_profile = await self.profile_repo.update(profile)

            jobs_completed = await self.job_repo.count_assigned(
                request.plumber_id, JobStatus.COMPLETED
            )
            unlocked = await self._unlock_badges(profile, jobs_completed)
            updated_profile.badges = profile.badges + unlocked

            return earning, updated_profile, unlocked

        result = await self.transaction_service.execute_in_transaction(operation)
        earning, profile, unlocked = result

        EARNINGS_RECORDED.inc()
        for badge in unlocked:
            BADGES_UNLOCKED.labels(badge=badge.name).inc()

        logger.info(
            "Earning recorded",
            plumber_id=str(request.plumber_id),
            job_id=str(request.job_id),
            amount=str(earning.amount),
            xp_awarded=earning.xp_awarded,
            xp=profile.xp,
            level=profile.level,
            unlocked_badges=[badge.name for badge in unlocked],
        )

        return RecordEarningResult(
            earning=earning, profile=profile, unlocked_badges=unlocked
        )

    async def _unlock_badges(
        self, profile: PlumberProfile, jobs_completed: int
    ) -> List[UnlockedBadge]:
        owned = profile.badge_ids
        unlocked_at = datetime.now(timezone.utc)
        unlocked = []
        for badge in await self.badge_repo.list_catalog():
            if badge.id in owned or not badge.is_earned_by(profile.xp, jobs_completed):
                continue
            unlocked.append(
                await self.badge_repo.unlock(profile.id, badge.id, unlocked_at)
            )
        return unlocked
