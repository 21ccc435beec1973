"""
Dashboard aggregation for plumber profiles.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable, List, Optional
from uuid import UUID
from zoneinfo import ZoneInfo

from forge.application.interfaces.repositories import (
    EarningRepositoryInterface,
    JobRepositoryInterface,
    PlumberProfileRepositoryInterface,
)
from forge.config.logging import get_logger
from forge.config.settings import settings
from forge.domain.entities.plumber_profile import UnlockedBadge
from forge.domain.exceptions.resource_error import NotFoundError
from forge.domain.value_objects.earnings_window import EarningsWindows
from forge.domain.value_objects.job_status import JobStatus

logger = get_logger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ProfileSummary:
    """Gamification state shown on the dashboard."""

    xp: int
    level: int
    next_level_xp: int
    forge_score: float
    is_active: bool


@dataclass
class EarningsSummary:
    """Earnings sums per reporting window."""

    today: Decimal
    week: Decimal
    month: Decimal
    total: Decimal


@dataclass
class JobCounts:
    """Job counters shown on the dashboard."""

    available: int
    in_progress: int
    completed: int


@dataclass
class DashboardSnapshot:
    """Everything the plumber dashboard renders."""

    profile: ProfileSummary
    earnings: EarningsSummary
    jobs: JobCounts
    badges: List[UnlockedBadge] = field(default_factory=list)


class DashboardAggregator:
    """Builds read-only dashboard snapshots from the profile and ledger."""

    def __init__(
        self,
        profile_repo: PlumberProfileRepositoryInterface,
        job_repo: JobRepositoryInterface,
        earning_repo: EarningRepositoryInterface,
        clock: Callable[[], datetime] = _utc_now,
        timezone_name: Optional[str] = None,
    ):
        self.profile_repo = profile_repo
        self.job_repo = job_repo
        self.earning_repo = earning_repo
        self.clock = clock
        self.tz = ZoneInfo(timezone_name or settings.DASHBOARD_TIMEZONE)

    async def build(self, plumber_id: UUID) -> DashboardSnapshot:
        """
        Aggregate the dashboard for a plumber.

        Args:
            plumber_id: User ID of the plumber

        Returns:
            DashboardSnapshot for the current moment

        Raises:
            NotFoundError: If the plumber has no profile
        """
        profile = await self.profile_repo.get_by_user_id(plumber_id, with_details=True)
        if not profile:
            raise NotFoundError("plumber_profile", plumber_id)

        windows = EarningsWindows.for_moment(self.clock().astimezone(self.tz))

        earnings = EarningsSummary(
            today=await self.earning_repo.sum_amount(
                plumber_id, since=windows.start_of_today
            ),
            week=await self.earning_repo.sum_amount(
                plumber_id, since=windows.start_of_week
            ),
            month=await self.earning_repo.sum_amount(
                plumber_id, since=windows.start_of_month
            ),
            total=await self.earning_repo.sum_amount(plumber_id),
        )

        jobs = JobCounts(
            available=await self.job_repo.count_available(),
            in_progress=await self.job_repo.count_assigned(
                plumber_id, JobStatus.IN_PROGRESS
            ),
            completed=await self.job_repo.count_assigned(
                plumber_id, JobStatus.COMPLETED
            ),
        )

        logger.debug(
            "Dashboard aggregated",
            plumber_id=str(plumber_id),
            total_earnings=str(earnings.total),
            badges=len(profile.badges),
        )

        return DashboardSnapshot(
            profile=ProfileSummary(
                xp=profile.xp,
                level=profile.level,
                next_level_xp=profile.next_level_xp,
                forge_score=profile.forge_score,
                is_active=profile.is_active,
            ),
            earnings=earnings,
            jobs=jobs,
            badges=list(profile.badges),
        )
