"""List available jobs use case."""

from dataclasses import dataclass
from typing import List
from uuid import UUID

from forge.application.interfaces.repositories import (
    JobRepositoryInterface,
    PlumberProfileRepositoryInterface,
)
from forge.config.logging import get_logger
from forge.domain.entities.job import Job
from forge.domain.exceptions.resource_error import NotFoundError

logger = get_logger(__name__)


@dataclass
class ListAvailableJobsResult:
    """Open jobs a plumber can quote on."""

    jobs: List[Job]


class ListAvailableJobsUseCase:
    """Use case for the plumber job feed."""

    def __init__(
        self,
        job_repo: JobRepositoryInterface,
        profile_repo: PlumberProfileRepositoryInterface,
    ):
        self.job_repo = job_repo
        self.profile_repo = profile_repo

    async def execute(self, plumber_id: UUID) -> ListAvailableJobsResult:
        """Get open jobs matching the plumber's preferred job types."""
        profile = await self.profile_repo.get_by_user_id(plumber_id, with_details=True)
        if not profile:
            raise NotFoundError("plumber_profile", plumber_id)

        job_types = None
        if profile.preferences and profile.preferences.preferred_job_types:
            job_types = profile.preferences.preferred_job_types

        jobs = await self.job_repo.find_available(job_types=job_types)

        logger.debug(
            "Available jobs listed",
            plumber_id=str(plumber_id),
            job_types=job_types,
            count=len(jobs),
        )
        return ListAvailableJobsResult(jobs=jobs)
