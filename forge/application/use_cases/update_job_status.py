"""Update job status use case."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from forge.application.interfaces.repositories import JobRepositoryInterface
from forge.config.logging import get_logger
from forge.config.settings import settings
from forge.domain.entities.job import Job
from forge.domain.exceptions.resource_error import NotFoundError
from forge.domain.exceptions.validation_error import ValidationError
from forge.domain.value_objects.job_status import JobStatus
from forge.domain.value_objects.user_role import UserRole
from forge.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from forge.infrastructure.monitoring.metrics import JOB_STATUS_TRANSITIONS

logger = get_logger(__name__)


@dataclass
class UpdateJobStatusRequest:
    """Request for changing a job's status."""

    job_id: UUID
    status: Optional[str]
    actor_id: UUID
    actor_role: UserRole
    scheduled_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None


@dataclass
class UpdateJobStatusResult:
    """Result of a status change."""

    job: Job
    previous_status: JobStatus


class UpdateJobStatusUseCase:
    """Use case for moving a job along its lifecycle."""

    def __init__(
        self,
        job_repo: JobRepositoryInterface,
        transaction_service: TransactionService,
        strict: Optional[bool] = None,
    ):
        self.job_repo = job_repo
        self.transaction_service = transaction_service
        self.strict = settings.STRICT_STATUS_TRANSITIONS if strict is None else strict

    async def execute(self, request: UpdateJobStatusRequest) -> UpdateJobStatusResult:
        """Apply the status change and return the job with participant summaries."""
        try:
            new_status = JobStatus(request.status)
        except ValueError:
            raise ValidationError(
                f"Invalid status '{request.status}'", reason="invalid_status"
            )

        async def operation():
            job = await self.job_repo.get_by_id(request.job_id, for_update=True)
            if not job:
                raise NotFoundError("job", request.job_id)

            previous_status = job.status
            job.apply_status(
                new_status,
                actor_id=request.actor_id,
                actor_role=request.actor_role,
                scheduled_at=request.scheduled_at,
                completed_at=request.completed_at,
                strict=self.strict,
            )
            await self.job_repo.update(job)
            return previous_status, await self.job_repo.get_details(job.id)

        previous_status, job = await self.transaction_service.execute_in_transaction(
            operation
        )

        JOB_STATUS_TRANSITIONS.labels(
            from_status=previous_status.value, to_status=new_status.value
        ).inc()
        logger.info(
            "Job status updated",
            job_id=str(job.id),
            from_status=previous_status.value,
            to_status=new_status.value,
            actor_id=str(request.actor_id),
            assigned_to_id=str(job.assigned_to_id) if job.assigned_to_id else None,
        )

        return UpdateJobStatusResult(job=job, previous_status=previous_status)
