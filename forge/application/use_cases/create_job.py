"""Create job use case."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from forge.application.interfaces.repositories import JobRepositoryInterface
from forge.config.logging import get_logger
from forge.domain.entities.job import Job
from forge.domain.exceptions.validation_error import (
    RequiredFieldError,
    ValidationError,
)
from forge.domain.value_objects.job_urgency import JobUrgency
from forge.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from forge.infrastructure.monitoring.metrics import JOBS_CREATED

logger = get_logger(__name__)


@dataclass
class CreateJobRequest:
    """Request for creating a job."""

    title: Optional[str]
    description: Optional[str]
    job_type: Optional[str]
    address: Optional[str]
    created_by_id: UUID
    urgency: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


@dataclass
class CreateJobResult:
    """Result of job creation."""

    job: Job


class CreateJobUseCase:
    """Use case for posting a new job to the marketplace."""

    def __init__(
        self,
        job_repo: JobRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.job_repo = job_repo
        self.transaction_service = transaction_service

    async def execute(self, request: CreateJobRequest) -> CreateJobResult:
        """Create a REQUESTED, unassigned job owned by the requester."""
        for field_name in ("title", "description", "job_type", "address"):
            value = getattr(request, field_name)
            if value is None or not str(value).strip():
                raise RequiredFieldError(field_name)

        urgency = JobUrgency.MEDIUM
        if request.urgency is not None:
            try:
                urgency = JobUrgency(request.urgency)
            except ValueError:
                raise ValidationError(
                    f"Unknown urgency '{request.urgency}'", reason="invalid_urgency"
                )

        job = Job(
            title=request.title.strip(),
            description=request.description.strip(),
            job_type=request.job_type.strip(),
            address=request.address.strip(),
            urgency=urgency,
            latitude=request.latitude,
            longitude=request.longitude,
            created_by_id=request.created_by_id,
        )

        async def operation():
            created = await self.job_repo.create(job)
            return await self.job_repo.get_details(created.id)

        created_job = await self.transaction_service.execute_in_transaction(operation)

        JOBS_CREATED.labels(job_type=job.job_type, urgency=urgency.value).inc()
        logger.info(
            "Job created",
            job_id=str(created_job.id),
            job_type=created_job.job_type,
            urgency=urgency.value,
            created_by_id=str(request.created_by_id),
        )

        return CreateJobResult(job=created_job)
