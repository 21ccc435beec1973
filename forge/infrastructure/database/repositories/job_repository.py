"""Job repository implementation."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import case, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.orm.exc import StaleDataError

from forge.application.interfaces.repositories import JobRepositoryInterface
from forge.config.logging import get_logger
from forge.domain.entities.job import Job
from forge.domain.entities.photo import Photo
from forge.domain.entities.user import UserSummary
from forge.domain.exceptions.resource_error import ConflictError, NotFoundError
from forge.domain.value_objects.job_status import JobStatus
from forge.domain.value_objects.job_urgency import JobUrgency
from forge.infrastructure.database.models.job import JobModel
from forge.infrastructure.database.models.user import UserModel
from forge.infrastructure.database.repositories.quote_repository import (
    quote_model_to_entity,
)

logger = get_logger(__name__)


class JobRepository(JobRepositoryInterface):
    """Job repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, job_id: UUID, for_update: bool = False) -> Optional[Job]:
        """Get job by ID."""
        stmt = select(JobModel).where(JobModel.id == job_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return self._model_to_entity(model) if model else None

    async def get_details(self, job_id: UUID) -> Optional[Job]:
        """Get job by ID with creator and assignee summaries."""
        stmt = (
            select(JobModel)
            .where(JobModel.id == job_id)
            .options(
                selectinload(JobModel.created_by), selectinload(JobModel.assigned_to)
            )
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()
        if not model:
            return None

        job = self._model_to_entity(model)
        job.created_by = _summary(model.created_by)
        job.assigned_to = _summary(model.assigned_to)
        return job

    async def create(self, job: Job) -> Job:
        """Create a new job."""
        job_model = JobModel(
            id=job.id,
            title=job.title,
            description=job.description,
            job_type=job.job_type,
            urgency=job.urgency,
            status=job.status,
            address=job.address,
            latitude=job.latitude,
            longitude=job.longitude,
            created_by_id=job.created_by_id,
            assigned_to_id=job.assigned_to_id,
            requested_at=job.requested_at,
            scheduled_at=job.scheduled_at,
            completed_at=job.completed_at,
            created_at=job.created_at,
            updated_at=job.updated_at,
        )

        self.db.add(job_model)
        # Use flush instead of commit to maintain transaction atomicity
        await self.db.flush()
        await self.db.refresh(job_model)

        return self._model_to_entity(job_model)

    async def update(self, job: Job) -> Job:
        """
        Update an existing job.

        The version column guards the write: if another transaction changed
        the row after it was read, the flush fails and a ConflictError is
        raised.
        """
        stmt = select(JobModel).where(JobModel.id == job.id)
        result = await self.db.execute(stmt)
        job_model = result.scalar_one_or_none()

        if not job_model:
            raise NotFoundError("job", job.id)

        if job.version is not None and job_model.version != job.version:
            raise ConflictError(
                f"Job {job.id} was modified concurrently", reason="concurrent_update"
            )

        job_model.status = job.status
        job_model.assigned_to_id = job.assigned_to_id
        job_model.scheduled_at = job.scheduled_at
        job_model.completed_at = job.completed_at
        job_model.updated_at = job.updated_at

        try:
            # Use flush instead of commit to maintain transaction atomicity
            await self.db.flush()
        except StaleDataError as e:
            logger.warning("Concurrent job update detected", job_id=str(job.id))
            raise ConflictError(
                f"Job {job.id} was modified concurrently", reason="concurrent_update"
            ) from e
        await self.db.refresh(job_model)

        return self._model_to_entity(job_model)

    async def find_available(
        self, job_types: Optional[List[str]] = None
    ) -> List[Job]:
        """Find unassigned REQUESTED jobs, most urgent and newest first."""
        urgency_rank = case(
            *[(JobModel.urgency == urgency, urgency.rank) for urgency in JobUrgency],
            else_=0,
        )
        stmt = (
            select(JobModel)
            .where(
                JobModel.status == JobStatus.REQUESTED,
                JobModel.assigned_to_id.is_(None),
            )
            .options(
                selectinload(JobModel.created_by),
                selectinload(JobModel.photos),
                selectinload(JobModel.quotes),
            )
            .order_by(urgency_rank.desc(), JobModel.created_at.desc())
            .execution_options(populate_existing=True)
        )
        if job_types:
            stmt = stmt.where(JobModel.job_type.in_(job_types))

        result = await self.db.execute(stmt)
        jobs = []
        for model in result.scalars().all():
            job = self._model_to_entity(model)
            job.created_by = _summary(model.created_by)
            job.photos = [
                Photo(
                    id=photo.id,
                    job_id=photo.job_id,
                    uploaded_by_id=photo.uploaded_by_id,
                    filename=photo.filename,
                    url=photo.url,
                    caption=photo.caption,
                    created_at=photo.created_at,
                )
                for photo in model.photos
            ]
            job.quotes = [quote_model_to_entity(quote) for quote in model.quotes]
            jobs.append(job)

        return jobs

    async def count_available(self) -> int:
        """Count unassigned REQUESTED jobs across the marketplace."""
        stmt = select(func.count(JobModel.id)).where(
            JobModel.status == JobStatus.REQUESTED,
            JobModel.assigned_to_id.is_(None),
        )
        result = await self.db.execute(stmt)
        return result.scalar_one()

    async def count_assigned(self, plumber_id: UUID, status: JobStatus) -> int:
        """Count jobs assigned to a plumber in a given status."""
        stmt = select(func.count(JobModel.id)).where(
            JobModel.assigned_to_id == plumber_id,
            JobModel.status == status,
        )
        result = await self.db.execute(stmt)
        return result.scalar_one()

    def _model_to_entity(self, model: JobModel) -> Job:
        """Convert SQLAlchemy model to domain entity."""
        return Job(
            id=model.id,
            title=model.title,
            description=model.description,
            job_type=model.job_type,
            urgency=model.urgency,
            status=model.status,
            address=model.address,
            latitude=model.latitude,
            longitude=model.longitude,
            created_by_id=model.created_by_id,
            assigned_to_id=model.assigned_to_id,
            requested_at=model.requested_at,
            scheduled_at=model.scheduled_at,
            completed_at=model.completed_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
            version=model.version,
        )


def _summary(user: Optional[UserModel]) -> Optional[UserSummary]:
    if user is None:
        return None
    return UserSummary(
        first_name=user.first_name, last_name=user.last_name, phone=user.phone
    )
