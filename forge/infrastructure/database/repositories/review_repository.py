"""Review repository implementation."""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from forge.application.interfaces.repositories import ReviewRepositoryInterface
from forge.config.logging import get_logger
from forge.domain.entities.review import Review
from forge.domain.exceptions.resource_error import ConflictError
from forge.infrastructure.database.models.review import ReviewModel

logger = get_logger(__name__)


class ReviewRepository(ReviewRepositoryInterface):
    """Review repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_job_and_author(
        self, job_id: UUID, author_id: UUID
    ) -> Optional[Review]:
        """Find the review an author left on a job."""
        stmt = select(ReviewModel).where(
            ReviewModel.job_id == job_id, ReviewModel.author_id == author_id
        )
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return self._model_to_entity(model) if model else None

    async def create(self, review: Review) -> Review:
        """Create a new review; the (job, author) pair is unique."""
        review_model = ReviewModel(
            id=review.id,
            job_id=review.job_id,
            author_id=review.author_id,
            target_id=review.target_id,
            rating=review.rating,
            comment=review.comment,
            created_at=review.created_at,
        )

        self.db.add(review_model)
        try:
            await self.db.flush()
        except IntegrityError as e:
            logger.warning(
                "Duplicate review rejected by database",
                job_id=str(review.job_id),
                author_id=str(review.author_id),
            )
            raise ConflictError(
                "Review already exists for this job", reason="review_exists"
            ) from e
        await self.db.refresh(review_model)

        return self._model_to_entity(review_model)

    def _model_to_entity(self, model: ReviewModel) -> Review:
        """Convert SQLAlchemy model to domain entity."""
        return Review(
            id=model.id,
            job_id=model.job_id,
            author_id=model.author_id,
            target_id=model.target_id,
            rating=model.rating,
            comment=model.comment,
            created_at=model.created_at,
        )
