"""Create review use case."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from forge.application.interfaces.repositories import (
    JobRepositoryInterface,
    ReviewRepositoryInterface,
)
from forge.config.logging import get_logger
from forge.domain.entities.review import Review
from forge.domain.exceptions.resource_error import ConflictError, NotFoundError
from forge.domain.exceptions.validation_error import ValidationError
from forge.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from forge.infrastructure.monitoring.metrics import REVIEWS_CREATED

logger = get_logger(__name__)


@dataclass
class CreateReviewRequest:
    """Request for reviewing a completed job."""

    job_id: UUID
    author_id: UUID
    rating: int
    comment: Optional[str] = None


@dataclass
class CreateReviewResult:
    """Result of review creation."""

    review: Review


class CreateReviewUseCase:
    """Use case for rating the plumber who completed a job."""

    def __init__(
        self,
        job_repo: JobRepositoryInterface,
        review_repo: ReviewRepositoryInterface,
        transaction_service: TransactionService,
    ):
        self.job_repo = job_repo
        self.review_repo = review_repo
        self.transaction_service = transaction_service

    async def execute(self, request: CreateReviewRequest) -> CreateReviewResult:
        """Create a single review per job and author."""
        rating = request.rating
        if isinstance(rating, bool) or not isinstance(rating, int):
            raise ValidationError("Rating must be an integer", reason="invalid_rating")
        if not 1 <= rating <= 5:
            raise ValidationError(
                "Rating must be between 1 and 5", reason="invalid_rating"
            )

        async def operation():
            job = await self.job_repo.get_by_id(request.job_id, for_update=True)
            if not job:
                raise NotFoundError("job", request.job_id)

            target_id = job.ensure_reviewable()

            existing = await self.review_repo.find_by_job_and_author(
                job.id, request.author_id
            )
            if existing:
                raise ConflictError(
                    "You have already reviewed this job", reason="review_exists"
                )

            return await self.review_repo.create(
                Review(
                    job_id=job.id,
                    author_id=request.author_id,
                    target_id=target_id,
                    rating=rating,
                    comment=request.comment,
                )
            )

        review = await self.transaction_service.execute_in_transaction(operation)

        REVIEWS_CREATED.labels(rating=str(rating)).inc()
        logger.info(
            "Review created",
            job_id=str(review.job_id),
            review_id=str(review.id),
            target_id=str(review.target_id),
            rating=rating,
        )

        return CreateReviewResult(review=review)
