"""
Unit tests for CreateReviewUseCase.
"""

from uuid import uuid4

import pytest

from forge.application.use_cases.create_review import (
    CreateReviewRequest,
    CreateReviewUseCase,
)
from forge.domain.entities.review import Review
from forge.domain.exceptions.resource_error import ConflictError, NotFoundError
from forge.domain.exceptions.state_error import InvalidStateError
from forge.domain.exceptions.validation_error import ValidationError
from forge.domain.value_objects.job_status import JobStatus


class TestCreateReviewUseCase:
    """Test cases for CreateReviewUseCase."""

    @pytest.fixture
    def completed_job(self, sample_job, plumber_id):
        sample_job.status = JobStatus.COMPLETED
        sample_job.assigned_to_id = plumber_id
        return sample_job

    @pytest.fixture
    def use_case(
        self, mock_job_repository, mock_review_repository, mock_transaction_service
    ):
        return CreateReviewUseCase(
            job_repo=mock_job_repository,
            review_repo=mock_review_repository,
            transaction_service=mock_transaction_service,
        )

    @pytest.mark.asyncio
    async def test_execute_success(
        self, use_case, completed_job, plumber_id, mock_job_repository
    ):
        mock_job_repository.get_by_id.return_value = completed_job

        result = await use_case.execute(
            CreateReviewRequest(
                job_id=completed_job.id,
                author_id=completed_job.created_by_id,
                rating=5,
                comment="Fast and tidy",
            )
        )

        assert result.review.target_id == plumber_id
        assert result.review.rating == 5

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rating", [0, 6, -1, True])
    async def test_rating_out_of_range(
        self, use_case, completed_job, mock_job_repository, rating
    ):
        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateReviewRequest(
                    job_id=completed_job.id,
                    author_id=completed_job.created_by_id,
                    rating=rating,
                )
            )

        mock_job_repository.get_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_job_not_found(self, use_case, mock_job_repository):
        mock_job_repository.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateReviewRequest(job_id=uuid4(), author_id=uuid4(), rating=4)
            )

    @pytest.mark.asyncio
    async def test_job_not_completed(self, use_case, sample_job, mock_job_repository):
        sample_job.status = JobStatus.IN_PROGRESS
        mock_job_repository.get_by_id.return_value = sample_job

        with pytest.raises(InvalidStateError) as exc_info:
            await use_case.execute(
                CreateReviewRequest(
                    job_id=sample_job.id, author_id=sample_job.created_by_id, rating=4
                )
            )

        assert exc_info.value.reason == "job_not_completed"

    @pytest.mark.asyncio
    async def test_job_without_assignee(self, use_case, sample_job, mock_job_repository):
        sample_job.status = JobStatus.COMPLETED
        mock_job_repository.get_by_id.return_value = sample_job

        with pytest.raises(InvalidStateError) as exc_info:
            await use_case.execute(
                CreateReviewRequest(
                    job_id=sample_job.id, author_id=sample_job.created_by_id, rating=4
                )
            )

        assert exc_info.value.reason == "job_not_assigned"

    @pytest.mark.asyncio
    async def test_second_review_conflicts(
        self,
        use_case,
        completed_job,
        plumber_id,
        mock_job_repository,
        mock_review_repository,
    ):
        mock_job_repository.get_by_id.return_value = completed_job
        mock_review_repository.find_by_job_and_author.return_value = Review(
            job_id=completed_job.id,
            author_id=completed_job.created_by_id,
            target_id=plumber_id,
            rating=3,
        )

        with pytest.raises(ConflictError):
            await use_case.execute(
                CreateReviewRequest(
                    job_id=completed_job.id,
                    author_id=completed_job.created_by_id,
                    rating=5,
                )
            )

        mock_review_repository.create.assert_not_awaited()
