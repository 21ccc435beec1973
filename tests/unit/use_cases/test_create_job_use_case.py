"""
Unit tests for CreateJobUseCase.
"""

from uuid import uuid4

import pytest

from forge.application.use_cases.create_job import CreateJobRequest, CreateJobUseCase
from forge.domain.entities.user import UserSummary
from forge.domain.exceptions.validation_error import (
    RequiredFieldError,
    ValidationError,
)
from forge.domain.value_objects.job_status import JobStatus
from forge.domain.value_objects.job_urgency import JobUrgency


class TestCreateJobUseCase:
    """Test cases for CreateJobUseCase."""

    @pytest.fixture
    def use_case(self, mock_job_repository, mock_transaction_service):
        def created(job):
            return job

        def details(job_id):
            job = mock_job_repository.create.call_args.args[0]
            job.created_by = UserSummary(first_name="Hannah", last_name="Reyes")
            return job

        mock_job_repository.create.side_effect = created
        mock_job_repository.get_details.side_effect = details
        return CreateJobUseCase(
            job_repo=mock_job_repository, transaction_service=mock_transaction_service
        )

    @pytest.fixture
    def request_data(self):
        return dict(
            title="Burst pipe",
            description="Water everywhere",
            job_type="leak",
            address="12 Elm Street",
            created_by_id=uuid4(),
        )

    @pytest.mark.asyncio
    async def test_execute_success(self, use_case, request_data, mock_job_repository):
        """New jobs start REQUESTED, unassigned and joined with the creator."""
        result = await use_case.execute(CreateJobRequest(**request_data))

        assert result.job.status == JobStatus.REQUESTED
        assert result.job.assigned_to_id is None
        assert result.job.urgency == JobUrgency.MEDIUM
        assert result.job.created_by_id == request_data["created_by_id"]
        assert result.job.created_by.first_name == "Hannah"
        mock_job_repository.create.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_explicit_urgency(self, use_case, request_data):
        result = await use_case.execute(
            CreateJobRequest(**request_data, urgency="EMERGENCY")
        )

        assert result.job.urgency == JobUrgency.EMERGENCY

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["title", "description", "job_type", "address"])
    async def test_blank_required_field(
        self, use_case, request_data, mock_job_repository, field
    ):
        """A blank required field fails and nothing is written."""
        request_data[field] = "   "

        with pytest.raises(RequiredFieldError) as exc_info:
            await use_case.execute(CreateJobRequest(**request_data))

        assert exc_info.value.field_name == field
        mock_job_repository.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_address(self, use_case, request_data, mock_job_repository):
        request_data["address"] = None

        with pytest.raises(ValidationError):
            await use_case.execute(CreateJobRequest(**request_data))

        mock_job_repository.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_urgency(self, use_case, request_data, mock_job_repository):
        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(CreateJobRequest(**request_data, urgency="ASAP"))

        assert exc_info.value.reason == "invalid_urgency"
        mock_job_repository.create.assert_not_awaited()
