"""
Unit tests for RecordEarningUseCase.
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from forge.application.use_cases.record_earning import (
    RecordEarningRequest,
    RecordEarningUseCase,
)
from forge.domain.entities.plumber_profile import Badge, UnlockedBadge
from forge.domain.exceptions.resource_error import ConflictError, NotFoundError
from forge.domain.exceptions.state_error import InvalidStateError
from forge.domain.exceptions.validation_error import ValidationError
from forge.domain.value_objects.job_status import JobStatus


class TestRecordEarningUseCase:
    """Test cases for RecordEarningUseCase."""

    @pytest.fixture
    def completed_job(self, sample_job, plumber_id):
        sample_job.status = JobStatus.COMPLETED
        sample_job.assigned_to_id = plumber_id
        return sample_job

    @pytest.fixture
    def use_case(
        self,
        mock_profile_repository,
        mock_job_repository,
        mock_earning_repository,
        mock_badge_repository,
        mock_transaction_service,
        sample_profile,
        completed_job,
    ):
        mock_profile_repository.get_by_user_id.return_value = sample_profile
        mock_job_repository.get_by_id.return_value = completed_job
        mock_job_repository.count_assigned.return_value = 1

        async def unlock(profile_id, badge_id, unlocked_at):
            badge = next(
                b
                for b in mock_badge_repository.list_catalog.return_value
                if b.id == badge_id
            )
            return UnlockedBadge(
                id=badge.id,
                name=badge.name,
                description=badge.description,
                icon=badge.icon,
                unlocked_at=unlocked_at,
            )

        mock_badge_repository.unlock.side_effect = unlock
        return RecordEarningUseCase(
            profile_repo=mock_profile_repository,
            job_repo=mock_job_repository,
            earning_repo=mock_earning_repository,
            badge_repo=mock_badge_repository,
            transaction_service=mock_transaction_service,
        )

    def make_request(self, job, plumber_id, amount="250.00"):
        return RecordEarningRequest(
            plumber_id=plumber_id, job_id=job.id, amount=Decimal(amount)
        )

    @pytest.mark.asyncio
    async def test_execute_awards_urgency_xp(self, use_case, completed_job, plumber_id):
        result = await use_case.execute(self.make_request(completed_job, plumber_id))

        assert result.earning.amount == Decimal("250.00")
        assert result.earning.xp_awarded == 100
        assert result.profile.xp == 100
        assert result.profile.level == 1
        assert result.unlocked_badges == []

    @pytest.mark.asyncio
    async def test_level_recomputed(
        self, use_case, completed_job, plumber_id, sample_profile
    ):
        sample_profile.xp = 1950

        result = await use_case.execute(self.make_request(completed_job, plumber_id))

        assert result.profile.xp == 2050
        assert result.profile.level == 2

    @pytest.mark.asyncio
    async def test_profile_locked_for_settlement(
        self, use_case, completed_job, plumber_id, mock_profile_repository
    ):
        await use_case.execute(self.make_request(completed_job, plumber_id))

        mock_profile_repository.get_by_user_id.assert_awaited_once_with(
            plumber_id, with_details=True, for_update=True
        )

    @pytest.mark.asyncio
    async def test_badges_unlocked_once(
        self,
        use_case,
        completed_job,
        plumber_id,
        sample_profile,
        mock_badge_repository,
    ):
        first_drop = Badge(
            name="First Drop",
            description="Complete your first job",
            icon="droplet",
            criteria={"jobsCompleted": 1},
        )
        veteran = Badge(
            name="Veteran",
            description="Reach 5000 XP",
            icon="medal",
            xp_required=5000,
        )
        owned = Badge(name="Welcome", description="Joined", icon="wave")
        early_bird = Badge(
            name="Early Bird",
            description="Start before 7am",
            icon="sunrise",
            criteria={"earlyStarts": 3},
        )
        sample_profile.badges = [
            UnlockedBadge(
                id=owned.id,
                name=owned.name,
                description=owned.description,
                icon=owned.icon,
                unlocked_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
            )
        ]
        mock_badge_repository.list_catalog.return_value = [
            first_drop,
            veteran,
            owned,
            early_bird,
        ]

        result = await use_case.execute(self.make_request(completed_job, plumber_id))

        assert [badge.name for badge in result.unlocked_badges] == ["First Drop"]
        assert {badge.name for badge in result.profile.badges} == {
            "Welcome",
            "First Drop",
        }
        mock_badge_repository.unlock.assert_awaited_once()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", ["0", "-10", "NaN"])
    async def test_invalid_amount(
        self, use_case, completed_job, plumber_id, mock_earning_repository, amount
    ):
        with pytest.raises(ValidationError):
            await use_case.execute(
                self.make_request(completed_job, plumber_id, amount=amount)
            )

        mock_earning_repository.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_already_settled(
        self, use_case, completed_job, plumber_id, mock_earning_repository
    ):
        mock_earning_repository.exists_for_job.return_value = True

        with pytest.raises(ConflictError):
            await use_case.execute(self.make_request(completed_job, plumber_id))

        mock_earning_repository.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_job_not_completed(self, use_case, completed_job, plumber_id):
        completed_job.status = JobStatus.IN_PROGRESS

        with pytest.raises(InvalidStateError) as exc_info:
            await use_case.execute(self.make_request(completed_job, plumber_id))

        assert exc_info.value.reason == "job_not_completed"

    @pytest.mark.asyncio
    async def test_job_assigned_elsewhere(
        self, use_case, completed_job, plumber_id, homeowner_id
    ):
        completed_job.assigned_to_id = homeowner_id

        with pytest.raises(InvalidStateError) as exc_info:
            await use_case.execute(self.make_request(completed_job, plumber_id))

        assert exc_info.value.reason == "job_not_assigned"

    @pytest.mark.asyncio
    async def test_profile_not_found(
        self, use_case, completed_job, plumber_id, mock_profile_repository
    ):
        mock_profile_repository.get_by_user_id.return_value = None

        with pytest.raises(NotFoundError):
            await use_case.execute(self.make_request(completed_job, plumber_id))
