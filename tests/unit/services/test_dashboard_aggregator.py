"""
Unit tests for DashboardAggregator.
"""

from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from forge.application.services.dashboard_aggregator import DashboardAggregator
from forge.domain.exceptions.resource_error import NotFoundError
from forge.domain.value_objects.job_status import JobStatus


class TestDashboardAggregator:
    """Test cases for DashboardAggregator."""

    @pytest.fixture
    def now(self):
        # Wednesday
        return datetime(2026, 10, 14, 15, 0, tzinfo=timezone.utc)

    @pytest.fixture
    def aggregator(
        self,
        mock_profile_repository,
        mock_job_repository,
        mock_earning_repository,
        sample_profile,
        now,
    ):
        mock_profile_repository.get_by_user_id.return_value = sample_profile

        async def sum_amount(plumber_id, since=None):
            if since is None:
                return Decimal("900.00")
            if since.day == 14:
                return Decimal("250.00")
            if since.day == 11:
                return Decimal("430.00")
            return Decimal("600.00")

        async def count_assigned(plumber_id, status):
            return {JobStatus.IN_PROGRESS: 2, JobStatus.COMPLETED: 7}[status]

        mock_earning_repository.sum_amount.side_effect = sum_amount
        mock_job_repository.count_available.return_value = 4
        mock_job_repository.count_assigned.side_effect = count_assigned
        return DashboardAggregator(
            profile_repo=mock_profile_repository,
            job_repo=mock_job_repository,
            earning_repo=mock_earning_repository,
            clock=lambda: now,
            timezone_name="UTC",
        )

    @pytest.mark.asyncio
    async def test_build_snapshot(self, aggregator, plumber_id):
        snapshot = await aggregator.build(plumber_id)

        assert snapshot.profile.xp == 0
        assert snapshot.profile.level == 1
        assert snapshot.profile.next_level_xp == 2000
        assert snapshot.profile.forge_score == 4.5
        assert snapshot.profile.is_active is True
        assert snapshot.earnings.today == Decimal("250.00")
        assert snapshot.earnings.week == Decimal("430.00")
        assert snapshot.earnings.month == Decimal("600.00")
        assert snapshot.earnings.total == Decimal("900.00")
        assert snapshot.jobs.available == 4
        assert snapshot.jobs.in_progress == 2
        assert snapshot.jobs.completed == 7
        assert snapshot.badges == []

    @pytest.mark.asyncio
    async def test_window_bounds(
        self, aggregator, plumber_id, mock_earning_repository
    ):
        await aggregator.build(plumber_id)

        bounds = [
            call.kwargs.get("since")
            for call in mock_earning_repository.sum_amount.await_args_list
        ]
        assert bounds == [
            datetime(2026, 10, 14, tzinfo=timezone.utc),
            datetime(2026, 10, 11, tzinfo=timezone.utc),
            datetime(2026, 10, 1, tzinfo=timezone.utc),
            None,
        ]

    @pytest.mark.asyncio
    async def test_local_timezone_shifts_today(
        self,
        mock_profile_repository,
        mock_job_repository,
        mock_earning_repository,
        sample_profile,
        plumber_id,
    ):
        mock_profile_repository.get_by_user_id.return_value = sample_profile
        mock_earning_repository.sum_amount.return_value = Decimal("0")
        mock_job_repository.count_available.return_value = 0
        mock_job_repository.count_assigned.return_value = 0
        aggregator = DashboardAggregator(
            profile_repo=mock_profile_repository,
            job_repo=mock_job_repository,
            earning_repo=mock_earning_repository,
            # 01:00 UTC is still the previous evening in New York
            clock=lambda: datetime(2026, 10, 15, 1, 0, tzinfo=timezone.utc),
            timezone_name="America/New_York",
        )

        await aggregator.build(plumber_id)

        first_call = mock_earning_repository.sum_amount.await_args_list[0]
        assert first_call.kwargs["since"] == datetime(
            2026, 10, 14, 4, 0, tzinfo=timezone.utc
        )

    @pytest.mark.asyncio
    async def test_profile_not_found(self, aggregator, mock_profile_repository):
        mock_profile_repository.get_by_user_id.return_value = None

        with pytest.raises(NotFoundError):
            await aggregator.build(uuid4())
