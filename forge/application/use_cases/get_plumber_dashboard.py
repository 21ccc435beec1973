"""Get plumber dashboard use case."""

from uuid import UUID

from forge.application.services.dashboard_aggregator import (
    DashboardAggregator,
    DashboardSnapshot,
)


class GetPlumberDashboardUseCase:
    """Use case for the plumber dashboard."""

    def __init__(self, aggregator: DashboardAggregator):
        self.aggregator = aggregator

    async def execute(self, plumber_id: UUID) -> DashboardSnapshot:
        return await self.aggregator.build(plumber_id)
