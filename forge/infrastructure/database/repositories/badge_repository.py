"""Badge repository implementation."""

from datetime import datetime
from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from forge.application.interfaces.repositories import BadgeRepositoryInterface
from forge.domain.entities.plumber_profile import Badge, UnlockedBadge
from forge.domain.exceptions.resource_error import NotFoundError
from forge.infrastructure.database.models.badge import BadgeModel, PlumberBadgeModel


class BadgeRepository(BadgeRepositoryInterface):
    """Badge repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_catalog(self) -> List[Badge]:
        """Get every badge in the catalog."""
        stmt = select(BadgeModel).order_by(BadgeModel.xp_required, BadgeModel.name)
        result = await self.db.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]

    async def create(self, badge: Badge) -> Badge:
        """Add a badge to the catalog."""
        badge_model = BadgeModel(
            id=badge.id,
            name=badge.name,
            description=badge.description,
            icon=badge.icon,
            xp_required=badge.xp_required,
            criteria=dict(badge.criteria),
        )

        self.db.add(badge_model)
        await self.db.flush()
        await self.db.refresh(badge_model)

        return self._model_to_entity(badge_model)

    async def unlock(
        self, plumber_profile_id: UUID, badge_id: UUID, unlocked_at: datetime
    ) -> UnlockedBadge:
        """Record that a profile unlocked a badge."""
        badge_model = await self.db.get(BadgeModel, badge_id)
        if badge_model is None:
            raise NotFoundError("badge", badge_id)

        link = PlumberBadgeModel(
            plumber_profile_id=plumber_profile_id,
            badge_id=badge_id,
            unlocked_at=unlocked_at,
        )
        self.db.add(link)
        await self.db.flush()

        return UnlockedBadge(
            id=badge_model.id,
            name=badge_model.name,
            description=badge_model.description,
            icon=badge_model.icon,
            unlocked_at=unlocked_at,
        )

    def _model_to_entity(self, model: BadgeModel) -> Badge:
        """Convert SQLAlchemy model to domain entity."""
        return Badge(
            id=model.id,
            name=model.name,
            description=model.description,
            icon=model.icon,
            xp_required=model.xp_required,
            criteria=dict(model.criteria or {}),
        )
