"""Plumber profile repository implementation."""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.orm.exc import StaleDataError

from forge.application.interfaces.repositories import (
    PlumberProfileRepositoryInterface,
)
from forge.config.logging import get_logger
from forge.domain.entities.plumber_profile import (
    WEEKDAYS,
    JobPreference,
    PlumberProfile,
    UnlockedBadge,
)
from forge.domain.exceptions.resource_error import ConflictError, NotFoundError
from forge.infrastructure.database.models.badge import PlumberBadgeModel
from forge.infrastructure.database.models.plumber_profile import (
    JobPreferenceModel,
    PlumberProfileModel,
)

logger = get_logger(__name__)

HOUR_FIELDS = [f"{day}_{edge}" for day in WEEKDAYS for edge in ("start", "end")]


class PlumberProfileRepository(PlumberProfileRepositoryInterface):
    """Plumber profile repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_user_id(
        self, user_id: UUID, with_details: bool = False, for_update: bool = False
    ) -> Optional[PlumberProfile]:
        """Get a plumber's profile, optionally with preferences and badges."""
        stmt = select(PlumberProfileModel).where(PlumberProfileModel.user_id == user_id)
        if for_update:
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        if with_details:
            stmt = stmt.options(
                selectinload(PlumberProfileModel.preferences),
                selectinload(PlumberProfileModel.badges).joinedload(
                    PlumberBadgeModel.badge
                ),
            ).execution_options(populate_existing=True)

        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()
        if not model:
            return None

        profile = self._model_to_entity(model)
        if with_details:
            if model.preferences is not None:
                profile.preferences = _preference_to_entity(model.preferences)
            profile.badges = [
                UnlockedBadge(
                    id=link.badge.id,
                    name=link.badge.name,
                    description=link.badge.description,
                    icon=link.badge.icon,
                    unlocked_at=link.unlocked_at,
                )
                for link in model.badges
            ]
        return profile

    async def create(self, profile: PlumberProfile) -> PlumberProfile:
        """Create a new profile."""
        profile_model = PlumberProfileModel(
            id=profile.id,
            user_id=profile.user_id,
            xp=profile.xp,
            level=profile.level,
            forge_score=profile.forge_score,
            is_active=profile.is_active,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )

        self.db.add(profile_model)
        await self.db.flush()
        await self.db.refresh(profile_model)

        return self._model_to_entity(profile_model)

    async def update(self, profile: PlumberProfile) -> PlumberProfile:
        """Persist xp, level, forge score and availability."""
        stmt = select(PlumberProfileModel).where(PlumberProfileModel.id == profile.id)
        result = await self.db.execute(stmt)
        profile_model = result.scalar_one_or_none()

        if not profile_model:
            raise NotFoundError("plumber_profile", profile.user_id)

        if profile.version is not None and profile_model.version != profile.version:
            raise ConflictError(
                f"Plumber profile {profile.id} was modified concurrently",
                reason="concurrent_update",
            )

        profile_model.xp = profile.xp
        profile_model.level = profile.level
        profile_model.forge_score = profile.forge_score
        profile_model.is_active = profile.is_active
        profile_model.updated_at = profile.updated_at

        try:
            await self.db.flush()
        except StaleDataError as e:
            logger.warning(
                "Concurrent profile update detected", plumber_profile_id=str(profile.id)
            )
            raise ConflictError(
                f"Plumber profile {profile.id} was modified concurrently",
                reason="concurrent_update",
            ) from e
        await self.db.refresh(profile_model)

        return self._model_to_entity(profile_model)

    async def upsert_preferences(self, preference: JobPreference) -> JobPreference:
        """Create or fully overwrite the profile's job preferences."""
        stmt = select(JobPreferenceModel).where(
            JobPreferenceModel.plumber_profile_id == preference.plumber_profile_id
        )
        result = await self.db.execute(stmt)
        preference_model = result.scalar_one_or_none()

        if preference_model is None:
            preference_model = JobPreferenceModel(
                id=preference.id,
                plumber_profile_id=preference.plumber_profile_id,
            )
            self.db.add(preference_model)
            logger.debug(
                "Creating job preferences",
                plumber_profile_id=str(preference.plumber_profile_id),
            )

        preference_model.preferred_job_types = list(preference.preferred_job_types)
        preference_model.max_distance_km = preference.max_distance_km
        for name in HOUR_FIELDS:
            setattr(preference_model, name, preference.hours.get(name))

        await self.db.flush()
        await self.db.refresh(preference_model)

        return _preference_to_entity(preference_model)

    def _model_to_entity(self, model: PlumberProfileModel) -> PlumberProfile:
        """Convert SQLAlchemy model to domain entity."""
        return PlumberProfile(
            id=model.id,
            user_id=model.user_id,
            xp=model.xp,
            level=model.level,
            forge_score=model.forge_score,
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at,
            version=model.version,
        )


def _preference_to_entity(model: JobPreferenceModel) -> JobPreference:
    return JobPreference(
        id=model.id,
        plumber_profile_id=model.plumber_profile_id,
        preferred_job_types=list(model.preferred_job_types or []),
        max_distance_km=model.max_distance_km,
        hours={name: getattr(model, name) for name in HOUR_FIELDS},
    )
