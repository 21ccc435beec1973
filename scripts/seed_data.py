#!/usr/bin/env python3
"""
Seed database with demo data for development.

Creates a homeowner, a dispatcher, an admin and a plumber with a profile,
job preferences, the badge catalog, a few jobs in different states and
some earnings, then prints a bearer token for each demo user.
"""

import asyncio
import os
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from sqlalchemy import func, select

from forge.config.database import create_engine, get_async_session_factory
from forge.config.logging import configure_logging, get_logger
from forge.domain.entities.earning import Earning
from forge.domain.entities.job import Job
from forge.domain.entities.plumber_profile import Badge, JobPreference, PlumberProfile
from forge.domain.entities.user import User
from forge.domain.value_objects.job_status import JobStatus
from forge.domain.value_objects.job_urgency import JobUrgency
from forge.domain.value_objects.user_role import UserRole
from forge.infrastructure.database.models import UserModel
from forge.infrastructure.database.repositories import (
    BadgeRepository,
    EarningRepository,
    JobRepository,
    PlumberProfileRepository,
    UserRepository,
)
from forge.infrastructure.security.tokens import AuthUser, create_access_token

logger = get_logger(__name__)

BADGE_CATALOG = [
    Badge(
        name="First Drop",
        description="Completed your first job",
        icon="droplet",
        criteria={"jobsCompleted": 1},
    ),
    Badge(
        name="Pipe Pro",
        description="Reached 1,000 XP",
        icon="wrench",
        xp_required=1000,
    ),
    Badge(
        name="Flood Fighter",
        description="Completed 10 jobs",
        icon="shield",
        xp_required=750,
        criteria={"jobsCompleted": 10},
    ),
    Badge(
        name="Early Bird",
        description="Started five jobs before 8am",
        icon="sunrise",
        criteria={"earlyStarts": 5},
    ),
]


def get_seed_database_url():
    """Get database URL for seeding."""
    # Allow override for Docker environment
    return os.getenv("MIGRATION_DATABASE_URL")


async def seed_database():
    """Seed database with demo data."""
    seed_engine = create_engine(get_seed_database_url())
    session_factory = get_async_session_factory(seed_engine)

    async with session_factory() as session:
        existing_users = await session.execute(select(func.count(UserModel.id)))
        if existing_users.scalar_one() > 0:
            logger.info("Database already has data, skipping seed")
            await seed_engine.dispose()
            return

        users = UserRepository(session)
        profiles = PlumberProfileRepository(session)
        badges = BadgeRepository(session)
        jobs = JobRepository(session)
        earnings = EarningRepository(session)

        homeowner = await users.create(
            User(
                email="hannah.homeowner@example.com",
                first_name="Hannah",
                last_name="Reyes",
                phone="555-0101",
                role=UserRole.HOMEOWNER,
            )
        )
        dispatcher = await users.create(
            User(
                email="dan.dispatch@example.com",
                first_name="Dan",
                last_name="Okafor",
                role=UserRole.DISPATCHER,
            )
        )
        admin = await users.create(
            User(
                email="admin@example.com",
                first_name="Ada",
                last_name="Admin",
                role=UserRole.ADMIN,
            )
        )
        plumber = await users.create(
            User(
                email="pat.plumber@example.com",
                first_name="Pat",
                last_name="Nguyen",
                phone="555-0199",
                role=UserRole.PLUMBER,
            )
        )
        logger.info("Created demo users", count=4)

        profile = await profiles.create(
            PlumberProfile(user_id=plumber.id, xp=850, level=1, forge_score=4.7)
        )
        await profiles.upsert_preferences(
            JobPreference(
                plumber_profile_id=profile.id,
                preferred_job_types=["leak", "drain", "water_heater"],
                max_distance_km=30,
                hours={
                    f"{day}_{edge}": hour
                    for day in ("monday", "tuesday", "wednesday", "thursday", "friday")
                    for edge, hour in (("start", "08:00"), ("end", "17:00"))
                },
            )
        )

        catalog = [await badges.create(badge) for badge in BADGE_CATALOG]
        now = datetime.now(timezone.utc)
        await badges.unlock(profile.id, catalog[0].id, now - timedelta(days=20))
        logger.info("Created badge catalog", count=len(catalog))

        await jobs.create(
            Job(
                title="Burst pipe under kitchen sink",
                description="Water pooling under the sink, main valve is shut.",
                job_type="leak",
                urgency=JobUrgency.EMERGENCY,
                address="12 Elm Street, Springfield",
                latitude=39.7817,
                longitude=-89.6501,
                created_by_id=homeowner.id,
            )
        )
        await jobs.create(
            Job(
                title="Slow bathroom drain",
                description="Shower drains slowly, probably hair clog.",
                job_type="drain",
                urgency=JobUrgency.LOW,
                address="48 Oak Avenue, Springfield",
                created_by_id=dispatcher.id,
            )
        )

        for days_ago, amount, urgency in (
            (0, Decimal("250.00"), JobUrgency.HIGH),
            (1, Decimal("180.00"), JobUrgency.MEDIUM),
            (12, Decimal("420.00"), JobUrgency.EMERGENCY),
        ):
            finished = now - timedelta(days=days_ago)
            completed = await jobs.create(
                Job(
                    title=f"Water heater service ({days_ago}d ago)",
                    description="Annual flush and anode rod inspection.",
                    job_type="water_heater",
                    urgency=urgency,
                    address="7 Birch Lane, Springfield",
                    created_by_id=homeowner.id,
                    status=JobStatus.COMPLETED,
                    assigned_to_id=plumber.id,
                    completed_at=finished,
                )
            )
            await earnings.create(
                Earning(
                    plumber_id=plumber.id,
                    job_id=completed.id,
                    amount=amount,
                    xp_awarded=urgency.xp_reward,
                    created_at=finished,
                )
            )
        logger.info("Created demo jobs and earnings")

        await session.commit()
    await seed_engine.dispose()

    for user in (homeowner, dispatcher, admin, plumber):
        token = create_access_token(
            AuthUser(id=user.id, role=user.role, email=user.email)
        )
        logger.info("Demo token", email=user.email, role=user.role.value, token=token)


if __name__ == "__main__":
    configure_logging()
    asyncio.run(seed_database())
