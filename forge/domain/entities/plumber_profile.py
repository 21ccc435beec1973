"""
Plumber profile domain entities.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4

XP_PER_LEVEL = 1000
DEFAULT_MAX_DISTANCE_KM = 50
WEEKDAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)


@dataclass
class Badge:
    """Catalog badge a plumber can unlock."""

    name: str
    description: str
    icon: str
    xp_required: int = 0
    criteria: Dict[str, Any] = field(default_factory=dict)
    id: UUID = field(default_factory=uuid4)

    def is_earned_by(self, xp: int, jobs_completed: int) -> bool:
        """Check the unlock criteria this service knows how to evaluate."""
        if xp < self.xp_required:
            return False
        required_jobs = self.criteria.get("jobsCompleted")
        if required_jobs is not None and jobs_completed < required_jobs:
            return False
        # Criteria tracked elsewhere (streaks, per-day counts) never unlock here
        known = {"jobsCompleted"}
        return not (set(self.criteria) - known)


@dataclass(frozen=True)
class UnlockedBadge:
    """Badge as shown on a plumber's profile."""

    id: UUID
    name: str
    description: str
    icon: str
    unlocked_at: datetime


@dataclass
class JobPreference:
    """Plumber job preferences."""

    plumber_profile_id: UUID
    preferred_job_types: List[str] = field(default_factory=list)
    max_distance_km: int = DEFAULT_MAX_DISTANCE_KM
    hours: Dict[str, Optional[str]] = field(default_factory=dict)
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self):
        for day in WEEKDAYS:
            self.hours.setdefault(f"{day}_start", None)
            self.hours.setdefault(f"{day}_end", None)


@dataclass
class PlumberProfile:
    """Gamified plumber profile."""

    user_id: UUID
    xp: int = 0
    level: int = 1
    forge_score: float = 0.0
    is_active: bool = True
    id: UUID = field(default_factory=uuid4)
    preferences: Optional[JobPreference] = None
    badges: List[UnlockedBadge] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    version: Optional[int] = None

    def __post_init__(self):
        if self.xp < 0:
            raise ValueError("XP cannot be negative")
        if not 0.0 <= self.forge_score <= 5.0:
            raise ValueError("ForgeScore must be between 0.0 and 5.0")
        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)
        if not self.updated_at:
            self.updated_at = datetime.now(timezone.utc)

    @property
    def next_level_xp(self) -> int:
        """XP at which the next level starts."""
        return (self.level + 1) * XP_PER_LEVEL

    @property
    def badge_ids(self) -> set:
        return {badge.id for badge in self.badges}

    def award_xp(self, amount: int) -> None:
        """Add XP and recompute the level."""
        if amount < 0:
            raise ValueError("XP award cannot be negative")
        self.xp += amount
        self.level = max(self.level, self.xp // XP_PER_LEVEL)
        self.updated_at = datetime.now(timezone.utc)
