"""
Repository interfaces for dependency inversion.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from forge.domain.entities.earning import Earning
from forge.domain.entities.job import Job
from forge.domain.entities.photo import Photo
from forge.domain.entities.plumber_profile import (
    Badge,
    JobPreference,
    PlumberProfile,
    UnlockedBadge,
)
from forge.domain.entities.quote import Quote
from forge.domain.entities.review import Review
from forge.domain.entities.user import User
from forge.domain.value_objects.job_status import JobStatus


class UserRepositoryInterface(ABC):
    """User repository interface."""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID."""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user."""
        pass


class JobRepositoryInterface(ABC):
    """Job repository interface."""

    @abstractmethod
    async def get_by_id(self, job_id: UUID, for_update: bool = False) -> Optional[Job]:
        """Get job by ID, optionally locking the row for the current transaction."""
        pass

    @abstractmethod
    async def get_details(self, job_id: UUID) -> Optional[Job]:
        """Get job by ID with creator and assignee summaries."""
        pass

    @abstractmethod
    async def create(self, job: Job) -> Job:
        """Create a new job."""
        pass

    @abstractmethod
    async def update(self, job: Job) -> Job:
        """Update an existing job."""
        pass

    @abstractmethod
    async def find_available(
        self, job_types: Optional[List[str]] = None
    ) -> List[Job]:
        """Find unassigned REQUESTED jobs, most urgent and newest first."""
        pass

    @abstractmethod
    async def count_available(self) -> int:
        """Count unassigned REQUESTED jobs across the marketplace."""
        pass

    @abstractmethod
    async def count_assigned(self, plumber_id: UUID, status: JobStatus) -> int:
        """Count jobs assigned to a plumber in a given status."""
        pass


class QuoteRepositoryInterface(ABC):
    """Quote repository interface."""

    @abstractmethod
    async def create(self, quote: Quote) -> Quote:
        """Create a new quote."""
        pass

    @abstractmethod
    async def get_by_job_id(self, job_id: UUID) -> List[Quote]:
        """Get all quotes for a job."""
        pass


class PhotoRepositoryInterface(ABC):
    """Photo repository interface."""

    @abstractmethod
    async def create(self, photo: Photo) -> Photo:
        """Create a new photo record."""
        pass


class ReviewRepositoryInterface(ABC):
    """Review repository interface."""

    @abstractmethod
    async def find_by_job_and_author(
        self, job_id: UUID, author_id: UUID
    ) -> Optional[Review]:
        """Find the review an author left on a job."""
        pass

    @abstractmethod
    async def create(self, review: Review) -> Review:
        """Create a new review."""
        pass


class PlumberProfileRepositoryInterface(ABC):
    """Plumber profile repository interface."""

    @abstractmethod
    async def get_by_user_id(
        self, user_id: UUID, with_details: bool = False, for_update: bool = False
    ) -> Optional[PlumberProfile]:
        """
        Get a plumber's profile, optionally with preferences and badges.

        With ``for_update`` the profile row stays locked until the current
        transaction ends.
        """
        pass

    @abstractmethod
    async def create(self, profile: PlumberProfile) -> PlumberProfile:
        """Create a new profile."""
        pass

    @abstractmethod
    async def update(self, profile: PlumberProfile) -> PlumberProfile:
        """Persist xp, level, forge score and availability."""
        pass

    @abstractmethod
    async def upsert_preferences(self, preference: JobPreference) -> JobPreference:
        """Create or fully overwrite the profile's job preferences."""
        pass


class BadgeRepositoryInterface(ABC):
    """Badge repository interface."""

    @abstractmethod
    async def list_catalog(self) -> List[Badge]:
        """Get every badge in the catalog."""
        pass

    @abstractmethod
    async def create(self, badge: Badge) -> Badge:
        """Add a badge to the catalog."""
        pass

    @abstractmethod
    async def unlock(
        self, plumber_profile_id: UUID, badge_id: UUID, unlocked_at: datetime
    ) -> UnlockedBadge:
        """Record that a profile unlocked a badge."""
        pass


class EarningRepositoryInterface(ABC):
    """Earning ledger repository interface."""

    @abstractmethod
    async def create(self, earning: Earning) -> Earning:
        """Append an earning row."""
        pass

    @abstractmethod
    async def exists_for_job(self, plumber_id: UUID, job_id: UUID) -> bool:
        """Check if the plumber was already paid for the job."""
        pass

    @abstractmethod
    async def sum_amount(
        self, plumber_id: UUID, since: Optional[datetime] = None
    ) -> Decimal:
        """Sum the plumber's earnings created at or after ``since``."""
        pass
