"""
User domain entity.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from forge.domain.value_objects.user_role import UserRole


@dataclass(frozen=True)
class UserSummary:
    """Contact card of a user shown next to jobs."""

    first_name: str
    last_name: str
    phone: Optional[str] = None


@dataclass
class User:
    """Marketplace user."""

    email: str
    first_name: str
    last_name: str
    role: UserRole
    phone: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)
        if not self.updated_at:
            self.updated_at = datetime.now(timezone.utc)

    def summary(self) -> UserSummary:
        return UserSummary(
            first_name=self.first_name, last_name=self.last_name, phone=self.phone
        )
