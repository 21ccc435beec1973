"""Review domain entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4


@dataclass
class Review:
    """A homeowner's rating of the plumber who completed a job."""

    job_id: UUID
    author_id: UUID
    target_id: UUID
    rating: int
    comment: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
    created_at: Optional[datetime] = None

    def __post_init__(self):
        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)
