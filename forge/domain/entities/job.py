"""Job domain entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID, uuid4

from forge.domain.entities.user import UserSummary
from forge.domain.exceptions.access_error import ForbiddenError
from forge.domain.exceptions.state_error import InvalidStateError
from forge.domain.value_objects.job_status import JobStatus
from forge.domain.value_objects.job_urgency import JobUrgency
from forge.domain.value_objects.user_role import UserRole


@dataclass
class Job:
    """Job domain entity."""

    title: str
    description: str
    job_type: str
    address: str
    created_by_id: UUID
    urgency: JobUrgency = JobUrgency.MEDIUM
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    id: UUID = field(default_factory=uuid4)
    status: JobStatus = JobStatus.REQUESTED
    assigned_to_id: Optional[UUID] = None
    requested_at: Optional[datetime] = None
    scheduled_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    version: Optional[int] = None

    # Read-side projections, filled by the repository when requested
    created_by: Optional[UserSummary] = None
    assigned_to: Optional[UserSummary] = None
    photos: List["Photo"] = field(default_factory=list)
    quotes: List["Quote"] = field(default_factory=list)

    def __post_init__(self):
        now = datetime.now(timezone.utc)
        if not self.requested_at:
            self.requested_at = now
        if not self.created_at:
            self.created_at = now
        if not self.updated_at:
            self.updated_at = now

    def is_involved(self, user_id: UUID) -> bool:
        """Check if the user created the job or is assigned to it."""
        return user_id in (self.created_by_id, self.assigned_to_id)

    def mark_quoted(self) -> None:
        """Move a freshly requested job to QUOTED after a quote lands."""
        if not self.status.is_open_for_quotes():
            raise InvalidStateError(
                "Job is not available for quoting",
                current_status=self.status.value,
                reason="job_not_quotable",
            )
        self.status = JobStatus.QUOTED
        self.updated_at = datetime.now(timezone.utc)

    def apply_status(
        self,
        new_status: JobStatus,
        actor_id: UUID,
        actor_role: UserRole,
        scheduled_at: Optional[datetime] = None,
        completed_at: Optional[datetime] = None,
        strict: bool = True,
    ) -> None:
        """
        Apply a status update requested by an actor.

        Only the creator or the assignee may update the job. A plumber moving
        the job to IN_PROGRESS becomes its assignee. With ``strict`` the move
        must follow the lifecycle graph.
        """
        if not self.is_involved(actor_id):
            raise ForbiddenError(
                "Not authorized to update this job", reason="not_job_participant"
            )

        if strict and not self.status.can_transition_to(new_status):
            raise InvalidStateError(
                f"Cannot move job from {self.status.value} to {new_status.value}",
                current_status=self.status.value,
                reason="illegal_transition",
            )

        self.status = new_status
        if scheduled_at:
            self.scheduled_at = scheduled_at
        if completed_at:
            self.completed_at = completed_at

        if new_status == JobStatus.IN_PROGRESS and actor_role == UserRole.PLUMBER:
            self.assigned_to_id = actor_id

        self.updated_at = datetime.now(timezone.utc)

    def ensure_reviewable(self) -> UUID:
        """Return the plumber to review, or raise if the job cannot be reviewed."""
        if self.status != JobStatus.COMPLETED:
            raise InvalidStateError(
                "Job must be completed to leave a review",
                current_status=self.status.value,
                reason="job_not_completed",
            )
        if not self.assigned_to_id:
            raise InvalidStateError(
                "No plumber assigned to this job",
                current_status=self.status.value,
                reason="job_not_assigned",
            )
        return self.assigned_to_id
