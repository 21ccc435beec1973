"""
Job status value object.
"""

from enum import Enum


class JobStatus(str, Enum):
    """Job lifecycle status enumeration."""

    REQUESTED = "REQUESTED"
    QUOTED = "QUOTED"
    SCHEDULED = "SCHEDULED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"

    @property
    def stage(self) -> int:
        """Position along the forward chain; CANCELLED sits outside it."""
        return _FORWARD_CHAIN.index(self) if self in _FORWARD_CHAIN else -1

    def is_terminal(self) -> bool:
        """Check if no further transitions are possible."""
        return self in [JobStatus.COMPLETED, JobStatus.CANCELLED]

    def is_open_for_quotes(self) -> bool:
        """Check if plumbers may still quote the job."""
        return self == JobStatus.REQUESTED

    def can_transition_to(self, target: "JobStatus") -> bool:
        """
        Check a move against the lifecycle graph.

        Forward moves may skip stages, CANCELLED is reachable from any
        non-terminal state and re-applying the current status of a live job
        is allowed so timestamps can be amended.
        """
        if self.is_terminal():
            return False
        if target == JobStatus.CANCELLED or target == self:
            return True
        return target.stage > self.stage


_FORWARD_CHAIN = [
    JobStatus.REQUESTED,
    JobStatus.QUOTED,
    JobStatus.SCHEDULED,
    JobStatus.IN_PROGRESS,
    JobStatus.COMPLETED,
]
