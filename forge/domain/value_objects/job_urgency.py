"""
Job urgency value object.
"""

from enum import Enum


class JobUrgency(str, Enum):
    """Job priority classification."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    EMERGENCY = "EMERGENCY"

    @property
    def rank(self) -> int:
        """Sort key, higher is more urgent."""
        return list(JobUrgency).index(self)

    @property
    def xp_reward(self) -> int:
        """XP granted to the plumber when a job of this urgency is settled."""
        if self == JobUrgency.EMERGENCY:
            return 150
        if self == JobUrgency.HIGH:
            return 100
        return 75
