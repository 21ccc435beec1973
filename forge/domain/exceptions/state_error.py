"""
Lifecycle state exceptions.
"""

from typing import Optional

from .base import ForgeError


class InvalidStateError(ForgeError):
    """Raised when an operation is not allowed in the job's current state."""

    reason = "invalid_state"

    def __init__(
        self, message: str, current_status: Optional[str] = None, reason: str = None
    ):
        self.current_status = current_status
        super().__init__(message, reason=reason)
