"""
Base domain exception.
"""

from typing import Optional


class ForgeError(Exception):
    """Base exception for all domain errors."""

    reason = "error"

    def __init__(self, message: str, reason: Optional[str] = None):
        self.message = message
        if reason:
            self.reason = reason
        super().__init__(message)
