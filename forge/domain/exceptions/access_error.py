"""
Authentication and authorization exceptions.
"""

from .base import ForgeError


class UnauthorizedError(ForgeError):
    """Raised when credentials are missing or invalid."""

    reason = "unauthorized"


class ForbiddenError(ForgeError):
    """Raised when an authenticated actor lacks role or ownership."""

    reason = "forbidden"
