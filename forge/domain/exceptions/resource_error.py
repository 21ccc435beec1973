"""
Resource lookup and uniqueness exceptions.
"""

from typing import Any

from .base import ForgeError


class NotFoundError(ForgeError):
    """Raised when a referenced entity does not exist."""

    reason = "not_found"

    def __init__(self, resource: str, resource_id: Any):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"{resource.replace('_', ' ').capitalize()} {resource_id} not found",
            reason=f"{resource}_not_found",
        )


class ConflictError(ForgeError):
    """Raised when an entity already exists or was modified concurrently."""

    reason = "conflict"
