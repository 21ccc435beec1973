"""
Domain exceptions package.
"""

from .access_error import ForbiddenError, UnauthorizedError
from .base import ForgeError
from .resource_error import ConflictError, NotFoundError
from .state_error import InvalidStateError
from .validation_error import (
    FileTooLargeError,
    InvalidFormatError,
    RequiredFieldError,
    ValidationError,
)

__all__ = [
    "ConflictError",
    "FileTooLargeError",
    "ForbiddenError",
    "ForgeError",
    "InvalidFormatError",
    "InvalidStateError",
    "NotFoundError",
    "RequiredFieldError",
    "UnauthorizedError",
    "ValidationError",
]
