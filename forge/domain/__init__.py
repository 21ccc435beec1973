"""
Domain package.
"""

from .entities import *
from .exceptions import *
from .value_objects import *

__all__ = [
    # Entities
    "Badge",
    "Earning",
    "Job",
    "JobPreference",
    "Photo",
    "PlumberProfile",
    "Quote",
    "Review",
    "UnlockedBadge",
    "User",
    "UserSummary",

    # Exceptions
    "ConflictError",
    "ForbiddenError",
    "ForgeError",
    "InvalidStateError",
    "NotFoundError",
    "UnauthorizedError",
    "ValidationError",

    # Value Objects
    "EarningsWindows",
    "JobStatus",
    "JobUrgency",
    "QuoteStatus",
    "QuoteTier",
    "TierOption",
    "UserRole",
]
