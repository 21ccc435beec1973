"""
Domain entities package.
"""

from .earning import Earning
from .job import Job
from .photo import Photo
from .plumber_profile import Badge, JobPreference, PlumberProfile, UnlockedBadge
from .quote import Quote
from .review import Review
from .user import User, UserSummary

__all__ = [
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
]
