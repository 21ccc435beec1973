"""
Database models package.
"""

from .badge import BadgeModel, PlumberBadgeModel
from .base import Base, BaseModel
from .earning import EarningModel
from .job import JobModel
from .photo import PhotoModel
from .plumber_profile import JobPreferenceModel, PlumberProfileModel
from .quote import QuoteModel
from .review import ReviewModel
from .user import UserModel

__all__ = [
    "Base",
    "BaseModel",
    "BadgeModel",
    "EarningModel",
    "JobModel",
    "JobPreferenceModel",
    "PhotoModel",
    "PlumberBadgeModel",
    "PlumberProfileModel",
    "QuoteModel",
    "ReviewModel",
    "UserModel",
]
