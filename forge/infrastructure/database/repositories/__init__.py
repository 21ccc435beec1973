"""
Database repositories package.
"""

from .badge_repository import BadgeRepository
from .earning_repository import EarningRepository
from .job_repository import JobRepository
from .photo_repository import PhotoRepository
from .plumber_profile_repository import PlumberProfileRepository
from .quote_repository import QuoteRepository
from .review_repository import ReviewRepository
from .transaction_repository import TransactionService
from .user_repository import UserRepository

__all__ = [
    "BadgeRepository",
    "EarningRepository",
    "JobRepository",
    "PhotoRepository",
    "PlumberProfileRepository",
    "QuoteRepository",
    "ReviewRepository",
    "TransactionService",
    "UserRepository",
]
