"""
Application interfaces package.
"""

from .repositories import (
    BadgeRepositoryInterface,
    EarningRepositoryInterface,
    JobRepositoryInterface,
    PhotoRepositoryInterface,
    PlumberProfileRepositoryInterface,
    QuoteRepositoryInterface,
    ReviewRepositoryInterface,
    UserRepositoryInterface,
)
from .storage import PhotoStorageInterface

__all__ = [
    "BadgeRepositoryInterface",
    "EarningRepositoryInterface",
    "JobRepositoryInterface",
    "PhotoRepositoryInterface",
    "PhotoStorageInterface",
    "PlumberProfileRepositoryInterface",
    "QuoteRepositoryInterface",
    "ReviewRepositoryInterface",
    "UserRepositoryInterface",
]
