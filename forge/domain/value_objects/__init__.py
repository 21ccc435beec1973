"""
Domain value objects package.
"""

from .earnings_window import EarningsWindows
from .job_status import JobStatus
from .job_urgency import JobUrgency
from .quote_tier import QuoteStatus, QuoteTier, TierOption
from .user_role import UserRole

__all__ = [
    "EarningsWindows",
    "JobStatus",
    "JobUrgency",
    "QuoteStatus",
    "QuoteTier",
    "TierOption",
    "UserRole",
]
