"""
Quote tier and status value objects.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class QuoteTier(str, Enum):
    """The three priced options of a quote."""

    GOOD = "GOOD"
    BETTER = "BETTER"
    BEST = "BEST"


class QuoteStatus(str, Enum):
    """Quote decision status."""

    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"


@dataclass(frozen=True)
class TierOption:
    """One priced option of a tiered quote."""

    title: str
    description: str
    price: Decimal

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "title": self.title,
            "description": self.description,
            "price": str(self.price),
        }
