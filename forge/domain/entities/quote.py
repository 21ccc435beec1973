"""Quote domain entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from forge.domain.value_objects.quote_tier import QuoteStatus, QuoteTier, TierOption


@dataclass
class Quote:
    """A good/better/best priced offer for a job."""

    job_id: UUID
    plumber_id: UUID
    good: TierOption
    better: TierOption
    best: TierOption
    id: UUID = field(default_factory=uuid4)
    selected_tier: Optional[QuoteTier] = None
    status: QuoteStatus = QuoteStatus.PENDING
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)
        if not self.updated_at:
            self.updated_at = datetime.now(timezone.utc)

    def option(self, tier: QuoteTier) -> TierOption:
        """Get the option for a tier."""
        return {
            QuoteTier.GOOD: self.good,
            QuoteTier.BETTER: self.better,
            QuoteTier.BEST: self.best,
        }[tier]
