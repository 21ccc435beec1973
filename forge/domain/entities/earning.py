"""Earning domain entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4


@dataclass(frozen=True)
class Earning:
    """Ledger row for a settled job. Never mutated after creation."""

    plumber_id: UUID
    job_id: UUID
    amount: Decimal
    xp_awarded: int
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
