"""
Quote SQLAlchemy model.
"""

from sqlalchemy import Column, Enum, ForeignKey, Numeric, String, Text, Uuid
from sqlalchemy.orm import relationship

from forge.domain.value_objects.quote_tier import QuoteStatus, QuoteTier

from .base import BaseModel


class QuoteModel(BaseModel):
    """Tiered quote database model."""

    __tablename__ = "quotes"

    job_id = Column(
        Uuid(as_uuid=True), ForeignKey("jobs.id"), nullable=False, index=True
    )
    plumber_id = Column(
        Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True
    )

    good_title = Column(String(255), nullable=False)
    good_description = Column(Text, nullable=False)
    good_price = Column(Numeric(10, 2), nullable=False)
    better_title = Column(String(255), nullable=False)
    better_description = Column(Text, nullable=False)
    better_price = Column(Numeric(10, 2), nullable=False)
    best_title = Column(String(255), nullable=False)
    best_description = Column(Text, nullable=False)
    best_price = Column(Numeric(10, 2), nullable=False)

    selected_tier = Column(
        Enum(QuoteTier, name="quote_tier_enum", native_enum=False, length=20)
    )
    status = Column(
        Enum(QuoteStatus, name="quote_status_enum", native_enum=False, length=20),
        nullable=False,
        default=QuoteStatus.PENDING,
    )

    # Relationships
    job = relationship("JobModel", back_populates="quotes")
