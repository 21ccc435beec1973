"""
Earning SQLAlchemy model.
"""

from sqlalchemy import Column, ForeignKey, Index, Integer, Numeric, UniqueConstraint, Uuid

from .base import BaseModel


class EarningModel(BaseModel):
    """Append-only earnings ledger."""

    __tablename__ = "earnings"
    __table_args__ = (
        UniqueConstraint("plumber_id", "job_id", name="uq_earnings_plumber_job"),
        Index("ix_earnings_plumber_created_at", "plumber_id", "created_at"),
    )

    plumber_id = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False)
    job_id = Column(Uuid(as_uuid=True), ForeignKey("jobs.id"), nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    xp_awarded = Column(Integer, nullable=False, default=0)
