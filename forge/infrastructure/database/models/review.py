"""
Review SQLAlchemy model.
"""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Text, UniqueConstraint, Uuid

from .base import BaseModel


class ReviewModel(BaseModel):
    """Review database model."""

    __tablename__ = "reviews"
    __table_args__ = (
        UniqueConstraint("job_id", "author_id", name="uq_reviews_job_author"),
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_reviews_rating"),
    )

    job_id = Column(
        Uuid(as_uuid=True), ForeignKey("jobs.id"), nullable=False, index=True
    )
    author_id = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False)
    target_id = Column(
        Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True
    )
    rating = Column(Integer, nullable=False)
    comment = Column(Text)
