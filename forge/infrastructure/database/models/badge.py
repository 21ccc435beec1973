"""
Badge SQLAlchemy models.
"""

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import relationship

from .base import BaseModel, utcnow


class BadgeModel(BaseModel):
    """Badge catalog database model."""

    __tablename__ = "badges"

    name = Column(String(100), nullable=False, unique=True)
    description = Column(Text, nullable=False)
    icon = Column(String(50), nullable=False)
    xp_required = Column(Integer, nullable=False, default=0)
    criteria = Column(JSON, nullable=False, default=dict)


class PlumberBadgeModel(BaseModel):
    """Badge unlocked by a plumber profile."""

    __tablename__ = "plumber_badges"
    __table_args__ = (
        UniqueConstraint(
            "plumber_profile_id", "badge_id", name="uq_plumber_badges_profile_badge"
        ),
    )

    plumber_profile_id = Column(
        Uuid(as_uuid=True), ForeignKey("plumber_profiles.id"), nullable=False
    )
    badge_id = Column(Uuid(as_uuid=True), ForeignKey("badges.id"), nullable=False)
    unlocked_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Relationships
    plumber_profile = relationship("PlumberProfileModel", back_populates="badges")
    badge = relationship("BadgeModel", lazy="joined")
