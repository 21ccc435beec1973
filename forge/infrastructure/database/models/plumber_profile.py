"""
Plumber profile SQLAlchemy models.
"""

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    Column,
    Float,
    ForeignKey,
    Integer,
    String,
    Uuid,
)
from sqlalchemy.orm import relationship

from .base import BaseModel


class PlumberProfileModel(BaseModel):
    """Plumber profile database model."""

    __tablename__ = "plumber_profiles"
    __table_args__ = (
        CheckConstraint("xp >= 0", name="ck_plumber_profiles_xp"),
        CheckConstraint(
            "forge_score >= 0 AND forge_score <= 5", name="ck_plumber_profiles_score"
        ),
    )

    user_id = Column(
        Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False, unique=True
    )
    xp = Column(Integer, nullable=False, default=0)
    level = Column(Integer, nullable=False, default=1)
    forge_score = Column(Float, nullable=False, default=0.0)
    is_active = Column(Boolean, nullable=False, default=True)

    # Optimistic concurrency counter
    version = Column(Integer, nullable=False)

    # Relationships
    user = relationship("UserModel", back_populates="plumber_profile")
    preferences = relationship(
        "JobPreferenceModel",
        back_populates="plumber_profile",
        uselist=False,
        cascade="all, delete-orphan",
    )
    badges = relationship(
        "PlumberBadgeModel",
        back_populates="plumber_profile",
        cascade="all, delete-orphan",
        order_by="PlumberBadgeModel.unlocked_at",
    )

    __mapper_args__ = {"version_id_col": version}

    def __repr__(self) -> str:
        return f"<PlumberProfile(id={self.id}, user_id={self.user_id}, level={self.level})>"


class JobPreferenceModel(BaseModel):
    """Job preference database model, one per plumber profile."""

    __tablename__ = "job_preferences"

    plumber_profile_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("plumber_profiles.id"),
        nullable=False,
        unique=True,
    )
    preferred_job_types = Column(JSON, nullable=False, default=list)
    max_distance_km = Column(Integer, nullable=False, default=50)

    monday_start = Column(String(5))
    monday_end = Column(String(5))
    tuesday_start = Column(String(5))
    tuesday_end = Column(String(5))
    wednesday_start = Column(String(5))
    wednesday_end = Column(String(5))
    thursday_start = Column(String(5))
    thursday_end = Column(String(5))
    friday_start = Column(String(5))
    friday_end = Column(String(5))
    saturday_start = Column(String(5))
    saturday_end = Column(String(5))
    sunday_start = Column(String(5))
    sunday_end = Column(String(5))

    # Relationships
    plumber_profile = relationship("PlumberProfileModel", back_populates="preferences")
