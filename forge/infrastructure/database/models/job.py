"""
Job SQLAlchemy model.
"""

from sqlalchemy import Column, DateTime, Enum, Float, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import relationship

from forge.domain.value_objects.job_status import JobStatus
from forge.domain.value_objects.job_urgency import JobUrgency

from .base import BaseModel, utcnow


class JobModel(BaseModel):
    """Job database model."""

    __tablename__ = "jobs"

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    job_type = Column(String(100), nullable=False, index=True)
    urgency = Column(
        Enum(JobUrgency, name="job_urgency_enum", native_enum=False, length=20),
        nullable=False,
        default=JobUrgency.MEDIUM,
    )
    status = Column(
        Enum(JobStatus, name="job_status_enum", native_enum=False, length=20),
        nullable=False,
        default=JobStatus.REQUESTED,
        index=True,
    )

    # Location
    address = Column(Text, nullable=False)
    latitude = Column(Float)
    longitude = Column(Float)

    # Ownership
    created_by_id = Column(
        Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True
    )
    assigned_to_id = Column(
        Uuid(as_uuid=True), ForeignKey("users.id"), nullable=True, index=True
    )

    # Lifecycle timestamps
    requested_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    scheduled_at = Column(DateTime(timezone=True))
    completed_at = Column(DateTime(timezone=True))

    # Optimistic concurrency counter
    version = Column(Integer, nullable=False)

    # Relationships
    created_by = relationship("UserModel", foreign_keys=[created_by_id])
    assigned_to = relationship("UserModel", foreign_keys=[assigned_to_id])
    quotes = relationship(
        "QuoteModel",
        back_populates="job",
        cascade="all, delete-orphan",
        order_by="QuoteModel.created_at",
    )
    photos = relationship(
        "PhotoModel",
        back_populates="job",
        cascade="all, delete-orphan",
        order_by="PhotoModel.created_at",
    )

    __mapper_args__ = {"version_id_col": version}

    def __repr__(self) -> str:
        return f"<Job(id={self.id}, title={self.title[:50]}, status={self.status})>"
