"""
Photo SQLAlchemy model.
"""

from sqlalchemy import Column, ForeignKey, String, Uuid
from sqlalchemy.orm import relationship

from .base import BaseModel


class PhotoModel(BaseModel):
    """Job photo database model."""

    __tablename__ = "photos"

    job_id = Column(
        Uuid(as_uuid=True), ForeignKey("jobs.id"), nullable=False, index=True
    )
    uploaded_by_id = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False)
    filename = Column(String(255), nullable=False)
    url = Column(String(500), nullable=False)
    caption = Column(String(500))

    # Relationships
    job = relationship("JobModel", back_populates="photos")
