"""
Job-related API schemas.
"""

from datetime import datetime
from typing import Any, List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from forge.domain.value_objects.job_status import JobStatus
from forge.domain.value_objects.job_urgency import JobUrgency
from forge.domain.value_objects.quote_tier import QuoteStatus, QuoteTier

from .common import BaseResponse, TimestampMixin


class JobCreateRequest(BaseModel):
    """Job creation request schema."""

    title: str = Field(..., max_length=255)
    description: str = Field(..., max_length=5000)
    job_type: str = Field(..., max_length=100, description="e.g. 'leak', 'drain'")
    address: str = Field(..., max_length=500)
    urgency: JobUrgency = JobUrgency.MEDIUM
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)


TIER_DESCRIPTION = "Tier option: an object with title, description and price"


class QuoteSubmitRequest(BaseModel):
    """
    Tiered quote submission schema.

    Tier bodies are passed through as sent and checked by the use case once
    the job is known to accept quotes.
    """

    good: Optional[Any] = Field(None, description=TIER_DESCRIPTION)
    better: Optional[Any] = Field(None, description=TIER_DESCRIPTION)
    best: Optional[Any] = Field(None, description=TIER_DESCRIPTION)

    def tiers(self) -> dict:
        return {"good": self.good, "better": self.better, "best": self.best}


class JobStatusUpdateRequest(BaseModel):
    """Job status update schema."""

    status: str = Field(..., description="Target job status")
    scheduled_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None


class ReviewCreateRequest(BaseModel):
    """Review creation schema."""

    rating: int = Field(..., description="Rating from 1 to 5")
    comment: Optional[str] = Field(None, max_length=2000)


class UserSummarySchema(BaseModel):
    """Public contact details of a job participant."""

    first_name: str
    last_name: str
    phone: Optional[str] = None

    model_config = {"from_attributes": True}


class TierOptionResponse(BaseModel):
    title: str
    description: str
    price: float

    model_config = {"from_attributes": True}


class QuoteResponse(TimestampMixin):
    """Quote response schema."""

    id: UUID
    job_id: UUID
    plumber_id: UUID
    good: TierOptionResponse
    better: TierOptionResponse
    best: TierOptionResponse
    selected_tier: Optional[QuoteTier] = None
    status: QuoteStatus

    model_config = {"from_attributes": True}


class PhotoResponse(BaseModel):
    """Photo response schema."""

    id: UUID
    job_id: UUID
    uploaded_by_id: UUID
    filename: str
    url: str
    caption: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}


class ReviewResponse(BaseModel):
    """Review response schema."""

    id: UUID
    job_id: UUID
    author_id: UUID
    target_id: UUID
    rating: int
    comment: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}


class JobResponse(TimestampMixin):
    """Job response schema."""

    id: UUID
    title: str
    description: str
    job_type: str
    urgency: JobUrgency
    status: JobStatus = Field(..., description="Current job status")
    address: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    created_by_id: UUID
    assigned_to_id: Optional[UUID] = None
    requested_at: datetime
    scheduled_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    created_by: Optional[UserSummarySchema] = None
    assigned_to: Optional[UserSummarySchema] = None
    photos: List[PhotoResponse] = []
    quotes: List[QuoteResponse] = []

    model_config = {"from_attributes": True}


class JobEnvelope(BaseResponse):
    job: JobResponse


class QuoteEnvelope(BaseResponse):
    quote: QuoteResponse


class PhotoEnvelope(BaseResponse):
    photo: PhotoResponse


class ReviewEnvelope(BaseResponse):
    review: ReviewResponse


class JobListResponse(BaseModel):
    """Available job feed."""

    jobs: List[JobResponse]
