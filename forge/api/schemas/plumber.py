"""
Plumber-facing API schemas.
"""

from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, StrictBool

from forge.domain.entities.plumber_profile import JobPreference

from .common import BaseResponse


class AvailabilityUpdateRequest(BaseModel):
    """Availability toggle schema. Strings and numbers are rejected."""

    is_active: StrictBool


class AvailabilityResponse(BaseResponse):
    is_active: bool


class PreferencesUpdateRequest(BaseModel):
    """Job preference upsert schema. Omitted fields are reset to defaults."""

    preferred_job_types: Optional[List[str]] = None
    max_distance_km: Optional[int] = Field(None, ge=0)
    monday_start: Optional[str] = None
    monday_end: Optional[str] = None
    tuesday_start: Optional[str] = None
    tuesday_end: Optional[str] = None
    wednesday_start: Optional[str] = None
    wednesday_end: Optional[str] = None
    thursday_start: Optional[str] = None
    thursday_end: Optional[str] = None
    friday_start: Optional[str] = None
    friday_end: Optional[str] = None
    saturday_start: Optional[str] = None
    saturday_end: Optional[str] = None
    sunday_start: Optional[str] = None
    sunday_end: Optional[str] = None

    def hours(self) -> Dict[str, Optional[str]]:
        return self.model_dump(exclude={"preferred_job_types", "max_distance_km"})


class PreferencesResponse(BaseModel):
    """Stored job preferences."""

    preferred_job_types: List[str]
    max_distance_km: int
    monday_start: Optional[str] = None
    monday_end: Optional[str] = None
    tuesday_start: Optional[str] = None
    tuesday_end: Optional[str] = None
    wednesday_start: Optional[str] = None
    wednesday_end: Optional[str] = None
    thursday_start: Optional[str] = None
    thursday_end: Optional[str] = None
    friday_start: Optional[str] = None
    friday_end: Optional[str] = None
    saturday_start: Optional[str] = None
    saturday_end: Optional[str] = None
    sunday_start: Optional[str] = None
    sunday_end: Optional[str] = None

    @classmethod
    def from_entity(cls, preference: JobPreference) -> "PreferencesResponse":
        return cls(
            preferred_job_types=preference.preferred_job_types,
            max_distance_km=preference.max_distance_km,
            **preference.hours,
        )


class PreferencesEnvelope(BaseResponse):
    preferences: PreferencesResponse


class BadgeSchema(BaseModel):
    """Unlocked badge."""

    id: UUID
    name: str
    description: str
    icon: str
    unlocked_at: datetime

    model_config = {"from_attributes": True}


class ProfileSummarySchema(BaseModel):
    xp: int
    level: int
    next_level_xp: int
    forge_score: float
    is_active: bool

    model_config = {"from_attributes": True}


class EarningsSummarySchema(BaseModel):
    """Earnings sums; every window is computed in the dashboard time zone."""

    today: float = Field(..., description="Earned since local midnight")
    week: float = Field(..., description="Earned since the start of the week (Sunday)")
    month: float = Field(
        ...,
        description=(
            "Earned since the first of the month, or since the start of the "
            "week when the week began in the previous month"
        ),
    )
    total: float = Field(..., description="All-time earnings")

    model_config = {"from_attributes": True}


class JobCountsSchema(BaseModel):
    available: int
    in_progress: int
    completed: int

    model_config = {"from_attributes": True}


class DashboardResponse(BaseModel):
    """Plumber dashboard."""

    profile: ProfileSummarySchema
    earnings: EarningsSummarySchema
    jobs: JobCountsSchema
    badges: List[BadgeSchema]

    model_config = {"from_attributes": True}


class EarningCreateRequest(BaseModel):
    """Settlement of a completed job."""

    plumber_id: UUID
    job_id: UUID
    amount: Decimal = Field(..., gt=0)


class EarningResponse(BaseModel):
    id: UUID
    plumber_id: UUID
    job_id: UUID
    amount: float
    xp_awarded: int
    created_at: datetime

    model_config = {"from_attributes": True}


class EarningEnvelope(BaseResponse):
    earning: EarningResponse
    xp: int
    level: int
    unlocked_badges: List[BadgeSchema] = []
