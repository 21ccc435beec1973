"""
API schemas for the Forge marketplace service.
"""

from .common import BaseResponse, ErrorResponse
from .job import (
    JobCreateRequest,
    JobEnvelope,
    JobListResponse,
    JobResponse,
    JobStatusUpdateRequest,
    PhotoEnvelope,
    QuoteEnvelope,
    QuoteSubmitRequest,
    ReviewCreateRequest,
    ReviewEnvelope,
)
from .plumber import (
    AvailabilityResponse,
    AvailabilityUpdateRequest,
    DashboardResponse,
    EarningCreateRequest,
    EarningEnvelope,
    PreferencesEnvelope,
    PreferencesUpdateRequest,
)

__all__ = [
    "AvailabilityResponse",
    "AvailabilityUpdateRequest",
    "BaseResponse",
    "DashboardResponse",
    "EarningCreateRequest",
    "EarningEnvelope",
    "ErrorResponse",
    "JobCreateRequest",
    "JobEnvelope",
    "JobListResponse",
    "JobResponse",
    "JobStatusUpdateRequest",
    "PhotoEnvelope",
    "PreferencesEnvelope",
    "PreferencesUpdateRequest",
    "QuoteEnvelope",
    "QuoteSubmitRequest",
    "ReviewCreateRequest",
    "ReviewEnvelope",
]
