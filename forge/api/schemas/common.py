"""
Schemas shared by every router.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class BaseResponse(BaseModel):
    """Envelope of every successful write: a human-readable message plus payload."""

    message: Optional[str] = None


class ErrorResponse(BaseModel):
    """Body returned for every handled error."""

    error: str = Field(..., description="Short title, e.g. 'Not Found'")
    message: str
    type: str = Field(
        ..., description="Machine-readable reason, e.g. 'job_not_quotable'"
    )


class TimestampMixin(BaseModel):
    """Audit timestamps carried by persisted resources."""

    created_at: datetime
    updated_at: datetime


def error_responses(*status_codes: int) -> Dict[int, Dict[str, Any]]:
    """OpenAPI ``responses`` entries documenting the error body."""
    return {code: {"model": ErrorResponse} for code in status_codes}
