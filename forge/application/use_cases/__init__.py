"""
Use cases package.

This package contains the job lifecycle and plumber dashboard use cases
that orchestrate the domain and the repositories.
"""

from .create_job import CreateJobUseCase
from .create_review import CreateReviewUseCase
from .get_plumber_dashboard import GetPlumberDashboardUseCase
from .list_available_jobs import ListAvailableJobsUseCase
from .record_earning import RecordEarningUseCase
from .submit_quote import SubmitQuoteUseCase
from .update_availability import UpdateAvailabilityUseCase
from .update_job_preferences import UpdateJobPreferencesUseCase
from .update_job_status import UpdateJobStatusUseCase
from .upload_job_photo import UploadJobPhotoUseCase

__all__ = [
    "CreateJobUseCase",
    "CreateReviewUseCase",
    "GetPlumberDashboardUseCase",
    "ListAvailableJobsUseCase",
    "RecordEarningUseCase",
    "SubmitQuoteUseCase",
    "UpdateAvailabilityUseCase",
    "UpdateJobPreferencesUseCase",
    "UpdateJobStatusUseCase",
    "UploadJobPhotoUseCase",
]
