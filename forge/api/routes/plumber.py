"""Plumber dashboard and profile API endpoints."""

from fastapi import APIRouter, status

from forge.api.dependencies import (
    AdminUser,
    BadgeRepositoryDep,
    DashboardAggregatorDep,
    EarningRepositoryDep,
    JobRepositoryDep,
    PlumberProfileRepositoryDep,
    PlumberUser,
    TransactionServiceDep,
)
from forge.api.schemas.common import error_responses
from forge.api.schemas.job import JobListResponse, JobResponse
from forge.api.schemas.plumber import (
    AvailabilityResponse,
    AvailabilityUpdateRequest,
    BadgeSchema,
    DashboardResponse,
    EarningCreateRequest,
    EarningEnvelope,
    EarningResponse,
    PreferencesEnvelope,
    PreferencesResponse,
    PreferencesUpdateRequest,
)
from forge.application.use_cases.get_plumber_dashboard import (
    GetPlumberDashboardUseCase,
)
from forge.application.use_cases.list_available_jobs import ListAvailableJobsUseCase
from forge.application.use_cases.record_earning import (
    RecordEarningRequest,
    RecordEarningUseCase,
)
from forge.application.use_cases.update_availability import (
    UpdateAvailabilityRequest,
    UpdateAvailabilityUseCase,
)
from forge.application.use_cases.update_job_preferences import (
    UpdateJobPreferencesRequest,
    UpdateJobPreferencesUseCase,
)

router = APIRouter(
    prefix="/plumber",
    tags=["plumber"],
    responses=error_responses(400, 401, 403, 404, 409),
)


@router.get("/jobs", response_model=JobListResponse)
async def list_available_jobs(
    user: PlumberUser,
    job_repository: JobRepositoryDep,
    profile_repository: PlumberProfileRepositoryDep,
):
    """Open jobs matching the plumber's preferred job types."""
    use_case = ListAvailableJobsUseCase(
        job_repo=job_repository, profile_repo=profile_repository
    )
    result = await use_case.execute(user.id)
    return JobListResponse(jobs=[JobResponse.model_validate(job) for job in result.jobs])


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(user: PlumberUser, aggregator: DashboardAggregatorDep):
    """Earnings, job counts, badges and progression for the plumber."""
    snapshot = await GetPlumberDashboardUseCase(aggregator).execute(user.id)
    return DashboardResponse.model_validate(snapshot)


@router.put("/availability", response_model=AvailabilityResponse)
async def update_availability(
    availability: AvailabilityUpdateRequest,
    user: PlumberUser,
    profile_repository: PlumberProfileRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Toggle whether the plumber is taking jobs."""
    use_case = UpdateAvailabilityUseCase(
        profile_repo=profile_repository, transaction_service=transaction_service
    )
    is_active = await use_case.execute(
        UpdateAvailabilityRequest(plumber_id=user.id, is_active=availability.is_active)
    )
    return AvailabilityResponse(message="Availability updated", is_active=is_active)


@router.put("/preferences", response_model=PreferencesEnvelope)
async def update_preferences(
    preferences: PreferencesUpdateRequest,
    user: PlumberUser,
    profile_repository: PlumberProfileRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Replace the plumber's job preferences."""
    use_case = UpdateJobPreferencesUseCase(
        profile_repo=profile_repository, transaction_service=transaction_service
    )
    stored = await use_case.execute(
        UpdateJobPreferencesRequest(
            plumber_id=user.id,
            preferred_job_types=preferences.preferred_job_types,
            max_distance_km=preferences.max_distance_km,
            hours=preferences.hours(),
        )
    )
    return PreferencesEnvelope(
        message="Preferences updated",
        preferences=PreferencesResponse.from_entity(stored),
    )


@router.post(
    "/earnings",
    response_model=EarningEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def record_earning(
    earning_data: EarningCreateRequest,
    admin: AdminUser,
    profile_repository: PlumberProfileRepositoryDep,
    job_repository: JobRepositoryDep,
    earning_repository: EarningRepositoryDep,
    badge_repository: BadgeRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Settle a completed job and award XP to its plumber."""
    use_case = RecordEarningUseCase(
        profile_repo=profile_repository,
        job_repo=job_repository,
        earning_repo=earning_repository,
        badge_repo=badge_repository,
        transaction_service=transaction_service,
    )
    result = await use_case.execute(
        RecordEarningRequest(
            plumber_id=earning_data.plumber_id,
            job_id=earning_data.job_id,
            amount=earning_data.amount,
        )
    )
    return EarningEnvelope(
        message="Earning recorded",
        earning=EarningResponse.model_validate(result.earning),
        xp=result.profile.xp,
        level=result.profile.level,
        unlocked_badges=[
            BadgeSchema.model_validate(badge) for badge in result.unlocked_badges
        ],
    )
