"""Job lifecycle API endpoints."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, File, Form, UploadFile, status

from forge.api.dependencies import (
    CurrentUser,
    HomeownerUser,
    JobCreatorUser,
    JobRepositoryDep,
    PhotoRepositoryDep,
    PhotoStorageDep,
    PlumberUser,
    QuoteRepositoryDep,
    ReviewRepositoryDep,
    TransactionServiceDep,
)
from forge.api.schemas.common import error_responses
from forge.api.schemas.job import (
    JobCreateRequest,
    JobEnvelope,
    JobResponse,
    JobStatusUpdateRequest,
    PhotoEnvelope,
    PhotoResponse,
    QuoteEnvelope,
    QuoteResponse,
    QuoteSubmitRequest,
    ReviewCreateRequest,
    ReviewEnvelope,
    ReviewResponse,
)
from forge.application.use_cases.create_job import CreateJobRequest, CreateJobUseCase
from forge.application.use_cases.create_review import (
    CreateReviewRequest,
    CreateReviewUseCase,
)
from forge.application.use_cases.submit_quote import (
    SubmitQuoteRequest,
    SubmitQuoteUseCase,
)
from forge.application.use_cases.update_job_status import (
    UpdateJobStatusRequest,
    UpdateJobStatusUseCase,
)
from forge.application.use_cases.upload_job_photo import (
    UploadJobPhotoRequest,
    UploadJobPhotoUseCase,
)
from forge.config.settings import settings
from forge.domain.exceptions.validation_error import FileTooLargeError

router = APIRouter(
    prefix="/jobs", tags=["jobs"], responses=error_responses(400, 401, 403, 404, 409)
)


@router.post("", response_model=JobEnvelope, status_code=status.HTTP_201_CREATED)
async def create_job(
    job_data: JobCreateRequest,
    user: JobCreatorUser,
    job_repository: JobRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Post a new job to the marketplace."""
    use_case = CreateJobUseCase(
        job_repo=job_repository, transaction_service=transaction_service
    )
    result = await use_case.execute(
        CreateJobRequest(
            title=job_data.title,
            description=job_data.description,
            job_type=job_data.job_type,
            address=job_data.address,
            urgency=job_data.urgency,
            latitude=job_data.latitude,
            longitude=job_data.longitude,
            created_by_id=user.id,
        )
    )

    return JobEnvelope(
        message="Job created successfully",
        job=JobResponse.model_validate(result.job),
    )


@router.post(
    "/{job_id}/quote",
    response_model=QuoteEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def submit_quote(
    job_id: UUID,
    quote_data: QuoteSubmitRequest,
    user: PlumberUser,
    job_repository: JobRepositoryDep,
    quote_repository: QuoteRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Submit a good/better/best quote for a requested job."""
    use_case = SubmitQuoteUseCase(
        job_repo=job_repository,
        quote_repo=quote_repository,
        transaction_service=transaction_service,
    )
    result = await use_case.execute(
        SubmitQuoteRequest(job_id=job_id, plumber_id=user.id, tiers=quote_data.tiers())
    )

    return QuoteEnvelope(
        message="Quote submitted successfully",
        quote=QuoteResponse.model_validate(result.quote),
    )


@router.post("/{job_id}/status", response_model=JobEnvelope)
async def update_job_status(
    job_id: UUID,
    status_data: JobStatusUpdateRequest,
    user: CurrentUser,
    job_repository: JobRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Move a job along its lifecycle."""
    use_case = UpdateJobStatusUseCase(
        job_repo=job_repository, transaction_service=transaction_service
    )
    result = await use_case.execute(
        UpdateJobStatusRequest(
            job_id=job_id,
            status=status_data.status,
            actor_id=user.id,
            actor_role=user.role,
            scheduled_at=status_data.scheduled_at,
            completed_at=status_data.completed_at,
        )
    )

    return JobEnvelope(
        message="Job status updated successfully",
        job=JobResponse.model_validate(result.job),
    )


@router.post(
    "/{job_id}/photo",
    response_model=PhotoEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def upload_job_photo(
    job_id: UUID,
    user: CurrentUser,
    job_repository: JobRepositoryDep,
    photo_repository: PhotoRepositoryDep,
    storage: PhotoStorageDep,
    transaction_service: TransactionServiceDep,
    photo: Optional[UploadFile] = File(None),
    caption: Optional[str] = Form(None),
):
    """Attach an image to a job."""
    filename, content, content_type = None, None, None
    if photo is not None:
        filename = photo.filename
        content = await read_upload(photo, settings.MAX_UPLOAD_SIZE_BYTES)
        content_type = photo.content_type

    use_case = UploadJobPhotoUseCase(
        job_repo=job_repository,
        photo_repo=photo_repository,
        storage=storage,
        transaction_service=transaction_service,
    )
    result = await use_case.execute(
        UploadJobPhotoRequest(
            job_id=job_id,
            uploader_id=user.id,
            filename=filename,
            content=content,
            content_type=content_type,
            caption=caption,
        )
    )

    return PhotoEnvelope(
        message="Photo uploaded successfully",
        photo=PhotoResponse.model_validate(result.photo),
    )


@router.post(
    "/{job_id}/review",
    response_model=ReviewEnvelope,
    status_code=status.HTTP_201_CREATED,
)
async def create_review(
    job_id: UUID,
    review_data: ReviewCreateRequest,
    user: HomeownerUser,
    job_repository: JobRepositoryDep,
    review_repository: ReviewRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Review the plumber who completed a job."""
    use_case = CreateReviewUseCase(
        job_repo=job_repository,
        review_repo=review_repository,
        transaction_service=transaction_service,
    )
    result = await use_case.execute(
        CreateReviewRequest(
            job_id=job_id,
            author_id=user.id,
            rating=review_data.rating,
            comment=review_data.comment,
        )
    )

    return ReviewEnvelope(
        message="Review created successfully",
        review=ReviewResponse.model_validate(result.review),
    )


async def read_upload(upload: UploadFile, limit_bytes: int) -> bytes:
    """
    Read an uploaded file without buffering more than ``limit_bytes + 1``.

    A declared size over the limit is rejected before anything is read. A
    file without a declared size comes back truncated to one byte past the
    limit, which the upload use case then rejects.
    """
    if upload.size is not None and upload.size > limit_bytes:
        raise FileTooLargeError(limit_bytes)
    return await upload.read(limit_bytes + 1)
