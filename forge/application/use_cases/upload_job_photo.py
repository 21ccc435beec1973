"""Upload job photo use case."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from uuid import UUID

from forge.application.interfaces.repositories import (
    JobRepositoryInterface,
    PhotoRepositoryInterface,
)
from forge.application.interfaces.storage import PhotoStorageInterface
from forge.config.logging import get_logger
from forge.config.settings import settings
from forge.domain.entities.photo import Photo
from forge.domain.exceptions.resource_error import NotFoundError
from forge.domain.exceptions.validation_error import (
    FileTooLargeError,
    ValidationError,
)
from forge.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from forge.infrastructure.monitoring.metrics import PHOTOS_UPLOADED

logger = get_logger(__name__)

ALLOWED_EXTENSIONS = {".jpeg", ".jpg", ".png", ".gif"}
ALLOWED_CONTENT_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/gif"}


@dataclass
class UploadJobPhotoRequest:
    """Request for attaching a photo to a job."""

    job_id: UUID
    uploader_id: UUID
    filename: Optional[str]
    content: Optional[bytes]
    content_type: Optional[str] = None
    caption: Optional[str] = None


@dataclass
class UploadJobPhotoResult:
    """Result of a photo upload."""

    photo: Photo


class UploadJobPhotoUseCase:
    """Use case for storing an image and linking it to a job."""

    def __init__(
        self,
        job_repo: JobRepositoryInterface,
        photo_repo: PhotoRepositoryInterface,
        storage: PhotoStorageInterface,
        transaction_service: TransactionService,
        max_size_bytes: Optional[int] = None,
    ):
        self.job_repo = job_repo
        self.photo_repo = photo_repo
        self.storage = storage
        self.transaction_service = transaction_service
        self.max_size_bytes = max_size_bytes or settings.MAX_UPLOAD_SIZE_BYTES

    async def execute(self, request: UploadJobPhotoRequest) -> UploadJobPhotoResult:
        """Validate the image, write it to storage and record it."""
        self._validate_file(request)

        job = await self.job_repo.get_by_id(request.job_id)
        if not job:
            raise NotFoundError("job", request.job_id)

        stored_filename = await self.storage.save(request.filename, request.content)
        photo = Photo(
            job_id=job.id,
            uploaded_by_id=request.uploader_id,
            filename=stored_filename,
            url=self.storage.url_for(stored_filename),
            caption=request.caption,
        )

        async def operation():
            return await self.photo_repo.create(photo)

        try:
            created_photo = await self.transaction_service.execute_in_transaction(
                operation
            )
        except Exception:
            await self.storage.delete(stored_filename)
            raise

        PHOTOS_UPLOADED.inc()
        logger.info(
            "Photo uploaded",
            job_id=str(job.id),
            photo_id=str(created_photo.id),
            filename=stored_filename,
        )

        return UploadJobPhotoResult(photo=created_photo)

    def _validate_file(self, request: UploadJobPhotoRequest) -> None:
        if not request.filename or request.content is None:
            raise ValidationError("No file uploaded", reason="missing_file")

        extension = Path(request.filename).suffix.lower()
        if extension not in ALLOWED_EXTENSIONS:
            raise ValidationError(
                "Only image files are allowed", reason="invalid_file_type"
            )
        if (
            request.content_type
            and request.content_type.lower() not in ALLOWED_CONTENT_TYPES
        ):
            raise ValidationError(
                "Only image files are allowed", reason="invalid_file_type"
            )

        if len(request.content) > self.max_size_bytes:
            raise FileTooLargeError(self.max_size_bytes)
