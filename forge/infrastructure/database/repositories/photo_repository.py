"""Photo repository implementation."""

from sqlalchemy.ext.asyncio import AsyncSession

from forge.application.interfaces.repositories import PhotoRepositoryInterface
from forge.domain.entities.photo import Photo
from forge.infrastructure.database.models.photo import PhotoModel


class PhotoRepository(PhotoRepositoryInterface):
    """Photo repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, photo: Photo) -> Photo:
        """Create a new photo record."""
        photo_model = PhotoModel(
            id=photo.id,
            job_id=photo.job_id,
            uploaded_by_id=photo.uploaded_by_id,
            filename=photo.filename,
            url=photo.url,
            caption=photo.caption,
            created_at=photo.created_at,
        )

        self.db.add(photo_model)
        await self.db.flush()
        await self.db.refresh(photo_model)

        return Photo(
            id=photo_model.id,
            job_id=photo_model.job_id,
            uploaded_by_id=photo_model.uploaded_by_id,
            filename=photo_model.filename,
            url=photo_model.url,
            caption=photo_model.caption,
            created_at=photo_model.created_at,
        )
