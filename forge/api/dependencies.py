"""
FastAPI dependency injection container.
"""

from typing import Annotated, Callable, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from forge.application.services.dashboard_aggregator import DashboardAggregator
from forge.config.database import get_db_session
from forge.config.logging import get_logger
from forge.domain.exceptions.access_error import ForbiddenError, UnauthorizedError
from forge.domain.value_objects.user_role import UserRole
from forge.infrastructure.database.repositories.badge_repository import (
    BadgeRepository,
)
from forge.infrastructure.database.repositories.earning_repository import (
    EarningRepository,
)
from forge.infrastructure.database.repositories.job_repository import JobRepository
from forge.infrastructure.database.repositories.photo_repository import (
    PhotoRepository,
)
from forge.infrastructure.database.repositories.plumber_profile_repository import (
    PlumberProfileRepository,
)
from forge.infrastructure.database.repositories.quote_repository import (
    QuoteRepository,
)
from forge.infrastructure.database.repositories.review_repository import (
    ReviewRepository,
)
from forge.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from forge.infrastructure.security.tokens import AuthUser, decode_access_token
from forge.infrastructure.storage.local_storage import LocalPhotoStorage

logger = get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


# Database Dependencies
async def get_job_repository(
    db: AsyncSession = Depends(get_db_session),
) -> JobRepository:
    """Get job repository instance."""
    return JobRepository(db)


async def get_quote_repository(
    db: AsyncSession = Depends(get_db_session),
) -> QuoteRepository:
    """Get quote repository instance."""
    return QuoteRepository(db)


async def get_photo_repository(
    db: AsyncSession = Depends(get_db_session),
) -> PhotoRepository:
    """Get photo repository instance."""
    return PhotoRepository(db)


async def get_review_repository(
    db: AsyncSession = Depends(get_db_session),
) -> ReviewRepository:
    """Get review repository instance."""
    return ReviewRepository(db)


async def get_plumber_profile_repository(
    db: AsyncSession = Depends(get_db_session),
) -> PlumberProfileRepository:
    """Get plumber profile repository instance."""
    return PlumberProfileRepository(db)


async def get_badge_repository(
    db: AsyncSession = Depends(get_db_session),
) -> BadgeRepository:
    """Get badge repository instance."""
    return BadgeRepository(db)


async def get_earning_repository(
    db: AsyncSession = Depends(get_db_session),
) -> EarningRepository:
    """Get earning repository instance."""
    return EarningRepository(db)


async def get_transaction_service(
    db: AsyncSession = Depends(get_db_session),
) -> TransactionService:
    """Get transaction service instance."""
    return TransactionService(db)


# Service Dependencies
async def get_photo_storage() -> LocalPhotoStorage:
    """Get photo storage instance."""
    return LocalPhotoStorage()


async def get_dashboard_aggregator(
    profile_repo: PlumberProfileRepository = Depends(get_plumber_profile_repository),
    job_repo: JobRepository = Depends(get_job_repository),
    earning_repo: EarningRepository = Depends(get_earning_repository),
) -> DashboardAggregator:
    """Get dashboard aggregator instance."""
    return DashboardAggregator(profile_repo, job_repo, earning_repo)


# Authentication Dependencies
async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> AuthUser:
    """Resolve the caller from the bearer token."""
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Access token required", reason="missing_token")
    return decode_access_token(credentials.credentials)


def require_roles(*roles: UserRole) -> Callable:
    """Build a dependency that only lets the given roles through."""

    async def dependency(user: AuthUser = Depends(get_current_user)) -> AuthUser:
        if user.role not in roles:
            logger.info(
                "Role not permitted",
                user_id=str(user.id),
                role=user.role.value,
                allowed=[role.value for role in roles],
            )
            raise ForbiddenError("Insufficient permissions", reason="role_not_allowed")
        return user

    return dependency


# Type aliases for cleaner dependency injection
JobRepositoryDep = Annotated[JobRepository, Depends(get_job_repository)]
QuoteRepositoryDep = Annotated[QuoteRepository, Depends(get_quote_repository)]
PhotoRepositoryDep = Annotated[PhotoRepository, Depends(get_photo_repository)]
ReviewRepositoryDep = Annotated[ReviewRepository, Depends(get_review_repository)]
PlumberProfileRepositoryDep = Annotated[
    PlumberProfileRepository, Depends(get_plumber_profile_repository)
]
BadgeRepositoryDep = Annotated[BadgeRepository, Depends(get_badge_repository)]
EarningRepositoryDep = Annotated[EarningRepository, Depends(get_earning_repository)]
TransactionServiceDep = Annotated[TransactionService, Depends(get_transaction_service)]
PhotoStorageDep = Annotated[LocalPhotoStorage, Depends(get_photo_storage)]
DashboardAggregatorDep = Annotated[
    DashboardAggregator, Depends(get_dashboard_aggregator)
]

CurrentUser = Annotated[AuthUser, Depends(get_current_user)]
PlumberUser = Annotated[AuthUser, Depends(require_roles(UserRole.PLUMBER))]
HomeownerUser = Annotated[AuthUser, Depends(require_roles(UserRole.HOMEOWNER))]
JobCreatorUser = Annotated[
    AuthUser, Depends(require_roles(UserRole.DISPATCHER, UserRole.HOMEOWNER))
]
AdminUser = Annotated[AuthUser, Depends(require_roles(UserRole.ADMIN))]
