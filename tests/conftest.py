"""
Pytest configuration and fixtures.
"""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from typing import AsyncGenerator  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402
from uuid import uuid4  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from forge.application.interfaces.repositories import (  # noqa: E402
    BadgeRepositoryInterface,
    EarningRepositoryInterface,
    JobRepositoryInterface,
    PhotoRepositoryInterface,
    PlumberProfileRepositoryInterface,
    QuoteRepositoryInterface,
    ReviewRepositoryInterface,
)
from forge.application.interfaces.storage import PhotoStorageInterface  # noqa: E402
from forge.domain.entities.job import Job  # noqa: E402
from forge.domain.entities.plumber_profile import PlumberProfile  # noqa: E402
from forge.domain.entities.user import User  # noqa: E402
from forge.domain.value_objects.job_urgency import JobUrgency  # noqa: E402
from forge.domain.value_objects.user_role import UserRole  # noqa: E402
from forge.infrastructure.database.models import Base  # noqa: E402
from forge.infrastructure.database.repositories.transaction_repository import (  # noqa: E402
    TransactionService,
)
from forge.infrastructure.security.tokens import (  # noqa: E402
    AuthUser,
    create_access_token,
)

# Test database URL
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine():
    """Create a fresh in-memory database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async_session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )

    async with async_session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def mock_transaction_service():
    """Transaction service that simply runs the operation."""
    service = AsyncMock(spec=TransactionService)

    async def run(operation):
        return await operation()

    service.execute_in_transaction.side_effect = run
    return service


@pytest.fixture
def mock_job_repository():
    """Mock job repository."""
    mock_repo = AsyncMock(spec=JobRepositoryInterface)
    mock_repo.update.side_effect = lambda job: job
    return mock_repo


@pytest.fixture
def mock_quote_repository():
    """Mock quote repository."""
    mock_repo = AsyncMock(spec=QuoteRepositoryInterface)
    mock_repo.create.side_effect = lambda quote: quote
    return mock_repo


@pytest.fixture
def mock_photo_repository():
    """Mock photo repository."""
    mock_repo = AsyncMock(spec=PhotoRepositoryInterface)
    mock_repo.create.side_effect = lambda photo: photo
    return mock_repo


@pytest.fixture
def mock_review_repository():
    """Mock review repository."""
    mock_repo = AsyncMock(spec=ReviewRepositoryInterface)
    mock_repo.find_by_job_and_author.return_value = None
    mock_repo.create.side_effect = lambda review: review
    return mock_repo


@pytest.fixture
def mock_profile_repository():
    """Mock plumber profile repository."""
    mock_repo = AsyncMock(spec=PlumberProfileRepositoryInterface)
    mock_repo.update.side_effect = lambda profile: profile
    mock_repo.upsert_preferences.side_effect = lambda preference: preference
    return mock_repo


@pytest.fixture
def mock_badge_repository():
    """Mock badge repository."""
    mock_repo = AsyncMock(spec=BadgeRepositoryInterface)
    mock_repo.list_catalog.return_value = []
    return mock_repo


@pytest.fixture
def mock_earning_repository():
    """Mock earning repository."""
    mock_repo = AsyncMock(spec=EarningRepositoryInterface)
    mock_repo.exists_for_job.return_value = False
    mock_repo.create.side_effect = lambda earning: earning
    return mock_repo


@pytest.fixture
def mock_storage():
    """Mock photo storage."""
    storage = AsyncMock(spec=PhotoStorageInterface)
    storage.save.return_value = "photo-1-1.jpg"
    storage.url_for = MagicMock(side_effect=lambda name: f"/uploads/{name}")
    return storage


@pytest.fixture
def homeowner_id():
    return uuid4()


@pytest.fixture
def plumber_id():
    return uuid4()


@pytest.fixture
def sample_job(homeowner_id):
    """A freshly requested job."""
    return Job(
        title="Leaking faucet",
        description="Kitchen faucet drips constantly",
        job_type="leak",
        address="12 Elm Street",
        urgency=JobUrgency.HIGH,
        created_by_id=homeowner_id,
        version=1,
    )


@pytest.fixture
def sample_profile(plumber_id):
    """A plumber profile without badges."""
    return PlumberProfile(user_id=plumber_id, xp=0, level=1, forge_score=4.5)


def make_user(role: UserRole, email: str = None, **kwargs) -> User:
    """Build a user entity for seeding."""
    return User(
        email=email or f"{role.value.lower()}-{uuid4().hex[:8]}@example.com",
        first_name=kwargs.pop("first_name", role.value.title()),
        last_name=kwargs.pop("last_name", "Tester"),
        role=role,
        **kwargs,
    )


def auth_headers(user: User) -> dict:
    """Bearer header for a user."""
    token = create_access_token(AuthUser(id=user.id, role=user.role, email=user.email))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_factory():
    return make_user


@pytest.fixture
def headers_for():
    return auth_headers
