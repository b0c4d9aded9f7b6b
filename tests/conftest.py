"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory async database, generation settings, completion client mocks
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock

import pytest

from study_gateway.configs.generation import GenerationSettings
from study_gateway.models.completion import CompletionFailure, FailureKind, RateLimitCode, RateLimitInfo


@pytest.fixture
async def test_engine():
    """
    Create in-memory SQLite async engine with all tables.

    Yields:
        AsyncEngine: Engine shared by every session of the test (StaticPool)
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool

    from study_gateway.boundary.db.base import Base
    import study_gateway.boundary.db.models  # noqa: F401  registers tables

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    """Session factory bound to the in-memory engine."""
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


@pytest.fixture
async def test_async_db(test_session_factory):
    """
    Create in-memory SQLite async database session for testing.

    Yields:
        AsyncSession: Test database session with rollback on teardown
    """
    async with test_session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def generation_settings() -> GenerationSettings:
    """Generation settings with defaults, independent of the environment."""
    return GenerationSettings(_env_file=None)


@pytest.fixture
def mock_completion_client() -> AsyncMock:
    """
    Create mock CompletionClient.

    Returns:
        AsyncMock: complete/transcribe/process_link are AsyncMocks to configure per test
    """
    client = AsyncMock()
    client.complete = AsyncMock()
    client.transcribe = AsyncMock()
    client.process_link = AsyncMock()
    return client


@pytest.fixture
def rate_limited_result() -> CompletionFailure:
    """Daily rate-limit failure as returned by the completion client."""
    return CompletionFailure(
        kind=FailureKind.RATE_LIMIT,
        message=RateLimitCode.DAILY_LIMIT_REACHED.value,
        status_code=429,
        rate_limit=RateLimitInfo(code=RateLimitCode.DAILY_LIMIT_REACHED, limit=20, remaining=0),
    )


@pytest.fixture
def transport_failure_result() -> CompletionFailure:
    """Generic transport failure as returned by the completion client."""
    return CompletionFailure(kind=FailureKind.TRANSPORT, message="Connection reset", status_code=500)
