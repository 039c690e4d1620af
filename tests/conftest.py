"""
Shared test fixtures for the Vacation Manager test suite.
"""

from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import vacation_manager.models  # noqa: F401  (registers tables on Base.metadata)
from tests.fakes import (
    FakeTeamRepository,
    FakeUserRepository,
    FakeVacationRepository,
    InMemoryStore,
)
from vacation_manager.config import Settings
from vacation_manager.database import Base


@pytest.fixture
def test_settings():
    """Settings configured for testing (no real DB connection needed)."""
    return Settings(
        db_host="localhost",
        db_port=5432,
        db_name="vacation_manager_test",
        db_user="test",
        db_password="test",
        debug=True,
    )


@pytest.fixture
def mock_db_session():
    """Create a mock async database session."""
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    return session


@pytest.fixture
def store():
    return InMemoryStore()


def build_test_app(test_settings):
    with patch("vacation_manager.main.get_settings", return_value=test_settings):
        from vacation_manager.main import create_app

        return create_app()


@pytest_asyncio.fixture
async def app_client(test_settings, mock_db_session, store):
    """Create a test client backed by in-memory repositories."""
    app = build_test_app(test_settings)

    from vacation_manager.database import get_db, get_db_readonly
    from vacation_manager.repositories import (
        get_team_repository,
        get_user_repository,
        get_vacation_repository,
    )

    app.dependency_overrides[get_db] = lambda: mock_db_session
    app.dependency_overrides[get_db_readonly] = lambda: mock_db_session
    app.dependency_overrides[get_user_repository] = lambda: FakeUserRepository(store)
    app.dependency_overrides[get_team_repository] = lambda: FakeTeamRepository(store)
    app.dependency_overrides[get_vacation_repository] = lambda: FakeVacationRepository(store)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def db_session():
    """A real async session over an in-memory SQLite database with all tables created."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(bind=engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()


@pytest_asyncio.fixture
async def sql_client(test_settings, db_session):
    """Create a test client whose repositories run real queries against db_session."""
    app = build_test_app(test_settings)

    from vacation_manager.database import get_db, get_db_readonly

    app.dependency_overrides[get_db] = lambda: db_session
    app.dependency_overrides[get_db_readonly] = lambda: db_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
