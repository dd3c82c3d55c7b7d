"""Pytest fixtures for API integration tests."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from usermanagement.application.ports import UserEventPublisher
from usermanagement.domain.user import UserEvent
from usermanagement.infrastructure.persistence.sqlalchemy import Base
from usermanagement.presentation.api.app import create_app
from usermanagement.presentation.api.config import API_V1_PREFIX
from usermanagement.presentation.api.dependencies import (
    get_db_session,
    get_event_publisher,
)
from usermanagement_config.settings import Settings


class RecordingEventPublisher(UserEventPublisher):
    """Keeps published events in memory instead of sending them."""

    def __init__(self) -> None:
        self.events: list[UserEvent] = []

    def publish(self, event: UserEvent) -> None:
        self.events.append(event)

    async def close(self) -> None:
        pass


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        db_url="sqlite+aiosqlite:///:memory:",
        api_host="127.0.0.1",
        api_port=8000,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        events_enabled=False,
    )


@pytest_asyncio.fixture
async def test_db_engine():
    """Create an in-memory SQLite database shared by all sessions."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def event_publisher() -> RecordingEventPublisher:
    return RecordingEventPublisher()


@pytest_asyncio.fixture
async def client(api_settings, test_db_engine, event_publisher):
    """HTTP client talking to the app in-process."""
    app = create_app(api_settings)
    session_maker = async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db_session():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_event_publisher] = lambda: event_publisher

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
