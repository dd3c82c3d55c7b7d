"""FastAPI dependency injection for the user management API.

Provides dependencies for:
- Database sessions
- The user event publisher and consumer
- Service instances
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from usermanagement.application.ports import UserEventPublisher
from usermanagement.application.services import UserService
from usermanagement.infrastructure.messaging import (
    HttpUserEventPublisher,
    UserEventConsumer,
)
from usermanagement.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)
from usermanagement.presentation.api.config import get_api_settings

logger = logging.getLogger(__name__)


@lru_cache()
def get_database_url() -> str:
    """
    Get database URL from application settings.

    Returns
    -------
    Database URL string
    """
    url = get_api_settings().database_url

    # Ensure data directory exists for file-based SQLite
    if url.startswith("sqlite") and ":memory:" not in url:
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_database_url(),
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """
    Get the shared async session maker (singleton).

    Returns
    -------
    async_sessionmaker configured with the shared engine
    """
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Event channel
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_event_publisher() -> UserEventPublisher:
    """Get the shared user event publisher (singleton)."""
    settings = get_api_settings()
    return HttpUserEventPublisher(
        base_url=settings.events_base_url,
        topic=settings.events_topic,
        timeout=settings.events_timeout,
        enabled=settings.events_enabled,
    )


@lru_cache(maxsize=1)
def get_event_consumer() -> UserEventConsumer:
    return UserEventConsumer()


EventPublisher = Annotated[UserEventPublisher, Depends(get_event_publisher)]
EventConsumer = Annotated[UserEventConsumer, Depends(get_event_consumer)]


# -----------------------------------------------------------------------------
# Services
# -----------------------------------------------------------------------------


def get_user_service(session: DBSession, publisher: EventPublisher) -> UserService:
    """Build a UserService bound to the request's session."""
    return UserService(
        user_repository=UserRepositorySQLAlchemy(session),
        event_publisher=publisher,
    )


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
