"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under the /api/v1/ prefix.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from usermanagement.infrastructure.messaging import drain_pending_events
from usermanagement.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
)
from usermanagement.presentation.api.config import API_V1_PREFIX, API_VERSION
from usermanagement.presentation.api.dependencies import (
    get_engine,
    get_event_publisher,
)
from usermanagement.presentation.api.exception_handlers import (
    setup_exception_handlers,
)
from usermanagement.presentation.api.routers import (
    events_router,
    health_router,
    users_router,
)
from usermanagement_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    - Console output with timestamps and module names
    - Configurable log level for usermanagement modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = get_settings()
    log_level_str = settings.log_level.upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("usermanagement").setLevel(log_level)
    logging.getLogger("usermanagement_config").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

OPENAPI_TAGS = [
    {
        "name": "Users",
        "description": """User record management.

**Roles:** `ADMIN`, `MANAGER`, `USER`

**Statuses:** `ACTIVE` (default on create), `INACTIVE`, `SUSPENDED`, `PENDING`

**Rules:**
- Email addresses are unique, compared case-insensitively
- Updates overwrite every field; an omitted status keeps the current one
- Every create, update and delete emits a change event
""",
    },
    {
        "name": "Events",
        "description": "Inbound delivery of user change events.",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting User Management API v%s...", API_VERSION)
    engine = get_engine()
    logger.info("Initializing database schema...")
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None

    publisher = get_event_publisher()
    yield

    logger.info("Shutting down User Management API...")
    await drain_pending_events()
    await publisher.close()
    await engine.dispose()
    logger.info("Database connections closed")


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints."""
    v1_router = APIRouter()

    v1_router.include_router(users_router, tags=["Users"])
    v1_router.include_router(events_router, tags=["Events"])
    v1_router.include_router(health_router, tags=["Health"])

    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app_name = settings.app_name

    app = FastAPI(
        title=f"{app_name} API",
        description="CRUD, search and statistics over user records.",
        version=API_VERSION,
        debug=settings.debug,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "api_base": API_V1_PREFIX,
            "endpoints": {
                "health": f"{API_V1_PREFIX}/health",
                "users": f"{API_V1_PREFIX}/users",
                "events": f"{API_V1_PREFIX}/events/users",
            },
        }

    return app


# Application instance for uvicorn
app = create_app()
