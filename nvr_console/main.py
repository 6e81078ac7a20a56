# Standard library imports
from contextlib import asynccontextmanager
import logging

# External package imports
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import (
    camera_router,
    group_router,
    recording_router,
    storage_router,
    register_exception_handlers,
)
from .core.config import get_settings, load_environment
from .di.container import get_container
from .domain.exceptions import ConsoleError
from .domain.models.group import Group
from .domain.repositories.group_repository import GroupRepository
from .utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)


async def seed_default_groups(group_repository: GroupRepository, names) -> int:
    """
    Insert the default camera groups that do not exist yet.
    
    Returns:
        Number of groups created
    """
    created = 0
    for name in names:
        if await group_repository.add_if_absent(Group(name=name, created_at=utc_now())):
            created += 1
    return created


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Creates MongoDB indexes and seeds the default groups. A database that
    is down at startup is logged, not fatal: requests then fail with 503
    until it comes back.
    """
    container = get_container()
    settings = container.settings
    
    try:
        if settings.persistence_backend == "mongo":
            from .infrastructure.db.mongo_connection import ensure_indexes
            await ensure_indexes(container.get("database"))
        created = await seed_default_groups(container.get(GroupRepository), settings.default_groups)
        logger.info(f"Seeded {created} default groups ({settings.persistence_backend} backend)")
    except ConsoleError as e:
        logger.error(f"Startup initialization failed: {e.message}")
    except Exception as e:
        logger.error(f"Startup initialization failed: {e}", exc_info=True)
    
    yield
    
    if settings.persistence_backend == "mongo":
        from .infrastructure.db.mongo_connection import close_database
        close_database()
    
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading
    - CORS middleware configuration
    - Exception handlers
    - API route registration
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    load_environment()
    
    settings = get_settings()
    
    # Create FastAPI app
    application = FastAPI(
        title="NVR Console API",
        version="1.0.0",
        description="Camera registry, groups, recording segments and storage backend configuration",
        lifespan=lifespan
    )
    
    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    register_exception_handlers(application)
    
    @application.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}
    
    # Register API routers
    application.include_router(camera_router, prefix="/api/cameras")
    application.include_router(group_router, prefix="/api/groups")
    application.include_router(recording_router, prefix="/api/recordings")
    application.include_router(storage_router, prefix="/api/storage")
    
    return application


# Create application instance
app = create_application()
