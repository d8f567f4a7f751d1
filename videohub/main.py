# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.exception_handlers import register_exception_handlers
from .api.v1 import auth_router, account_router, channel_router
from .core.config import get_settings
from .core.logging_config import configure_logging
from .di.container import get_container
from .domain.repositories.user_repository import UserRepository
from .infrastructure.db.mongo_connection import close_database
from .infrastructure.http_client_factory import close_shared_http_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Ensures the unique indexes on the users collection at startup, and closes
    the shared HTTP client and the MongoDB client at shutdown.
    """
    try:
        user_repository = get_container().get(UserRepository)
        ensure_indexes = getattr(user_repository, "ensure_indexes", None)
        if ensure_indexes is not None:
            await ensure_indexes()
    except Exception as e:
        # Don't fail app startup if MongoDB is temporarily unavailable
        logger.error(f"Failed to ensure database indexes: {e}", exc_info=True)

    yield

    try:
        await close_shared_http_client()
    except Exception as e:
        logger.error(f"Error closing shared HTTP client: {e}", exc_info=True)

    close_database()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - Exception handlers producing the response envelope
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    configure_logging()
    settings = get_settings()

    application = FastAPI(
        title="VideoHub Account API",
        version="1.0.0",
        description="User accounts, sessions and channel profiles for VideoHub",
        lifespan=lifespan
    )

    # Cookies carry the session, so origins must be explicit
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    application.include_router(auth_router, prefix="/api/v1/users")
    application.include_router(account_router, prefix="/api/v1/users")
    application.include_router(channel_router, prefix="/api/v1/users")

    @application.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    return application


# Create application instance
app = create_application()
