# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional
import logging

# External package imports
import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.error_handlers import register_exception_handlers
from .api.v1 import user_router
from .core.config import Settings, get_settings
from .core.logging_config import configure_logging
from .di.container import DIContainer
from .domain.exceptions import StorageError
from .infrastructure.db.mongo_connection import MongoConnection

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Opens the MongoDB connection (unless the in-memory backend is selected),
    ensures the users indexes, builds the DI container and closes the
    connection on shutdown.
    """
    settings: Settings = app.state.settings
    connection: Optional[MongoConnection] = None
    
    if settings.storage_backend == "mongo":
        connection = MongoConnection.from_settings(settings)
        try:
            await connection.ensure_indexes()
        except StorageError as e:
            # Motor reconnects on demand; requests fail with 500 until MongoDB is reachable
            logger.error(f"Could not ensure user indexes at startup: {e}")
    
    app.state.container = DIContainer(settings, connection=connection)
    logger.info(f"User service started with {settings.storage_backend} storage backend")
    
    try:
        yield
    finally:
        app.state.container = None
        if connection is not None:
            connection.close()
        logger.info("Application shutdown complete")


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading
    - CORS middleware configuration
    - Request validation error handling
    - API route registration under the configured prefix
    
    Args:
        settings: Settings to use instead of the environment-derived ones
    
    Returns:
        Configured FastAPI application instance
    """
    if settings is None:
        # Load environment variables from .env file
        env_path = Path(__file__).resolve().parent.parent / ".env"
        load_dotenv(env_path)
        settings = get_settings()
    
    api_prefix = f"/{settings.api_prefix}" if settings.api_prefix else ""
    
    # Create FastAPI app
    application = FastAPI(
        title="User Service API",
        version="1.0.0",
        description="Clean Architecture user management API",
        docs_url=f"{api_prefix}/docs",
        openapi_url=f"{api_prefix}/openapi.json",
        lifespan=lifespan
    )
    application.state.settings = settings
    application.state.container = None
    
    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    register_exception_handlers(application)
    
    # Register API routers
    application.include_router(user_router, prefix=f"{api_prefix}/users")
    
    return application


# Create application instance
app = create_application()


def run() -> None:
    """Run the API with uvicorn on the configured host and port"""
    settings: Settings = app.state.settings
    configure_logging(settings.log_level)
    
    logger.info(f"Application is running on: http://{settings.host}:{settings.port}/{settings.api_prefix}")
    logger.info(f"Swagger documentation: http://{settings.host}:{settings.port}/{settings.api_prefix}/docs")
    
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
