"""
Profile Store FastAPI Application

Main entry point for the profile store API.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError

# Common library imports
from common.database import MongoDB
from common.utils import register_exception_handlers

# App-specific imports
from profile_store.config import Settings, settings as default_settings
from profile_store.dependencies import init_services
from profile_store.routers import profile_router

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str) -> None:
    """Configure root logging for the server process."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use; defaults to the environment-loaded settings
    """
    settings = settings or default_settings

    # =========================================================================
    # Application Lifespan
    # =========================================================================
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Connect to MongoDB and build services on startup; disconnect on shutdown.

        A missing MONGODB_URI aborts startup. A failed connection check is
        only logged: requests then fail individually.
        """
        settings.validate_required()

        database = MongoDB()
        try:
            await database.connect(
                uri=settings.MONGODB_URI,
                database_name=settings.MONGODB_DATABASE,
            )
        except PyMongoError as e:
            # Malformed URI: no client could be built
            if database.client is None:
                raise
            logger.error(f"MongoDB connection error: {e}")

        app.state.database = database
        profile_service = init_services(app, database, settings.MONGODB_COLLECTION)

        if database.is_connected:
            try:
                await profile_service.ensure_indexes()
            except PyMongoError as e:
                logger.error(f"Failed to create profile indexes: {e}")

        logger.info("Profile store API started")

        yield

        logger.info("Shutting down profile store API")
        await database.disconnect()

    app = FastAPI(
        title="Profile Store API",
        description="Digital business-card profile storage",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development() else None,
        redoc_url="/redoc" if settings.is_development() else None,
    )

    # =========================================================================
    # CORS Middleware
    # =========================================================================
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=settings.get_cors_methods(),
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # =========================================================================
    # Health Check Endpoint (before the profile catch-all route)
    # =========================================================================
    @app.get("/health", tags=["Health"])
    async def health():
        """Report API status and whether the startup database ping succeeded."""
        database = getattr(app.state, "database", None)
        return {
            "status": "ok",
            "version": app.version,
            "database": database.is_connected if database else False,
        }

    app.include_router(profile_router)

    return app


app = create_app()


def main() -> None:
    """Run the API with uvicorn, exiting if required settings are missing."""
    import uvicorn

    configure_logging(default_settings.LOG_LEVEL)

    try:
        default_settings.validate_required()
    except ValueError as e:
        logger.critical(f"MongoDB URI is missing! {e}")
        sys.exit(1)

    uvicorn.run(
        "api:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        reload=default_settings.is_development(),
        lifespan="on",
    )


# =============================================================================
# Run with Uvicorn
# =============================================================================
if __name__ == "__main__":
    main()
