"""
Main FastAPI application entry point.
Configures the application, middleware, and includes routers.
"""
from dotenv import load_dotenv

# Load environment variables from .env file first
load_dotenv()

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from typing import Optional
import logging
import uvicorn

from .config import Settings, settings
from .core.cloudinary import configure_cloudinary
from .core.middleware import setup_middlewares
from .database import Base, engine
from .exceptions import register_exception_handlers
from .notifications.dispatcher import build_email_dispatcher
from .promos.router import router as promos_router
from .uploads.router import router as uploads_router
from .users.router import router as users_router
from .waitlist.router import router as waitlist_router

# Configure logging
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create database tables if they don't exist
    Base.metadata.create_all(bind=engine)
    logger.info("🚀 CarePass API ready")
    yield
    logger.info("CarePass API shutting down")


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    The email transport is selected here, once; an unrecognized
    EMAIL_SERVICE raises before the application exists.

    Args:
        app_settings: Settings to build with (defaults to the environment)

    Returns:
        FastAPI: Configured application

    Raises:
        FatalConfigError: If the configuration is unusable
    """
    app_settings = app_settings or settings

    email_dispatcher = build_email_dispatcher(app_settings)
    configure_cloudinary(app_settings)

    app = FastAPI(
        title="CarePass API",
        description="API for the CarePass healthcare membership platform",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.email_dispatcher = email_dispatcher

    # Register exception handlers
    register_exception_handlers(app)

    # Every origin may call every route, preflight included
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Setup custom middleware
    setup_middlewares(app)

    # Include routers
    app.include_router(uploads_router, tags=["Uploads"])
    app.include_router(users_router, prefix="/users", tags=["Users"])
    app.include_router(promos_router, prefix="/promo-codes", tags=["Promo Codes"])
    app.include_router(waitlist_router, prefix="/waitlist", tags=["Waitlist"])

    # Root endpoint
    @app.get("/")
    def root():
        """
        Root endpoint for API health check.

        Returns:
            dict: Simple welcome message
        """
        return {"message": "Backend API is running"}

    # Health check endpoint
    @app.get("/health")
    async def health_check(request: Request):
        """
        Health check endpoint for monitoring.

        Returns:
            dict: Health status information
        """
        return {
            "status": "healthy",
            "email_service": request.app.state.email_dispatcher.transport_name,
        }

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("carepass.main:app", host="0.0.0.0", port=settings.port)
