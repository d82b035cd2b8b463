"""
FastAPI application factory for the FormValidator demo.

Creates and configures the FastAPI app, reads banner settings from the
environment, and mounts the routes.

Run with:
    uvicorn formvalidator.api.app:app --reload
"""

import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from formvalidator.api.routes import BannerSettings, configure_routes, router

# Load environment variables from .env
load_dotenv()

# Logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    application = FastAPI(
        title="FormValidator",
        description="Declarative field validation for interactive forms",
        version="0.1.0",
    )

    # CORS - allow all origins in development
    allowed_origins = os.getenv("CORS_ALLOWED_ORIGINS", "*").split(",")
    application.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    banner_settings = BannerSettings(
        title=os.getenv("BANNER_TITLE", "Validation Error"),
        visible_duration_ms=int(os.getenv("BANNER_VISIBLE_MS", "3000")),
    )
    configure_routes(banner_settings)
    application.include_router(router, prefix="/api")

    logger.info("CORS allowed origins: %s", ", ".join(allowed_origins))
    logger.info(
        "Banner: title=%r, visible for %d ms",
        banner_settings.title,
        banner_settings.visible_duration_ms,
    )

    return application


# Create the app instance (used by uvicorn)
app = create_app()
