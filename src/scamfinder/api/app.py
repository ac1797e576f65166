"""FastAPI app for ScamFinder, REST API for scans."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scamfinder.api.routes import router
from scamfinder.logging_config import configure_logging
from scamfinder.settings import get_settings

try:
    from importlib.metadata import version

    VERSION = version("scamfinder")
except Exception:
    VERSION = "0.0.0"


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="ScamFinder",
        description="Fraud-risk analysis of text, images, documents and emails.",
        version=VERSION,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(router)
    return application


app = create_app()
