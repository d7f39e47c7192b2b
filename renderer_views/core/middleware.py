"""Middleware configuration."""

from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from renderer_views.config import Settings
from renderer_views.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Configure all middleware for the application.

    Args:
        app: FastAPI application instance
        settings: Application settings
    """
    # Signed cookie sessions give session attribute exposure something to read
    if settings.session_secret:
        log_with_context(
            logger,
            "info",
            "Configuring session middleware",
            event_type="session_config",
        )
        app.add_middleware(SessionMiddleware, secret_key=settings.session_secret)
    else:
        log_with_context(
            logger,
            "info",
            "No session secret configured, sessions disabled",
            event_type="session_config",
        )
