"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI

from renderer_views import __version__
from renderer_views.config import Settings, get_settings
from renderer_views.context import TemplateApplicationContext
from renderer_views.core.lifespan import lifespan
from renderer_views.core.middleware import setup_middleware
from renderer_views.middleware.error_handlers import register_error_handlers
from renderer_views.routers import health_router, view_router


def create_app(
    settings: Settings | None = None,
    template_context: TemplateApplicationContext | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use instead of the environment-loaded singleton
        template_context: Pre-built template application context; built from
            ``settings.templates_dir`` at startup when omitted

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Renderer Views",
        description="""
        Resolves logical view names to locale-specific Jinja2 definitions.

        ## Views
        - `/views/{view_name}` - Render a view; `?lang=` or `Accept-Language` picks the locale

        ## Health
        - `/health` - Basic health check
        - `/health/views` - Definition count and resolver cache statistics
        """,
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.template_context = template_context

    setup_middleware(app, settings)

    register_error_handlers(app)

    app.include_router(view_router.router, tags=["views"])
    app.include_router(health_router.router, tags=["health"])

    return app
