"""Application lifespan management."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from renderer_views import __version__
from renderer_views.chain import ViewResolverChain
from renderer_views.config import Settings
from renderer_views.container import DefinitionContainer
from renderer_views.context import TemplateApplicationContext
from renderer_views.logging_config import get_logger, log_with_context
from renderer_views.protocols import Renderer
from renderer_views.renderers import StringRenderer
from renderer_views.resolver import RendererViewResolver

logger = get_logger(__name__)


def build_template_context(settings: Settings) -> TemplateApplicationContext:
    """Create the definition container and the application context around it."""
    container = DefinitionContainer.from_directory(settings.templates_dir)
    return TemplateApplicationContext(container=container)


def build_renderer(settings: Settings) -> Renderer | None:
    """Renderer chosen by ``view_renderer``; None leaves the resolver its default."""
    if settings.view_renderer == "string":
        return StringRenderer()
    return None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - startup and shutdown events.

    Exceptions after yield are re-raised so cleanup runs and the error
    still reaches the server.
    """
    settings: Settings = app.state.settings

    log_with_context(
        logger,
        "info",
        "Starting Renderer Views application",
        version=__version__,
        templates_dir=str(settings.templates_dir),
        event_type="app_startup",
    )

    # Keep a context installed before startup (tests, embedding applications)
    if getattr(app.state, "template_context", None) is None:
        app.state.template_context = build_template_context(settings)

    resolver = RendererViewResolver(settings.resolver_config(), renderer=build_renderer(settings)).bind(app)
    app.state.view_resolvers = ViewResolverChain([resolver])
    log_with_context(
        logger,
        "info",
        "View resolvers initialized",
        resolvers=len(app.state.view_resolvers.resolvers),
        renderer=settings.view_renderer,
        event_type="view_resolvers_ready",
    )

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        log_with_context(
            logger,
            "info",
            "Shutting down Renderer Views application",
            event_type="app_shutdown",
        )

        for chained in app.state.view_resolvers.resolvers:
            if isinstance(chained, RendererViewResolver):
                chained.cleanup()
        log_with_context(
            logger,
            "info",
            "View resolvers cleaned up",
            event_type="view_resolvers_cleanup",
        )
