"""Health and diagnostics endpoints."""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends

from renderer_views import __version__
from renderer_views.caching import CachingViewResolver
from renderer_views.chain import ViewResolverChain
from renderer_views.context import TemplateApplicationContext
from renderer_views.dependencies import get_template_context, get_view_resolvers
from renderer_views.models import HealthResponse, ViewCacheStats, ViewsHealthResponse
from renderer_views.resolver import RendererViewResolver

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint."""
    return HealthResponse(status="ok", version=__version__)


@router.get("/health/views", response_model=ViewsHealthResponse)
async def views_health(
    template_context: TemplateApplicationContext = Depends(get_template_context),
    resolvers: ViewResolverChain = Depends(get_view_resolvers),
):
    """View resolution status.

    Reports how many definitions the container can see and, for every
    caching resolver, the size of its view and probe caches.
    """
    container = template_context.container
    definitions = len(container.list_definitions()) if container is not None else 0

    stats = []
    for resolver in resolvers.resolvers:
        if not isinstance(resolver, CachingViewResolver):
            continue
        probes = None
        if isinstance(resolver, RendererViewResolver) and resolver.probe_cache is not None:
            probes = resolver.probe_cache.size()
        stats.append(
            ViewCacheStats(
                resolver=type(resolver).__name__,
                cached_views=resolver.cache_size(),
                probe_locales=probes,
            )
        )

    return ViewsHealthResponse(
        status="ok" if container is not None else "unavailable",
        version=__version__,
        timestamp=datetime.now(UTC),
        definitions=definitions,
        resolvers=stats,
    )
