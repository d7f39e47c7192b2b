"""Ordered chain of view resolvers."""

from renderer_views.caching import CachingViewResolver
from renderer_views.locale import Locale
from renderer_views.logging_config import get_logger, log_with_context
from renderer_views.protocols import View, ViewResolver

logger = get_logger(__name__)


class ViewResolverChain:
    """Asks each resolver in registration order; the first view returned wins."""

    def __init__(self, resolvers: list[ViewResolver] | None = None):
        self.resolvers: list[ViewResolver] = list(resolvers or [])

    def add(self, resolver: ViewResolver) -> None:
        self.resolvers.append(resolver)

    def resolve(self, view_name: str, locale: Locale) -> View | None:
        """Resolve ``view_name`` through the chain.

        Returns:
            The first non-None view, or None when no resolver can supply one
        """
        for resolver in self.resolvers:
            view = resolver.resolve_view(view_name, locale)
            if view is not None:
                return view

        log_with_context(
            logger,
            "info",
            "No resolver produced a view",
            view_name=view_name,
            locale=str(locale),
            resolvers=len(self.resolvers),
            event_type="view_not_found",
        )
        return None

    def clear_caches(self) -> None:
        """Clear the view cache of every caching resolver in the chain."""
        for resolver in self.resolvers:
            if isinstance(resolver, CachingViewResolver):
                resolver.clear_cache()
