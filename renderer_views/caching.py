"""Caching base class for view resolvers."""

import threading
from abc import ABC, abstractmethod
from collections import OrderedDict

from renderer_views.locale import Locale
from renderer_views.logging_config import get_logger, log_with_context
from renderer_views.protocols import View

logger = get_logger(__name__)

DEFAULT_CACHE_LIMIT = 1024

# Cached in place of None so a repeat miss skips load_view
_UNRESOLVED = object()


class CachingViewResolver(ABC):
    """View resolver that caches views per (view name, locale).

    Thread-safe: lookup, creation and insertion happen under one lock, so a
    view is loaded at most once per key while cached. Once ``cache_limit``
    entries are held, the least recently used entry is evicted. A limit of 0
    disables caching and every call reaches :meth:`load_view`.
    """

    def __init__(self, cache_limit: int = DEFAULT_CACHE_LIMIT, cache_unresolved: bool = True):
        if cache_limit < 0:
            raise ValueError("cache_limit must be zero or positive")
        self.cache_limit = cache_limit
        self.cache_unresolved = cache_unresolved
        self._views: OrderedDict[tuple[str, Locale], object] = OrderedDict()
        # Reentrant: post-processors run inside load_view may resolve other views
        self._lock = threading.RLock()

    @property
    def cache_enabled(self) -> bool:
        return self.cache_limit > 0

    def resolve_view(self, view_name: str, locale: Locale) -> View | None:
        """Return the view for ``view_name`` in ``locale``, or None if unresolvable.

        Args:
            view_name: Logical view name
            locale: Locale to resolve for

        Returns:
            Cached or freshly loaded view, or None
        """
        if not self.cache_enabled:
            return self.load_view(view_name, locale)

        key = (view_name, locale)
        with self._lock:
            if key in self._views:
                self._views.move_to_end(key)
                cached = self._views[key]
                log_with_context(
                    logger,
                    "debug",
                    "View cache hit",
                    view_name=view_name,
                    locale=str(locale),
                    event_type="view_cache_hit",
                )
                return None if cached is _UNRESOLVED else cached  # type: ignore[return-value]

            view = self.load_view(view_name, locale)
            if view is not None:
                self._store(key, view)
            elif self.cache_unresolved:
                self._store(key, _UNRESOLVED)
            return view

    def _store(self, key: tuple[str, Locale], value: object) -> None:
        self._views[key] = value
        while len(self._views) > self.cache_limit:
            evicted, _ = self._views.popitem(last=False)
            log_with_context(
                logger,
                "debug",
                "View cache eviction",
                view_name=evicted[0],
                locale=str(evicted[1]),
                event_type="view_cache_evict",
            )

    def remove_from_cache(self, view_name: str, locale: Locale) -> None:
        """Drop the cached entry for one view name and locale, if any."""
        with self._lock:
            removed = self._views.pop((view_name, locale), None) is not None
        log_with_context(
            logger,
            "debug",
            "View cache entry removed" if removed else "No cached view to remove",
            view_name=view_name,
            locale=str(locale),
            event_type="view_cache_remove",
        )

    def clear_cache(self) -> None:
        """Drop every cached view."""
        with self._lock:
            self._views.clear()
        log_with_context(
            logger,
            "info",
            "View cache cleared",
            resolver=type(self).__name__,
            event_type="view_cache_clear",
        )

    def cache_size(self) -> int:
        """Number of cached entries, unresolved markers included."""
        with self._lock:
            return len(self._views)

    @abstractmethod
    def load_view(self, view_name: str, locale: Locale) -> View | None:
        """Build the view for ``view_name``; None lets the next resolver try."""
        ...
