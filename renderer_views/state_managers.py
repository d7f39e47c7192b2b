"""State managers for resolver-wide mutable state.

Resolution runs synchronously on the host's worker threads, so these managers
guard their check-then-insert sequences with threading.Lock. All state
managers inherit from StateManager ABC.
"""

import threading
from abc import ABC, abstractmethod
from collections.abc import Callable

from renderer_views.context import ProbeContext, TemplateApplicationContext
from renderer_views.locale import Locale
from renderer_views.logging_config import get_logger, log_with_context
from renderer_views.protocols import Renderer

logger = get_logger(__name__)


class StateManager(ABC):
    """Base class for all state managers.

    State managers provide thread-safe access to mutable resolver state.
    """

    @abstractmethod
    def cleanup(self) -> None:
        """Drop held state (called during app shutdown)."""
        pass


class LocaleProbeCache(StateManager):
    """One probe context per locale, created lazily and reused for the resolver's lifetime."""

    def __init__(self, application_context: TemplateApplicationContext):
        self._application_context = application_context
        self._probes: dict[Locale, ProbeContext] = {}
        self._lock = threading.Lock()

    def get(self, locale: Locale) -> ProbeContext:
        """Get the probe context for ``locale``, creating it on first use."""
        with self._lock:
            probe = self._probes.get(locale)
            if probe is None:
                probe = ProbeContext(locale=locale, application_context=self._application_context)
                self._probes[locale] = probe
                log_with_context(
                    logger,
                    "debug",
                    "Probe context created",
                    locale=str(locale),
                    event_type="probe_context_created",
                )
            return probe

    def size(self) -> int:
        """Number of locales with a probe context."""
        with self._lock:
            return len(self._probes)

    def cleanup(self) -> None:
        with self._lock:
            self._probes.clear()


class RendererHolder(StateManager):
    """Holds the resolver's renderer, building the default exactly once."""

    def __init__(self, renderer: Renderer | None = None):
        self._renderer = renderer
        self._explicit = renderer is not None
        self._lock = threading.Lock()

    def set(self, renderer: Renderer) -> None:
        """Install an explicit renderer, replacing any default."""
        with self._lock:
            self._renderer = renderer
            self._explicit = True

    def get(self, factory: Callable[[], Renderer]) -> Renderer:
        """Return the renderer, calling ``factory`` once if none is held yet."""
        with self._lock:
            if self._renderer is None:
                self._renderer = factory()
                log_with_context(
                    logger,
                    "info",
                    "Default renderer created",
                    renderer=type(self._renderer).__name__,
                    event_type="renderer_created",
                )
            return self._renderer

    def cleanup(self) -> None:
        """Forget a lazily built default; an explicit renderer is kept."""
        with self._lock:
            if not self._explicit:
                self._renderer = None
