"""Template application context and the per-call contexts handed to renderers."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from starlette.requests import Request

from renderer_views.locale import Locale
from renderer_views.logging_config import get_logger, log_with_context

if TYPE_CHECKING:
    from renderer_views.container import DefinitionContainer
    from renderer_views.protocols import View

logger = get_logger(__name__)

SCOPES = ("application", "session", "request")

ViewPostProcessor = Callable[["View", str], "View | None"]

_EMPTY: Mapping[str, Any] = MappingProxyType({})


class TemplateApplicationContext:
    """Application-wide state shared by every resolver and view.

    Holds the definition container, application-scope attributes exposed to
    templates, and the post-processors every resolved view passes through.
    """

    def __init__(
        self,
        container: "DefinitionContainer | None" = None,
        attributes: dict[str, Any] | None = None,
        post_processors: list[ViewPostProcessor] | None = None,
    ):
        self.container = container
        self.attributes: dict[str, Any] = dict(attributes or {})
        self.post_processors: list[ViewPostProcessor] = list(post_processors or [])

    def add_post_processor(self, processor: ViewPostProcessor) -> None:
        """Register a post-processor run by :meth:`finalize`."""
        self.post_processors.append(processor)

    def finalize(self, view: "View", view_name: str) -> "View":
        """Run every post-processor over ``view`` in registration order.

        A post-processor may return a replacement view; returning None keeps
        the current one.
        """
        for processor in self.post_processors:
            replacement = processor(view, view_name)
            if replacement is not None:
                view = replacement

        log_with_context(
            logger,
            "debug",
            "View finalized",
            view_name=view_name,
            post_processors=len(self.post_processors),
            event_type="view_finalized",
        )
        return view


@dataclass(frozen=True)
class ProbeContext:
    """Locale-bound context used only to ask a renderer whether a definition exists.

    There is no request behind it: parameters and headers are always empty and
    nothing can be written, dispatched or included.
    """

    locale: Locale
    application_context: TemplateApplicationContext
    params: Mapping[str, str] = field(default_factory=lambda: _EMPTY)
    headers: Mapping[str, str] = field(default_factory=lambda: _EMPTY)


@dataclass
class RenderContext:
    """Context for an actual render: a live request plus the merged model."""

    locale: Locale
    application_context: TemplateApplicationContext
    request: Request
    model: dict[str, Any] = field(default_factory=dict)

    def scope(self, name: str) -> Mapping[str, Any]:
        """Return the attributes of one of the ``SCOPES``.

        Raises:
            ValueError: If ``name`` is not a known scope
        """
        if name == "application":
            return self.application_context.attributes
        if name == "session":
            return self.request.session if "session" in self.request.scope else _EMPTY
        if name == "request":
            return self.request.scope.get("state") or _EMPTY
        raise ValueError(f"Unknown scope: {name!r}")
