"""Protocol definitions for dependency injection."""

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from starlette.requests import Request
from starlette.responses import Response

from renderer_views.locale import Locale

if TYPE_CHECKING:
    from renderer_views.context import RenderContext, TemplateApplicationContext


@runtime_checkable
class LocaleContextProbe(Protocol):
    """The minimal context a renderer needs to decide whether a definition exists.

    Only the locale and the template application context are available;
    nothing here implies a live HTTP exchange.
    """

    @property
    def locale(self) -> Locale: ...

    @property
    def application_context(self) -> "TemplateApplicationContext": ...


class Renderer(Protocol):
    """Protocol for definition renderers.

    A renderer answers whether a named definition can be rendered for a
    locale and renders it against a live request context.
    """

    def is_renderable(self, name: str, context: LocaleContextProbe) -> bool:
        """Check whether ``name`` can be rendered in the probe's locale."""
        ...

    def render(self, name: str, context: "RenderContext") -> str:
        """Render ``name`` to text."""
        ...


class View(Protocol):
    """A resolved view, consumed by the dispatch layer."""

    @property
    def content_type(self) -> str: ...

    def render(self, model: dict[str, Any] | None, request: Request) -> Response:
        """Render the view for ``request`` with the given model."""
        ...


class ViewResolver(Protocol):
    """Maps a view name and locale to a view, or None to let the next resolver try."""

    def resolve_view(self, view_name: str, locale: Locale) -> View | None: ...


class ViewFinalizer(Protocol):
    """Finalization step a view passes through before it is handed out."""

    def finalize(self, view: View, view_name: str) -> View: ...
