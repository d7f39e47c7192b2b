"""View that renders a definition through a Renderer."""

from collections.abc import Mapping
from typing import Any

from fastapi.responses import HTMLResponse
from starlette.requests import Request

from renderer_views.context import RenderContext, TemplateApplicationContext
from renderer_views.exceptions import ModelAttributeConflictException
from renderer_views.locale import Locale
from renderer_views.logging_config import get_logger, log_with_context
from renderer_views.protocols import Renderer
from renderer_views.views.request_context import RequestContext

logger = get_logger(__name__)

DEFAULT_CONTENT_TYPE = "text/html; charset=utf-8"
MACRO_REQUEST_CONTEXT_ATTRIBUTE = "macro_request_context"


class RendererView:
    """Renders one definition for one locale.

    Resolvers copy their configuration onto the view after construction; the
    attributes below mirror the resolver options one to one.
    """

    def __init__(
        self,
        application_context: TemplateApplicationContext,
        renderer: Renderer,
        name: str,
        locale: Locale,
    ):
        self.application_context = application_context
        self.renderer = renderer
        self.name = name
        self.locale = locale

        self.content_type: str = DEFAULT_CONTENT_TYPE
        self.request_context_attribute: str | None = None
        self.attributes_map: dict[str, Any] | None = None
        self.expose_request_attributes = False
        self.allow_request_override = False
        self.expose_session_attributes = False
        self.allow_session_override = False
        self.expose_macro_helpers = True
        self.expose_model_in_request = True

    def _expose(self, model: dict[str, Any], attributes: Mapping[str, Any], allow_override: bool, source: str) -> None:
        for key, value in attributes.items():
            if key in model and not allow_override:
                raise ModelAttributeConflictException(key, source)
            model[key] = value

    def build_model(self, model: dict[str, Any] | None, request: Request) -> dict[str, Any]:
        """Merge static attributes, the model and the exposed scopes.

        Raises:
            ModelAttributeConflictException: If an exposed attribute collides
                with a model key and overriding is not allowed
        """
        merged: dict[str, Any] = dict(self.attributes_map or {})
        merged.update(model or {})

        if self.request_context_attribute:
            merged[self.request_context_attribute] = RequestContext(request, self.locale, merged)

        if self.expose_request_attributes:
            self._expose(merged, request.scope.get("state") or {}, self.allow_request_override, "request")

        if self.expose_session_attributes and "session" in request.scope:
            self._expose(merged, request.session, self.allow_session_override, "session")

        if self.expose_macro_helpers:
            if MACRO_REQUEST_CONTEXT_ATTRIBUTE in merged:
                raise ModelAttributeConflictException(MACRO_REQUEST_CONTEXT_ATTRIBUTE, "macro helper")
            merged[MACRO_REQUEST_CONTEXT_ATTRIBUTE] = RequestContext(request, self.locale, merged)

        return merged

    def render(self, model: dict[str, Any] | None, request: Request) -> HTMLResponse:
        """Render the definition for ``request``.

        Args:
            model: Model attributes supplied by the handler
            request: The live request

        Returns:
            HTMLResponse with the rendered definition and this view's content type
        """
        merged = self.build_model(model, request)

        if self.expose_model_in_request:
            for key, value in merged.items():
                setattr(request.state, key, value)

        context = RenderContext(
            locale=self.locale,
            application_context=self.application_context,
            request=request,
            model=merged,
        )
        content = self.renderer.render(self.name, context)

        log_with_context(
            logger,
            "debug",
            "View rendered",
            definition=self.name,
            locale=str(self.locale),
            content_length=len(content),
            event_type="view_rendered",
        )
        return HTMLResponse(content=content, media_type=self.content_type)

    def __repr__(self) -> str:
        return f"RendererView(name={self.name!r}, locale={str(self.locale)!r})"
