"""View objects produced by view resolvers.

A view renders one definition for one locale; resolvers decide which view,
views decide how the model reaches the template.
"""

from renderer_views.views.renderer_view import DEFAULT_CONTENT_TYPE, MACRO_REQUEST_CONTEXT_ATTRIBUTE, RendererView
from renderer_views.views.request_context import RequestContext

__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "MACRO_REQUEST_CONTEXT_ATTRIBUTE",
    "RendererView",
    "RequestContext",
]
