"""Renderer implementations."""

from html import escape

from renderer_views.container import DefinitionContainer
from renderer_views.context import RenderContext
from renderer_views.protocols import LocaleContextProbe


class DefinitionRenderer:
    """Renders container definitions; the default renderer of RendererViewResolver."""

    def __init__(self, container: DefinitionContainer):
        self.container = container

    def is_renderable(self, name: str, context: LocaleContextProbe) -> bool:
        return self.container.is_valid_definition(name, context)

    def render(self, name: str, context: RenderContext) -> str:
        return self.container.render(name, context)


class StringRenderer:
    """Renders the name itself as escaped literal text. Every name is renderable."""

    def is_renderable(self, name: str, context: LocaleContextProbe) -> bool:
        return True

    def render(self, name: str, context: RenderContext) -> str:
        return escape(name)
