"""View resolver for renderer-backed definitions.

``RendererViewResolver`` turns a logical view name into a ``RendererView``
when its renderer reports the decorated name as renderable for the requested
locale. A typical setup binds it to the host application, whose state carries
the template application context:

    resolver = RendererViewResolver(settings.resolver_config())
    resolver.bind(app)
    view = resolver.resolve_view("home", Locale.parse("fr"))

Views are cached per (name, locale) by ``CachingViewResolver``; "no view" is
reported as None so a ``ViewResolverChain`` can fall through to the next
resolver.
"""

import re
from collections.abc import Iterable
from functools import lru_cache
from typing import Any

from renderer_views.caching import CachingViewResolver
from renderer_views.context import TemplateApplicationContext
from renderer_views.exceptions import ConfigurationException, ContextBindingMissingException
from renderer_views.locale import Locale
from renderer_views.logging_config import get_logger, log_with_context
from renderer_views.models.resolver import ResolverConfig
from renderer_views.protocols import Renderer, View, ViewFinalizer
from renderer_views.renderers import DefinitionRenderer
from renderer_views.state_managers import LocaleProbeCache, RendererHolder
from renderer_views.views.renderer_view import RendererView

logger = get_logger(__name__)


@lru_cache(maxsize=256)
def _compile_pattern(pattern: str) -> re.Pattern[str]:
    return re.compile(".*".join(re.escape(part) for part in pattern.split("*")), re.DOTALL)


def simple_match(pattern: str, name: str) -> bool:
    """Match ``name`` against a wildcard pattern where ``*`` is the only special character."""
    return _compile_pattern(pattern).fullmatch(name) is not None


def matches_any(patterns: Iterable[str], name: str) -> bool:
    """Check whether ``name`` matches at least one pattern. No patterns means no match."""
    return any(simple_match(pattern, name) for pattern in patterns)


class RendererViewResolver(CachingViewResolver):
    """Resolves view names to ``RendererView`` instances.

    The renderer defaults to a ``DefinitionRenderer`` over the container of the
    template application context, built once on first use. Renderability is
    probed with a per-locale ``ProbeContext`` since no request exists at
    resolution time.
    """

    def __init__(
        self,
        config: ResolverConfig | None = None,
        template_context: TemplateApplicationContext | None = None,
        renderer: Renderer | None = None,
        finalizer: ViewFinalizer | None = None,
    ):
        config = config or ResolverConfig()
        super().__init__(cache_limit=config.cache_limit, cache_unresolved=config.cache_unresolved)
        self.config = config
        self._renderer = RendererHolder(renderer)
        self._finalizer = finalizer
        self.template_context: TemplateApplicationContext | None = None
        self._probes: LocaleProbeCache | None = None
        if template_context is not None:
            self._attach(template_context)

    def _attach(self, template_context: TemplateApplicationContext) -> None:
        self.template_context = template_context
        self._probes = LocaleProbeCache(template_context)

    def bind(self, app: Any) -> "RendererViewResolver":
        """Bind to the host application, looking up its template application context.

        An explicitly supplied context takes precedence over the lookup.

        Args:
            app: Host application whose ``state`` carries ``template_context``

        Returns:
            This resolver, for chaining

        Raises:
            ContextBindingMissingException: If no context was supplied and the
                application state has none
        """
        if self.template_context is None:
            template_context = getattr(app.state, "template_context", None)
            if template_context is None:
                raise ContextBindingMissingException(
                    "No template application context found in application state",
                    details={"resolver": type(self).__name__},
                )
            self._attach(template_context)

        log_with_context(
            logger,
            "info",
            "View resolver bound",
            resolver=type(self).__name__,
            prefix=self.config.prefix,
            suffix=self.config.suffix,
            view_names=list(self.config.view_names) if self.config.view_names is not None else None,
            event_type="resolver_bound",
        )
        return self

    @property
    def renderer(self) -> Renderer:
        """The configured renderer, or the default one built on first access."""
        return self._renderer.get(self._default_renderer)

    @renderer.setter
    def renderer(self, renderer: Renderer) -> None:
        self._renderer.set(renderer)

    @property
    def probe_cache(self) -> LocaleProbeCache | None:
        return self._probes

    def _default_renderer(self) -> Renderer:
        context = self._require_context()
        if context.container is None:
            raise ConfigurationException(
                "Template application context has no definition container",
                details={"resolver": type(self).__name__},
            )
        return DefinitionRenderer(context.container)

    def _require_context(self) -> TemplateApplicationContext:
        if self.template_context is None:
            raise ConfigurationException(
                "View resolver used before being bound to an application",
                details={"resolver": type(self).__name__},
            )
        return self.template_context

    def target_name(self, view_name: str) -> str:
        """Decorate ``view_name`` with the configured prefix and suffix."""
        return (self.config.prefix or "") + view_name + (self.config.suffix or "")

    def accepts(self, view_name: str) -> bool:
        """Check ``view_name`` against the allow-list; without one every name is accepted."""
        if self.config.view_names is None:
            return True
        return matches_any(self.config.view_names, view_name)

    def load_view(self, view_name: str, locale: Locale) -> View | None:
        if not self.accepts(view_name):
            log_with_context(
                logger,
                "debug",
                "View name rejected by allow-list",
                view_name=view_name,
                event_type="view_filtered",
            )
            return None

        context = self._require_context()
        target_name = self.target_name(view_name)
        renderer = self.renderer
        probe = self._probes.get(locale)  # type: ignore[union-attr]

        if not renderer.is_renderable(target_name, probe):
            log_with_context(
                logger,
                "debug",
                "No renderable definition",
                view_name=view_name,
                target_name=target_name,
                locale=str(locale),
                event_type="view_unresolved",
            )
            return None

        view = self.build_view(context, renderer, target_name, locale)
        finalizer = self._finalizer or context
        result = finalizer.finalize(view, view_name)

        log_with_context(
            logger,
            "debug",
            "View resolved",
            view_name=view_name,
            target_name=target_name,
            locale=str(locale),
            event_type="view_resolved",
        )
        return result

    def build_view(
        self,
        context: TemplateApplicationContext,
        renderer: Renderer,
        target_name: str,
        locale: Locale,
    ) -> RendererView:
        """Construct the view and copy the resolver configuration onto it."""
        config = self.config
        view = RendererView(context, renderer, target_name, locale)
        if config.content_type is not None:
            view.content_type = config.content_type
        view.request_context_attribute = config.request_context_attribute
        view.attributes_map = config.attributes_map
        view.expose_request_attributes = config.expose_request_attributes
        view.allow_request_override = config.allow_request_override
        view.expose_session_attributes = config.expose_session_attributes
        view.allow_session_override = config.allow_session_override
        view.expose_macro_helpers = config.expose_macro_helpers
        view.expose_model_in_request = config.expose_model_in_request
        return view

    def cleanup(self) -> None:
        """Release cached views, probe contexts and a lazily built renderer."""
        self.clear_cache()
        if self._probes is not None:
            self._probes.cleanup()
        self._renderer.cleanup()
