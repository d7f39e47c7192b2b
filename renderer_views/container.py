"""Locale-aware definition container backed by a Jinja2 environment."""

import posixpath
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, Template, TemplateNotFound, select_autoescape

from renderer_views.context import SCOPES, RenderContext
from renderer_views.exceptions import ViewNotFoundException
from renderer_views.locale import Locale
from renderer_views.logging_config import get_logger, log_with_context
from renderer_views.protocols import LocaleContextProbe

logger = get_logger(__name__)

# Template variable for each scope; "request" itself is the live request object
SCOPE_VARIABLES = {"application": "application", "session": "session", "request": "request_scope"}


def localized_names(name: str, locale: Locale) -> list[str]:
    """Candidate template names for ``name`` in ``locale``, most specific first.

    ``pages/home.html`` in ``fr_CA`` yields ``pages/home_fr_CA.html``,
    ``pages/home_fr.html`` and finally ``pages/home.html``.
    """
    stem, ext = posixpath.splitext(name)
    names = [f"{stem}_{candidate}{ext}" for candidate in locale.fallbacks() if str(candidate)]
    names.append(name)
    return names


class DefinitionContainer:
    """Looks up and renders definitions (templates) through a Jinja2 environment."""

    def __init__(self, environment: Environment):
        self.environment = environment

    @classmethod
    def from_directory(cls, directory: Path) -> "DefinitionContainer":
        """Build a container over a template directory with HTML autoescaping."""
        environment = Environment(
            loader=FileSystemLoader(str(directory)),
            autoescape=select_autoescape(["html", "htm", "xml"]),
        )
        return cls(environment)

    def _load(self, name: str, locale: Locale) -> Template | None:
        for candidate in localized_names(name, locale):
            try:
                return self.environment.get_template(candidate)
            except TemplateNotFound:
                continue
        return None

    def resolve_definition(self, name: str, locale: Locale) -> str | None:
        """Return the most specific existing template name for ``name``, or None."""
        template = self._load(name, locale)
        return template.name if template is not None else None

    def is_valid_definition(self, name: str, context: LocaleContextProbe) -> bool:
        """Check whether a definition exists for ``name`` in the context's locale."""
        found = self._load(name, context.locale) is not None
        log_with_context(
            logger,
            "debug",
            "Definition lookup",
            definition=name,
            locale=str(context.locale),
            found=found,
            event_type="definition_lookup",
        )
        return found

    def render(self, name: str, context: RenderContext) -> str:
        """Render the most specific template for ``name``.

        The template sees the model plus ``request`` and ``locale``, and each
        scope under its ``SCOPE_VARIABLES`` name: ``application``, ``session``
        and ``request_scope``. These keys shadow model entries of the same name.

        Raises:
            ViewNotFoundException: If the definition disappeared since resolution
        """
        template = self._load(name, context.locale)
        if template is None:
            raise ViewNotFoundException(name, details={"locale": str(context.locale)})

        variables = dict(context.model)
        variables["request"] = context.request
        variables["locale"] = context.locale
        for scope in SCOPES:
            variables[SCOPE_VARIABLES[scope]] = context.scope(scope)
        return template.render(variables)

    def list_definitions(self) -> list[str]:
        """List every template name the loader can see."""
        if self.environment.loader is None:
            return []
        return self.environment.list_templates()
