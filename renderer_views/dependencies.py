"""FastAPI dependencies for dependency injection."""

from fastapi import Request

from renderer_views.chain import ViewResolverChain
from renderer_views.config import get_settings
from renderer_views.context import TemplateApplicationContext
from renderer_views.exceptions import ContextBindingMissingException
from renderer_views.locale import Locale, resolve_locale
from renderer_views.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


async def get_template_context(request: Request) -> TemplateApplicationContext:
    """
    Get the template application context from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The shared TemplateApplicationContext instance.

    Raises:
        ContextBindingMissingException: If the context is not initialized.
    """
    context: TemplateApplicationContext | None = getattr(request.app.state, "template_context", None)

    if context is None:
        raise ContextBindingMissingException("Template application context not initialized.")

    return context


async def get_view_resolvers(request: Request) -> ViewResolverChain:
    """
    Get the view resolver chain from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The shared ViewResolverChain instance.

    Raises:
        RuntimeError: If the resolver chain is not initialized.
    """
    chain: ViewResolverChain | None = getattr(request.app.state, "view_resolvers", None)

    if chain is None:
        raise RuntimeError("View resolver chain not initialized.")

    return chain


async def get_request_locale(request: Request) -> Locale:
    """
    Determine the locale for a request.

    A valid ``lang`` query parameter wins, then the Accept-Language
    header, then the configured default locale. A malformed ``lang`` is
    ignored.

    Args:
        request: The FastAPI request object.

    Returns:
        The locale to resolve views in.
    """
    settings = getattr(request.app.state, "settings", None) or get_settings()
    default = settings.locale

    lang = request.query_params.get("lang")
    if lang:
        try:
            return Locale.parse(lang)
        except ValueError:
            log_with_context(logger, "debug", "Ignoring malformed lang parameter", lang=lang, event_type="locale_invalid")

    return resolve_locale(request.headers.get("accept-language"), default)
