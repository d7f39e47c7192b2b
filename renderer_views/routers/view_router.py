"""Page/view routes resolving logical view names through the resolver chain."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from renderer_views.chain import ViewResolverChain
from renderer_views.dependencies import get_request_locale, get_view_resolvers
from renderer_views.exceptions import ViewNotFoundException
from renderer_views.locale import Locale

router = APIRouter()

# Query parameters that steer resolution and are kept out of the model
RESERVED_PARAMS = {"lang"}


@router.get("/views/{view_name:path}", response_class=HTMLResponse)
def render_view(
    view_name: str,
    request: Request,
    resolvers: ViewResolverChain = Depends(get_view_resolvers),
    locale: Locale = Depends(get_request_locale),
):
    """Resolve ``view_name`` for the request locale and render it.

    Query parameters other than ``lang`` become the model.
    """
    view = resolvers.resolve(view_name, locale)
    if view is None:
        raise ViewNotFoundException(view_name, details={"locale": str(locale)})

    model = {key: value for key, value in request.query_params.items() if key not in RESERVED_PARAMS}
    return view.render(model, request)
