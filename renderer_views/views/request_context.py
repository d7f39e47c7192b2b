"""Request helper exposed to templates."""

from typing import Any

from starlette.requests import Request

from renderer_views.locale import Locale


class RequestContext:
    """Read-only view of the current request for template helpers."""

    def __init__(self, request: Request, locale: Locale, model: dict[str, Any] | None = None):
        self.request = request
        self.locale = locale
        self.model = model or {}

    @property
    def root_path(self) -> str:
        """Mount point of the application, without trailing slash."""
        return self.request.scope.get("root_path", "").rstrip("/")

    @property
    def request_uri(self) -> str:
        return self.request.url.path

    @property
    def query_string(self) -> str:
        return self.request.url.query

    def url(self, path: str) -> str:
        """Prefix an application-relative path with the root path."""
        if not path.startswith("/"):
            path = "/" + path
        return self.root_path + path

    def __repr__(self) -> str:
        return f"RequestContext(uri={self.request_uri!r}, locale={str(self.locale)!r})"
