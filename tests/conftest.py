"""Pytest configuration and shared fixtures."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from starlette.requests import Request

from renderer_views.config import Settings
from renderer_views.container import DefinitionContainer
from renderer_views.context import TemplateApplicationContext
from renderer_views.core.app_factory import create_app

TEMPLATES = {
    "home.html": "home {{ greeting }}",
    "home_fr.html": "accueil {{ greeting }}",
    "home_fr_CA.html": "accueil québec",
    "pages/about.html": "about {{ locale }} {{ macro_request_context.request_uri }}",
    "pages/escaped.html": "{{ snippet }}",
    "admin/secret.html": "secret",
}


@pytest.fixture
def templates_dir(tmp_path):
    """Template directory populated with TEMPLATES."""
    root = tmp_path / "templates"
    for name, body in TEMPLATES.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(body, encoding="utf-8")
    return root


@pytest.fixture
def container(templates_dir):
    """Definition container over the test templates."""
    return DefinitionContainer.from_directory(templates_dir)


@pytest.fixture
def template_context(container):
    """Template application context holding the test container."""
    return TemplateApplicationContext(container=container, attributes={"site": "test-site"})


@pytest.fixture
def mock_renderer():
    """Renderer stub that reports every name as renderable."""
    renderer = MagicMock()
    renderer.is_renderable = MagicMock(return_value=True)
    renderer.render = MagicMock(return_value="<p>rendered</p>")
    return renderer


@pytest.fixture
def make_request():
    """Factory for bare Starlette requests without a running application."""

    def _make(
        path: str = "/views/home",
        query_string: bytes = b"",
        headers: list[tuple[bytes, bytes]] | None = None,
        state: dict | None = None,
        session: dict | None = None,
        root_path: str = "",
    ) -> Request:
        scope = {
            "type": "http",
            "method": "GET",
            "path": path,
            "root_path": root_path,
            "query_string": query_string,
            "headers": headers or [],
            "state": state if state is not None else {},
        }
        if session is not None:
            scope["session"] = session
        return Request(scope)

    return _make


@pytest.fixture
def test_settings(templates_dir):
    """Settings pointing at the test templates."""
    return Settings(templates_dir=templates_dir, default_locale="en", view_suffix=".html")


@pytest.fixture
def test_client(test_settings):
    """FastAPI test client with lifespan context."""
    app = create_app(test_settings)
    with TestClient(app) as client:
        yield client
