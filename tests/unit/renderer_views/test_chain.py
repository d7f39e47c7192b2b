"""Unit tests for the view resolver chain."""

from unittest.mock import MagicMock

from renderer_views.chain import ViewResolverChain
from renderer_views.locale import Locale
from renderer_views.resolver import RendererViewResolver


def test_first_view_wins():
    view = object()
    first = MagicMock()
    first.resolve_view.return_value = None
    second = MagicMock()
    second.resolve_view.return_value = view
    third = MagicMock()

    chain = ViewResolverChain([first, second])
    chain.add(third)

    assert chain.resolve("home", Locale("en")) is view
    first.resolve_view.assert_called_once_with("home", Locale("en"))
    third.resolve_view.assert_not_called()


def test_no_view_returns_none():
    resolver = MagicMock()
    resolver.resolve_view.return_value = None

    assert ViewResolverChain([resolver]).resolve("home", Locale("en")) is None


def test_empty_chain_returns_none():
    assert ViewResolverChain().resolve("home", Locale("en")) is None


def test_clear_caches_clears_caching_resolvers(template_context, mock_renderer):
    caching = RendererViewResolver(template_context=template_context, renderer=mock_renderer)
    caching.resolve_view("home", Locale("en"))
    plain = MagicMock(spec=["resolve_view"])

    ViewResolverChain([caching, plain]).clear_caches()

    assert caching.cache_size() == 0
