"""Unit tests for the caching resolver base."""

import pytest

from renderer_views.caching import CachingViewResolver
from renderer_views.locale import Locale


class CountingResolver(CachingViewResolver):
    """Resolves every name except those starting with 'missing'."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.loads: list[tuple[str, Locale]] = []

    def load_view(self, view_name, locale):
        self.loads.append((view_name, locale))
        if view_name.startswith("missing"):
            return None
        return object()


EN = Locale("en")
FR = Locale("fr")


def test_views_are_cached_per_name_and_locale():
    resolver = CountingResolver()

    first = resolver.resolve_view("home", EN)
    assert resolver.resolve_view("home", EN) is first
    assert resolver.resolve_view("home", FR) is not first
    assert resolver.loads == [("home", EN), ("home", FR)]


def test_unresolved_views_are_cached_by_default():
    resolver = CountingResolver()

    assert resolver.resolve_view("missing", EN) is None
    assert resolver.resolve_view("missing", EN) is None
    assert len(resolver.loads) == 1
    assert resolver.cache_size() == 1


def test_unresolved_views_not_cached_when_disabled():
    resolver = CountingResolver(cache_unresolved=False)

    resolver.resolve_view("missing", EN)
    resolver.resolve_view("missing", EN)

    assert len(resolver.loads) == 2
    assert resolver.cache_size() == 0


def test_zero_limit_disables_cache():
    resolver = CountingResolver(cache_limit=0)

    assert resolver.cache_enabled is False
    assert resolver.resolve_view("home", EN) is not resolver.resolve_view("home", EN)
    assert resolver.cache_size() == 0


def test_least_recently_used_entry_is_evicted():
    resolver = CountingResolver(cache_limit=2)

    resolver.resolve_view("a", EN)
    resolver.resolve_view("b", EN)
    resolver.resolve_view("a", EN)  # touch a, b is now oldest
    resolver.resolve_view("c", EN)

    assert resolver.cache_size() == 2
    resolver.loads.clear()
    resolver.resolve_view("a", EN)
    resolver.resolve_view("b", EN)
    assert resolver.loads == [("b", EN)]


def test_remove_from_cache():
    resolver = CountingResolver()
    first = resolver.resolve_view("home", EN)

    resolver.remove_from_cache("home", EN)
    resolver.remove_from_cache("never-cached", EN)

    assert resolver.resolve_view("home", EN) is not first


def test_clear_cache():
    resolver = CountingResolver()
    resolver.resolve_view("home", EN)
    resolver.resolve_view("missing", EN)

    resolver.clear_cache()

    assert resolver.cache_size() == 0


def test_negative_limit_rejected():
    with pytest.raises(ValueError):
        CountingResolver(cache_limit=-1)
