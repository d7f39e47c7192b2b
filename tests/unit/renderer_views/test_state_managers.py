"""Unit tests for state managers."""

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock

from renderer_views.context import ProbeContext
from renderer_views.locale import Locale
from renderer_views.state_managers import LocaleProbeCache, RendererHolder

# LocaleProbeCache Tests


def test_probe_cache_creates_probe_for_locale(template_context):
    """Test probe context carries the locale and application context."""
    cache = LocaleProbeCache(template_context)

    probe = cache.get(Locale("fr"))

    assert isinstance(probe, ProbeContext)
    assert probe.locale == Locale("fr")
    assert probe.application_context is template_context


def test_probe_cache_reuses_probe_for_same_locale(template_context):
    """Test repeat calls with an equal locale return the same object."""
    cache = LocaleProbeCache(template_context)

    first = cache.get(Locale.parse("fr-CA"))
    second = cache.get(Locale.parse("fr_CA"))

    assert first is second
    assert cache.size() == 1


def test_probe_cache_distinct_locales(template_context):
    """Test each locale gets its own probe."""
    cache = LocaleProbeCache(template_context)

    assert cache.get(Locale("fr")) is not cache.get(Locale("de"))
    assert cache.size() == 2


def test_probe_cache_concurrent_access(template_context):
    """Test exactly one probe per locale under concurrent first use."""
    cache = LocaleProbeCache(template_context)
    locales = [Locale("en"), Locale("fr"), Locale("de"), Locale("nl")]
    barrier = threading.Barrier(16)

    def fetch(index: int) -> ProbeContext:
        barrier.wait()
        return cache.get(locales[index % len(locales)])

    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(fetch, range(16)))

    assert cache.size() == len(locales)
    for locale in locales:
        probes = {id(probe) for probe in results if probe.locale == locale}
        assert len(probes) == 1


def test_probe_cache_cleanup(template_context):
    """Test cleanup drops all probes."""
    cache = LocaleProbeCache(template_context)
    first = cache.get(Locale("en"))

    cache.cleanup()

    assert cache.size() == 0
    assert cache.get(Locale("en")) is not first


# RendererHolder Tests


def test_renderer_holder_explicit_renderer_skips_factory():
    """Test an explicit renderer is returned without building a default."""
    renderer = MagicMock()
    factory = MagicMock()
    holder = RendererHolder(renderer)

    assert holder.get(factory) is renderer
    factory.assert_not_called()


def test_renderer_holder_builds_default_once():
    """Test the factory runs once even under concurrent first use."""
    calls = []

    def factory():
        calls.append(1)
        time.sleep(0.01)
        return MagicMock()

    holder = RendererHolder()
    barrier = threading.Barrier(8)

    def fetch(_):
        barrier.wait()
        return holder.get(factory)

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(fetch, range(8)))

    assert len(calls) == 1
    assert all(result is results[0] for result in results)


def test_renderer_holder_set_replaces_default():
    """Test set installs an explicit renderer."""
    holder = RendererHolder()
    default = holder.get(MagicMock)
    explicit = MagicMock()

    holder.set(explicit)

    assert holder.get(MagicMock) is explicit
    assert explicit is not default


def test_renderer_holder_cleanup_forgets_default_only():
    """Test cleanup drops a lazily built default but keeps an explicit renderer."""
    lazy = RendererHolder()
    first = lazy.get(MagicMock)
    lazy.cleanup()
    assert lazy.get(MagicMock) is not first

    explicit = MagicMock()
    held = RendererHolder(explicit)
    held.cleanup()
    assert held.get(MagicMock) is explicit
