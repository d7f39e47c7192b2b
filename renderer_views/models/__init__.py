"""Renderer Views models"""

from renderer_views.models.base_models import HealthResponse, ViewCacheStats, ViewsHealthResponse
from renderer_views.models.resolver import ResolverConfig

__all__ = [
    "HealthResponse",
    "ResolverConfig",
    "ViewCacheStats",
    "ViewsHealthResponse",
]
