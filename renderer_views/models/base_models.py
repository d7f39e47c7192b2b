"""Pydantic models for health and diagnostics responses."""

from datetime import datetime

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Basic health check response."""

    status: str
    version: str


class ViewCacheStats(BaseModel):
    """Cache statistics for a single view resolver."""

    resolver: str = Field(..., description="Resolver class name")
    cached_views: int = Field(..., description="Entries in the view cache, unresolved markers included")
    probe_locales: int | None = Field(None, description="Locales with a cached probe context")


class ViewsHealthResponse(BaseModel):
    """View resolution health with per-resolver cache statistics."""

    status: str = Field(..., description="Overall status: ok or unavailable")
    version: str = Field(..., description="Application version")
    timestamp: datetime = Field(..., description="Current server timestamp")
    definitions: int = Field(..., description="Templates visible to the definition container")
    resolvers: list[ViewCacheStats] = Field(default_factory=list)
