"""Resolver configuration model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ResolverConfig(BaseModel):
    """Settings copied onto every view a RendererViewResolver builds.

    Frozen: the resolver reads it on every resolution and never writes it.
    """

    model_config = ConfigDict(frozen=True)

    prefix: str | None = Field(default=None, description="Prepended to view names to form the definition name")
    suffix: str | None = Field(default=None, description="Appended to view names to form the definition name")
    content_type: str | None = Field(default=None, description="Response content type for resolved views")
    attributes_map: dict[str, Any] | None = Field(default=None, description="Static attributes merged into each model")
    request_context_attribute: str | None = Field(
        default=None, description="Model key under which a RequestContext is exposed"
    )

    expose_request_attributes: bool = False
    allow_request_override: bool = False
    expose_session_attributes: bool = False
    allow_session_override: bool = False
    expose_macro_helpers: bool = True
    expose_model_in_request: bool = True

    view_names: tuple[str, ...] | None = Field(
        default=None, description="Wildcard allow-list of view names; None disables filtering"
    )

    cache_limit: int = Field(default=1024, ge=0, description="Maximum cached views; 0 disables caching")
    cache_unresolved: bool = True

    @field_validator("view_names", mode="before")
    @classmethod
    def normalize_view_names(cls, v: Any) -> Any:
        """Accept a single comma separated string as well as a sequence."""
        if isinstance(v, str):
            return tuple(name.strip() for name in v.split(",") if name.strip())
        return v
