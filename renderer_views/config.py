from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from renderer_views.locale import Locale
from renderer_views.logging_config import get_logger, log_with_context
from renderer_views.models.resolver import ResolverConfig

logger = get_logger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent  # renderer-views/


class Settings(BaseSettings):
    """Application settings with validation.

    Every field has a default, so the application starts without a .env file.
    Values are read from environment variables or the .env file; list and
    mapping fields (view_names, view_attributes) take JSON.

    Uses Pydantic v2 API:
    - model_config with SettingsConfigDict
    - @field_validator decorator
    """

    # Server settings
    api_host: str = Field(default="127.0.0.1", min_length=1, description="Server host")
    api_port: int = Field(ge=1, le=65535, default=8000, description="Server port")
    log_level: str = Field(default="INFO", description="Root log level")

    # Templates
    templates_dir: Path = Field(default=BASE_DIR / "templates", description="Directory searched for definitions")
    default_locale: str = Field(default="en", description="Locale used when the request names none")
    session_secret: str = Field(default="", description="Enables signed cookie sessions when set")

    # View resolver
    view_renderer: Literal["definition", "string"] = "definition"
    view_prefix: str | None = None
    view_suffix: str | None = ".html"
    view_content_type: str | None = None
    view_attributes: dict[str, Any] | None = None
    view_request_context_attribute: str | None = None
    view_expose_request_attributes: bool = False
    view_allow_request_override: bool = False
    view_expose_session_attributes: bool = False
    view_allow_session_override: bool = False
    view_expose_macro_helpers: bool = True
    view_expose_model_in_request: bool = True
    view_names: list[str] | None = None
    view_cache_limit: int = Field(default=1024, ge=0)
    view_cache_unresolved: bool = True

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level names a standard logging level."""
        v = v.strip().upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"log_level must be a standard logging level, got {v!r}")
        return v

    @field_validator("templates_dir", mode="after")
    @classmethod
    def validate_templates_dir(cls, v: Path) -> Path:
        """Warn when the templates directory does not exist; every view would be unresolvable."""
        if not v.is_dir():
            log_with_context(
                logger,
                "warning",
                "Templates directory not found, no definitions will resolve",
                templates_dir=str(v),
                event_type="config_templates_missing",
            )
        return v

    @field_validator("default_locale", mode="after")
    @classmethod
    def validate_default_locale(cls, v: str) -> str:
        """Ensure default_locale parses as a locale tag."""
        Locale.parse(v)
        return v

    @property
    def locale(self) -> Locale:
        """Default locale as a Locale value."""
        return Locale.parse(self.default_locale)

    def resolver_config(self) -> ResolverConfig:
        """Build the immutable resolver configuration from these settings."""
        return ResolverConfig(
            prefix=self.view_prefix,
            suffix=self.view_suffix,
            content_type=self.view_content_type,
            attributes_map=self.view_attributes,
            request_context_attribute=self.view_request_context_attribute,
            expose_request_attributes=self.view_expose_request_attributes,
            allow_request_override=self.view_allow_request_override,
            expose_session_attributes=self.view_expose_session_attributes,
            allow_session_override=self.view_allow_session_override,
            expose_macro_helpers=self.view_expose_macro_helpers,
            expose_model_in_request=self.view_expose_model_in_request,
            view_names=self.view_names,
            cache_limit=self.view_cache_limit,
            cache_unresolved=self.view_cache_unresolved,
        )


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance for dependency injection.

    Returns:
        Cached Settings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
