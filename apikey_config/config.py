from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import API_KEY_CONFIG


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env files."""

    # Application configuration
    debug: bool = Field(default=True, description="Enable debug mode")
    app_name: str = Field(default="apikey-config", description="Application name")
    version: str = Field(default="0.1.0", description="Application version")

    # API key configuration
    api_key_prefix: str = Field(
        default=API_KEY_CONFIG["PREFIX"],
        description="Namespacing token prepended to generated API keys",
    )
    api_key_expiry_days: int = Field(
        default=API_KEY_CONFIG["EXPIRY_DAYS"],
        description="Days after issuance until an API key expires",
    )

    @field_validator("api_key_prefix", mode="before")
    @classmethod
    def default_empty_prefix(cls, v: Any) -> Any:
        """Fall back to the constant prefix when the override is empty."""
        if v is None or v == "":
            return API_KEY_CONFIG["PREFIX"]
        return v

    # Logging configuration
    log_level: str | None = Field(
        default=None, description="Override the log level derived from debug"
    )
    log_to_file: bool = Field(
        default=False, description="Force logging to file even in debug mode"
    )

    # Pydantic Settings configuration
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return not self.debug

    @property
    def api_key_table(self) -> Mapping[str, Any]:
        """Get the API-key constants table with overrides applied."""
        return MappingProxyType(
            {
                **API_KEY_CONFIG,
                "PREFIX": self.api_key_prefix,
                "EXPIRY_DAYS": self.api_key_expiry_days,
            }
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance.

    Settings are loaded on first access so a malformed environment surfaces
    during start-up instead of at import time.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance."""
    global _settings
    _settings = None
