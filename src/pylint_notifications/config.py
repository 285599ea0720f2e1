"""Configuration management service with Pydantic Settings.

This module provides centralized configuration for the notification
facility, loading and validating environment variables on first use.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_INSTALL_DOCS_URL = (
    "https://pylint.readthedocs.io/en/stable/user_guide/installation/index.html"
)


class PluginSettings(BaseSettings):
    """Plugin-level settings."""

    model_config = SettingsConfigDict(env_prefix="PYLINT_PLUGIN_")

    install_docs_url: str = Field(
        default=DEFAULT_INSTALL_DOCS_URL,
        alias="PYLINT_PLUGIN_INSTALL_DOCS_URL",
        description="Documentation page explaining how to install Pylint",
    )

    @field_validator("install_docs_url")
    @classmethod
    def validate_install_docs_url(cls, v: str) -> str:
        """Validate documentation URL format."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Documentation URL must be an HTTP(S) endpoint")
        return v


class RendererSettings(BaseSettings):
    """Remote rendering host settings."""

    model_config = SettingsConfigDict(env_prefix="RENDERER_")

    url: str | None = Field(
        default=None,
        alias="RENDERER_URL",
        description="HTTP endpoint of a remote rendering host",
    )
    timeout: float = Field(
        default=5.0,
        alias="RENDERER_TIMEOUT",
        description="HTTP request timeout in seconds",
        gt=0,
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str | None) -> str | None:
        """Validate renderer URL format."""
        if v is None:
            return v
        if not v.startswith(("http://", "https://")):
            raise ValueError("Renderer URL must be an HTTP(S) endpoint")
        return v

    @property
    def enabled(self) -> bool:
        """Check if a remote rendering host is configured."""
        return self.url is not None


class Settings(BaseSettings):
    """Main application settings.

    Loads configuration from environment variables with support for
    .env files via python-dotenv.

    Example:
        ```python
        from pylint_notifications.config import get_settings

        settings = get_settings()
        print(settings.plugin.install_docs_url)
        print(settings.max_cause_depth)
        ```
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    plugin: PluginSettings = Field(default_factory=PluginSettings)
    renderer: RendererSettings = Field(default_factory=RendererSettings)

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Logging level",
    )
    max_cause_depth: int = Field(
        default=64,
        alias="TRACE_MAX_CAUSE_DEPTH",
        description="Maximum number of cause links followed when looking for a root cause",
        ge=1,
        le=10000,
    )

    def get_logging_level(self) -> int:
        """Get the numeric logging level."""
        level: int = getattr(logging, self.log_level)
        return level

    def redacted_summary(self) -> dict[str, str]:
        """Get a printable summary of settings.

        Returns:
            Dictionary of settings with credentials in URLs masked.
        """
        return {
            "install_docs_url": self.plugin.install_docs_url,
            "renderer_url": (
                self._redact_url(self.renderer.url) if self.renderer.url else "(not set)"
            ),
            "renderer_timeout": str(self.renderer.timeout),
            "log_level": self.log_level,
            "max_cause_depth": str(self.max_cause_depth),
        }

    @staticmethod
    def _redact_url(url: str) -> str:
        """Redact password from URL if present."""
        if "@" in url and "://" in url:
            protocol_end = url.index("://") + 3
            at_pos = url.index("@")
            creds_part = url[protocol_end:at_pos]
            if ":" in creds_part:
                username = creds_part.split(":")[0]
                return f"{url[:protocol_end]}{username}:***@{url[at_pos + 1 :]}"
        return url


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The Settings instance.

    Raises:
        ValidationError: If environment variables have invalid values.
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache.

    Useful for testing when you need to reload settings with
    different environment variables.
    """
    get_settings.cache_clear()
