"""Configuration settings for the Google Custom Search MCP Server using Pydantic Settings.

This module provides type-safe configuration management with automatic validation,
environment variable loading, and documentation generation.
"""

import logging
from typing import Any, Self

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Central configuration management with Pydantic validation.

    All settings are loaded from environment variables with automatic type conversion
    and validation. Default values are provided for non-critical settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
        validate_default=True,
    )

    # ========================================
    # Debug Settings
    # ========================================
    debug: bool = Field(
        default=False,
        alias="MCP_DEBUG",
        description="Enable debug mode with verbose logging",
    )

    # ========================================
    # Google Custom Search Settings
    # ========================================
    google_api_key: str | None = Field(
        default=None,
        description="Google API key for the Custom Search JSON API",
    )

    google_search_engine_id: str | None = Field(
        default=None,
        description="Programmable Search Engine ID (cx)",
    )

    google_search_base_url: str = Field(
        default="https://www.googleapis.com/customsearch/v1",
        description="Custom Search JSON API endpoint",
    )

    google_search_timeout: int = Field(
        default=30,
        ge=5,
        le=120,
        description="Timeout in seconds for Custom Search API requests",
    )

    user_agent: str = Field(
        default="Google-Search-MCP-Server/1.0",
        description="User agent for outgoing HTTP requests",
    )

    # ========================================
    # Image Validation Settings
    # ========================================
    image_head_timeout: float = Field(
        default=3.0,
        gt=0,
        le=60,
        description="Deadline in seconds for the HEAD probe of an image URL",
    )

    image_get_timeout: float = Field(
        default=5.0,
        gt=0,
        le=60,
        description="Deadline in seconds for the GET probe of an image URL",
    )

    image_check_ceiling: float = Field(
        default=7.0,
        gt=0,
        le=120,
        description="Hard per-image ceiling enforced by the batch validator",
    )

    image_min_bytes: int = Field(
        default=1000,
        ge=0,
        description="Images with a smaller content-length are treated as placeholders",
    )

    image_overfetch_margin: int = Field(
        default=5,
        ge=0,
        le=10,
        description="Extra image candidates fetched to absorb validation attrition",
    )

    # ========================================
    # Server Settings
    # ========================================
    host: str = Field(
        default="0.0.0.0",
        description="Server host address",
    )

    port: int = Field(
        default=8051,
        ge=1024,
        le=65535,
        description="Server port number",
    )

    # ========================================
    # Transport Settings
    # ========================================
    transport: str = Field(
        default="stdio",
        description="Transport mode (stdio, http, streamable-http or sse)",
    )

    mcp_api_key: str | None = Field(
        default=None,
        description="MCP API key for authentication",
    )

    # ========================================
    # Validators
    # ========================================
    @model_validator(mode="after")
    def check_image_ceiling(self) -> Self:
        """The batch ceiling must outlast both probe deadlines."""
        longest_probe = max(self.image_head_timeout, self.image_get_timeout)
        if self.image_check_ceiling <= longest_probe:
            msg = (
                f"image_check_ceiling ({self.image_check_ceiling}s) must be greater "
                f"than the probe timeouts ({longest_probe}s)"
            )
            raise ValueError(msg)
        return self

    # ========================================
    # Helper Methods
    # ========================================
    def has_google_config(self) -> bool:
        """Check if the Google credentials are configured."""
        return all([self.google_api_key, self.google_search_engine_id])

    def missing_google_config(self) -> list[str]:
        """Return the environment variable names of missing Google credentials."""
        missing = []
        if not self.google_api_key:
            missing.append("GOOGLE_API_KEY")
        if not self.google_search_engine_id:
            missing.append("GOOGLE_SEARCH_ENGINE_ID")
        return missing

    def to_dict(self) -> dict[str, Any]:
        """Export settings as a dictionary (safe version without secrets)."""
        return {
            "debug": self.debug,
            "host": self.host,
            "port": self.port,
            "transport": self.transport,
            "has_google_api_key": bool(self.google_api_key),
            "has_search_engine_id": bool(self.google_search_engine_id),
            "has_mcp_api_key": bool(self.mcp_api_key),
            "google_search_timeout": self.google_search_timeout,
            "image_head_timeout": self.image_head_timeout,
            "image_get_timeout": self.image_get_timeout,
            "image_check_ceiling": self.image_check_ceiling,
            "image_min_bytes": self.image_min_bytes,
            "image_overfetch_margin": self.image_overfetch_margin,
        }


# Singleton pattern with proper typing
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get cached settings instance (singleton pattern)."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
        logger.info("Settings initialized from environment")
        if not _settings_instance.has_google_config():
            logger.warning(
                "Missing %s. Search tools will fail until configured.",
                ", ".join(_settings_instance.missing_google_config()),
            )
    return _settings_instance


def reset_settings() -> None:
    """Reset settings instance (useful for testing)."""
    global _settings_instance
    _settings_instance = None
