"""
Configuration for the Earnings Feed client.

Defines the wire constants shared by the client and resources, plus optional
settings loaded from environment variables and .env files with
pydantic-settings. The client constructor never reads the environment; use
EarningsFeed.from_settings() to opt in.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://earningsfeed.com"
DEFAULT_TIMEOUT_MS = 30000
API_PREFIX = "/api/v1"

# Page sizes
DEFAULT_PAGE_SIZE = 25
DEFAULT_ITER_PAGE_SIZE = 100


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    Optional:
        EARNINGSFEED_API_KEY: API key used as the bearer token
        EARNINGSFEED_BASE_URL: Override of the production base URL
        EARNINGSFEED_TIMEOUT_MS: Per-request timeout in milliseconds
        EARNINGSFEED_LOG_LEVEL: Default level for setup_logging()
    """

    model_config = SettingsConfigDict(
        env_prefix="EARNINGSFEED_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    API_KEY: str | None = Field(default=None, description="Earnings Feed API key")
    BASE_URL: str = Field(default=DEFAULT_BASE_URL, description="API base URL")
    TIMEOUT_MS: int = Field(
        default=DEFAULT_TIMEOUT_MS, gt=0, description="Request timeout in milliseconds"
    )
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Logging level"
    )

    @field_validator("BASE_URL")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an absolute http(s) URL."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("BASE_URL must start with http:// or https://")
        return v.rstrip("/")

    @property
    def api_key(self) -> str | None:
        """Get API key (lowercase alias)."""
        return self.API_KEY

    @property
    def base_url(self) -> str:
        """Get base URL (lowercase alias)."""
        return self.BASE_URL

    @property
    def timeout_ms(self) -> int:
        """Get timeout in milliseconds (lowercase alias)."""
        return self.TIMEOUT_MS

    def redacted_display(self) -> dict[str, str | int | None]:
        """Return settings with the API key redacted for display."""
        key = self.API_KEY
        if key is not None:
            key = f"{key[:8]}...{key[-4:]}" if len(key) > 12 else "***"
        return {
            "API_KEY": key,
            "BASE_URL": self.BASE_URL,
            "TIMEOUT_MS": self.TIMEOUT_MS,
            "LOG_LEVEL": self.LOG_LEVEL,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings singleton.

    Returns:
        Settings instance loaded from environment.

    Raises:
        pydantic.ValidationError: If a setting is present but invalid.
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
