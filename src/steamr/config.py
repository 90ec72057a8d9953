"""
Client configuration using Pydantic Settings.

Loads configuration from environment variables (or a local .env file)
with validation, type coercion, and sensible defaults.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SteamAPIConfig(BaseSettings):
    """Steam Web API specific configuration."""

    model_config = SettingsConfigDict(
        env_prefix="STEAM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: SecretStr = Field(
        default=SecretStr(""),
        description=(
            "Steam Web API key from https://steamcommunity.com/dev/apikey. "
            "Leave empty for endpoints that tolerate anonymous access."
        ),
    )
    base_url: str = Field(
        default="https://api.steampowered.com",
        description="Base URL for Steam Web API",
    )
    timeout_seconds: float = Field(
        default=30,
        ge=1,
        le=120,
        description="HTTP request timeout in seconds",
    )
    user_agent: str = Field(
        default="steamr/0.1",
        description="User-Agent header sent with every request",
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URL so endpoint paths can be appended."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid base URL: {v}")
        return v.rstrip("/")


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    format: Literal["json", "console"] = Field(
        default="console",
        description="Log output format",
    )
    include_timestamp: bool = Field(
        default=True,
        description="Include timestamp in log entries",
    )


class Settings(BaseSettings):
    """
    Main settings.

    Aggregates all configuration sections and provides
    a single entry point for configuration access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    steam: SteamAPIConfig = Field(default_factory=SteamAPIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def has_api_key(self) -> bool:
        """Check if a developer API key is configured."""
        return bool(self.steam.api_key.get_secret_value())


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings.

    Uses lru_cache to ensure settings are only loaded once
    and reused across the process.

    Returns:
        Settings: Configuration instance
    """
    return Settings()
