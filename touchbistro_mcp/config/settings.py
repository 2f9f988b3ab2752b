"""
Application settings and configuration management.

Uses Pydantic Settings for validation and environment variable support.
All variables share the TOUCHBISTRO_ prefix, e.g. TOUCHBISTRO_API_KEY.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

API_BASE_URL = "https://cloud.touchbistro.com/api/v1"


class Settings(BaseSettings):
    """Main application settings."""

    # Credentials
    api_key: str = Field(default="", description="TouchBistro API bearer token")
    venue_id: str = Field(
        default="", description="Venue identifier sent as X-Venue-Id on every request"
    )
    base_url: str = Field(default=API_BASE_URL, description="TouchBistro API base URL")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    log_file: Path | None = Field(default=None, description="Log file path")

    model_config = SettingsConfigDict(
        env_prefix="TOUCHBISTRO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    def missing_credentials(self) -> list[str]:
        """Return the names of required environment variables that are unset."""
        missing = []
        if not self.api_key:
            missing.append("TOUCHBISTRO_API_KEY")
        if not self.venue_id:
            missing.append("TOUCHBISTRO_VENUE_ID")
        return missing


def load_settings(env_file: str | Path | None = None, **overrides) -> Settings:
    """
    Load settings from file and environment.

    Args:
        env_file: Path to .env file (optional, defaults to .env in the cwd)
        **overrides: Explicit values that take precedence over the environment

    Returns:
        Loaded settings instance
    """
    if env_file:
        return Settings(_env_file=env_file, **overrides)
    return Settings(**overrides)
