"""
Configuration settings for the WorkOS SDK.
Reads WORKOS_* environment variables (and an optional .env file).
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from .version import __version__

DEFAULT_BASE_URL = "https://api.workos.com"


class WorkOsSettings(BaseSettings):
    """SDK settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="WORKOS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: SecretStr = Field(..., description="WorkOS API key (sk_...)")
    client_id: Optional[str] = Field(default=None, description="WorkOS client ID (client_...)")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="WorkOS API base URL")
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    user_agent: str = f"workos-sdk-python/{__version__}"


@lru_cache()
def get_settings() -> WorkOsSettings:
    """Get cached settings instance."""
    return WorkOsSettings()
