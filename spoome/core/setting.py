"""
Configuration Settings

This module defines client configuration using Pydantic Settings.
All configuration is loaded from environment variables (prefix ``SPOOME_``)
or a .env file, and can be overridden per client via constructor arguments.

Examples:
    SPOOME_BASE_URL=https://links.example.org
    SPOOME_API_KEY=sk_live_...
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Settings", "settings", "DEFAULT_BASE_URL", "__version__"]

__version__ = "0.1.0"

DEFAULT_BASE_URL = "https://spoo.me"


class Settings(BaseSettings):
    """
    Client settings loaded from environment variables.

    All settings can be overridden via environment variables or .env file.
    """
    model_config = SettingsConfigDict(
        env_prefix="SPOOME_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Service Configuration
    # Point this at a self-hosted instance to use it instead of the public service
    BASE_URL: str = Field(
        default=DEFAULT_BASE_URL,
        description="Origin of the spoo.me instance all endpoint paths resolve against"
    )

    # Authentication
    API_KEY: Optional[str] = Field(
        default=None,
        description="Optional API key sent with every request"
    )
    API_KEY_HEADER: str = Field(
        default="Authorization",
        description="Header carrying the API key (Authorization uses the Bearer scheme)"
    )

    # HTTP Configuration
    TIMEOUT: float = Field(
        default=10.0,
        description="Timeout in seconds for HTTP clients built by the library"
    )
    USER_AGENT: str = Field(
        default=f"spoome-python/{__version__}",
        description="User-Agent header sent with every request"
    )

    @field_validator("BASE_URL")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


settings = Settings()
