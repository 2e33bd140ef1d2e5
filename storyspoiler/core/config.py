"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables
(prefix ``STORY_SPOILER_``) or a local ``.env`` file. Credentials are never
hard-coded; they must be injected by the environment.

Usage:
    from storyspoiler.core.config import get_settings

    settings = get_settings()
    base_url = settings.api_base_url
    password = settings.password.get_secret_value()
"""

import logging
from functools import lru_cache

import httpx
from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from storyspoiler.core.constants import API_TIMEOUT_DEFAULT, DEFAULT_API_BASE_URL
from storyspoiler.core.enums import Environment


class Settings(BaseSettings):
    """
    Test suite settings (flat structure).

    Configuration precedence:
        1. Environment variables (``STORY_SPOILER_*``)
        2. ``.env`` file in the working directory
        3. Default values (only for non-sensitive config)
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON instead of colored console output",
    )

    # Remote API
    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        description="Story Spoiler API base URL (e.g., https://host/api)",
    )
    username: str = Field(
        description="Account username used for the token exchange",
    )
    password: SecretStr = Field(
        description="Account password used for the token exchange",
    )

    # HTTP timeouts
    http_timeout_total: float = Field(
        default=API_TIMEOUT_DEFAULT,
        description="Default timeout applied to write operations (seconds)",
    )
    http_timeout_connect: float = Field(
        default=10.0,
        description="Connection timeout (seconds)",
    )
    http_timeout_read: float = Field(
        default=30.0,
        description="Read timeout (seconds)",
    )
    http_timeout_pool: float = Field(
        default=5.0,
        description="Connection pool acquisition timeout (seconds)",
    )

    model_config = SettingsConfigDict(
        env_prefix="STORY_SPOILER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("api_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """
        Remove trailing slashes from URLs.

        Args:
            v: URL string.

        Returns:
            str: URL without trailing slash.
        """
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the logging level name.

        Args:
            v: Level name in any case.

        Returns:
            str: Upper-case level name.

        Raises:
            ValueError: If the name is not a standard logging level.
        """
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for structlog's filtering logger."""
        return logging.getLevelNamesMapping()[self.log_level]

    @property
    def is_ci(self) -> bool:
        """
        Check if running in CI environment.

        Returns:
            bool: True if environment is CI, False otherwise.
        """
        return self.environment == Environment.CI

    def get_http_timeout(self) -> httpx.Timeout:
        """
        Build the httpx timeout used by every API client.

        Returns:
            httpx.Timeout: Timeout with connect/read/pool set explicitly and
            write falling back to the total.
        """
        return httpx.Timeout(
            self.http_timeout_total,
            connect=self.http_timeout_connect,
            read=self.http_timeout_read,
            pool=self.http_timeout_pool,
        )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Cached settings instance.

    Raises:
        pydantic.ValidationError: If credentials are not configured.
    """
    return Settings()  # type: ignore[call-arg]  # Pydantic Settings loads from env
