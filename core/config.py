"""
Application configuration management.

Uses pydantic-settings for type-safe environment variable parsing.
All configuration is centralized here so that load/save defaults and
network behaviour are not scattered through the syndication package
as os.getenv() calls.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with validation and type coercion.

    Values are loaded from environment variables or .env file.
    All fields have sensible defaults for local development.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Resource loading defaults
    default_character_encoding: str = "utf-8"
    load_timeout_seconds: float = 15.0
    retrieval_limit: int = 0  # 0 means unlimited

    # Resource saving defaults
    auto_detect_extensions: bool = True
    minimize_output: bool = False

    # HTTP transport
    http_user_agent: str = "syndication-toolkit/0.1"
    http_follow_redirects: bool = True

    # Mock configuration (tests and local development)
    mock_fetch_latency_seconds: float = 0.05

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False

    # Environment
    environment: Literal["development", "staging", "production"] = "development"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings singleton.

    Use this function to get settings instance throughout the application.
    The @lru_cache ensures we only parse environment once.
    """
    return Settings()


# Convenience export for direct import
settings = get_settings()
