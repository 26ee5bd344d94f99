"""
Centralized configuration for the fleet console.

All settings are loaded from environment variables (prefixed ``FLEET_``)
or a local ``.env`` file, with sensible defaults for a developer machine.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FLEET_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Fleet Console"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "WARNING"

    # Backend API
    api_base_url: str = "http://localhost:5000/api"
    request_timeout: float = 10.0  # seconds

    # Session persistence
    storage_backend: Literal["file", "memory"] = "file"
    session_file: Path = Path.home() / ".fleetconsole" / "session.json"
    login_route: str = "/login"

    # Development shortcuts, never enable in production
    enable_demo_accounts: bool = False
    data_source: Literal["live", "demo", "fallback"] = "live"

    # Request helpers
    submit_success_reset_seconds: float = 3.0


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
