"""
Bridge Configuration: Settings for the app-info bridge and its HTTP surface.

The settings manage:
  - Platform-level settings (host, port, environment, log level)
  - Where the app's own package metadata is read from
  - Observability toggles
"""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sliding_tile.version import APP_NAME, DISTRIBUTION_NAME


class Settings(BaseSettings):
    """Bridge-wide settings, overridable via SLIDING_TILE_* env vars."""

    model_config = SettingsConfigDict(
        env_prefix="SLIDING_TILE_",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Platform ─────────────────────────────────────────────────────
    platform_name: str = APP_NAME
    environment: Literal["development", "staging", "production"] = "development"
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_json: bool = False

    # ── Package metadata ─────────────────────────────────────────────
    package_name: str = DISTRIBUTION_NAME
    metadata_source: Literal["installed", "manifest"] = "installed"
    manifest_path: str = "pubspec.yaml"

    # ── Observability / HTTP ─────────────────────────────────────────
    tracing_enabled: bool = False
    cors_origins: str = ""

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @property
    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for structlog's filtering logger."""
        return logging.getLevelNamesMapping()[self.log_level]


@lru_cache
def get_settings() -> Settings:
    """Singleton accessor: parsed once, cached forever."""
    return Settings()
