"""Application configuration using Pydantic settings.

Values come from environment variables prefixed with ``SKYCAST_`` (or a
``.env`` file in the working directory), e.g. ``SKYCAST_UNITS=imperial``.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from skycast.schemas import Units


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SKYCAST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "skycast"
    app_env: str = "development"
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Default location for the CLI (Moscow)
    lat: float = Field(default=55.7558, ge=-90, le=90)
    lon: float = Field(default=37.6173, ge=-180, le=180)
    units: Units = Units.METRIC

    # Open-Meteo
    open_meteo_url: str = "https://api.open-meteo.com/v1/forecast"
    forecast_days: int = Field(default=7, ge=1, le=16)

    # Nominatim (OpenStreetMap geocoding)
    nominatim_url: str = "https://nominatim.openstreetmap.org"
    accept_language: str = "en"

    # HTTP transport
    http_timeout: float = 10.0
    user_agent: str = "skycast/0.1.0"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
