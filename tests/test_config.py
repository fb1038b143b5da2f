"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from skycast.config import Settings, get_settings
from skycast.schemas import Units


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SKYCAST_UNITS", raising=False)
        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.app_name == "skycast"
        assert settings.units == Units.METRIC
        assert settings.forecast_days == 7
        assert settings.open_meteo_url == "https://api.open-meteo.com/v1/forecast"
        assert settings.nominatim_url == "https://nominatim.openstreetmap.org"
        assert settings.http_timeout == 10.0

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SKYCAST_UNITS", "imperial")
        monkeypatch.setenv("SKYCAST_LAT", "40.7128")
        monkeypatch.setenv("SKYCAST_LOG_JSON", "true")

        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.units == Units.IMPERIAL
        assert settings.lat == 40.7128
        assert settings.log_json is True

    def test_latitude_range(self) -> None:
        with pytest.raises(ValidationError):
            Settings(lat=91.0)

    def test_forecast_days_range(self) -> None:
        with pytest.raises(ValidationError):
            Settings(forecast_days=17)


class TestGetSettings:
    def test_cached(self) -> None:
        assert get_settings() is get_settings()
