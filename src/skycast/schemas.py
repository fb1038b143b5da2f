"""
Domain models for skycast.

Pydantic models for the normalized, UI-ready output. These define the
canonical schema - the normalize package builds them from the raw
Open-Meteo series (see ``datasources/openmeteo/models.py``).

All models are frozen: a record is built once per request and handed to
the caller, who owns it.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Request options
# =============================================================================


class Units(StrEnum):
    """Measurement system requested from the provider."""

    METRIC = "metric"
    IMPERIAL = "imperial"

    @property
    def temperature_unit(self) -> str:
        """Open-Meteo ``temperature_unit`` parameter value."""
        return "fahrenheit" if self is Units.IMPERIAL else "celsius"

    @property
    def windspeed_unit(self) -> str:
        """Open-Meteo ``windspeed_unit`` parameter value."""
        return "mph" if self is Units.IMPERIAL else "ms"


# =============================================================================
# Geographic
# =============================================================================


class Location(BaseModel):
    """A resolved place with coordinates."""

    model_config = ConfigDict(frozen=True)

    name: str
    country: str = ""
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class PlaceLabel(BaseModel):
    """City/country label attached to a report."""

    model_config = ConfigDict(frozen=True)

    city: str
    country: str = ""

    @classmethod
    def unknown(cls) -> PlaceLabel:
        """Sentinel label used when reverse lookup fails."""
        return cls(city="Unknown", country="")


# =============================================================================
# Weather
# =============================================================================


class CurrentConditions(BaseModel):
    """Current weather at the requested point."""

    model_config = ConfigDict(frozen=True)

    temp: int
    temp_min: int
    temp_max: int
    feels_like: int
    humidity: int
    pressure: int = Field(..., description="Sea-level pressure in mmHg")
    wind_speed: float
    wind_deg: float
    wind_direction: str = Field(..., description="Eight-way compass label for wind_deg")
    clouds: int
    visibility: int = Field(..., description="Visibility in meters")
    description: str
    icon: str
    icon_url: str
    city_name: str
    country: str
    sunrise: datetime
    sunset: datetime
    observed_at: datetime


class HourlySample(BaseModel):
    """One hour of forecast, owned by the DayForecast containing it."""

    model_config = ConfigDict(frozen=True)

    dt: datetime
    temp: int
    feels_like: int
    humidity: int
    pressure: int
    wind_speed: float
    wind_deg: float
    clouds: int
    description: str
    icon: str
    icon_url: str


class DayForecast(BaseModel):
    """One calendar day of forecast with its hourly samples.

    ``humidity``, ``pressure`` and ``wind_speed`` are averages over
    ``hourly``; they are None when no hourly sample falls on this date.
    """

    model_config = ConfigDict(frozen=True)

    date: date
    temp_min: int
    temp_max: int
    temp_avg: int
    humidity: int | None
    pressure: int | None
    wind_speed: float | None
    description: str
    icon: str
    icon_url: str
    hourly: tuple[HourlySample, ...] = ()


class Forecast(BaseModel):
    """Multi-day forecast for a location, ascending by date."""

    model_config = ConfigDict(frozen=True)

    city: str
    country: str
    days: tuple[DayForecast, ...] = ()


class WeatherReport(BaseModel):
    """Complete weather response: current conditions plus forecast."""

    model_config = ConfigDict(frozen=True)

    units: Units
    current: CurrentConditions
    forecast: Forecast
