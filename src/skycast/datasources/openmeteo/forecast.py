"""Combined current/hourly/daily forecast from Open-Meteo Forecast API."""

from __future__ import annotations

from typing import Any

from skycast.datasources.openmeteo.client import (
    DAILY_VARS,
    DEFAULT_FORECAST_DAYS,
    HOURLY_VARS,
    OPEN_METEO_API,
)
from skycast.schemas import Units
from skycast.services.http import session


def fetch_forecast(
    lat: float,
    lon: float,
    units: Units = Units.METRIC,
    *,
    forecast_days: int = DEFAULT_FORECAST_DAYS,
    api_url: str = OPEN_METEO_API,
) -> dict[str, Any]:
    """
    Fetch current weather plus hourly and daily series from Open-Meteo.

    Times in the response are local to the point (``timezone=auto``) and
    the offset is reported as ``utc_offset_seconds``.

    Args:
        lat: Latitude.
        lon: Longitude.
        units: Metric (Celsius, m/s) or imperial (Fahrenheit, mph).
        forecast_days: Number of days to forecast (max 16).
        api_url: Forecast endpoint.

    Returns:
        Raw API response dict with ``current_weather``, ``hourly`` and
        ``daily`` keys.

    Raises:
        requests.RequestException: On transport failure or non-2xx status.
    """
    params: dict[str, str | int | float | bool] = {
        "latitude": lat,
        "longitude": lon,
        "current_weather": "true",
        "hourly": ",".join(HOURLY_VARS),
        "daily": ",".join(DAILY_VARS),
        "temperature_unit": units.temperature_unit,
        "windspeed_unit": units.windspeed_unit,
        "timezone": "auto",
        "forecast_days": forecast_days,
    }

    resp = session.get(api_url, params=params)
    resp.raise_for_status()
    result: dict[str, Any] = resp.json()
    return result
