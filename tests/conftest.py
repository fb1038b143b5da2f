"""Shared fixtures: synthetic Open-Meteo forecast payloads."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, time, timedelta
from typing import Any

import pytest

from skycast.datasources.openmeteo import RawSeries
from skycast.normalize import aggregate_forecast, build_current_conditions
from skycast.schemas import PlaceLabel, Units, WeatherReport

PayloadFactory = Callable[..., dict[str, Any]]


def build_payload(
    start: date = date(2024, 1, 1),
    days: int = 7,
    hours: int | None = None,
    current_time: str = "2024-01-01T10:00",
) -> dict[str, Any]:
    """
    Build an Open-Meteo style response starting at local midnight of ``start``.

    Hourly values: temperature = hour of day, feels-like = hour - 2,
    humidity 50, pressure 1013.25 hPa, clouds 40, visibility 24140 m,
    wind 3.0 at 180 degrees, weather code 3.
    Daily values for day ``d``: min = d, max = 10 + d, code 61.
    """
    n_hours = days * 24 if hours is None else hours
    start_dt = datetime.combine(start, time())
    hour_times = [start_dt + timedelta(hours=i) for i in range(n_hours)]
    day_dates = [start + timedelta(days=d) for d in range(days)]

    return {
        "latitude": 55.75,
        "longitude": 37.625,
        "utc_offset_seconds": 10800,
        "timezone": "Europe/Moscow",
        "current_weather": {
            "time": current_time,
            "temperature": 15.0,
            "windspeed": 4.5,
            "winddirection": 90.0,
            "weathercode": 0,
        },
        "hourly": {
            "time": [t.strftime("%Y-%m-%dT%H:%M") for t in hour_times],
            "temperature_2m": [float(t.hour) for t in hour_times],
            "apparent_temperature": [float(t.hour) - 2 for t in hour_times],
            "relative_humidity_2m": [50.0] * n_hours,
            "pressure_msl": [1013.25] * n_hours,
            "cloudcover": [40.0] * n_hours,
            "visibility": [24140.0] * n_hours,
            "windspeed_10m": [3.0] * n_hours,
            "winddirection_10m": [180.0] * n_hours,
            "weathercode": [3] * n_hours,
        },
        "daily": {
            "time": [d.isoformat() for d in day_dates],
            "temperature_2m_max": [10.0 + i for i in range(days)],
            "temperature_2m_min": [float(i) for i in range(days)],
            "sunrise": [f"{d.isoformat()}T08:00" for d in day_dates],
            "sunset": [f"{d.isoformat()}T17:00" for d in day_dates],
            "weathercode": [61] * days,
        },
    }


@pytest.fixture
def make_payload() -> PayloadFactory:
    """Factory for synthetic payloads; see ``build_payload`` for values."""
    return build_payload


@pytest.fixture
def payload() -> dict[str, Any]:
    """Seven days of hourly and daily data starting 2024-01-01."""
    return build_payload()


@pytest.fixture
def series(payload: dict[str, Any]) -> RawSeries:
    return RawSeries.from_payload(payload)


@pytest.fixture
def label() -> PlaceLabel:
    return PlaceLabel(city="Moscow", country="RU")


@pytest.fixture
def report(series: RawSeries, label: PlaceLabel) -> WeatherReport:
    """A fully normalized metric report for 2024-01-01 10:00."""
    return WeatherReport(
        units=Units.METRIC,
        current=build_current_conditions(series, label, datetime(2024, 1, 1, 10, 0)),
        forecast=aggregate_forecast(series, label),
    )
