"""Open-Meteo forecast data source.

Fetches current conditions plus hourly and daily series in one request
(free, no API key) and parses them into validated records.

Public API:
  - forecast: fetch_forecast (raw response dict)
  - models: RawSeries, CurrentSnapshot, HourlyRecord, DailyRecord
  - client: API URL, requested variables
"""

from skycast.datasources.openmeteo.client import (
    DAILY_VARS,
    DEFAULT_FORECAST_DAYS,
    HOURLY_VARS,
    OPEN_METEO_API,
)
from skycast.datasources.openmeteo.forecast import fetch_forecast
from skycast.datasources.openmeteo.models import (
    CurrentSnapshot,
    DailyRecord,
    HourlyRecord,
    RawSeries,
)

__all__ = [
    "DAILY_VARS",
    "DEFAULT_FORECAST_DAYS",
    "HOURLY_VARS",
    "OPEN_METEO_API",
    "CurrentSnapshot",
    "DailyRecord",
    "HourlyRecord",
    "RawSeries",
    "fetch_forecast",
]
