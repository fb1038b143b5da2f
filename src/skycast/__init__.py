"""Skycast - current conditions and 5-day forecasts from Open-Meteo.

Architecture::

    datasources/   External APIs (Open-Meteo forecast, Nominatim geocoding)
    normalize/     Pure raw series -> UI-ready records (codes, units, alignment)
    services/      Weather facade (error translation) and shared HTTP client
    schemas.py     Pydantic output models
    errors.py      Error taxonomy exposed to callers
    config.py      Settings from SKYCAST_* environment variables
    cli.py         Command-line entry point

Data flow: datasources -> normalize -> services.weather -> caller
"""

__version__ = "0.1.0"

from skycast.config import Settings
from skycast.errors import WeatherError
from skycast.schemas import CurrentConditions, DayForecast, Forecast, Units, WeatherReport

__all__ = [
    "CurrentConditions",
    "DayForecast",
    "Forecast",
    "Settings",
    "Units",
    "WeatherError",
    "WeatherReport",
    "__version__",
]
