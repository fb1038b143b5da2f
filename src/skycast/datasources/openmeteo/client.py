"""Open-Meteo API client constants and shared configuration.

API docs: https://open-meteo.com/en/docs
"""

OPEN_METEO_API = "https://api.open-meteo.com/v1/forecast"

# Hourly variables we request from Open-Meteo
HOURLY_VARS = [
    "temperature_2m",
    "apparent_temperature",
    "relative_humidity_2m",
    "pressure_msl",
    "cloudcover",
    "visibility",
    "windspeed_10m",
    "winddirection_10m",
    "weathercode",
]

# Daily variables we request from Open-Meteo
DAILY_VARS = [
    "temperature_2m_max",
    "temperature_2m_min",
    "sunrise",
    "sunset",
    "weathercode",
]

DEFAULT_FORECAST_DAYS = 7
