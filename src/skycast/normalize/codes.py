"""WMO weather code classification.

Open-Meteo reports conditions as WMO Weather Interpretation Codes
(https://open-meteo.com/en/docs). Codes that share meteorological intent
(e.g. drizzle 51/53/55) share an icon but keep distinct descriptions.
Icon ids follow the OpenWeatherMap icon set so they can be fetched as images.

Pure lookups with no external dependencies; every input yields a result.
"""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType
from typing import NamedTuple

ICON_URL_TEMPLATE = "https://openweathermap.org/img/wn/{icon}@2x.png"

UNKNOWN_DESCRIPTION = "Unknown"
DEFAULT_ICON = "01d"
FALLBACK_SYMBOL = "\u2753"


class WeatherCode(IntEnum):
    """WMO codes emitted by Open-Meteo that we classify."""

    CLEAR_SKY = 0
    MAINLY_CLEAR = 1
    PARTLY_CLOUDY = 2
    OVERCAST = 3
    FOG = 45
    RIME_FOG = 48
    LIGHT_DRIZZLE = 51
    MODERATE_DRIZZLE = 53
    DENSE_DRIZZLE = 55
    LIGHT_RAIN = 61
    MODERATE_RAIN = 63
    HEAVY_RAIN = 65
    LIGHT_SNOW = 71
    MODERATE_SNOW = 73
    HEAVY_SNOW = 75
    SNOW_GRAINS = 77
    LIGHT_SHOWERS = 80
    MODERATE_SHOWERS = 81
    VIOLENT_SHOWERS = 82
    THUNDERSTORM = 95
    THUNDERSTORM_HAIL = 96
    THUNDERSTORM_HEAVY_HAIL = 99


class Condition(NamedTuple):
    """Classified weather code."""

    description: str
    icon: str

    @property
    def icon_url(self) -> str:
        return icon_url(self.icon)


_CONDITIONS: MappingProxyType[int, Condition] = MappingProxyType(
    {
        WeatherCode.CLEAR_SKY: Condition("Clear sky", "01d"),
        WeatherCode.MAINLY_CLEAR: Condition("Mainly clear", "02d"),
        WeatherCode.PARTLY_CLOUDY: Condition("Partly cloudy", "03d"),
        WeatherCode.OVERCAST: Condition("Overcast", "04d"),
        WeatherCode.FOG: Condition("Fog", "50d"),
        WeatherCode.RIME_FOG: Condition("Depositing rime fog", "50d"),
        WeatherCode.LIGHT_DRIZZLE: Condition("Light drizzle", "09d"),
        WeatherCode.MODERATE_DRIZZLE: Condition("Moderate drizzle", "09d"),
        WeatherCode.DENSE_DRIZZLE: Condition("Dense drizzle", "09d"),
        WeatherCode.LIGHT_RAIN: Condition("Light rain", "10d"),
        WeatherCode.MODERATE_RAIN: Condition("Moderate rain", "10d"),
        WeatherCode.HEAVY_RAIN: Condition("Heavy rain", "10d"),
        WeatherCode.LIGHT_SNOW: Condition("Light snow", "13d"),
        WeatherCode.MODERATE_SNOW: Condition("Moderate snow", "13d"),
        WeatherCode.HEAVY_SNOW: Condition("Heavy snow", "13d"),
        WeatherCode.SNOW_GRAINS: Condition("Snow grains", "13d"),
        WeatherCode.LIGHT_SHOWERS: Condition("Light rain showers", "09d"),
        WeatherCode.MODERATE_SHOWERS: Condition("Moderate rain showers", "09d"),
        WeatherCode.VIOLENT_SHOWERS: Condition("Violent rain showers", "09d"),
        WeatherCode.THUNDERSTORM: Condition("Thunderstorm", "11d"),
        WeatherCode.THUNDERSTORM_HAIL: Condition("Thunderstorm with hail", "11d"),
        WeatherCode.THUNDERSTORM_HEAVY_HAIL: Condition("Thunderstorm with heavy hail", "11d"),
    }
)

UNKNOWN_CONDITION = Condition(UNKNOWN_DESCRIPTION, DEFAULT_ICON)

# Glyphs for environments that can't load the icon images
_DISPLAY_SYMBOLS: MappingProxyType[str, str] = MappingProxyType(
    {
        "01d": "\u2600\ufe0f",
        "01n": "\U0001f319",
        "02d": "\u26c5",
        "02n": "\u2601\ufe0f",
        "03d": "\u2601\ufe0f",
        "03n": "\u2601\ufe0f",
        "04d": "\u2601\ufe0f",
        "04n": "\u2601\ufe0f",
        "09d": "\U0001f327\ufe0f",
        "09n": "\U0001f327\ufe0f",
        "10d": "\U0001f326\ufe0f",
        "10n": "\U0001f327\ufe0f",
        "11d": "\u26c8\ufe0f",
        "11n": "\u26c8\ufe0f",
        "13d": "\u2744\ufe0f",
        "13n": "\u2744\ufe0f",
        "50d": "\U0001f32b\ufe0f",
        "50n": "\U0001f32b\ufe0f",
    }
)


def classify(code: int) -> Condition:
    """Map a WMO weather code to its description and icon id.

    Codes outside the table yield ``UNKNOWN_CONDITION`` rather than an error.
    """
    return _CONDITIONS.get(code, UNKNOWN_CONDITION)


def icon_url(icon_id: str) -> str:
    """Image URL for an icon id."""
    return ICON_URL_TEMPLATE.format(icon=icon_id)


def to_display_symbol(icon_id: str) -> str:
    """Fallback glyph for an icon id, ``FALLBACK_SYMBOL`` if unrecognized."""
    return _DISPLAY_SYMBOLS.get(icon_id, FALLBACK_SYMBOL)
