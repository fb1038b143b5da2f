"""Open-Meteo forecast data models.

The API returns each axis as parallel arrays keyed by variable name.
``RawSeries.from_payload`` zips them once into per-sample records so the
normalize package never re-derives alignment from raw indices.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Any

from skycast.errors import MalformedPayloadError

# Payload key -> record field, per axis
_HOURLY_FIELDS = {
    "temperature_2m": "temperature",
    "apparent_temperature": "feels_like",
    "relative_humidity_2m": "humidity",
    "pressure_msl": "pressure_hpa",
    "cloudcover": "cloud_cover",
    "visibility": "visibility",
    "windspeed_10m": "wind_speed",
    "winddirection_10m": "wind_direction",
    "weathercode": "weather_code",
}

_DAILY_FIELDS = {
    "temperature_2m_min": "temp_min",
    "temperature_2m_max": "temp_max",
    "weathercode": "weather_code",
}

_SNAPSHOT_FIELDS = {
    "temperature": "temperature",
    "windspeed": "wind_speed",
    "winddirection": "wind_direction",
    "weathercode": "weather_code",
}


@dataclass(frozen=True)
class CurrentSnapshot:
    """Instantaneous conditions at fetch time (``current_weather``)."""

    time: datetime
    temperature: float
    wind_speed: float
    wind_direction: float
    weather_code: int


@dataclass(frozen=True)
class HourlyRecord:
    """One sample of the hourly axis."""

    time: datetime
    temperature: float
    feels_like: float
    humidity: float
    pressure_hpa: float
    cloud_cover: float
    visibility: float
    wind_speed: float
    wind_direction: float
    weather_code: int


@dataclass(frozen=True)
class DailyRecord:
    """One sample of the daily axis."""

    date: date
    temp_min: float
    temp_max: float
    sunrise: datetime
    sunset: datetime
    weather_code: int


@dataclass(frozen=True)
class RawSeries:
    """A validated Open-Meteo forecast response."""

    latitude: float
    longitude: float
    utc_offset_seconds: int
    current: CurrentSnapshot
    hourly: tuple[HourlyRecord, ...]
    daily: tuple[DailyRecord, ...]

    def to_local(self, instant: datetime) -> datetime:
        """Convert an aware instant to the provider's naive local time."""
        tz = timezone(timedelta(seconds=self.utc_offset_seconds))
        return instant.astimezone(tz).replace(tzinfo=None)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> RawSeries:
        """
        Validate and parse a raw forecast response.

        Raises:
            MalformedPayloadError: If the body is not a JSON object,
                ``current_weather``, ``hourly`` or ``daily`` (or any
                required array) is missing, arrays on one
                axis differ in length, a value is null, or a time string
                can't be parsed.
        """
        if not isinstance(payload, dict):
            raise MalformedPayloadError(
                f"Response is not a JSON object (got {type(payload).__name__})"
            )

        current = _section(payload, "current_weather")
        hourly = _section(payload, "hourly")
        daily = _section(payload, "daily")

        snapshot = CurrentSnapshot(
            time=_parse_datetime(_value(current, "time", "current_weather")),
            **{
                field: _number(_value(current, key, "current_weather"), key)
                for key, field in _SNAPSHOT_FIELDS.items()
            },
        )

        hourly_columns = _columns(hourly, "hourly", ["time", *_HOURLY_FIELDS])
        hourly_records = tuple(
            HourlyRecord(
                time=_parse_datetime(row["time"]),
                **{field: _number(row[key], key) for key, field in _HOURLY_FIELDS.items()},
            )
            for row in _rows(hourly_columns)
        )

        daily_columns = _columns(daily, "daily", ["time", "sunrise", "sunset", *_DAILY_FIELDS])
        daily_records = tuple(
            DailyRecord(
                date=_parse_date(row["time"]),
                sunrise=_parse_datetime(row["sunrise"]),
                sunset=_parse_datetime(row["sunset"]),
                **{field: _number(row[key], key) for key, field in _DAILY_FIELDS.items()},
            )
            for row in _rows(daily_columns)
        )

        return cls(
            latitude=float(_number(payload.get("latitude", 0.0), "latitude")),
            longitude=float(_number(payload.get("longitude", 0.0), "longitude")),
            utc_offset_seconds=int(
                _number(payload.get("utc_offset_seconds", 0), "utc_offset_seconds")
            ),
            current=snapshot,
            hourly=hourly_records,
            daily=daily_records,
        )


# ---------------------------------------------------------------------------
# Parsing helpers
# ---------------------------------------------------------------------------


def _section(payload: dict[str, Any], key: str) -> dict[str, Any]:
    section = payload.get(key)
    if not isinstance(section, dict):
        raise MalformedPayloadError(f"Response has no '{key}' section")
    return section


def _value(section: dict[str, Any], key: str, where: str) -> Any:
    if section.get(key) is None:
        raise MalformedPayloadError(f"Missing '{where}.{key}'")
    return section[key]


def _columns(section: dict[str, Any], where: str, keys: list[str]) -> dict[str, list[Any]]:
    """Pull the required arrays of one axis and check they line up."""
    columns: dict[str, list[Any]] = {}
    for key in keys:
        column = section.get(key)
        if not isinstance(column, list):
            raise MalformedPayloadError(f"Missing array '{where}.{key}'")
        columns[key] = column

    lengths = {len(column) for column in columns.values()}
    if len(lengths) > 1:
        raise MalformedPayloadError(
            f"Arrays in '{where}' have different lengths: {sorted(lengths)}"
        )
    return columns


def _rows(columns: dict[str, list[Any]]) -> list[dict[str, Any]]:
    keys = list(columns)
    return [dict(zip(keys, values, strict=True)) for values in zip(*columns.values(), strict=True)]


def _number(value: Any, key: str) -> Any:
    if value is None or isinstance(value, bool) or not isinstance(value, int | float):
        raise MalformedPayloadError(f"Expected a number for '{key}', got {value!r}")
    return value


def _parse_datetime(value: Any) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except (TypeError, ValueError) as exc:
        raise MalformedPayloadError(f"Invalid timestamp {value!r}") from exc


def _parse_date(value: Any) -> date:
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError) as exc:
        raise MalformedPayloadError(f"Invalid date {value!r}") from exc
