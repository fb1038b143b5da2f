"""Build the current-conditions record from a forecast series."""

from __future__ import annotations

from typing import TYPE_CHECKING

from skycast.errors import MalformedPayloadError
from skycast.normalize.align import current_hour_index
from skycast.normalize.codes import classify
from skycast.normalize.units import convert_pressure, round_int, wind_direction_label
from skycast.schemas import CurrentConditions

if TYPE_CHECKING:
    from datetime import datetime

    from skycast.datasources.openmeteo.models import RawSeries
    from skycast.schemas import PlaceLabel


def build_current_conditions(
    series: RawSeries, label: PlaceLabel, now: datetime
) -> CurrentConditions:
    """
    Combine snapshot, hourly and daily data into current conditions.

    Sources per field:
      - temperature, wind, weather code, observation time: the
        ``current_weather`` snapshot as reported, never interpolated.
      - feels-like, humidity, pressure, cloud cover, visibility: the hourly
        sample aligned to the hour of ``now``.
      - min/max temperature: extremes across *all* returned days, not just
        today.
      - sunrise/sunset: the first daily entry (the provider starts the daily
        axis at local today).

    Args:
        series: Parsed forecast response.
        label: City/country label for the report.
        now: Reference instant, naive, in the provider's local time.

    Raises:
        MalformedPayloadError: If the daily axis is empty.
        AlignmentOutOfRangeError: If no hourly sample covers ``now``.
    """
    if not series.daily:
        raise MalformedPayloadError("Daily series is empty")

    hour = series.hourly[current_hour_index(series.hourly, now)]
    today = series.daily[0]
    snapshot = series.current
    condition = classify(snapshot.weather_code)

    return CurrentConditions(
        temp=round_int(snapshot.temperature),
        temp_min=round_int(min(day.temp_min for day in series.daily)),
        temp_max=round_int(max(day.temp_max for day in series.daily)),
        feels_like=round_int(hour.feels_like),
        humidity=round_int(hour.humidity),
        pressure=round_int(convert_pressure(hour.pressure_hpa)),
        wind_speed=snapshot.wind_speed,
        wind_deg=snapshot.wind_direction,
        wind_direction=wind_direction_label(snapshot.wind_direction),
        clouds=round_int(hour.cloud_cover),
        visibility=round_int(hour.visibility),
        description=condition.description,
        icon=condition.icon,
        icon_url=condition.icon_url,
        city_name=label.city,
        country=label.country,
        sunrise=today.sunrise,
        sunset=today.sunset,
        observed_at=snapshot.time,
    )
