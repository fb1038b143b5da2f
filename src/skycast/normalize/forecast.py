"""Aggregate hourly and daily series into a multi-day forecast."""

from __future__ import annotations

import statistics
from typing import TYPE_CHECKING

from skycast.normalize.align import bucket_by_date
from skycast.normalize.codes import classify
from skycast.normalize.units import convert_pressure, round_half_up, round_int
from skycast.schemas import DayForecast, Forecast, HourlySample

if TYPE_CHECKING:
    from skycast.datasources.openmeteo.models import DailyRecord, HourlyRecord, RawSeries
    from skycast.schemas import PlaceLabel

FORECAST_DAYS = 5


def normalize_hour(record: HourlyRecord) -> HourlySample:
    """Round and classify one hourly record."""
    condition = classify(record.weather_code)
    return HourlySample(
        dt=record.time,
        temp=round_int(record.temperature),
        feels_like=round_int(record.feels_like),
        humidity=round_int(record.humidity),
        pressure=round_int(convert_pressure(record.pressure_hpa)),
        wind_speed=record.wind_speed,
        wind_deg=record.wind_direction,
        clouds=round_int(record.cloud_cover),
        description=condition.description,
        icon=condition.icon,
        icon_url=condition.icon_url,
    )


def summarize_day(day: DailyRecord, hourly: list[HourlySample]) -> DayForecast:
    """
    Build one day's forecast from its daily record and bucketed hours.

    Min/max temperature and the condition come from the daily axis. Humidity,
    pressure and wind speed are means over ``hourly`` (of the already
    rounded hourly values) and are None when the day has no hourly samples.
    """
    condition = classify(day.weather_code)

    humidity: int | None = None
    pressure: int | None = None
    wind_speed: float | None = None
    if hourly:
        humidity = round_int(statistics.fmean(h.humidity for h in hourly))
        pressure = round_int(statistics.fmean(h.pressure for h in hourly))
        wind_speed = round_half_up(statistics.fmean(h.wind_speed for h in hourly), 1)

    return DayForecast(
        date=day.date,
        temp_min=round_int(day.temp_min),
        temp_max=round_int(day.temp_max),
        temp_avg=round_int((day.temp_min + day.temp_max) / 2),
        humidity=humidity,
        pressure=pressure,
        wind_speed=wind_speed,
        description=condition.description,
        icon=condition.icon,
        icon_url=condition.icon_url,
        hourly=tuple(hourly),
    )


def aggregate_forecast(
    series: RawSeries, label: PlaceLabel, days: int = FORECAST_DAYS
) -> Forecast:
    """
    Build the multi-day forecast.

    Takes the first ``min(days, len(series.daily))`` daily entries in order
    and gives each the hourly samples falling on its calendar date. Days are
    kept even when they have fewer than 24 (or zero) hourly samples.

    Args:
        series: Parsed forecast response.
        label: City/country label for the forecast.
        days: Maximum number of days to emit.

    Returns:
        Forecast with days in ascending date order.

    Raises:
        ValueError: If ``days`` is less than 1.
    """
    if days < 1:
        raise ValueError(f"days must be at least 1, got {days}")

    daily = series.daily[:days]
    buckets = bucket_by_date(series.hourly, (day.date for day in daily))

    summaries: list[DayForecast] = []
    for day in daily:
        # pop so a repeated date can't claim the same samples twice
        hours = [normalize_hour(h) for h in buckets.pop(day.date, [])]
        summaries.append(summarize_day(day, hours))

    return Forecast(city=label.city, country=label.country, days=tuple(summaries))
