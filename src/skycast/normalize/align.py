"""Alignment of hourly samples to a reference hour or calendar date.

All instants are naive local times in the timezone the provider reports
(Open-Meteo with ``timezone=auto``). Callers must pass the reference
instant in that same timezone.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from skycast.errors import AlignmentOutOfRangeError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from datetime import date, datetime

    from skycast.datasources.openmeteo.models import HourlyRecord


def current_hour_index(samples: Sequence[HourlyRecord], now: datetime) -> int:
    """
    Index of the hourly sample covering the hour of ``now``.

    The provider emits one sample per hour, so matching compares the
    calendar date and hour-of-day only; minutes and seconds are ignored.

    Raises:
        AlignmentOutOfRangeError: If no sample covers that hour, e.g. the
            payload is shorter than a day or ``now`` lies outside its range.
    """
    target = (now.date(), now.hour)
    for i, sample in enumerate(samples):
        if (sample.time.date(), sample.time.hour) == target:
            return i
    raise AlignmentOutOfRangeError(
        f"No hourly sample for {now:%Y-%m-%d %H}:00 "
        f"(series has {len(samples)} samples)"
    )


def indices_for_date(samples: Sequence[HourlyRecord], day: date) -> list[int]:
    """Indices of every hourly sample whose calendar date equals ``day``."""
    return [i for i, sample in enumerate(samples) if sample.time.date() == day]


def bucket_by_date(
    samples: Sequence[HourlyRecord], days: Iterable[date]
) -> dict[date, list[HourlyRecord]]:
    """
    Partition hourly samples into calendar-day buckets.

    Args:
        samples: Hourly records in time order.
        days: Dates to bucket into. Every date gets a key, possibly with an
            empty list.

    Returns:
        Dict mapping each date to its samples in original order. Samples on
        dates not listed are left out; no sample lands in two buckets.
    """
    buckets: dict[date, list[HourlyRecord]] = {day: [] for day in days}
    for sample in samples:
        bucket = buckets.get(sample.time.date())
        if bucket is not None:
            bucket.append(sample)
    return buckets
