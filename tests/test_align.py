"""Tests for aligning hourly samples to hours and calendar dates."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import TYPE_CHECKING

import pytest

from skycast.datasources.openmeteo import RawSeries
from skycast.errors import AlignmentOutOfRangeError
from skycast.normalize.align import bucket_by_date, current_hour_index, indices_for_date

if TYPE_CHECKING:
    from conftest import PayloadFactory


class TestCurrentHourIndex:
    """Test matching a reference instant to its hourly sample."""

    def test_matches_hour(self, series: RawSeries) -> None:
        assert current_hour_index(series.hourly, datetime(2024, 1, 1, 10, 0)) == 10

    def test_ignores_minutes(self, series: RawSeries) -> None:
        assert current_hour_index(series.hourly, datetime(2024, 1, 1, 10, 59, 59)) == 10

    def test_matches_date_as_well_as_hour(self, series: RawSeries) -> None:
        """Hour 10 of the second day is a different sample."""
        assert current_hour_index(series.hourly, datetime(2024, 1, 2, 10, 5)) == 34

    def test_after_payload_range(self, series: RawSeries) -> None:
        with pytest.raises(AlignmentOutOfRangeError):
            current_hour_index(series.hourly, datetime(2024, 1, 8, 0, 0))

    def test_before_payload_range(self, series: RawSeries) -> None:
        with pytest.raises(AlignmentOutOfRangeError):
            current_hour_index(series.hourly, datetime(2023, 12, 31, 23, 0))

    def test_short_payload(self, make_payload: PayloadFactory) -> None:
        """A payload covering only the morning has no sample for the afternoon."""
        short = RawSeries.from_payload(make_payload(days=1, hours=12))
        assert current_hour_index(short.hourly, datetime(2024, 1, 1, 11, 0)) == 11
        with pytest.raises(AlignmentOutOfRangeError):
            current_hour_index(short.hourly, datetime(2024, 1, 1, 15, 0))

    def test_empty_series(self) -> None:
        with pytest.raises(AlignmentOutOfRangeError):
            current_hour_index((), datetime(2024, 1, 1, 0, 0))


class TestIndicesForDate:
    def test_full_day(self, series: RawSeries) -> None:
        assert indices_for_date(series.hourly, date(2024, 1, 2)) == list(range(24, 48))

    def test_date_not_in_series(self, series: RawSeries) -> None:
        assert indices_for_date(series.hourly, date(2024, 2, 1)) == []

    def test_partial_day(self, make_payload: PayloadFactory) -> None:
        partial = RawSeries.from_payload(make_payload(days=2, hours=30))
        assert indices_for_date(partial.hourly, date(2024, 1, 2)) == list(range(24, 30))


class TestBucketByDate:
    """Test partitioning hourly samples into calendar days."""

    def test_every_sample_in_exactly_one_bucket(self, series: RawSeries) -> None:
        days = [date(2024, 1, 1) + timedelta(days=d) for d in range(7)]
        buckets = bucket_by_date(series.hourly, days)

        bucketed = [sample for day in days for sample in buckets[day]]
        assert bucketed == list(series.hourly)
        assert len(set(bucketed)) == len(series.hourly)

    def test_bucket_matches_indices_for_date(self, series: RawSeries) -> None:
        day = date(2024, 1, 3)
        buckets = bucket_by_date(series.hourly, [day])
        assert buckets[day] == [series.hourly[i] for i in indices_for_date(series.hourly, day)]

    def test_bucket_preserves_time_order(self, series: RawSeries) -> None:
        buckets = bucket_by_date(series.hourly, [date(2024, 1, 1)])
        times = [s.time for s in buckets[date(2024, 1, 1)]]
        assert times == sorted(times)
        assert all(t.date() == date(2024, 1, 1) for t in times)

    def test_unlisted_dates_are_dropped(self, series: RawSeries) -> None:
        buckets = bucket_by_date(series.hourly, [date(2024, 1, 1)])
        assert list(buckets) == [date(2024, 1, 1)]
        assert len(buckets[date(2024, 1, 1)]) == 24

    def test_empty_bucket(self, series: RawSeries) -> None:
        buckets = bucket_by_date(series.hourly, [date(2030, 1, 1)])
        assert buckets == {date(2030, 1, 1): []}

    def test_calendar_date_not_rolling_window(self, make_payload: PayloadFactory) -> None:
        """Samples bucket by calendar date even when the axis starts mid-day."""
        payload = make_payload(days=2, hours=24)
        payload["hourly"]["time"] = [
            (datetime(2024, 1, 1, 12) + timedelta(hours=i)).strftime("%Y-%m-%dT%H:%M")
            for i in range(24)
        ]
        shifted = RawSeries.from_payload(payload)
        buckets = bucket_by_date(shifted.hourly, [date(2024, 1, 1), date(2024, 1, 2)])
        assert len(buckets[date(2024, 1, 1)]) == 12
        assert len(buckets[date(2024, 1, 2)]) == 12
