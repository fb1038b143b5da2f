"""Tests for unit conversion and rounding helpers."""

from __future__ import annotations

import pytest

from skycast.normalize.units import (
    convert_pressure,
    round_half_up,
    round_int,
    wind_direction_label,
)


class TestConvertPressure:
    def test_standard_atmosphere(self) -> None:
        """1013.25 hPa is about 760 mmHg."""
        assert convert_pressure(1013.25) == pytest.approx(760.0, abs=0.01)
        assert round_int(convert_pressure(1013.25)) == 760

    def test_unrounded(self) -> None:
        assert convert_pressure(1000) == pytest.approx(750.062)

    def test_zero(self) -> None:
        assert convert_pressure(0) == 0


class TestRounding:
    """Half-up rounding, unlike Python's round()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(2.5, 3), (3.5, 4), (2.4, 2), (-2.5, -2), (-2.6, -3), (0.0, 0)],
    )
    def test_round_int(self, value: float, expected: int) -> None:
        assert round_int(value) == expected

    def test_round_int_returns_int(self) -> None:
        assert isinstance(round_int(7.2), int)

    def test_round_half_up_one_decimal(self) -> None:
        assert round_half_up(2.25, 1) == pytest.approx(2.3)
        assert round_half_up(2.24, 1) == pytest.approx(2.2)

    def test_round_half_up_default_digits(self) -> None:
        assert round_half_up(4.5) == 5


class TestWindDirectionLabel:
    """Test eight-way compass labels."""

    @pytest.mark.parametrize(
        ("degrees", "label"),
        [
            (0, "N"),
            (45, "NE"),
            (90, "E"),
            (135, "SE"),
            (180, "S"),
            (225, "SW"),
            (270, "W"),
            (315, "NW"),
        ],
    )
    def test_cardinal_and_intercardinal(self, degrees: float, label: str) -> None:
        assert wind_direction_label(degrees) == label

    @pytest.mark.parametrize(
        ("below", "at", "expected_below", "expected_at"),
        [
            (22.4, 22.5, "N", "NE"),
            (67.4, 67.5, "NE", "E"),
            (157.4, 157.5, "SE", "S"),
            (337.4, 337.5, "NW", "N"),
        ],
    )
    def test_octant_boundaries(
        self, below: float, at: float, expected_below: str, expected_at: str
    ) -> None:
        """A boundary value rounds up into the next octant."""
        assert wind_direction_label(below) == expected_below
        assert wind_direction_label(at) == expected_at

    def test_wraps_at_360(self) -> None:
        assert wind_direction_label(360) == "N"
        assert wind_direction_label(450) == "E"

    def test_negative_degrees(self) -> None:
        assert wind_direction_label(-45) == "NW"
        assert wind_direction_label(-90) == "W"

    def test_periodicity(self) -> None:
        for degrees in range(-720, 721, 5):
            assert wind_direction_label(degrees) == wind_direction_label(degrees + 360)
