"""
Tests for suitability scoring.
"""

from __future__ import annotations

from datetime import date

import pytest

from bee_heatmap import scoring

NORTH = 45.0
SOUTH = -33.9
PEAK_NORTH = 5  # June
PEAK_SOUTH = 11  # December


class TestTemperatureFactor:
    """Test temperature bands."""

    @pytest.mark.parametrize("temp", [20.0, 25.0, 32.0])
    def test_optimal(self, temp: float) -> None:
        assert scoring.temperature_factor(temp) == 1.0

    @pytest.mark.parametrize("temp", [15.1, 19.9, 32.1, 37.9])
    def test_tolerable(self, temp: float) -> None:
        assert scoring.temperature_factor(temp) == 0.5

    @pytest.mark.parametrize("temp", [-5.0, 15.0, 38.0, 45.0])
    def test_too_cold_or_hot(self, temp: float) -> None:
        assert scoring.temperature_factor(temp) == 0.0


class TestSeasonalityFactor:
    """Test hemisphere-aware seasonal tables."""

    @pytest.mark.parametrize(
        ("month", "expected"),
        [(0, 0.1), (1, 0.1), (2, 1.0), (7, 1.0), (8, 0.5), (9, 0.5), (10, 0.1), (11, 0.1)],
    )
    def test_northern(self, month: int, expected: float) -> None:
        assert scoring.seasonality_factor(month, NORTH) == expected

    @pytest.mark.parametrize(
        ("month", "expected"),
        [(0, 1.0), (1, 1.0), (2, 0.5), (3, 0.5), (4, 0.1), (7, 0.1), (8, 1.0), (11, 1.0)],
    )
    def test_southern(self, month: int, expected: float) -> None:
        assert scoring.seasonality_factor(month, SOUTH) == expected

    def test_equator_is_southern(self) -> None:
        assert scoring.seasonality_factor(0, 0.0) == 1.0

    def test_hemispheres_differ_in_october(self) -> None:
        assert scoring.seasonality_factor(9, 10.0) == 0.5
        assert scoring.seasonality_factor(9, -10.0) == 1.0

    @pytest.mark.parametrize("month", [-1, 12])
    def test_rejects_bad_month(self, month: int) -> None:
        with pytest.raises(ValueError):
            scoring.seasonality_factor(month, NORTH)


class TestScore:
    """Test the combined weight."""

    @pytest.mark.parametrize("temp", [20.0, 26.5, 32.0])
    def test_peak_conditions(self, temp: float) -> None:
        assert scoring.score(temp, True, NORTH, PEAK_NORTH) == 1.0
        assert scoring.score(temp, True, SOUTH, PEAK_SOUTH) == 1.0

    @pytest.mark.parametrize("temp", [-10.0, 16.0, 25.0, 35.0, 50.0])
    @pytest.mark.parametrize("month", range(12))
    def test_unvegetated_capped(self, temp: float, month: int) -> None:
        assert scoring.score(temp, False, NORTH, month) <= 0.05

    def test_unvegetated_residual(self) -> None:
        assert scoring.score(25.0, False, NORTH, PEAK_NORTH) == pytest.approx(0.05)

    @pytest.mark.parametrize("vegetated", [True, False])
    def test_missing_temperature_fails_closed(self, vegetated: bool) -> None:
        assert scoring.score(None, vegetated, NORTH, PEAK_NORTH) == 0.0

    def test_factors_multiply(self) -> None:
        # tolerable temp x shoulder season
        assert scoring.score(17.0, True, NORTH, 8) == pytest.approx(0.25)
        # unvegetated x tolerable x dormant
        assert scoring.score(17.0, False, SOUTH, 5) == pytest.approx(0.0025)

    def test_hemisphere_switch(self) -> None:
        assert scoring.score(25.0, True, 10.0, 9) == 0.5
        assert scoring.score(25.0, True, -10.0, 9) == 1.0

    def test_month_zero_is_january(self) -> None:
        assert scoring.score(25.0, True, -10.0, 0) == 1.0
        assert scoring.score(25.0, True, 10.0, 0) == pytest.approx(0.1)
        assert scoring.score(25.0, True, 10.0, 2) == 1.0


class TestCurrentMonth:
    def test_from_date(self) -> None:
        assert scoring.current_month(date(2024, 10, 3)) == 9

    def test_defaults_to_today(self) -> None:
        assert scoring.current_month() == date.today().month - 1
