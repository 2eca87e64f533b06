"""Tests for runway wind component resolution."""

import math

import pytest

from flightcalc.core.errors import InvalidArgumentError
from flightcalc.performance import (
    CrosswindSide,
    WindVector,
    analyze_runways,
    resolve_wind,
    resolve_wind_components,
    runway_heading_from_ident,
)


class TestResolveWindComponents:
    """Test single runway wind resolution."""

    def test_worked_example(self) -> None:
        """Test 280 at 20 on runway 24: 40 degrees off from the right."""
        c = resolve_wind_components(240.0, 280.0, 20.0)

        assert c.headwind_kts == 15  # 20 x cos 40 = 15.32
        assert c.crosswind_kts == 13  # 20 x sin 40 = 12.86
        assert c.crosswind_side is CrosswindSide.RIGHT

    def test_crosswind_from_left(self) -> None:
        """Test wind left of the runway heading."""
        c = resolve_wind_components(360.0, 330.0, 20.0)

        assert c.headwind_kts == 17
        assert c.crosswind_kts == 10
        assert c.crosswind_side is CrosswindSide.LEFT

    @pytest.mark.parametrize(
        ("direction", "expected_side"),
        [(5.0, CrosswindSide.RIGHT), (355.0, CrosswindSide.LEFT), (175.0, CrosswindSide.RIGHT)],
    )
    def test_light_crosswind_keeps_side(
        self, direction: float, expected_side: CrosswindSide
    ) -> None:
        """Test a crosswind that rounds to 0 kts still reports its side."""
        c = resolve_wind_components(0.0, direction, 3.0)  # 3 x sin 5 = 0.26 kt

        assert c.crosswind_kts == 0
        assert c.crosswind_side is expected_side

    @pytest.mark.parametrize("heading", [0.0, 40.0, 90.0, 180.0, 275.0, 359.0])
    @pytest.mark.parametrize("speed", [0.0, 7.0, 15.0, 42.0])
    def test_wind_straight_down_runway(self, heading: float, speed: float) -> None:
        """Test wind aligned with the runway is all headwind."""
        c = resolve_wind_components(heading, heading, speed)

        assert c.headwind_kts == speed
        assert c.crosswind_kts == 0
        assert c.crosswind_side is CrosswindSide.NONE

    @pytest.mark.parametrize("heading", [0.0, 40.0, 90.0, 180.0, 275.0])
    @pytest.mark.parametrize("speed", [7.0, 15.0, 42.0])
    def test_wind_ninety_degrees_off(self, heading: float, speed: float) -> None:
        """Test a direct crosswind has no headwind component."""
        c = resolve_wind_components(heading, heading + 90.0, speed)

        assert c.headwind_kts == 0
        assert c.crosswind_kts == speed
        assert c.crosswind_side is CrosswindSide.RIGHT

    def test_direct_tailwind(self) -> None:
        """Test wind from behind is a negative headwind with no side."""
        c = resolve_wind_components(90.0, 270.0, 12.0)

        assert c.headwind_kts == -12
        assert c.is_tailwind
        assert c.crosswind_kts == 0
        assert c.crosswind_side is CrosswindSide.NONE

    @pytest.mark.parametrize("runway", [0.0, 45.0, 123.0, 359.0])
    @pytest.mark.parametrize("direction", [0.0, 17.0, 190.0, 300.0])
    def test_angle_normalization_invariance(self, runway: float, direction: float) -> None:
        """Test full turns added to the wind direction change nothing."""
        base = resolve_wind_components(runway, direction, 23.0)

        assert resolve_wind_components(runway, direction + 360.0, 23.0) == base
        assert resolve_wind_components(runway, direction - 360.0, 23.0) == base

    def test_out_of_range_headings_accepted(self) -> None:
        """Test headings outside [0, 360) are taken modulo 360."""
        assert resolve_wind_components(600.0, -90.0, 10.0) == resolve_wind_components(
            240.0, 270.0, 10.0
        )

    def test_gust_components(self) -> None:
        """Test gust components are resolved with the same geometry."""
        c = resolve_wind_components(240.0, 280.0, 20.0, gust_speed=30.0)

        assert c.gust_headwind_kts == 23  # 30 x cos 40 = 22.98
        assert c.gust_crosswind_kts == 19  # 30 x sin 40 = 19.28
        assert c.headwind_kts == 15

    def test_no_gust_components_without_gust(self) -> None:
        """Test gust fields stay empty when no gust is reported."""
        c = resolve_wind_components(240.0, 270.0, 15.0)

        assert c.gust_headwind_kts is None
        assert c.gust_crosswind_kts is None

    @pytest.mark.parametrize(
        ("runway", "direction", "speed"),
        [(math.nan, 270.0, 10.0), (240.0, math.inf, 10.0), (240.0, 270.0, -math.inf)],
    )
    def test_rejects_non_finite(self, runway: float, direction: float, speed: float) -> None:
        """Test non-finite inputs are rejected."""
        with pytest.raises(InvalidArgumentError):
            resolve_wind_components(runway, direction, speed)

    def test_rejects_negative_speed(self) -> None:
        """Test negative wind speed is rejected."""
        with pytest.raises(InvalidArgumentError, match="speed_kts"):
            resolve_wind_components(240.0, 270.0, -5.0)

    def test_rejects_gust_below_speed(self) -> None:
        """Test a gust lower than the sustained wind is rejected."""
        with pytest.raises(InvalidArgumentError, match="gust_kts"):
            resolve_wind_components(240.0, 270.0, 15.0, gust_speed=10.0)

    def test_resolve_wind_vector(self) -> None:
        """Test resolving a WindVector matches the scalar form."""
        wind = WindVector(270.0, 15.0, 25.0)
        assert resolve_wind(240.0, wind) == resolve_wind_components(240.0, 270.0, 15.0, 25.0)


class TestWindVector:
    """Test WindVector validation."""

    def test_validated_normalizes_direction(self) -> None:
        """Test direction 360 becomes 0."""
        assert WindVector(360.0, 10.0).validated().direction_degrees == 0.0

    def test_validated_is_new_instance(self) -> None:
        """Test validation does not mutate the original."""
        wind = WindVector(-90.0, 10.0)
        validated = wind.validated()

        assert wind.direction_degrees == -90.0
        assert validated.direction_degrees == 270.0


class TestRunwayHeadingFromIdent:
    """Test runway identifier parsing."""

    @pytest.mark.parametrize(
        ("ident", "expected"),
        [("04", 40.0), ("4", 40.0), ("22R", 220.0), ("13L", 130.0), ("36C", 360.0), ("09", 90.0)],
    )
    def test_heading_is_number_times_ten(self, ident: str, expected: float) -> None:
        """Test the ident x 10 approximation."""
        assert runway_heading_from_ident(ident) == expected

    @pytest.mark.parametrize("ident", ["", "H1", "RW04", "37", "00", "04X", "04L/22R"])
    def test_rejects_invalid_idents(self, ident: str) -> None:
        """Test malformed identifiers are rejected."""
        with pytest.raises(InvalidArgumentError):
            runway_heading_from_ident(ident)


class TestAnalyzeRunways:
    """Test per-airport runway ranking."""

    def test_both_ends_ranked_by_headwind(self) -> None:
        """Test each runway contributes both ends, best headwind first."""
        ranking = analyze_runways(["04/22", "13/31"], WindVector(270.0, 15.0))

        assert [r.ident for r in ranking] == ["31", "22", "04", "13"]
        assert [r.components.headwind_kts for r in ranking] == [11, 10, -10, -11]
        assert ranking[0].is_best
        assert not any(r.is_best for r in ranking[1:])

    def test_ties_keep_input_order(self) -> None:
        """Test parallel runways with equal headwind keep the listed order."""
        ranking = analyze_runways(["04L/22R", "04R/22L"], WindVector(220.0, 10.0))

        assert [r.ident for r in ranking] == ["22R", "22L", "04L", "04R"]
        assert ranking[0].is_best
        assert not ranking[1].is_best

    def test_no_best_without_headwind(self) -> None:
        """Test no end is flagged when every end has zero headwind."""
        ranking = analyze_runways(["18/36"], WindVector(90.0, 10.0))

        assert all(r.components.headwind_kts == 0 for r in ranking)
        assert not any(r.is_best for r in ranking)

    def test_calm_wind(self) -> None:
        """Test calm wind gives zero components everywhere."""
        ranking = analyze_runways(["09/27"], WindVector(0.0, 0.0))

        assert [r.ident for r in ranking] == ["09", "27"]
        assert all(r.components.crosswind_side is CrosswindSide.NONE for r in ranking)

    def test_empty_runway_list(self) -> None:
        """Test an airport without runways gives an empty ranking."""
        assert analyze_runways([], WindVector(270.0, 10.0)) == []

    def test_invalid_ident_rejected(self) -> None:
        """Test a bad identifier anywhere fails the analysis."""
        with pytest.raises(InvalidArgumentError):
            analyze_runways(["04/22", "XX"], WindVector(270.0, 10.0))
