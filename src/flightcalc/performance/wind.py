"""Runway wind component resolution.

This module splits a wind vector into headwind and crosswind components
relative to a runway heading, and ranks every runway end at an airport by
headwind to surface the best runway for the reported wind.

Runway headings are approximated from the runway identifier (ident "04" is
treated as 040 degrees). True runway bearings can differ by several degrees,
so near-tie rankings between runways with similar headwinds may differ from
what the real bearings would give.

Typical usage example:
    from flightcalc.performance import WindVector, analyze_runways, resolve_wind_components

    components = resolve_wind_components(240.0, 270.0, 15.0)
    print(f"Headwind {components.headwind_kts} kt, crosswind {components.crosswind_kts} kt")

    ranking = analyze_runways(["04/22", "13/31"], WindVector(270.0, 15.0))
    best = ranking[0]
"""

import math
import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from flightcalc.core.errors import InvalidArgumentError
from flightcalc.core.logging_system import get_logger
from flightcalc.core.numeric import (
    normalize_heading,
    normalize_signed,
    require_finite,
    require_non_negative,
    round_half_away,
)

logger = get_logger(__name__)

_RUNWAY_END_PATTERN = re.compile(r"^(\d{1,2})[LRC]?$")

# Raw crosswind below this is trigonometric residue (e.g. sin 180 deg), not a side
CROSSWIND_EPSILON_KTS = 1e-9


class CrosswindSide(Enum):
    """Side of the runway the crosswind blows from."""

    LEFT = "Left"
    RIGHT = "Right"
    NONE = "None"


@dataclass(frozen=True)
class WindVector:
    """Reported wind.

    Attributes:
        direction_degrees: Direction the wind blows from (degrees magnetic).
        speed_kts: Sustained wind speed (knots, >= 0).
        gust_kts: Gust speed (knots), None when no gusts are reported.
    """

    direction_degrees: float
    speed_kts: float
    gust_kts: float | None = None

    def validated(self) -> "WindVector":
        """Return a copy with direction normalized to [0, 360).

        Raises:
            InvalidArgumentError: If any value is non-finite, the speed is
                negative, or the gust is lower than the sustained speed.
        """
        direction = require_finite(self.direction_degrees, "direction_degrees")
        speed = require_non_negative(self.speed_kts, "speed_kts")
        gust = None
        if self.gust_kts is not None:
            gust = require_non_negative(self.gust_kts, "gust_kts")
            if gust < speed:
                raise InvalidArgumentError(
                    f"gust_kts ({gust}) must not be lower than speed_kts ({speed})", "gust_kts"
                )
        return WindVector(normalize_heading(direction), speed, gust)


@dataclass(frozen=True)
class WindComponents:
    """Wind components relative to a runway.

    Attributes:
        headwind_kts: Headwind component (positive) or tailwind (negative).
        crosswind_kts: Crosswind magnitude (always >= 0).
        crosswind_side: Side the crosswind comes from.
        gust_headwind_kts: Headwind component of the gust, if gusts reported.
        gust_crosswind_kts: Crosswind magnitude of the gust, if gusts reported.
    """

    headwind_kts: int
    crosswind_kts: int
    crosswind_side: CrosswindSide
    gust_headwind_kts: int | None = None
    gust_crosswind_kts: int | None = None

    @property
    def is_tailwind(self) -> bool:
        """True when the along-runway component is a tailwind."""
        return self.headwind_kts < 0


@dataclass(frozen=True)
class RunwayWindAnalysis:
    """Wind components for one runway end.

    Attributes:
        ident: Runway end identifier (e.g. "22R").
        heading_degrees: Heading derived from the identifier.
        components: Resolved wind components.
        is_best: True for the top-ranked end when it has a headwind.
    """

    ident: str
    heading_degrees: float
    components: WindComponents
    is_best: bool = False


def _components(delta_rad: float, speed_kts: float) -> tuple[int, int, float]:
    """Rounded headwind and crosswind plus the raw signed crosswind."""
    raw_crosswind = math.sin(delta_rad) * speed_kts
    headwind = round_half_away(math.cos(delta_rad) * speed_kts)
    crosswind = round_half_away(abs(raw_crosswind))
    return headwind, crosswind, raw_crosswind


def resolve_wind_components(
    runway_heading: float,
    wind_direction: float,
    wind_speed: float,
    gust_speed: float | None = None,
) -> WindComponents:
    """Resolve wind into components relative to a runway heading.

    The angle between wind and runway is normalized into (-180, 180] before
    the trigonometry. Components are rounded half away from zero to whole
    knots. The crosswind side follows the sign of the unrounded crosswind
    (positive is from the right), so a light crosswind that rounds to 0 kts
    still reports its side. Calm wind or wind straight along the runway is NONE.

    Args:
        runway_heading: Runway heading (degrees, any finite value).
        wind_direction: Direction the wind blows from (degrees, any finite value).
        wind_speed: Sustained wind speed (knots, >= 0).
        gust_speed: Optional gust speed (knots, >= wind_speed).

    Returns:
        WindComponents for the runway.

    Raises:
        InvalidArgumentError: If inputs are non-finite or speeds are invalid.

    Examples:
        >>> c = resolve_wind_components(240.0, 280.0, 20.0)
        >>> (c.headwind_kts, c.crosswind_kts, c.crosswind_side)
        (15, 13, <CrosswindSide.RIGHT: 'Right'>)
    """
    heading = normalize_heading(require_finite(runway_heading, "runway_heading"))
    wind = WindVector(wind_direction, wind_speed, gust_speed).validated()

    delta = normalize_signed(wind.direction_degrees - heading)
    delta_rad = math.radians(delta)

    headwind, crosswind, raw_crosswind = _components(delta_rad, wind.speed_kts)

    if abs(raw_crosswind) < CROSSWIND_EPSILON_KTS:
        side = CrosswindSide.NONE
    elif raw_crosswind > 0:
        side = CrosswindSide.RIGHT
    else:
        side = CrosswindSide.LEFT

    gust_headwind = gust_crosswind = None
    if wind.gust_kts is not None:
        gust_headwind, gust_crosswind, _ = _components(delta_rad, wind.gust_kts)

    logger.debug(
        "Wind %03.0f@%.0f on heading %03.0f: delta=%.1f head=%d cross=%d %s",
        wind.direction_degrees,
        wind.speed_kts,
        heading,
        delta,
        headwind,
        crosswind,
        side.value,
    )

    return WindComponents(
        headwind_kts=headwind,
        crosswind_kts=crosswind,
        crosswind_side=side,
        gust_headwind_kts=gust_headwind,
        gust_crosswind_kts=gust_crosswind,
    )


def resolve_wind(runway_heading: float, wind: WindVector) -> WindComponents:
    """Resolve a WindVector against a runway heading.

    Args:
        runway_heading: Runway heading (degrees).
        wind: Reported wind.

    Returns:
        WindComponents for the runway.
    """
    return resolve_wind_components(
        runway_heading, wind.direction_degrees, wind.speed_kts, wind.gust_kts
    )


def runway_heading_from_ident(ident: str) -> float:
    """Approximate a runway end's heading from its identifier.

    Parallel-runway suffixes (L/R/C) are ignored and the number is multiplied
    by ten: "04L" -> 40.0, "36" -> 360.0.

    Args:
        ident: Single runway end identifier.

    Returns:
        Approximate magnetic heading in degrees.

    Raises:
        InvalidArgumentError: If the identifier is not a runway number 01-36
            with an optional L/R/C suffix.
    """
    match = _RUNWAY_END_PATTERN.match(ident.strip().upper())
    if not match:
        raise InvalidArgumentError(f"Invalid runway identifier: {ident!r}", "ident")

    number = int(match.group(1))
    if not 1 <= number <= 36:
        raise InvalidArgumentError(f"Runway number out of range 01-36: {ident!r}", "ident")

    return number * 10.0


def split_runway_ident(ident: str) -> list[str]:
    """Split a runway pair identifier into its ends.

    Args:
        ident: Runway identifier such as "04L/22R" or a single end "09".

    Returns:
        List of runway end identifiers, in the order given.
    """
    return [end.strip().upper() for end in ident.split("/") if end.strip()]


def analyze_runways(runway_idents: Iterable[str], wind: WindVector) -> list[RunwayWindAnalysis]:
    """Resolve the wind for every runway end and rank by headwind.

    Every identifier is split into its ends; ends are sorted by headwind,
    strongest first. The sort is stable, so ends with equal headwind keep the
    order in which they were listed. The first end is marked best only when
    it actually has a headwind.

    Args:
        runway_idents: Runway identifiers, e.g. ["04L/22R", "04R/22L", "13/31"].
        wind: Reported wind.

    Returns:
        Ranked list of RunwayWindAnalysis, best first.

    Raises:
        InvalidArgumentError: If any identifier or wind value is invalid.
    """
    wind = wind.validated()

    analyses = []
    for ident in runway_idents:
        for end in split_runway_ident(ident):
            heading = runway_heading_from_ident(end)
            analyses.append(
                RunwayWindAnalysis(
                    ident=end,
                    heading_degrees=heading,
                    components=resolve_wind(heading, wind),
                )
            )

    analyses.sort(key=lambda a: a.components.headwind_kts, reverse=True)

    if analyses and analyses[0].components.headwind_kts > 0:
        top = analyses[0]
        analyses[0] = RunwayWindAnalysis(top.ident, top.heading_degrees, top.components, True)
        logger.debug("Best runway for wind %s: %s", wind, top.ident)

    return analyses
