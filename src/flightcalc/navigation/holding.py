"""Holding pattern entry classification.

Chooses between the three standard entries (Direct, Teardrop, Parallel) from
the aircraft heading relative to the reciprocal of the inbound course.

The sector boundaries sit at 70 and 110 degrees from the reciprocal. Which
side of a boundary an exact value falls on differs between right and left
patterns:

    Right turns: Teardrop (0, 70), Parallel (-110, 0], Direct otherwise.
    Left turns:  Teardrop (-70, 0), Parallel [0, 110), Direct otherwise.

Typical usage example:
    from flightcalc.navigation import HoldingEntryInputs, TurnDirection, classify_holding_entry

    result = classify_holding_entry(HoldingEntryInputs(360.0, 150.0, TurnDirection.RIGHT))
    print(result.entry_type.value)  # Parallel
"""

from dataclasses import dataclass
from enum import Enum

from flightcalc.core.errors import InvalidArgumentError
from flightcalc.core.logging_system import get_logger
from flightcalc.core.numeric import normalize_heading, normalize_signed, require_finite

logger = get_logger(__name__)

TEARDROP_SECTOR_DEG = 70.0
PARALLEL_SECTOR_DEG = 110.0


class TurnDirection(Enum):
    """Direction of the turns in the holding pattern."""

    RIGHT = "Right"
    LEFT = "Left"


class HoldingEntry(Enum):
    """Holding pattern entry procedure."""

    DIRECT = "Direct"
    TEARDROP = "Teardrop"
    PARALLEL = "Parallel"


@dataclass(frozen=True)
class HoldingEntryInputs:
    """Holding geometry and aircraft heading.

    Attributes:
        inbound_course_degrees: Inbound course to the holding fix.
        aircraft_heading_degrees: Aircraft heading on arrival at the fix.
        turn_direction: Pattern turn direction (standard is right).
    """

    inbound_course_degrees: float
    aircraft_heading_degrees: float
    turn_direction: TurnDirection = TurnDirection.RIGHT


@dataclass(frozen=True)
class HoldingEntryResult:
    """Entry classification.

    Attributes:
        entry_type: Entry to fly.
        relative_bearing_degrees: Heading minus reciprocal of the inbound
            course, in (-180, 180].
    """

    entry_type: HoldingEntry
    relative_bearing_degrees: float


def reciprocal(course_degrees: float) -> float:
    """Reciprocal of a course, in [0, 360)."""
    return normalize_heading(course_degrees + 180.0)


def _classify_right(relative: float) -> HoldingEntry:
    if 0.0 < relative < TEARDROP_SECTOR_DEG:
        return HoldingEntry.TEARDROP
    if -PARALLEL_SECTOR_DEG < relative <= 0.0:
        return HoldingEntry.PARALLEL
    return HoldingEntry.DIRECT


def _classify_left(relative: float) -> HoldingEntry:
    if -TEARDROP_SECTOR_DEG < relative < 0.0:
        return HoldingEntry.TEARDROP
    if 0.0 <= relative < PARALLEL_SECTOR_DEG:
        return HoldingEntry.PARALLEL
    return HoldingEntry.DIRECT


def classify_holding_entry(inputs: HoldingEntryInputs) -> HoldingEntryResult:
    """Classify the entry into a holding pattern.

    Courses and headings outside [0, 360) are reduced modulo 360.

    Args:
        inputs: Inbound course, aircraft heading and turn direction.

    Returns:
        HoldingEntryResult with the entry type.

    Raises:
        InvalidArgumentError: If an angle is non-finite or the turn direction
            is not a TurnDirection.
    """
    inbound = normalize_heading(require_finite(inputs.inbound_course_degrees, "inbound_course_degrees"))
    heading = normalize_heading(
        require_finite(inputs.aircraft_heading_degrees, "aircraft_heading_degrees")
    )

    if not isinstance(inputs.turn_direction, TurnDirection):
        raise InvalidArgumentError(
            f"turn_direction must be a TurnDirection, got {inputs.turn_direction!r}",
            "turn_direction",
        )

    relative = normalize_signed(heading - reciprocal(inbound))

    if inputs.turn_direction is TurnDirection.RIGHT:
        entry = _classify_right(relative)
    else:
        entry = _classify_left(relative)

    logger.debug(
        "Hold inbound %03.0f %s turns, heading %03.0f: relative=%.1f -> %s",
        inbound,
        inputs.turn_direction.value.lower(),
        heading,
        relative,
        entry.value,
    )

    return HoldingEntryResult(entry_type=entry, relative_bearing_degrees=relative)
