"""Top-of-descent planning with the 3:1 rule.

A 3 degree descent path covers roughly 3 nm for every 1000 ft lost and needs
a descent rate of about five times the groundspeed (fpm).
"""

from dataclasses import dataclass

from flightcalc.core.errors import InvalidArgumentError
from flightcalc.core.logging_system import get_logger
from flightcalc.core.numeric import require_finite, round_half_away

logger = get_logger(__name__)

NM_PER_1000FT = 3.0
FPM_PER_KT = 5.0


@dataclass(frozen=True)
class DescentPlanInputs:
    """Descent request.

    Attributes:
        current_altitude_ft: Cruise or current altitude.
        target_altitude_ft: Altitude to reach.
        ground_speed_kts: Groundspeed during the descent.
    """

    current_altitude_ft: float
    target_altitude_ft: float
    ground_speed_kts: float


@dataclass(frozen=True)
class DescentPlanResult:
    """Descent plan, rounded to whole units.

    Attributes:
        distance_nm: Distance before the target to begin descent.
        required_rate_fpm: Descent rate for a 3 degree path.
        time_min: Time from top of descent to the target altitude.
    """

    distance_nm: int
    required_rate_fpm: int
    time_min: int

    @property
    def descent_required(self) -> bool:
        """False when already at or below the target altitude."""
        return self.distance_nm > 0 or self.required_rate_fpm > 0


NO_DESCENT = DescentPlanResult(distance_nm=0, required_rate_fpm=0, time_min=0)


def plan_descent(inputs: DescentPlanInputs) -> DescentPlanResult:
    """Plan the descent from current to target altitude.

    Being at or below the target is not an error: the plan is all zeros,
    whatever the groundspeed. Time is computed from the unrounded distance.

    Args:
        inputs: Altitudes and groundspeed.

    Returns:
        DescentPlanResult.

    Raises:
        InvalidArgumentError: If any input is non-finite, or a descent is
            needed and the groundspeed is not positive.

    Examples:
        >>> plan_descent(DescentPlanInputs(35000.0, 3000.0, 450.0))
        DescentPlanResult(distance_nm=96, required_rate_fpm=2250, time_min=13)
    """
    current = require_finite(inputs.current_altitude_ft, "current_altitude_ft")
    target = require_finite(inputs.target_altitude_ft, "target_altitude_ft")
    ground_speed = require_finite(inputs.ground_speed_kts, "ground_speed_kts")

    if current <= target:
        logger.debug("No descent needed: current %.0f ft <= target %.0f ft", current, target)
        return NO_DESCENT

    if ground_speed <= 0:
        logger.debug("Rejected descent plan: ground speed %.1f kts", ground_speed)
        raise InvalidArgumentError(
            f"ground_speed_kts must be positive to plan a descent, got {ground_speed}",
            "ground_speed_kts",
        )

    distance = (current - target) / 1000.0 * NM_PER_1000FT
    rate = ground_speed * FPM_PER_KT
    time = distance / (ground_speed / 60.0)

    result = DescentPlanResult(
        distance_nm=round_half_away(distance),
        required_rate_fpm=round_half_away(rate),
        time_min=round_half_away(time),
    )

    logger.debug(
        "Descent %.0f -> %.0f ft at %.0f kts: TOD %d nm, %d fpm, %d min",
        current,
        target,
        ground_speed,
        result.distance_nm,
        result.required_rate_fpm,
        result.time_min,
    )

    return result
