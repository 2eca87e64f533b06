"""Weight and balance evaluation.

Sums the empty aircraft with every loaded station, computes the center of
gravity, and checks the result against the profile's envelope.

Limits are checked in order of severity and the first violation wins:
    1. Over maximum gross weight
    2. CG aft of the aft limit
    3. CG forward of the (weight-dependent) forward limit

A value exactly on a limit is within limits.
"""

from dataclasses import dataclass
from enum import Enum

from flightcalc.core.errors import NotComputableError
from flightcalc.core.logging_system import get_logger
from flightcalc.core.numeric import require_non_negative
from flightcalc.weight_balance.profile import DEFAULT_PROFILE, AircraftProfile, load_profile

logger = get_logger(__name__)


class WeightBalanceStatus(Enum):
    """Outcome of the envelope check."""

    WITHIN_LIMITS = "Within Limits"
    OVER_MAX_GROSS_WEIGHT = "Over Max Gross Weight"
    AFT_CG_EXCEEDED = "Aft CG Limit Exceeded"
    FORWARD_CG_EXCEEDED = "Forward CG Limit Exceeded"


@dataclass(frozen=True)
class WeightBalanceInputs:
    """Loading for one flight.

    Attributes:
        pilot_lbs: Pilot weight (front seat).
        front_passenger_lbs: Front passenger weight.
        rear_passengers_lbs: Combined rear seat weight.
        baggage_1_lbs: Baggage area 1 weight.
        baggage_2_lbs: Baggage area 2 weight.
        fuel_gallons: Usable fuel on board (US gallons).
    """

    pilot_lbs: float = 0.0
    front_passenger_lbs: float = 0.0
    rear_passengers_lbs: float = 0.0
    baggage_1_lbs: float = 0.0
    baggage_2_lbs: float = 0.0
    fuel_gallons: float = 0.0


@dataclass(frozen=True)
class WeightBalanceResult:
    """Weight and balance figures.

    Attributes:
        total_weight_lbs: Gross weight.
        total_moment: Total moment (lb-in).
        center_of_gravity_in: CG position (inches aft of datum).
        status: Envelope check outcome.
        forward_cg_limit_in: Forward CG limit at this gross weight.
        fuel_weight_lbs: Weight of the fuel load.
    """

    total_weight_lbs: float
    total_moment: float
    center_of_gravity_in: float
    status: WeightBalanceStatus
    forward_cg_limit_in: float
    fuel_weight_lbs: float

    @property
    def is_within_limits(self) -> bool:
        """True when the loading is inside the envelope."""
        return self.status is WeightBalanceStatus.WITHIN_LIMITS

    def describe(self, profile: AircraftProfile) -> str:
        """Human-readable status line.

        Args:
            profile: Profile the result was evaluated against.

        Returns:
            Status description with the offending value and limit.
        """
        if self.status is WeightBalanceStatus.OVER_MAX_GROSS_WEIGHT:
            return (
                f"{self.status.value}: {self.total_weight_lbs:.0f} lbs > "
                f"{profile.max_gross_weight_lbs:.0f} lbs"
            )
        if self.status is WeightBalanceStatus.AFT_CG_EXCEEDED:
            return (
                f'{self.status.value}: {self.center_of_gravity_in:.1f}" > '
                f'{profile.aft_cg_limit_in:.1f}"'
            )
        if self.status is WeightBalanceStatus.FORWARD_CG_EXCEEDED:
            return (
                f'{self.status.value}: {self.center_of_gravity_in:.1f}" < '
                f'{self.forward_cg_limit_in:.1f}"'
            )
        return self.status.value


def _station_loads(inputs: WeightBalanceInputs, profile: AircraftProfile) -> dict[str, float]:
    """Validate inputs and map them onto the profile's stations (lbs)."""
    pilot = require_non_negative(inputs.pilot_lbs, "pilot_lbs")
    front_passenger = require_non_negative(inputs.front_passenger_lbs, "front_passenger_lbs")
    fuel_gallons = require_non_negative(inputs.fuel_gallons, "fuel_gallons")

    return {
        "front_seats": pilot + front_passenger,
        "rear_seats": require_non_negative(inputs.rear_passengers_lbs, "rear_passengers_lbs"),
        "baggage_1": require_non_negative(inputs.baggage_1_lbs, "baggage_1_lbs"),
        "baggage_2": require_non_negative(inputs.baggage_2_lbs, "baggage_2_lbs"),
        "fuel": fuel_gallons * profile.fuel_lbs_per_gallon,
    }


def evaluate_weight_balance(
    inputs: WeightBalanceInputs, profile: AircraftProfile | None = None
) -> WeightBalanceResult:
    """Compute gross weight, moment and CG and check them against the envelope.

    Args:
        inputs: Station weights and fuel quantity.
        profile: Aircraft profile (see load_profile()). Defaults to the
            packaged Cessna 172S profile, loaded on each call.

    Returns:
        WeightBalanceResult.

    Raises:
        InvalidArgumentError: If any weight or the fuel quantity is negative
            or non-finite.
        NotComputableError: If the total weight is not positive, which only
            a malformed profile can cause.
        ConfigError: If the default profile is needed and cannot be loaded.

    Examples:
        >>> result = evaluate_weight_balance(WeightBalanceInputs(pilot_lbs=170, fuel_gallons=40))
        >>> result.status
        <WeightBalanceStatus.WITHIN_LIMITS: 'Within Limits'>
    """
    if profile is None:
        profile = load_profile(DEFAULT_PROFILE)

    loads = _station_loads(inputs, profile)

    total_weight = profile.empty_weight_lbs
    total_moment = profile.empty_weight_moment
    for station_name, weight in loads.items():
        total_weight += weight
        total_moment += profile.station(station_name).calculate_moment(weight)

    if total_weight <= 0:
        raise NotComputableError(
            f"Total weight must be positive to compute CG, got {total_weight}", "total_weight_lbs"
        )

    cg = total_moment / total_weight
    forward_limit = profile.forward_cg_limit.limit_at(total_weight)

    if total_weight > profile.max_gross_weight_lbs:
        status = WeightBalanceStatus.OVER_MAX_GROSS_WEIGHT
    elif cg > profile.aft_cg_limit_in:
        status = WeightBalanceStatus.AFT_CG_EXCEEDED
    elif cg < forward_limit:
        status = WeightBalanceStatus.FORWARD_CG_EXCEEDED
    else:
        status = WeightBalanceStatus.WITHIN_LIMITS

    logger.debug(
        "%s: weight=%.1f lbs moment=%.1f CG=%.2f in (fwd %.2f, aft %.2f) -> %s",
        profile.name,
        total_weight,
        total_moment,
        cg,
        forward_limit,
        profile.aft_cg_limit_in,
        status.value,
    )

    return WeightBalanceResult(
        total_weight_lbs=total_weight,
        total_moment=total_moment,
        center_of_gravity_in=cg,
        status=status,
        forward_cg_limit_in=forward_limit,
        fuel_weight_lbs=loads["fuel"],
    )
