"""Weight and balance for aircraft.

This module provides data-driven aircraft profiles and the evaluation of
a loading against the profile's weight and CG envelope.
"""

from flightcalc.weight_balance.evaluator import (
    WeightBalanceInputs,
    WeightBalanceResult,
    WeightBalanceStatus,
    evaluate_weight_balance,
)
from flightcalc.weight_balance.profile import (
    DEFAULT_PROFILE,
    AircraftProfile,
    ForwardCgLimit,
    list_profiles,
    load_profile,
)
from flightcalc.weight_balance.station import LoadStation

__all__ = [
    "DEFAULT_PROFILE",
    "AircraftProfile",
    "ForwardCgLimit",
    "LoadStation",
    "WeightBalanceInputs",
    "WeightBalanceResult",
    "WeightBalanceStatus",
    "evaluate_weight_balance",
    "list_profiles",
    "load_profile",
]
