"""FlightCalc - flight performance and navigation calculation engine.

Stateless calculators for runway wind components, density altitude, weight
and balance, holding pattern entries, top-of-descent planning and unit
conversions. Every calculation takes an input dataclass and returns a result
dataclass; invalid input raises InvalidArgumentError or NotComputableError.

Typical usage:
    from flightcalc import DescentPlanInputs, plan_descent

    plan = plan_descent(DescentPlanInputs(35000.0, 3000.0, 450.0))
    print(plan.distance_nm)  # 96
"""

from flightcalc.core.errors import CalculationError, InvalidArgumentError, NotComputableError
from flightcalc.navigation import (
    DescentPlanInputs,
    DescentPlanResult,
    HoldingEntry,
    HoldingEntryInputs,
    HoldingEntryResult,
    TurnDirection,
    classify_holding_entry,
    plan_descent,
)
from flightcalc.performance import (
    CrosswindSide,
    DensityAltitudeInput,
    DensityAltitudeResult,
    RunwayWindAnalysis,
    WindComponents,
    WindVector,
    analyze_runways,
    calculate_density_altitude,
    resolve_wind,
    resolve_wind_components,
    runway_heading_from_ident,
)
from flightcalc.units import ConversionKind, ConversionResult, convert
from flightcalc.weight_balance import (
    AircraftProfile,
    WeightBalanceInputs,
    WeightBalanceResult,
    WeightBalanceStatus,
    evaluate_weight_balance,
    load_profile,
)

__version__ = "0.1.0"

__all__ = [
    "AircraftProfile",
    "CalculationError",
    "ConversionKind",
    "ConversionResult",
    "CrosswindSide",
    "DensityAltitudeInput",
    "DensityAltitudeResult",
    "DescentPlanInputs",
    "DescentPlanResult",
    "HoldingEntry",
    "HoldingEntryInputs",
    "HoldingEntryResult",
    "InvalidArgumentError",
    "NotComputableError",
    "RunwayWindAnalysis",
    "TurnDirection",
    "WeightBalanceInputs",
    "WeightBalanceResult",
    "WeightBalanceStatus",
    "WindComponents",
    "WindVector",
    "analyze_runways",
    "calculate_density_altitude",
    "classify_holding_entry",
    "convert",
    "evaluate_weight_balance",
    "load_profile",
    "plan_descent",
    "resolve_wind",
    "resolve_wind_components",
    "runway_heading_from_ident",
]
