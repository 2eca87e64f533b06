"""Navigation planning aids.

Holding pattern entry selection and top-of-descent planning.
"""

from flightcalc.navigation.descent import DescentPlanInputs, DescentPlanResult, plan_descent
from flightcalc.navigation.holding import (
    HoldingEntry,
    HoldingEntryInputs,
    HoldingEntryResult,
    TurnDirection,
    classify_holding_entry,
)

__all__ = [
    "DescentPlanInputs",
    "DescentPlanResult",
    "HoldingEntry",
    "HoldingEntryInputs",
    "HoldingEntryResult",
    "TurnDirection",
    "classify_holding_entry",
    "plan_descent",
]
