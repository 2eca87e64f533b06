"""Error taxonomy for flight calculations.

Every calculation validates its inputs before doing any arithmetic and raises
one of the exceptions below. Nothing is clamped or replaced with a default:
a bad value in a weight-and-balance or descent figure is worse than no figure.

Typical usage example:
    from flightcalc.core.errors import InvalidArgumentError

    try:
        plan = plan_descent(DescentPlanInputs(10000.0, 0.0, 0.0))
    except InvalidArgumentError as e:
        print(f"Cannot plan descent: {e}")
"""


class CalculationError(ValueError):
    """Base class for all calculation failures.

    Attributes:
        field: Name of the offending input field, if known.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize calculation error.

        Args:
            message: Human-readable description of the failure.
            field: Name of the offending input field, if known.
        """
        super().__init__(message)
        self.field = field


class InvalidArgumentError(CalculationError):
    """Raised when an input value is outside what a calculation accepts.

    Examples: NaN or infinite numbers, zero ground speed for a descent,
    negative station weights, malformed runway identifiers.
    """


class NotComputableError(CalculationError):
    """Raised when a formula would produce a non-finite result.

    Raised before the offending operation (e.g. a division by zero), never
    caught after the fact.
    """
