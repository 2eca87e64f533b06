"""Numeric helpers shared by the calculators.

Angle normalization, input validation and the engine-wide rounding rule.

Rounding is round-half-away-from-zero to the nearest integer: 2.5 -> 3,
-2.5 -> -3. Python's built-in round() uses banker's rounding and is not used
for any published figure.
"""

import math

from flightcalc.core.errors import InvalidArgumentError, NotComputableError


def require_finite(value: float, field: str) -> float:
    """Validate that a value is a finite number.

    Args:
        value: Value to check.
        field: Input field name, used in the error message.

    Returns:
        The value as a float.

    Raises:
        InvalidArgumentError: If value is NaN, infinite or not a number.
    """
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"{field} must be a number, got {value!r}", field) from e

    if not math.isfinite(number):
        raise InvalidArgumentError(f"{field} must be finite, got {number}", field)

    return number


def require_non_negative(value: float, field: str) -> float:
    """Validate that a value is finite and >= 0.

    Args:
        value: Value to check.
        field: Input field name, used in the error message.

    Returns:
        The value as a float.

    Raises:
        InvalidArgumentError: If value is non-finite or negative.
    """
    number = require_finite(value, field)
    if number < 0:
        raise InvalidArgumentError(f"{field} must not be negative, got {number}", field)
    return number


def require_computable(value: float, field: str) -> float:
    """Validate a unit-conversion input.

    Args:
        value: Value to check.
        field: Input field name, used in the error message.

    Returns:
        The value as a float.

    Raises:
        NotComputableError: If value is NaN, infinite or not a number.
    """
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise NotComputableError(f"{field} must be a number, got {value!r}", field) from e

    if not math.isfinite(number):
        raise NotComputableError(f"Cannot convert non-finite {field}: {number}", field)

    return number


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Args:
        value: Finite value to round.

    Returns:
        Rounded integer.

    Examples:
        >>> round_half_away(2.5)
        3
        >>> round_half_away(-2.5)
        -3
    """
    magnitude = abs(value)
    whole = math.floor(magnitude)
    # Compare the fraction directly; magnitude + 0.5 can round up on its own
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


def normalize_heading(degrees: float) -> float:
    """Normalize an angle into [0, 360).

    Args:
        degrees: Finite angle in degrees.

    Returns:
        Equivalent angle in [0, 360).
    """
    result = math.fmod(degrees, 360.0)
    if result < 0:
        result += 360.0
    # fmod of a tiny negative value can land exactly on 360 after the add
    if result >= 360.0:
        result -= 360.0
    return result


def normalize_signed(degrees: float) -> float:
    """Normalize an angle into (-180, 180].

    The angle is first reduced with fmod, then shifted by whole turns until it
    reaches the canonical representative.

    Args:
        degrees: Finite angle in degrees.

    Returns:
        Equivalent angle in (-180, 180].

    Examples:
        >>> normalize_signed(270.0)
        -90.0
        >>> normalize_signed(-180.0)
        180.0
    """
    result = math.fmod(degrees, 360.0)
    while result <= -180.0:
        result += 360.0
    while result > 180.0:
        result -= 360.0
    return result
