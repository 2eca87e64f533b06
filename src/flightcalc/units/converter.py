"""Unit conversions for display.

Each conversion is a plain linear or affine transform. Non-finite input
raises NotComputableError instead of producing NaN or infinity.

Typical usage example:
    from flightcalc.units import ConversionKind, convert, celsius_to_fahrenheit

    celsius_to_fahrenheit(15.0)  # 59.0
    convert(ConversionKind.DISTANCE, 100.0).format()  # "185.20 km / 115.08 sm"
"""

from dataclasses import dataclass
from enum import Enum

from flightcalc.core.errors import InvalidArgumentError
from flightcalc.core.logging_system import get_logger
from flightcalc.core.numeric import require_computable

logger = get_logger(__name__)

KM_PER_NM = 1.852
SM_PER_NM = 1.15078
HPA_PER_INHG = 33.8639
KG_PER_LB = 0.453592


def nm_to_km(nm: float) -> float:
    """Nautical miles to kilometers."""
    return require_computable(nm, "nm") * KM_PER_NM


def nm_to_sm(nm: float) -> float:
    """Nautical miles to statute miles."""
    return require_computable(nm, "nm") * SM_PER_NM


def kts_to_mph(kts: float) -> float:
    """Knots to statute miles per hour."""
    return require_computable(kts, "kts") * SM_PER_NM


def kts_to_kph(kts: float) -> float:
    """Knots to kilometers per hour."""
    return require_computable(kts, "kts") * KM_PER_NM


def celsius_to_fahrenheit(celsius: float) -> float:
    """Degrees Celsius to degrees Fahrenheit."""
    return require_computable(celsius, "celsius") * 9.0 / 5.0 + 32.0


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Degrees Fahrenheit to degrees Celsius."""
    return (require_computable(fahrenheit, "fahrenheit") - 32.0) * 5.0 / 9.0


def inhg_to_hpa(inhg: float) -> float:
    """Inches of mercury to hectopascals."""
    return require_computable(inhg, "inhg") * HPA_PER_INHG


def lbs_to_kg(lbs: float) -> float:
    """Pounds to kilograms."""
    return require_computable(lbs, "lbs") * KG_PER_LB


class ConversionKind(Enum):
    """Conversion groups offered by the converter panel."""

    DISTANCE = "dist"
    SPEED = "speed"
    TEMP_C = "temp_c"
    TEMP_F = "temp_f"
    PRESSURE = "press"
    WEIGHT = "weight"


# kind -> ((unit, function, display decimals), ...)
_CONVERSIONS = {
    ConversionKind.DISTANCE: (("km", nm_to_km, 2), ("sm", nm_to_sm, 2)),
    ConversionKind.SPEED: (("mph", kts_to_mph, 1), ("km/h", kts_to_kph, 1)),
    ConversionKind.TEMP_C: (("°F", celsius_to_fahrenheit, 1),),
    ConversionKind.TEMP_F: (("°C", fahrenheit_to_celsius, 1),),
    ConversionKind.PRESSURE: (("hPa", inhg_to_hpa, 1),),
    ConversionKind.WEIGHT: (("kg", lbs_to_kg, 1),),
}


@dataclass(frozen=True)
class ConversionResult:
    """All outputs of one conversion.

    Attributes:
        kind: Conversion group.
        value: Input value.
        outputs: (unit, converted value, display decimals) per output.
    """

    kind: ConversionKind
    value: float
    outputs: tuple[tuple[str, float, int], ...]

    def get(self, unit: str) -> float:
        """Converted value for one output unit.

        Raises:
            KeyError: If this conversion has no such unit.
        """
        for output_unit, converted, _ in self.outputs:
            if output_unit == unit:
                return converted
        raise KeyError(unit)

    def format(self) -> str:
        """Display string, e.g. '185.20 km / 115.08 sm'."""
        return " / ".join(
            f"{converted:.{decimals}f} {unit}" for unit, converted, decimals in self.outputs
        )


def convert(kind: ConversionKind | str, value: float) -> ConversionResult:
    """Run every conversion of a group on one value.

    Args:
        kind: Conversion group, as a ConversionKind or its string value
            ("dist", "speed", "temp_c", "temp_f", "press", "weight").
        value: Value in the group's source unit.

    Returns:
        ConversionResult.

    Raises:
        InvalidArgumentError: If the kind is unknown.
        NotComputableError: If value is NaN or infinite.
    """
    if not isinstance(kind, ConversionKind):
        try:
            kind = ConversionKind(kind)
        except ValueError as e:
            valid = ", ".join(k.value for k in ConversionKind)
            raise InvalidArgumentError(
                f"Unknown conversion kind {kind!r}; expected one of: {valid}", "kind"
            ) from e

    outputs = tuple((unit, func(value), decimals) for unit, func, decimals in _CONVERSIONS[kind])
    logger.debug("Converted %s %r -> %s", kind.value, value, outputs)

    return ConversionResult(kind=kind, value=float(value), outputs=outputs)
