"""Unit conversions."""

from flightcalc.units.converter import (
    ConversionKind,
    ConversionResult,
    celsius_to_fahrenheit,
    convert,
    fahrenheit_to_celsius,
    inhg_to_hpa,
    kts_to_kph,
    kts_to_mph,
    lbs_to_kg,
    nm_to_km,
    nm_to_sm,
)

__all__ = [
    "ConversionKind",
    "ConversionResult",
    "celsius_to_fahrenheit",
    "convert",
    "fahrenheit_to_celsius",
    "inhg_to_hpa",
    "kts_to_kph",
    "kts_to_mph",
    "lbs_to_kg",
    "nm_to_km",
    "nm_to_sm",
]
