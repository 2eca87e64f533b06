"""Pressure and density altitude.

Uses the standard flight-training approximations:
    - Pressure altitude: 1000 ft per inch of mercury from 29.92 inHg.
    - ISA temperature: 15 C at sea level, lapsing 2 C per 1000 ft.
    - Density altitude: 120 ft per degree C above ISA.

No range checks are applied beyond rejecting non-finite numbers; negative
field elevations and extreme temperatures produce a figure, not an error.
"""

from dataclasses import dataclass

from flightcalc.core.logging_system import get_logger
from flightcalc.core.numeric import require_finite, round_half_away

logger = get_logger(__name__)

STANDARD_ALTIMETER_INHG = 29.92
FT_PER_INHG = 1000.0
SEA_LEVEL_ISA_TEMP_C = 15.0
ISA_LAPSE_C_PER_1000FT = 2.0
DA_FT_PER_DEG_C = 120.0

# Density altitude this far above field elevation degrades performance noticeably
HIGH_DENSITY_ALTITUDE_MARGIN_FT = 2000


@dataclass(frozen=True)
class DensityAltitudeInput:
    """Field conditions.

    Attributes:
        elevation_ft: Field elevation (ft MSL).
        outside_air_temp_c: Outside air temperature (C).
        altimeter_setting_inhg: Altimeter setting (inHg).
    """

    elevation_ft: float
    outside_air_temp_c: float
    altimeter_setting_inhg: float = STANDARD_ALTIMETER_INHG


@dataclass(frozen=True)
class DensityAltitudeResult:
    """Computed altitudes.

    Attributes:
        pressure_altitude_ft: Pressure altitude, whole feet.
        density_altitude_ft: Density altitude, whole feet.
        standard_temp_c: ISA temperature at field elevation (C).
        is_high_density_altitude: True when density altitude exceeds field
            elevation by more than 2000 ft.
    """

    pressure_altitude_ft: int
    density_altitude_ft: int
    standard_temp_c: float
    is_high_density_altitude: bool


def isa_temperature_c(elevation_ft: float) -> float:
    """ISA temperature at an elevation using the 2 C / 1000 ft lapse rate."""
    return SEA_LEVEL_ISA_TEMP_C - ISA_LAPSE_C_PER_1000FT * (elevation_ft / 1000.0)


def calculate_density_altitude(conditions: DensityAltitudeInput) -> DensityAltitudeResult:
    """Calculate pressure and density altitude.

    Args:
        conditions: Field elevation, temperature and altimeter setting.

    Returns:
        DensityAltitudeResult with both altitudes rounded to whole feet.

    Raises:
        InvalidArgumentError: If any input is NaN or infinite.

    Examples:
        >>> r = calculate_density_altitude(DensityAltitudeInput(0.0, 15.0, 29.92))
        >>> (r.pressure_altitude_ft, r.density_altitude_ft)
        (0, 0)
    """
    elevation = require_finite(conditions.elevation_ft, "elevation_ft")
    oat = require_finite(conditions.outside_air_temp_c, "outside_air_temp_c")
    altimeter = require_finite(conditions.altimeter_setting_inhg, "altimeter_setting_inhg")

    pressure_altitude = elevation + (STANDARD_ALTIMETER_INHG - altimeter) * FT_PER_INHG
    standard_temp = isa_temperature_c(elevation)
    density_altitude = pressure_altitude + DA_FT_PER_DEG_C * (oat - standard_temp)

    result = DensityAltitudeResult(
        pressure_altitude_ft=round_half_away(pressure_altitude),
        density_altitude_ft=round_half_away(density_altitude),
        standard_temp_c=standard_temp,
        is_high_density_altitude=density_altitude > elevation + HIGH_DENSITY_ALTITUDE_MARGIN_FT,
    )

    logger.debug(
        "Elevation %.0f ft, OAT %.1f C, altimeter %.2f: PA=%d ft DA=%d ft",
        elevation,
        oat,
        altimeter,
        result.pressure_altitude_ft,
        result.density_altitude_ft,
    )

    return result
