"""Performance calculations.

Runway wind components and density altitude.
"""

from flightcalc.performance.density_altitude import (
    DensityAltitudeInput,
    DensityAltitudeResult,
    calculate_density_altitude,
)
from flightcalc.performance.wind import (
    CrosswindSide,
    RunwayWindAnalysis,
    WindComponents,
    WindVector,
    analyze_runways,
    resolve_wind,
    resolve_wind_components,
    runway_heading_from_ident,
)

__all__ = [
    "CrosswindSide",
    "DensityAltitudeInput",
    "DensityAltitudeResult",
    "RunwayWindAnalysis",
    "WindComponents",
    "WindVector",
    "analyze_runways",
    "calculate_density_altitude",
    "resolve_wind",
    "resolve_wind_components",
    "runway_heading_from_ident",
]
