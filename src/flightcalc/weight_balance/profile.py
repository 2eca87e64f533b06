"""Aircraft weight and balance profiles.

A profile describes one aircraft type: empty weight and moment, load station
arms, fuel density and the certified CG envelope. Profiles are data, stored
as YAML under flightcalc/config/aircraft, so adding a type needs no code.

Typical usage example:
    from flightcalc.weight_balance import load_profile

    profile = load_profile("cessna172s")
    print(profile.forward_cg_limit.limit_at(2400.0))  # 39.5
"""

from dataclasses import dataclass
from pathlib import Path

from flightcalc.core.config import ConfigError, ConfigLoader
from flightcalc.core.logging_system import get_logger
from flightcalc.core.resource_path import get_aircraft_dir
from flightcalc.weight_balance.station import LoadStation

logger = get_logger(__name__)

DEFAULT_PROFILE = "cessna172s"

# Station name -> station type. Every profile must define all of them.
STATION_TYPES = {
    "front_seats": "seat",
    "rear_seats": "seat",
    "baggage_1": "cargo",
    "baggage_2": "cargo",
    "fuel": "fuel",
}


@dataclass(frozen=True)
class ForwardCgLimit:
    """Piecewise-linear forward CG limit.

    Constant at base_limit_in up to threshold_weight_lbs, then moving aft by
    slope_in_per_lb for each pound above the threshold.

    Attributes:
        base_limit_in: Forward limit at or below the threshold weight (in).
        threshold_weight_lbs: Weight where the limit starts to move aft.
        slope_in_per_lb: Aft movement of the limit per pound above threshold.
    """

    base_limit_in: float
    threshold_weight_lbs: float
    slope_in_per_lb: float

    def limit_at(self, weight_lbs: float) -> float:
        """Forward CG limit at a gross weight.

        Args:
            weight_lbs: Gross weight.

        Returns:
            Forward CG limit in inches aft of datum.
        """
        if weight_lbs <= self.threshold_weight_lbs:
            return self.base_limit_in
        return self.base_limit_in + self.slope_in_per_lb * (weight_lbs - self.threshold_weight_lbs)


@dataclass(frozen=True)
class AircraftProfile:
    """Weight and balance data for one aircraft type.

    Attributes:
        name: Display name (e.g., "Cessna 172S").
        empty_weight_lbs: Basic empty weight.
        empty_weight_moment: Basic empty moment (lb-in).
        stations: Load stations, one per entry in STATION_TYPES.
        fuel_lbs_per_gallon: Fuel density.
        forward_cg_limit: Forward CG limit as a function of weight.
        aft_cg_limit_in: Aft CG limit (constant).
        max_gross_weight_lbs: Maximum gross weight.
        min_envelope_weight_lbs: Lowest weight drawn on the envelope chart.
    """

    name: str
    empty_weight_lbs: float
    empty_weight_moment: float
    stations: tuple[LoadStation, ...]
    fuel_lbs_per_gallon: float
    forward_cg_limit: ForwardCgLimit
    aft_cg_limit_in: float
    max_gross_weight_lbs: float
    min_envelope_weight_lbs: float

    @property
    def empty_cg_in(self) -> float:
        """CG of the empty aircraft."""
        return self.empty_weight_moment / self.empty_weight_lbs

    def station(self, name: str) -> LoadStation:
        """Get a load station by name.

        Raises:
            KeyError: If the profile has no such station.
        """
        for station in self.stations:
            if station.name == name:
                return station
        raise KeyError(name)

    def envelope_points(self) -> list[tuple[float, float]]:
        """Closed CG envelope polygon for charting.

        Returns:
            List of (cg_in, weight_lbs) vertices, first point repeated last.
        """
        fwd = self.forward_cg_limit
        threshold = fwd.threshold_weight_lbs
        return [
            (fwd.base_limit_in, threshold),
            (fwd.base_limit_in, self.min_envelope_weight_lbs),
            (self.aft_cg_limit_in, self.min_envelope_weight_lbs),
            (self.aft_cg_limit_in, self.max_gross_weight_lbs),
            (fwd.limit_at(self.max_gross_weight_lbs), self.max_gross_weight_lbs),
            (fwd.base_limit_in, threshold),
        ]

    @classmethod
    def from_config(cls, config: ConfigLoader) -> "AircraftProfile":
        """Build a profile from a loaded aircraft YAML file.

        Args:
            config: Loaded configuration with an 'aircraft' section.

        Returns:
            AircraftProfile.

        Raises:
            ConfigError: If required keys are missing or values are invalid.
        """
        aircraft = config.get_section("aircraft")
        name = aircraft.get("name", "Unknown Aircraft")

        stations: list[LoadStation] = []
        for station_name, station_type in STATION_TYPES.items():
            arm = _number(config.require(f"aircraft.stations.{station_name}.arm_in"), station_name)
            stations.append(LoadStation(station_name, arm, station_type))
            logger.debug("Loaded %s station: %s @ %.1f in", station_type, station_name, arm)

        profile = cls(
            name=name,
            empty_weight_lbs=_number(config.require("aircraft.empty_weight_lbs"), "empty_weight_lbs"),
            empty_weight_moment=_number(
                config.require("aircraft.empty_weight_moment"), "empty_weight_moment"
            ),
            stations=tuple(stations),
            fuel_lbs_per_gallon=_number(
                config.require("aircraft.fuel_lbs_per_gallon"), "fuel_lbs_per_gallon"
            ),
            forward_cg_limit=ForwardCgLimit(
                base_limit_in=_number(
                    config.require("aircraft.limits.forward_cg.base_limit_in"), "base_limit_in"
                ),
                threshold_weight_lbs=_number(
                    config.require("aircraft.limits.forward_cg.threshold_weight_lbs"),
                    "threshold_weight_lbs",
                ),
                slope_in_per_lb=_number(
                    config.get("aircraft.limits.forward_cg.slope_in_per_lb", 0.0), "slope_in_per_lb"
                ),
            ),
            aft_cg_limit_in=_number(config.require("aircraft.limits.aft_cg_in"), "aft_cg_in"),
            max_gross_weight_lbs=_number(
                config.require("aircraft.limits.max_gross_weight_lbs"), "max_gross_weight_lbs"
            ),
            min_envelope_weight_lbs=_number(
                config.get("aircraft.limits.min_envelope_weight_lbs", 0.0),
                "min_envelope_weight_lbs",
            ),
        )

        if profile.empty_weight_lbs <= 0:
            raise ConfigError(f"Profile '{name}': empty_weight_lbs must be positive")
        if profile.fuel_lbs_per_gallon <= 0:
            raise ConfigError(f"Profile '{name}': fuel_lbs_per_gallon must be positive")
        if profile.max_gross_weight_lbs <= profile.empty_weight_lbs:
            raise ConfigError(f"Profile '{name}': max gross weight must exceed empty weight")

        logger.info(
            "Aircraft profile '%s': empty=%.0f lbs, max_gross=%.0f lbs, aft CG=%.1f in",
            profile.name,
            profile.empty_weight_lbs,
            profile.max_gross_weight_lbs,
            profile.aft_cg_limit_in,
        )
        return profile


def _number(value: object, key: str) -> float:
    """Convert a config value to float, raising ConfigError on bad data."""
    if isinstance(value, bool):
        raise ConfigError(f"Profile value '{key}' must be a number, got {value!r}")
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Profile value '{key}' must be a number, got {value!r}") from e


def list_profiles() -> list[str]:
    """Names of the aircraft profiles shipped with the package."""
    return sorted(path.stem for path in get_aircraft_dir().glob("*.yaml"))


def load_profile(name_or_path: str | Path = DEFAULT_PROFILE) -> AircraftProfile:
    """Load an aircraft profile by packaged name or from a YAML path.

    Args:
        name_or_path: Packaged profile name (e.g., "cessna172s") or a path to
            a profile YAML file.

    Returns:
        AircraftProfile.

    Raises:
        ConfigError: If the profile cannot be found or is invalid.
    """
    path = Path(name_or_path)
    if path.suffix not in (".yaml", ".yml"):
        path = get_aircraft_dir() / f"{name_or_path}.yaml"
        if not path.exists():
            raise ConfigError(
                f"Unknown aircraft profile '{name_or_path}'. Available: {', '.join(list_profiles())}"
            )

    return AircraftProfile.from_config(ConfigLoader.load(path))
