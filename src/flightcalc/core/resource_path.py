"""Resource path resolution for packaged configuration data.

Configuration files (logging setup, aircraft profiles) ship inside the
package under flightcalc/config, so they resolve the same way from a source
checkout and from an installed wheel.

Typical usage:
    from flightcalc.core.resource_path import get_config_path

    profile_path = get_config_path("aircraft/cessna172s.yaml")
"""

from pathlib import Path


def get_package_root() -> Path:
    """Get the flightcalc package directory.

    Returns:
        Path to the installed flightcalc package (src/flightcalc from source).
    """
    # Up from flightcalc/core to flightcalc
    return Path(__file__).parent.parent


def get_config_path(config_file: str) -> Path:
    """Get path to a packaged configuration file.

    Args:
        config_file: Config filename or relative path (e.g., "logging.yaml" or
            "aircraft/cessna172s.yaml")

    Returns:
        Absolute path to the config file.

    Examples:
        >>> get_config_path("logging.yaml").name
        'logging.yaml'
    """
    return get_package_root() / "config" / config_file


def get_aircraft_dir() -> Path:
    """Get the directory holding packaged aircraft profiles.

    Returns:
        Path to flightcalc/config/aircraft.
    """
    return get_config_path("aircraft")
