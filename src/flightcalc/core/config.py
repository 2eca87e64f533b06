"""Configuration loader for YAML files.

This module provides configuration loading with support for nested access,
defaults, and validation. Aircraft profiles are stored as YAML and read
through this loader.

Typical usage example:
    from flightcalc.core.config import ConfigLoader

    config = ConfigLoader.load("config/aircraft/cessna172s.yaml")
    max_gross = config.get("aircraft.limits.max_gross_weight_lbs")
"""

from pathlib import Path
from typing import Any

import yaml

from flightcalc.core.logging_system import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Raised when configuration operations fail."""


class ConfigLoader:
    """Configuration loader for YAML files.

    Provides loading, nested access, and default values for configuration.

    Examples:
        >>> config = ConfigLoader.load("config/aircraft/cessna172s.yaml")
        >>> fuel_density = config.get("aircraft.fuel_lbs_per_gallon", default=6.0)
    """

    def __init__(self, data: dict[str, Any], source: Path | None = None) -> None:
        """Initialize with configuration data.

        Args:
            data: Configuration dictionary.
            source: File the data was loaded from, if any.
        """
        self._data = data
        self.source = source

    @classmethod
    def load(cls, path: str | Path) -> "ConfigLoader":
        """Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            ConfigLoader instance with loaded data.

        Raises:
            ConfigError: If file cannot be loaded or is not a mapping.
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load configuration: {e}") from e

        if data is None:
            data = {}

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {path}")

        logger.info("Loaded configuration from: %s", path)
        return cls(data, source=path)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Supports nested access like "aircraft.limits.aft_cg_in".

        Args:
            key: Configuration key (supports dot notation).
            default: Default value if key not found.

        Returns:
            Configuration value or default.
        """
        keys = key.split(".")
        value = self._data

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def require(self, key: str) -> Any:
        """Get a configuration value that must be present.

        Args:
            key: Configuration key (supports dot notation).

        Returns:
            Configuration value.

        Raises:
            ConfigError: If the key is missing.
        """
        value = self.get(key)
        if value is None:
            where = f" in {self.source}" if self.source else ""
            raise ConfigError(f"Missing required configuration key '{key}'{where}")
        return value

    def get_section(self, key: str) -> dict[str, Any]:
        """Get an entire configuration section.

        Args:
            key: Section key (supports dot notation).

        Returns:
            Configuration section as dictionary.

        Raises:
            ConfigError: If section not found or not a dict.
        """
        value = self.get(key)

        if value is None:
            raise ConfigError(f"Configuration section not found: {key}")

        if not isinstance(value, dict):
            raise ConfigError(f"Configuration key is not a section: {key}")

        return value
