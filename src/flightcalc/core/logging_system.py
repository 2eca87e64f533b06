"""Logging system for the calculation engine and its hosts.

This module provides YAML-configured logging with per-component levels,
platform-aware log locations, and startup-based rotation.

Library modules only ask for loggers; they never install handlers. A host
application (the command-line tool, a web service) calls initialize_logging()
once at startup to attach console and file handlers.

Platform-specific log locations:
    - macOS: ~/Library/Logs/FlightCalc/flightcalc.log
    - Linux: ~/.flightcalc/logs/flightcalc.log
    - Windows: %AppData%/FlightCalc/Logs/flightcalc.log

Typical usage example:
    from flightcalc.core.logging_system import get_logger

    logger = get_logger(__name__)
    logger.debug("Density altitude: %d ft", density_altitude_ft)
"""

import logging
import os
import platform
import time
from pathlib import Path
from typing import Any

import yaml

# Global configuration
_logging_config: dict[str, Any] = {}
_loggers_cache: dict[str, logging.Logger] = {}
_handlers: list[logging.Handler] = []
_initialized = False


class LoggingError(Exception):
    """Raised when logging system operations fail."""


def get_platform_log_dir() -> Path:
    """Get platform-specific log directory.

    Returns:
        Path to the platform-appropriate log directory:
        - macOS: ~/Library/Logs/FlightCalc
        - Linux: ~/.flightcalc/logs
        - Windows: %AppData%/FlightCalc/Logs
    """
    system = platform.system()

    if system == "Darwin":  # macOS
        return Path.home() / "Library" / "Logs" / "FlightCalc"
    elif system == "Windows":
        appdata = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return appdata / "FlightCalc" / "Logs"
    else:  # Linux and other Unix-like systems
        return Path.home() / ".flightcalc" / "logs"


def rotate_logs(log_dir: Path, log_filename: str = "flightcalc.log", keep_count: int = 5) -> None:
    """Rotate logs on startup, keeping the last N runs.

    Renames current log to flightcalc.log.1, shifts older logs, and deletes
    logs beyond keep_count.

    Args:
        log_dir: Directory containing log files.
        log_filename: Base name of the log file.
        keep_count: Number of old logs to keep.
    """
    log_file = log_dir / log_filename

    if not log_file.exists():
        return

    oldest_log = log_dir / f"{log_filename}.{keep_count}"
    if oldest_log.exists():
        oldest_log.unlink()

    for i in range(keep_count - 1, 0, -1):
        old_log = log_dir / f"{log_filename}.{i}"
        new_log = log_dir / f"{log_filename}.{i + 1}"
        if old_log.exists():
            old_log.rename(new_log)

    log_file.rename(log_dir / f"{log_filename}.1")


def initialize_logging(config_path: str | Path | None = None, use_platform_dir: bool = True) -> None:
    """Initialize the logging system from YAML configuration.

    Should be called once by the host application before any logging occurs.

    Args:
        config_path: Path to logging configuration YAML file.
            If None, uses default configuration.
        use_platform_dir: If True, use platform-specific log directory.
            If False, use directory from config (for development/testing).

    Raises:
        LoggingError: If initialization fails.

    Examples:
        >>> initialize_logging("config/logging.yaml")
        >>> log = get_logger("flightcalc.main")
        >>> log.info("Logging initialized")
    """
    global _logging_config, _initialized

    if config_path:
        try:
            config_path = Path(config_path)
            if not config_path.exists():
                raise LoggingError(f"Logging config file not found: {config_path}")

            with config_path.open("r", encoding="utf-8") as f:
                _logging_config = yaml.safe_load(f) or {}

        except Exception as e:
            raise LoggingError(f"Failed to load logging config: {e}") from e
    else:
        _logging_config = _get_default_config()

    if use_platform_dir:
        _logging_config["log_dir"] = str(get_platform_log_dir())

    combined = _logging_config.get("combined_log", {})
    if combined.get("enabled", True):
        log_dir = Path(_logging_config.get("log_dir", "logs"))
        log_dir.mkdir(parents=True, exist_ok=True)
        rotate_logs(
            log_dir,
            combined.get("filename", "flightcalc.log"),
            combined.get("backup_count", 5),
        )

    _configure_root_logger()

    # Loggers handed out before initialization pick up component levels now
    for name, logger in _loggers_cache.items():
        _apply_component_config(name, logger)

    _initialized = True


def _get_default_config() -> dict[str, Any]:
    """Get default logging configuration.

    Returns:
        Default logging configuration dictionary.
    """
    return {
        "version": 1,
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "date_format": "%Y-%m-%d %H:%M:%S",
        "log_dir": "logs",
        "combined_log": {
            "enabled": True,
            "filename": "flightcalc.log",
            "backup_count": 5,
        },
        "console": {
            "enabled": True,
            "level": "WARNING",
        },
        "components": {},
    }


def _configure_root_logger() -> None:
    """Configure the root logger with handlers."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture all, filter in handlers

    for handler in _handlers:
        handler.close()
    _handlers.clear()
    root_logger.handlers.clear()

    if _logging_config.get("console", {}).get("enabled", True):
        console_handler = logging.StreamHandler()
        console_level = _logging_config.get("console", {}).get("level", "INFO")
        console_handler.setLevel(getattr(logging, console_level))
        console_handler.setFormatter(_get_formatter())
        root_logger.addHandler(console_handler)
        _handlers.append(console_handler)

    # Rotation happens on startup, so a plain FileHandler is enough
    if _logging_config.get("combined_log", {}).get("enabled", True):
        combined_config = _logging_config["combined_log"]
        log_dir = Path(_logging_config.get("log_dir", "logs"))
        log_file = log_dir / combined_config.get("filename", "flightcalc.log")

        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(_get_formatter())
        root_logger.addHandler(file_handler)
        _handlers.append(file_handler)


class MillisecondFormatter(logging.Formatter):
    """Custom formatter that shows milliseconds with dot separator."""

    def formatTime(self, record, datefmt=None):
        """Format time with milliseconds using dot separator."""
        ct = self.converter(record.created)
        if datefmt:
            s = time.strftime(datefmt, ct)
        else:
            s = time.strftime("%Y-%m-%d %H:%M:%S", ct)
        s = f"{s}.{int(record.msecs):03d}"
        return s


def _get_formatter() -> logging.Formatter:
    """Get the configured log formatter.

    Returns:
        Configured logging.Formatter instance.
    """
    fmt = _logging_config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    datefmt = _logging_config.get("date_format", "%Y-%m-%d %H:%M:%S")
    return MillisecondFormatter(fmt, datefmt)


def _apply_component_config(name: str, logger: logging.Logger) -> None:
    """Apply the 'components' section of the config to one logger.

    Args:
        name: Logger name.
        logger: Logger to configure.
    """
    component_config = _logging_config.get("components", {}).get(name, {})

    if not component_config.get("enabled", True):
        logger.disabled = True
        return

    logger.disabled = False
    if "level" in component_config:
        logger.setLevel(getattr(logging, component_config["level"]))


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module or component.

    Loggers are cached and reused. Each logger can have its own level in the
    logging config YAML under the 'components' section. Unlike a host, the
    library never initializes logging implicitly: until initialize_logging()
    runs, records propagate to whatever handlers the embedding application
    installed.

    Args:
        name: Logger name (typically the module's __name__).

    Returns:
        Logger instance.

    Examples:
        >>> log = get_logger("flightcalc.navigation.descent")
        >>> log.debug("Descent distance: %d nm", distance_nm)

    Note:
        Use lazy formatting (%) instead of f-strings for better performance.
    """
    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = logging.getLogger(name)
    if _initialized:
        _apply_component_config(name, logger)

    _loggers_cache[name] = logger
    return logger


def shutdown_logging() -> None:
    """Shutdown the logging system gracefully.

    Flushes all handlers and closes log files. Should be called at
    application shutdown.
    """
    global _initialized

    root_logger = logging.getLogger()
    for handler in _handlers:
        handler.flush()
        handler.close()
        root_logger.removeHandler(handler)
    _handlers.clear()

    _loggers_cache.clear()
    _initialized = False
