"""Unit tests for the logging system with platform-aware paths and rotation."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from flightcalc.core.logging_system import (
    LoggingError,
    get_logger,
    get_platform_log_dir,
    initialize_logging,
    rotate_logs,
    shutdown_logging,
)


class TestPlatformLogDir:
    """Tests for get_platform_log_dir function."""

    def test_macos_log_dir(self) -> None:
        """Test macOS log directory path."""
        with patch("platform.system", return_value="Darwin"):
            log_dir = get_platform_log_dir()
            assert log_dir == Path.home() / "Library" / "Logs" / "FlightCalc"

    def test_linux_log_dir(self) -> None:
        """Test Linux log directory path."""
        with patch("platform.system", return_value="Linux"):
            log_dir = get_platform_log_dir()
            assert log_dir == Path.home() / ".flightcalc" / "logs"

    def test_windows_log_dir(self) -> None:
        """Test Windows log directory path."""
        with patch("platform.system", return_value="Windows"):
            with patch.dict("os.environ", {"APPDATA": "C:/Users/Test/AppData/Roaming"}):
                log_dir = get_platform_log_dir()
                assert "FlightCalc" in str(log_dir)
                assert "Logs" in str(log_dir)

    def test_unknown_platform_defaults_to_linux(self) -> None:
        """Test unknown platform defaults to Linux-style path."""
        with patch("platform.system", return_value="FreeBSD"):
            log_dir = get_platform_log_dir()
            assert log_dir == Path.home() / ".flightcalc" / "logs"


class TestLogRotation:
    """Tests for log rotation functionality."""

    def test_rotate_logs_no_existing_log(self, tmp_path: Path) -> None:
        """Test rotation when no log file exists - should do nothing."""
        rotate_logs(tmp_path, "test.log", 5)
        assert list(tmp_path.glob("*")) == []

    def test_rotate_logs_multiple_files(self, tmp_path: Path) -> None:
        """Test rotation shifts every existing log by one."""
        (tmp_path / "test.log").write_text("current")
        (tmp_path / "test.log.1").write_text("previous-1")
        (tmp_path / "test.log.2").write_text("previous-2")

        rotate_logs(tmp_path, "test.log", 5)

        assert not (tmp_path / "test.log").exists()
        assert (tmp_path / "test.log.1").read_text() == "current"
        assert (tmp_path / "test.log.2").read_text() == "previous-1"
        assert (tmp_path / "test.log.3").read_text() == "previous-2"

    def test_rotate_logs_deletes_oldest(self, tmp_path: Path) -> None:
        """Test that oldest log beyond keep_count is deleted."""
        (tmp_path / "test.log").write_text("current")
        for i in range(1, 4):
            (tmp_path / f"test.log.{i}").write_text(f"old-{i}")

        rotate_logs(tmp_path, "test.log", keep_count=3)

        assert (tmp_path / "test.log.1").read_text() == "current"
        assert (tmp_path / "test.log.3").read_text() == "old-2"
        assert not (tmp_path / "test.log.4").exists()


class TestLoggingInitialization:
    """Tests for logging system initialization."""

    def test_initialize_with_platform_dir(self, tmp_path: Path) -> None:
        """Test initialization writes the combined log to the platform directory."""
        with patch(
            "flightcalc.core.logging_system.get_platform_log_dir", return_value=tmp_path
        ):
            initialize_logging(use_platform_dir=True)

            get_logger("test").info("Test message")
            shutdown_logging()

        assert "Test message" in (tmp_path / "flightcalc.log").read_text()
        assert not any(isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers)

    def test_initialize_with_missing_config(self) -> None:
        """Test initialization fails cleanly with missing config file."""
        with pytest.raises(LoggingError, match="Logging config file not found"):
            initialize_logging(config_path="/nonexistent/config.yaml")

    def test_initialize_from_yaml(self, tmp_path: Path) -> None:
        """Test component levels and file names come from YAML."""
        config_file = tmp_path / "logging.yaml"
        config_file.write_text(
            "combined_log:\n"
            "  enabled: true\n"
            "  filename: calc.log\n"
            "console:\n"
            "  enabled: false\n"
            f"log_dir: {tmp_path.as_posix()}\n"
            "components:\n"
            "  quiet_component:\n"
            "    level: ERROR\n"
            "  muted_component:\n"
            "    enabled: false\n"
        )

        initialize_logging(config_file, use_platform_dir=False)
        quiet = get_logger("quiet_component")
        muted = get_logger("muted_component")
        quiet.warning("dropped warning")
        quiet.error("kept error")
        muted.error("muted error")
        shutdown_logging()

        content = (tmp_path / "calc.log").read_text()
        assert quiet.level == logging.ERROR
        assert "kept error" in content
        assert "dropped warning" not in content
        assert "muted error" not in content
        muted.disabled = False

    def test_startup_rotates_existing_log(self, tmp_path: Path) -> None:
        """Test that initialization rotates the log of the previous run."""
        with patch(
            "flightcalc.core.logging_system.get_platform_log_dir", return_value=tmp_path
        ):
            initialize_logging(use_platform_dir=True)
            get_logger("test").info("First run")
            shutdown_logging()

            initialize_logging(use_platform_dir=True)
            get_logger("test").info("Second run")
            shutdown_logging()

        assert "First run" in (tmp_path / "flightcalc.log.1").read_text()
        current = (tmp_path / "flightcalc.log").read_text()
        assert "Second run" in current
        assert "First run" not in current


class TestLoggerFunctionality:
    """Tests for logger creation and usage."""

    def test_get_logger_caches_loggers(self) -> None:
        """Test that loggers are cached and reused."""
        assert get_logger("cached") is get_logger("cached")

    def test_get_logger_does_not_initialize(self) -> None:
        """Test that asking for a logger installs no handlers."""
        shutdown_logging()
        logger = get_logger("library_module")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "library_module"
        assert not any(isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers)

    def test_debug_messages_reach_file(self, tmp_path: Path) -> None:
        """Test that debug records are written to the combined log."""
        with patch(
            "flightcalc.core.logging_system.get_platform_log_dir", return_value=tmp_path
        ):
            initialize_logging(use_platform_dir=True)
            logger = get_logger("test")
            logger.debug("Debug message")
            logger.error("Error message")
            shutdown_logging()

        content = (tmp_path / "flightcalc.log").read_text()
        assert "Debug message" in content
        assert "Error message" in content
