"""Tests for the command-line entry point."""

import logging

import pytest

from flightcalc.main import EXIT_CONFIG_ERROR, EXIT_INVALID_INPUT, EXIT_OK, main, parse_args


class TestParseArgs:
    """Test argument parsing."""

    def test_wind_arguments(self) -> None:
        """Test wind subcommand arguments are parsed as floats."""
        args = parse_args(["wind", "--runway", "240", "--wind-dir", "270", "--wind-speed", "15"])

        assert args.command == "wind"
        assert args.runway == 240.0
        assert args.gust is None

    def test_defaults(self) -> None:
        """Test optional arguments fall back to their defaults."""
        args = parse_args(["density-altitude", "--elevation", "0", "--temp", "15"])
        assert args.altimeter == 29.92

        args = parse_args(["weight-balance"])
        assert args.profile == "cessna172s"
        assert args.fuel == 0.0

    def test_subcommand_required(self) -> None:
        """Test running without a subcommand is a usage error."""
        with pytest.raises(SystemExit):
            parse_args([])

    def test_unknown_conversion_kind(self) -> None:
        """Test argparse restricts conversion kinds."""
        with pytest.raises(SystemExit):
            parse_args(["convert", "volume", "1"])


class TestMain:
    """Test running calculations end to end."""

    def test_wind(self, capsys) -> None:
        """Test wind components are printed."""
        code = main(["wind", "--runway", "240", "--wind-dir", "280", "--wind-speed", "20"])

        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert "Headwind: 15 kts" in out
        assert "Crosswind: 13 kts (Right)" in out

    def test_wind_tailwind_with_gust(self, capsys) -> None:
        """Test tailwind labelling and gust line."""
        code = main(
            ["wind", "--runway", "90", "--wind-dir", "270", "--wind-speed", "10", "--gust", "20"]
        )

        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert "Tailwind: 10 kts" in out
        assert "Gust: Tailwind: 20 kts" in out

    def test_runways(self, capsys) -> None:
        """Test the best runway is listed first and flagged."""
        code = main(["runways", "04/22", "13/31", "--wind-dir", "270", "--wind-speed", "15"])

        lines = capsys.readouterr().out.splitlines()
        assert code == EXIT_OK
        assert len(lines) == 4
        assert lines[0].startswith("RWY 31")
        assert lines[0].endswith("BEST")
        assert "BEST" not in "".join(lines[1:])

    def test_density_altitude(self, capsys) -> None:
        """Test altitudes and the high density altitude warning."""
        code = main(["density-altitude", "--elevation", "5000", "--temp", "35"])

        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert "Pressure altitude: 5000 ft" in out
        assert "Density altitude: 8600 ft" in out
        assert "High density altitude" in out

    def test_weight_balance(self, capsys) -> None:
        """Test the packaged profile is used by default."""
        code = main(["weight-balance", "--pilot", "170", "--fuel", "40"])

        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert "Cessna 172S" in out
        assert "Total weight: 2073 lbs" in out
        assert "Status: Within Limits" in out

    def test_weight_balance_over_gross(self, capsys) -> None:
        """Test an out-of-limits loading is a result, not an error."""
        code = main(["weight-balance", "--baggage1", "900"])

        assert code == EXIT_OK
        assert "Status: Over Max Gross Weight" in capsys.readouterr().out

    def test_holding(self, capsys) -> None:
        """Test the entry name is printed."""
        code = main(["holding", "--inbound", "360", "--heading", "150", "--turn", "left"])

        assert code == EXIT_OK
        assert capsys.readouterr().out.strip() == "Teardrop entry"

    def test_descent(self, capsys) -> None:
        """Test the descent plan lines."""
        code = main(["descent", "--current", "35000", "--target", "3000", "--ground-speed", "450"])

        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert "Distance to begin descent: 96 NM" in out
        assert "Required rate: 2250 fpm" in out
        assert "Time to target: 13 min" in out

    def test_convert(self, capsys) -> None:
        """Test the conversion display string."""
        code = main(["convert", "dist", "100"])

        assert code == EXIT_OK
        assert capsys.readouterr().out.strip() == "185.20 km / 115.08 sm"

    def test_invalid_input_exit_code(self, capsys) -> None:
        """Test calculation errors print a message and exit with 2."""
        code = main(["descent", "--current", "10000", "--target", "2000", "--ground-speed", "0"])

        captured = capsys.readouterr()
        assert code == EXIT_INVALID_INPUT
        assert captured.out == ""
        assert "Error: ground_speed_kts" in captured.err

    def test_not_computable_exit_code(self, capsys) -> None:
        """Test non-finite conversions are reported as invalid input."""
        code = main(["convert", "temp_c", "nan"])

        assert code == EXIT_INVALID_INPUT
        assert "Error:" in capsys.readouterr().err

    def test_config_error_exit_code(self, capsys) -> None:
        """Test an unknown aircraft profile exits with 1."""
        code = main(["weight-balance", "--profile", "concorde"])

        assert code == EXIT_CONFIG_ERROR
        assert "Unknown aircraft profile 'concorde'" in capsys.readouterr().err

    def test_logging_shut_down_after_run(self, capsys) -> None:
        """Test main releases its log handlers when done."""
        main(["convert", "weight", "1"])

        assert not any(isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers)
