"""FlightCalc command-line tool.

Thin host around the calculation engine: parses arguments, initializes
logging, runs one calculation and prints the result.

Typical usage:
    flightcalc wind --runway 240 --wind-dir 270 --wind-speed 15
    flightcalc runways 04L/22R 13/31 --wind-dir 270 --wind-speed 15 --gust 25
    flightcalc density-altitude --elevation 5000 --temp 30 --altimeter 29.80
    flightcalc weight-balance --pilot 180 --front-passenger 160 --fuel 40
    flightcalc holding --inbound 360 --heading 150 --turn left
    flightcalc descent --current 35000 --target 3000 --ground-speed 450
    flightcalc convert temp_c 15
"""

import argparse
import sys
from collections.abc import Callable, Sequence

from flightcalc.core.config import ConfigError
from flightcalc.core.errors import CalculationError
from flightcalc.core.logging_system import get_logger, initialize_logging, shutdown_logging
from flightcalc.core.resource_path import get_config_path
from flightcalc.navigation import (
    DescentPlanInputs,
    HoldingEntryInputs,
    TurnDirection,
    classify_holding_entry,
    plan_descent,
)
from flightcalc.performance import (
    DensityAltitudeInput,
    WindVector,
    analyze_runways,
    calculate_density_altitude,
    resolve_wind_components,
)
from flightcalc.units import ConversionKind, convert
from flightcalc.weight_balance import (
    DEFAULT_PROFILE,
    WeightBalanceInputs,
    evaluate_weight_balance,
    load_profile,
)

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_INVALID_INPUT = 2


def _format_along(headwind_kts: int) -> str:
    label = "Tailwind" if headwind_kts < 0 else "Headwind"
    return f"{label}: {abs(headwind_kts)} kts"


def cmd_wind(args: argparse.Namespace) -> str:
    """Wind components for a single runway heading."""
    c = resolve_wind_components(args.runway, args.wind_dir, args.wind_speed, args.gust)
    lines = [
        _format_along(c.headwind_kts),
        f"Crosswind: {c.crosswind_kts} kts ({c.crosswind_side.value})",
    ]
    if c.gust_headwind_kts is not None:
        lines.append(f"Gust: {_format_along(c.gust_headwind_kts)}, crosswind {c.gust_crosswind_kts} kts")
    return "\n".join(lines)


def cmd_runways(args: argparse.Namespace) -> str:
    """Rank runway ends by headwind."""
    wind = WindVector(args.wind_dir, args.wind_speed, args.gust)
    lines = []
    for analysis in analyze_runways(args.idents, wind):
        c = analysis.components
        best = "  BEST" if analysis.is_best else ""
        lines.append(
            f"RWY {analysis.ident:<4} {_format_along(c.headwind_kts):<18} "
            f"Crosswind: {c.crosswind_kts} kts {c.crosswind_side.value}{best}"
        )
    return "\n".join(lines)


def cmd_density_altitude(args: argparse.Namespace) -> str:
    """Pressure and density altitude."""
    r = calculate_density_altitude(DensityAltitudeInput(args.elevation, args.temp, args.altimeter))
    lines = [
        f"Pressure altitude: {r.pressure_altitude_ft} ft",
        f"Density altitude: {r.density_altitude_ft} ft",
    ]
    if r.is_high_density_altitude:
        lines.append("High density altitude! Engine performance reduced.")
    return "\n".join(lines)


def cmd_weight_balance(args: argparse.Namespace) -> str:
    """Weight and balance against an aircraft profile."""
    profile = load_profile(args.profile)
    inputs = WeightBalanceInputs(
        pilot_lbs=args.pilot,
        front_passenger_lbs=args.front_passenger,
        rear_passengers_lbs=args.rear,
        baggage_1_lbs=args.baggage1,
        baggage_2_lbs=args.baggage2,
        fuel_gallons=args.fuel,
    )
    r = evaluate_weight_balance(inputs, profile)
    return "\n".join(
        [
            profile.name,
            f"Total weight: {r.total_weight_lbs:.0f} lbs",
            f"Total moment: {r.total_moment:.0f} lb-in",
            f"CG: {r.center_of_gravity_in:.1f} in",
            f"Status: {r.describe(profile)}",
        ]
    )


def cmd_holding(args: argparse.Namespace) -> str:
    """Holding pattern entry."""
    turn = TurnDirection.LEFT if args.turn == "left" else TurnDirection.RIGHT
    r = classify_holding_entry(HoldingEntryInputs(args.inbound, args.heading, turn))
    return f"{r.entry_type.value} entry"


def cmd_descent(args: argparse.Namespace) -> str:
    """Top-of-descent plan."""
    r = plan_descent(DescentPlanInputs(args.current, args.target, args.ground_speed))
    return "\n".join(
        [
            f"Distance to begin descent: {r.distance_nm} NM",
            f"Required rate: {r.required_rate_fpm} fpm",
            f"Time to target: {r.time_min} min",
        ]
    )


def cmd_convert(args: argparse.Namespace) -> str:
    """Unit conversion."""
    return convert(args.kind, args.value).format()


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    Returns:
        Parser with one subcommand per calculation.
    """
    parser = argparse.ArgumentParser(
        prog="flightcalc", description="FlightCalc - flight performance and navigation calculator"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    wind = subparsers.add_parser("wind", help="Headwind/crosswind for one runway")
    wind.add_argument("--runway", type=float, required=True, help="Runway heading (degrees)")
    _add_wind_arguments(wind)
    wind.set_defaults(handler=cmd_wind)

    runways = subparsers.add_parser("runways", help="Rank runway ends by headwind")
    runways.add_argument("idents", nargs="+", help="Runway identifiers (e.g., 04L/22R 13/31)")
    _add_wind_arguments(runways)
    runways.set_defaults(handler=cmd_runways)

    da = subparsers.add_parser("density-altitude", help="Pressure and density altitude")
    da.add_argument("--elevation", type=float, required=True, help="Field elevation (ft)")
    da.add_argument("--temp", type=float, required=True, help="Outside air temperature (C)")
    da.add_argument("--altimeter", type=float, default=29.92, help="Altimeter setting (inHg)")
    da.set_defaults(handler=cmd_density_altitude)

    wb = subparsers.add_parser("weight-balance", help="Weight and balance check")
    wb.add_argument("--profile", default=DEFAULT_PROFILE, help="Profile name or YAML path")
    wb.add_argument("--pilot", type=float, default=0.0, help="Pilot weight (lbs)")
    wb.add_argument("--front-passenger", type=float, default=0.0, help="Front passenger (lbs)")
    wb.add_argument("--rear", type=float, default=0.0, help="Rear passengers (lbs)")
    wb.add_argument("--baggage1", type=float, default=0.0, help="Baggage area 1 (lbs)")
    wb.add_argument("--baggage2", type=float, default=0.0, help="Baggage area 2 (lbs)")
    wb.add_argument("--fuel", type=float, default=0.0, help="Fuel (US gallons)")
    wb.set_defaults(handler=cmd_weight_balance)

    hold = subparsers.add_parser("holding", help="Holding pattern entry")
    hold.add_argument("--inbound", type=float, required=True, help="Inbound course (degrees)")
    hold.add_argument("--heading", type=float, required=True, help="Aircraft heading (degrees)")
    hold.add_argument("--turn", choices=["right", "left"], default="right", help="Turn direction")
    hold.set_defaults(handler=cmd_holding)

    descent = subparsers.add_parser("descent", help="Top of descent (3:1 rule)")
    descent.add_argument("--current", type=float, required=True, help="Current altitude (ft)")
    descent.add_argument("--target", type=float, required=True, help="Target altitude (ft)")
    descent.add_argument("--ground-speed", type=float, required=True, help="Groundspeed (kts)")
    descent.set_defaults(handler=cmd_descent)

    conv = subparsers.add_parser("convert", help="Unit conversion")
    conv.add_argument("kind", choices=[k.value for k in ConversionKind], help="Conversion")
    conv.add_argument("value", type=float, help="Value to convert")
    conv.set_defaults(handler=cmd_convert)

    return parser


def _add_wind_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--wind-dir", type=float, required=True, help="Wind direction (degrees)")
    parser.add_argument("--wind-speed", type=float, required=True, help="Wind speed (kts)")
    parser.add_argument("--gust", type=float, default=None, help="Gust speed (kts)")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments to parse (defaults to sys.argv[1:]).

    Returns:
        Parsed arguments
    """
    return build_parser().parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code: 0 on success, 1 for configuration errors, 2 for invalid input.
    """
    args = parse_args(argv)

    logging_config = get_config_path("logging.yaml")
    if logging_config.exists():
        initialize_logging(str(logging_config), use_platform_dir=True)
    else:
        initialize_logging(use_platform_dir=True)

    handler: Callable[[argparse.Namespace], str] = args.handler
    try:
        print(handler(args))
        return EXIT_OK
    except CalculationError as e:
        logger.info("Rejected %s input: %s", args.command, e)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    finally:
        shutdown_logging()


if __name__ == "__main__":
    sys.exit(main())
