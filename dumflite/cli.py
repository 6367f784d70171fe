"""Command-line flight driver.

Builds a single-component rocket, flies it on the Moon until it comes back
down, and prints a status line every reporting interval.

Usage:
    python -m dumflite
    python -m dumflite --time-step "10 ms" --pitch 60 --csv flight.csv
"""

import argparse
import logging
from functools import partial

from dumflite import units
from dumflite.constants import DEG_TO_RAD, LUNAR_GRAVITY
from dumflite.simulation import FlightConfig, FlightSample, run_flight
from dumflite.units import parse_quantity
from dumflite.vehicle import Body, BodyConfig, ThrustComponent

logger = logging.getLogger(__name__)

COLUMN_WIDTH = 36


def format_vec(values, precision: int = 6) -> str:
    """Render a 3-vector as ``<x, y, z>`` with the given significant digits."""
    return "<" + ", ".join(f"{float(v):.{precision}g}" for v in values) + ">"


def format_header() -> str:
    """Column header matching format_status()."""
    return (
        " " * 10
        + f"{'Position (m)':<{COLUMN_WIDTH}} "
        + f"{'Velocity (m/s)':<{COLUMN_WIDTH}} "
        + f"{'Acceleration (m/s^2)':<{COLUMN_WIDTH}}"
    )


def format_status(sample: FlightSample) -> str:
    """One status line: time, position, velocity, acceleration."""
    return (
        f"{sample.time:>8.0f}s "
        f"{format_vec(sample.position):<{COLUMN_WIDTH}} "
        f"{format_vec(sample.velocity):<{COLUMN_WIDTH}} "
        f"{format_vec(sample.acceleration):<{COLUMN_WIDTH}}"
    )


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the driver."""
    parser = argparse.ArgumentParser(
        prog="dumflite",
        description="Fly a single-engine rocket until it returns to the ground.",
    )

    sim = parser.add_argument_group("simulation")
    sim.add_argument(
        "--time-step", type=partial(parse_quantity, dimension="time"), default=1.0 * units.ms,
        help="Integration step, e.g. '1 ms' (default: 1 ms)",
    )
    sim.add_argument(
        "--report-interval", type=partial(parse_quantity, dimension="time"), default=1.0 * units.s,
        help="Time between status lines (default: 1 s)",
    )
    sim.add_argument(
        "--max-time", type=partial(parse_quantity, dimension="time"), default=None,
        help="Stop after this much simulated time (default: no limit)",
    )
    sim.add_argument(
        "--gravity", type=partial(parse_quantity, dimension="acceleration"), default=LUNAR_GRAVITY,
        help=f"Gravitational acceleration (default: {LUNAR_GRAVITY} m/s^2)",
    )

    engine = parser.add_argument_group("engine")
    engine.add_argument(
        "--dry-mass", type=partial(parse_quantity, dimension="mass"), default=20.0 * units.kg,
        help="Dry mass (default: 20 kg)",
    )
    engine.add_argument(
        "--propellant-mass", type=partial(parse_quantity, dimension="mass"), default=80.0 * units.kg,
        help="Propellant mass (default: 80 kg)",
    )
    engine.add_argument(
        "--thrust", type=partial(parse_quantity, dimension="force"), default=250.0 * units.N,
        help="Thrust (default: 250 N)",
    )
    engine.add_argument(
        "--usage-rate", type=partial(parse_quantity, dimension="mass_flow"),
        default=0.1 * units.kg / units.s,
        help="Propellant usage rate (default: 0.1 kg/s)",
    )
    engine.add_argument("--pitch", type=float, default=45.0, help="Thrust pitch [deg] (default: 45)")
    engine.add_argument("--yaw", type=float, default=45.0, help="Thrust yaw [deg] (default: 45)")

    output = parser.add_argument_group("output")
    output.add_argument("--csv", default=None, help="Write the sampled trajectory to this CSV file")
    output.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    return parser


def build_rocket(args: argparse.Namespace) -> Body:
    """Create the body described by the parsed arguments."""
    rocket = Body(BodyConfig(gravity=args.gravity))
    rocket.add_component(ThrustComponent(
        dry_mass=args.dry_mass,
        propellant_mass=args.propellant_mass,
        thrust=args.thrust,
        usage_rate=args.usage_rate,
        direction=[args.pitch * DEG_TO_RAD, args.yaw * DEG_TO_RAD, 0.0],
        enabled=True,
    ))
    return rocket


def main(argv: list[str] | None = None) -> int:
    """Run the driver; returns 0 if the rocket landed, 1 otherwise."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    rocket = build_rocket(args)
    config = FlightConfig(
        time_step=args.time_step,
        report_interval=args.report_interval,
        max_time=args.max_time,
    )

    print(format_header())
    result = run_flight(rocket, config, on_report=lambda sample: print(format_status(sample)))

    if args.csv is not None:
        result.to_dataframe().write_csv(args.csv)
        logger.info(f"Wrote {len(result.samples)} samples to {args.csv}")

    if not result.landed:
        print(f"Still airborne at t={result.flight_time:.3f} s")
        return 1

    print(f"Landed at t={result.flight_time:.3f} s, apogee {result.apogee:.3f} m")
    return 0
