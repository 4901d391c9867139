"""CLI entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from airnav.analysis.runways import preferred_runway, runway_winds
from airnav.analysis.wind import compose, decompose
from airnav.config import list_airfields, load_airfield_runways
from airnav.digest.text import format_components, format_runway_table, format_vector
from airnav.models import PolarVector

logger = logging.getLogger(__name__)


def run_components(args: argparse.Namespace) -> None:
    """Decompose a wind against a heading or every runway of an airfield."""
    wind = PolarVector(direction=args.direction, speed=args.speed)

    if args.airfield:
        runways = load_airfield_runways(args.airfield)
        logger.debug("Loaded %d runways for %s", len(runways), args.airfield)
        rows = runway_winds(wind, runways)
        print(f"Wind {format_vector(wind)} at {args.airfield.upper()}")
        print(format_runway_table(rows, preferred_runway(wind, runways)))
        return

    wc = decompose(wind, args.heading)
    print(format_components(wc))


def run_compose(args: argparse.Namespace) -> None:
    """Print the resultant of two polar vectors."""
    vector_a = PolarVector(direction=args.direction_a, speed=args.speed_a)
    vector_b = PolarVector(direction=args.direction_b, speed=args.speed_b)
    print(format_vector(compose(vector_a, vector_b)))


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="airnav",
        description="Wind components and wind triangle arithmetic",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # components subcommand
    comp_parser = subparsers.add_parser(
        "components", help="Headwind/tailwind and crosswind for a wind"
    )
    comp_parser.add_argument("direction", type=int, help="Wind direction (degrees)")
    comp_parser.add_argument("speed", type=float, help="Wind speed (kt)")
    target = comp_parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--heading", type=int, help="Reference heading (degrees)")
    target.add_argument(
        "--airfield", help="Airfield code from runways.yaml (resolves every runway)"
    )

    # compose subcommand
    compose_parser = subparsers.add_parser(
        "compose", help="Resultant of two polar vectors (e.g. airspeed + wind)"
    )
    compose_parser.add_argument("direction_a", type=int, metavar="DIR_A")
    compose_parser.add_argument("speed_a", type=float, metavar="SPEED_A")
    compose_parser.add_argument("direction_b", type=int, metavar="DIR_B")
    compose_parser.add_argument("speed_b", type=float, metavar="SPEED_B")

    # airfields subcommand
    subparsers.add_parser("airfields", help="List configured airfields")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        if args.command == "airfields":
            for name in list_airfields():
                print(f"  {name}")
        elif args.command == "components":
            run_components(args)
        elif args.command == "compose":
            run_compose(args)
    except KeyError as exc:
        print(f"Error: {exc.args[0]}")
        sys.exit(1)
    except ValueError as exc:
        print(f"Error: {exc}")
        sys.exit(1)
