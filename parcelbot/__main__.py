"""Module entry point for `python -m parcelbot`."""

from __future__ import annotations

import argparse
from pathlib import Path

from parcelbot.app import (
    DEFAULT_COMPARE_ROBOTS,
    resolve_settings,
    run_benchmark,
    run_simulation,
)
from parcelbot.sim.agent_policy import ROBOT_NAMES
from parcelbot.sim.errors import NoRouteError, TurnLimitExceeded


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the parcel delivery robot.")
    parser.add_argument(
        "--robot",
        default=None,
        help=f"Robot to run: {', '.join(ROBOT_NAMES)}.",
    )
    parser.add_argument(
        "--parcels",
        type=int,
        default=None,
        help="Number of random parcels to deliver.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random village and random robot.",
    )
    parser.add_argument(
        "--world",
        type=Path,
        default=None,
        help="JSON village file with roads, hub and mail_route.",
    )
    parser.add_argument(
        "--compare",
        type=int,
        default=None,
        metavar="TRIALS",
        help="Benchmark robots over this many random villages.",
    )
    parser.add_argument(
        "--robots",
        nargs="+",
        default=list(DEFAULT_COMPARE_ROBOTS),
        help="Robots to benchmark (with --compare).",
    )
    parser.add_argument(
        "--max-turns",
        type=int,
        default=None,
        help="Stop a run that has not delivered everything after this many turns.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only print the final turn count.",
    )
    args = parser.parse_args()

    try:
        settings = resolve_settings(
            robot=args.robot,
            parcels=args.parcels,
            seed=args.seed,
            world_path=args.world,
            max_turns=args.max_turns,
        )
        if args.compare is not None:
            run_benchmark(settings, args.compare, robot_names=args.robots)
            return
        run_simulation(settings, quiet=args.quiet)
    except (ValueError, FileNotFoundError, NoRouteError, TurnLimitExceeded) as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
