"""Command-line entry point.

    fuelstation-sim [CONFIG] [--seed N] [--length S] [--realtime FACTOR] [--json] [-v]

CONFIG is a JSON or YAML scenario (full or flat parameter file); without it
the default scenario runs.  The report goes to stdout, progress logging to
stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys

from fuelstation_sim.config.loader import ConfigError, load_scenario
from fuelstation_sim.config.scenario import Scenario
from fuelstation_sim.engine.controller import run_simulation
from fuelstation_sim.api.report import render_report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fuelstation-sim",
        description="Simulate cars competing for fuel pumps and checkout registers.",
    )
    parser.add_argument("config", nargs="?", help="scenario file (.json, .yaml, .yml)")
    parser.add_argument("--seed", type=int, help="random seed for a reproducible run")
    parser.add_argument("--length", type=float, help="override simulation length (simulated s)")
    parser.add_argument(
        "--realtime", type=float, metavar="FACTOR",
        help="pace the run against the wall clock (1.0 = real time)",
    )
    parser.add_argument("--json", action="store_true", help="print the full result as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every customer event")
    return parser


def _apply_overrides(scenario: Scenario, args: argparse.Namespace) -> Scenario:
    station_updates = {}
    simulation_updates = {}
    if args.length is not None:
        station_updates["simulation_length"] = args.length
    if args.seed is not None:
        simulation_updates["random_seed"] = args.seed
    if args.realtime is not None:
        simulation_updates["realtime_factor"] = args.realtime

    data = scenario.model_dump(mode="json")
    data["station"].update(station_updates)
    data["simulation"].update(simulation_updates)
    return Scenario.model_validate(data)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        scenario = load_scenario(args.config) if args.config else Scenario()
        scenario = _apply_overrides(scenario, args)
    except ConfigError as exc:
        print(f"fuelstation-sim: {exc}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"fuelstation-sim: invalid option: {exc}", file=sys.stderr)
        return 2

    result = run_simulation(scenario)
    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        print(render_report(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
