"""
Driver loop for the greenhouse simulation.

Usage:
  smart-garden
  smart-garden --cycles 10 --delay 0 --seed 42
  smart-garden --json
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from collections.abc import Callable
from typing import TextIO

from smart_garden.config import load_config, setup_logging
from smart_garden.control_loops.garden_controller import GardenController
from smart_garden.domain.exceptions import GardenError
from smart_garden.garden import build_default_garden
from smart_garden.schemas.events import CycleReport

logger = logging.getLogger(__name__)


def run_simulation(
    controller: GardenController,
    cycles: int,
    delay_seconds: float,
    *,
    as_json: bool = False,
    out: TextIO | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> list[CycleReport]:
    """Run ``cycles`` cycles, printing each one; returns the reports."""
    out = out or sys.stdout
    reports: list[CycleReport] = []

    print("Welcome to the Smart Garden system!\n", file=out)
    for day in range(1, cycles + 1):
        report = controller.run_cycle()
        reports.append(report)

        if as_json:
            print(report.model_dump_json(), file=out)
        else:
            print(f"=== Day {day} ===", file=out)
            for event in report.events:
                print(event.message, file=out)
            print(file=out)

        if day < cycles and delay_seconds > 0:
            sleep(delay_seconds)

    print("Greenhouse shutting down. Goodbye!", file=out)
    return reports


def main(argv: list[str] | None = None) -> int:
    """Run the greenhouse simulation for a fixed number of days."""
    parser = argparse.ArgumentParser(prog="smart-garden", description="Run the greenhouse simulation")
    parser.add_argument("--cycles", type=int, help="Number of cycles (days) to run (env: SMART_GARDEN_CYCLES)")
    parser.add_argument(
        "--delay", type=float, help="Seconds to sleep between cycles (env: SMART_GARDEN_CYCLE_DELAY)"
    )
    parser.add_argument("--seed", type=int, help="Seed for reproducible runs (env: SMART_GARDEN_SEED)")
    parser.add_argument("--json", action="store_true", help="Print each cycle report as JSON")
    args = parser.parse_args(argv)

    if args.cycles is not None and args.cycles < 1:
        parser.error("--cycles must be at least 1")
    if args.delay is not None and args.delay < 0:
        parser.error("--delay must not be negative")

    # Flags win over the environment; overridden variables are never parsed.
    overrides = {
        name: value
        for name, value in (
            ("cycles", args.cycles),
            ("cycle_delay_seconds", args.delay),
            ("random_seed", args.seed),
        )
        if value is not None
    }
    try:
        config = load_config(**overrides)
        setup_logging(debug=config.DEBUG, log_file=config.log_file, level=config.log_level)
    except (GardenError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    controller = build_default_garden(seed=config.random_seed)
    try:
        run_simulation(controller, config.cycles, config.cycle_delay_seconds, as_json=args.json)
    except KeyboardInterrupt:
        logger.info("Simulation stopped by user after %d cycles", controller.cycle_count)
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
