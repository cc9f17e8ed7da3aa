"""Command-line front end for the drone telemetry simulator."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .dashboard import Dashboard
from .logger import get_logger
from .simulator import DroneSimulator
from .telemetry import DEFAULT_INTERVAL, TelemetryModel

__all__ = ["main"]

_STRATEGIES = {"hover": 0, "random-walk": 1}

_HELP = """Commands:
  s, start, stop     start or stop the simulation
  f, failure         toggle failure simulation
  h, hover           use the hover strategy
  r, random          use the random-walk strategy
  show               show the telemetry
  about              about this program
  q, quit, exit      leave"""


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="dronetelemetry", description="Simulate real-time drone telemetry."
    )
    parser.add_argument(
        "--interval", type=float, default=DEFAULT_INTERVAL,
        help="seconds between simulation steps (default: %(default)s)",
    )
    parser.add_argument(
        "--strategy", choices=sorted(_STRATEGIES), default="hover",
        help="movement strategy (default: %(default)s)",
    )
    parser.add_argument("--failure", action="store_true", help="start in failure mode")
    parser.add_argument(
        "--steps", type=int, default=None,
        help="run this many steps, print the telemetry and exit",
    )
    return parser.parse_args(argv)


def _run_steps(dashboard: Dashboard, steps: int) -> None:
    for number in range(1, steps + 1):
        dashboard.model.update_telemetry()
        print(f"Step {number}:")
        print(dashboard.render())


def _run_interactive(dashboard: Dashboard) -> None:
    print(_HELP)
    print(dashboard.render())
    for raw in sys.stdin:
        command = raw.strip().lower()
        if command in ("q", "quit", "exit"):
            break
        if command in ("s", "start", "stop"):
            dashboard.on_start_stop_clicked()
        elif command in ("f", "failure"):
            dashboard.on_failure_clicked()
        elif command in ("h", "hover"):
            dashboard.on_strategy_selected(0)
        elif command in ("r", "random"):
            dashboard.on_strategy_selected(1)
        elif command in ("", "show"):
            print(dashboard.render())
            continue
        elif command == "about":
            print(dashboard.about_text)
            continue
        elif command == "help":
            print(_HELP)
            continue
        else:
            print(f"Unknown command: {command}")
            continue
        print(f"Status: {dashboard.status_text}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulator; returns the process exit status."""
    args = _parse_args(argv)
    try:
        try:
            get_logger()
        except Exception as exc:  # the simulator still runs with console output only
            print(f"Logger initialization failed: {exc}", file=sys.stderr)

        model = TelemetryModel(args.interval)
        with Dashboard(model, DroneSimulator()) as dashboard:
            dashboard.warning_shown.connect(print)
            if args.strategy != "hover":
                dashboard.on_strategy_selected(_STRATEGIES[args.strategy])
            if args.failure:
                dashboard.on_failure_clicked()
            if args.steps is not None:
                if args.steps < 0:
                    raise ValueError(f"steps must not be negative, got {args.steps}")
                _run_steps(dashboard, args.steps)
            else:
                _run_interactive(dashboard)
        return 0
    except Exception as exc:
        print(f"Fatal error: Application failed to start: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())