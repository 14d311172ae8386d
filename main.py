"""CLI entrypoint for the clutch launch optimizer."""

from __future__ import annotations

import argparse
import signal
import sys
import threading
from pathlib import Path

from loguru import logger

from clutch_engine import __version__
from clutch_engine.config import load_parameters
from clutch_engine.core.evolution import EvolutionEngine
from clutch_engine.core.simulator import SimulationResult
from clutch_engine.logger_setup import setup_logger
from clutch_engine.telemetry import format_status, write_trace

DEFAULT_TELEMETRY_PATH: Path = Path("clutch.dat")


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", type=Path, default=None, help="YAML parameter file")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--sweeps", type=int, default=None, help="stop after this many sweeps"
    )
    parser.add_argument(
        "--telemetry",
        type=Path,
        default=DEFAULT_TELEMETRY_PATH,
        help="file receiving the best individual's trajectory",
    )
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Evolve pedal curves until interrupted."""
    args = _parse_args(argv)
    setup_logger(level=args.log_level)

    params = load_parameters(args.config)

    print(f"Clutch Launch Optimizer v{__version__}")
    print("=" * 56)
    print(f"  Vehicle mass     : {params.mass:.0f} kg")
    print(f"  Hill grade       : {params.hill_grade}")
    print(f"  Speed goal       : {params.speed_goal} m/s")
    print(f"  Population size  : {params.population_size}")
    print(f"  Telemetry file   : {args.telemetry}")
    print("-" * 56)
    print("Press Ctrl-C to stop after the current sweep.\n")

    stop = threading.Event()

    def _request_stop(signum: int, frame: object) -> None:
        logger.warning("Interrupt received; finishing current sweep")
        stop.set()

    signal.signal(signal.SIGINT, _request_stop)

    def _report(result: SimulationResult) -> None:
        write_trace(result, args.telemetry)
        logger.info(format_status(result))

    engine = EvolutionEngine(params, seed=args.seed)
    engine.run(stop_event=stop, max_sweeps=args.sweeps, on_sweep=_report)

    print(f"\nStopped after {engine.sweeps} sweeps.")
    print(f"Best score: {engine.best_score():.6g}")


if __name__ == "__main__":
    sys.exit(main() or 0)
