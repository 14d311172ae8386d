"""Telemetry file output and status messages for recorded runs."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from clutch_engine.core.simulator import Outcome, SimulationResult

TELEMETRY_HEADER: str = "#time\tvelocity\tacceleration\tRPM x1000\tclutch\tgas"


def write_trace(result: SimulationResult, path: Path) -> Path:
    """Write the per-step trace of *result* as a tab-separated file.

    The file starts with :data:`TELEMETRY_HEADER` followed by one line per
    integration step.  An existing file is overwritten.

    Args:
        result: A recorded simulation result.
        path: Output file.

    Returns:
        The path written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    frame = result.trace_frame()
    with open(path, "w", encoding="utf-8", newline="") as fh:
        fh.write(TELEMETRY_HEADER + "\n")
        frame.to_csv(fh, sep="\t", header=False, index=False, lineterminator="\n")
    logger.debug("Wrote {} telemetry rows to {}", len(frame), path)
    return path


def format_status(result: SimulationResult) -> str:
    """Render the one-line status message for a finished run."""
    if result.outcome is Outcome.STALL:
        return f"Car stalled, maximum speed: {result.speed} meters/sec"
    if result.outcome is Outcome.SUCCESS:
        return f"Started successfully, clutch dissipated {result.energy} J"
    return f"Failed to start in time, {result.rpm_mismatch} RPM mismatch"
