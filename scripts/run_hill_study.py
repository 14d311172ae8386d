#!/usr/bin/env python
"""Evolve launch policies on a range of hill grades and save a summary.

This script:

1. Loads the default simulation parameters.
2. Runs a seeded evolutionary search (default: 20 sweeps) for each hill
   grade in ``HILL_GRADES``.
3. Saves results to ``results/hill_study.json``.
4. Prints a structured summary.

Usage
-----
::

    python scripts/run_hill_study.py
"""

from __future__ import annotations

import json
import os
import sys

# Ensure the project root is on the import path.
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from clutch_engine.config import load_parameters  # noqa: E402
from clutch_engine.core.study import run_hill_study  # noqa: E402
from clutch_engine.logger_setup import setup_logger  # noqa: E402

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

HILL_GRADES: list[float] = [-0.05, 0.0, 0.05, 0.10, 0.15]
SWEEPS: int = 20
POPULATION_SIZE: int = 50
BASE_SEED: int = 2024
RESULTS_DIR: str = os.path.join(_project_root, "results")
OUTPUT_PATH: str = os.path.join(RESULTS_DIR, "hill_study.json")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def main() -> None:
    """Run the hill-grade study and save the summary."""
    setup_logger(level="WARNING")

    print("=" * 60)
    print("HILL GRADE LAUNCH STUDY")
    print("=" * 60)
    print()

    params = load_parameters(overrides={"population_size": POPULATION_SIZE})
    print(f"[1/2] Searching {len(HILL_GRADES)} grades, {SWEEPS} sweeps each")
    summary = run_hill_study(params, HILL_GRADES, sweeps=SWEEPS, base_seed=BASE_SEED)
    print("      Search complete.")
    print()

    print("[2/2] Saving results")
    output: dict[str, object] = {
        "metadata": {
            "sweeps": SWEEPS,
            "population_size": POPULATION_SIZE,
            "base_seed": BASE_SEED,
        },
        "grades": {str(grade): entry for grade, entry in summary.items()},
    }
    os.makedirs(RESULTS_DIR, exist_ok=True)
    with open(OUTPUT_PATH, "w", encoding="utf-8") as fh:
        json.dump(output, fh, indent=2, sort_keys=True)
    print(f"      Results saved to {OUTPUT_PATH}")
    print()

    # -- Structured summary --------------------------------------------------
    print("=" * 60)
    print(f"  {'Grade':>6}  {'Outcome':<8}  {'Score':>12}  {'Energy (J)':>12}")
    print("=" * 60)
    for grade, entry in summary.items():
        print(
            f"  {grade:6.2f}  {entry['outcome']:<8}  "
            f"{entry['score']:12.6g}  {entry['energy']:12.1f}"
        )
    print()
    print("Study complete.")


if __name__ == "__main__":
    main()
