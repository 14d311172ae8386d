"""Hill-grade study: evolve launch policies across several road slopes.

Each grade is searched independently with ``seed = base_seed + i`` so that:
  - Results are fully reproducible given the same ``base_seed``.
  - No global random state is modified.
"""

from __future__ import annotations

import dataclasses
from typing import Any

from clutch_engine.core.evolution import EvolutionEngine
from clutch_engine.core.params import SimulationParameters


def run_hill_study(
    params: SimulationParameters,
    hill_grades: list[float],
    sweeps: int,
    base_seed: int = 42,
) -> dict[float, dict[str, Any]]:
    """Run a fixed-length search for every hill grade.

    Args:
        params: Baseline parameters; only ``hill_grade`` is varied.
        hill_grades: Road slopes to evaluate.
        sweeps: Sweeps per grade (>= 1).
        base_seed: Grade *i* is searched with seed ``base_seed + i``.

    Returns:
        Mapping from grade to a summary dictionary with keys:
            outcome        -- terminal outcome of the best policy
            score          -- its fitness
            energy         -- clutch energy dissipated (J)
            launch_time    -- simulated time at termination (s)
            gas_coeffs     -- best gas polynomial coefficients
            clutch_coeffs  -- best clutch polynomial coefficients
            simulations    -- number of simulation runs performed

    Raises:
        ValueError: If sweeps < 1.
    """
    if sweeps < 1:
        raise ValueError("sweeps must be >= 1.")

    summary: dict[float, dict[str, Any]] = {}
    for i, grade in enumerate(hill_grades):
        grade_params = dataclasses.replace(params, hill_grade=grade)
        engine = EvolutionEngine(grade_params, seed=base_seed + i)
        result = engine.search(sweeps)
        summary[grade] = {
            "outcome": result.outcome.value,
            "score": result.score,
            "energy": result.energy,
            "launch_time": result.time,
            "gas_coeffs": list(engine.best.gas_coeffs),
            "clutch_coeffs": list(engine.best.clutch_coeffs),
            "simulations": engine.simulator.runs,
        }
    return summary
