"""Asexual mutation operator for control policies."""

from __future__ import annotations

import numpy as np
from numpy.random import Generator

from clutch_engine.core.policy import N_COEFFS, ControlPolicy

# Each coefficient is scaled by a factor drawn from [SCALE_LOW, SCALE_LOW + SCALE_SPAN).
SCALE_LOW: float = 0.9
SCALE_SPAN: float = 0.2


def _scale_factors(rng: Generator) -> np.ndarray:
    return SCALE_LOW + SCALE_SPAN * rng.random(N_COEFFS)


def mutate(parent: ControlPolicy, rng: Generator) -> ControlPolicy:
    """Return a perturbed copy of *parent*.

    Every one of the 12 coefficients is multiplied by an independent factor
    ``0.9 + 0.2*U`` with ``U ~ Uniform[0, 1)``.  Signs are preserved and
    zero coefficients stay zero.  The child starts without a cached score;
    the parent is left untouched.

    Args:
        parent: Policy to copy.
        rng: Random source.

    Returns:
        A new :class:`ControlPolicy`.
    """
    clutch = np.asarray(parent.clutch_coeffs) * _scale_factors(rng)
    gas = np.asarray(parent.gas_coeffs) * _scale_factors(rng)
    return ControlPolicy(gas_coeffs=gas.tolist(), clutch_coeffs=clutch.tolist())
