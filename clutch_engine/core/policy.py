"""Polynomial pedal-control policy.

A policy is a pair of degree-5 polynomials in simulation time, one for the
gas pedal and one for the clutch pedal.  Raw polynomial values are clamped
to [0, 1] on every evaluation.
"""

from __future__ import annotations

from collections.abc import Sequence

from numpy.random import Generator

# Coefficients per pedal curve (constant term through t**5).
N_COEFFS: int = 6


def pedal_position(coeffs: Sequence[float], t: float) -> float:
    """Evaluate ``sum(c_i * t**i)`` and clamp the result to [0, 1].

    Args:
        coeffs: Polynomial coefficients, constant term first.
        t: Simulation time in seconds.

    Returns:
        Pedal position, 0.0 = released and 1.0 = fully pressed.
    """
    raw: float = 0.0
    for c in reversed(coeffs):
        raw = raw * t + c
    if raw < 0.0:
        return 0.0
    if raw > 1.0:
        return 1.0
    return raw


def _as_coeffs(values: Sequence[float], label: str) -> tuple[float, ...]:
    coeffs = tuple(float(v) for v in values)
    if len(coeffs) != N_COEFFS:
        raise ValueError(f"{label} must have {N_COEFFS} coefficients.")
    return coeffs


class ControlPolicy:
    """One individual: gas and clutch pedal curves plus a score cache.

    Coefficients are fixed at construction.  The only mutable part is the
    cached fitness, which is ``None`` until the simulator first scores the
    policy.

    Attributes:
        gas_coeffs: Gas pedal polynomial coefficients (constant term first).
        clutch_coeffs: Clutch pedal polynomial coefficients.
    """

    __slots__ = ("_gas_coeffs", "_clutch_coeffs", "_cached_score")

    def __init__(
        self,
        gas_coeffs: Sequence[float],
        clutch_coeffs: Sequence[float],
    ) -> None:
        self._gas_coeffs: tuple[float, ...] = _as_coeffs(gas_coeffs, "gas_coeffs")
        self._clutch_coeffs: tuple[float, ...] = _as_coeffs(
            clutch_coeffs, "clutch_coeffs"
        )
        self._cached_score: float | None = None

    @classmethod
    def random(cls, rng: Generator) -> ControlPolicy:
        """Create a policy with coefficients drawn uniformly from [-0.5, 0.5)."""
        clutch = rng.random(N_COEFFS) - 0.5
        gas = rng.random(N_COEFFS) - 0.5
        return cls(gas_coeffs=gas.tolist(), clutch_coeffs=clutch.tolist())

    @property
    def gas_coeffs(self) -> tuple[float, ...]:
        return self._gas_coeffs

    @property
    def clutch_coeffs(self) -> tuple[float, ...]:
        return self._clutch_coeffs

    def gas_pedal(self, t: float) -> float:
        """Gas pedal position at time *t*."""
        return pedal_position(self._gas_coeffs, t)

    def clutch_pedal(self, t: float) -> float:
        """Clutch pedal position at time *t* (1.0 = full holding torque)."""
        return pedal_position(self._clutch_coeffs, t)

    # -- score cache ----------------------------------------------------------

    @property
    def cached_score(self) -> float | None:
        return self._cached_score

    @property
    def has_cached_score(self) -> bool:
        return self._cached_score is not None

    def remember_score(self, score: float) -> None:
        self._cached_score = float(score)

    def forget_score(self) -> None:
        self._cached_score = None

    def __repr__(self) -> str:
        return (
            f"ControlPolicy(gas_coeffs={list(self._gas_coeffs)}, "
            f"clutch_coeffs={list(self._clutch_coeffs)}, "
            f"cached_score={self._cached_score})"
        )
