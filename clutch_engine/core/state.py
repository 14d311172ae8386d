"""Per-run vehicle state for the clutch launch simulation."""

from __future__ import annotations


class VehicleState:
    """Mutable bookkeeping for a single simulation run.

    Attributes:
        t: Simulated time in seconds.
        v: Vehicle speed in m/s.
        w: Engine angular velocity.
        direction: Clutch slip (``w - v*K``) carried over from the
            previous step; its sign change marks a lock-up.
        energy: Energy dissipated by clutch slip so far (J).
    """

    __slots__ = ("t", "v", "w", "direction", "energy")

    def __init__(self, w: float, k: float) -> None:
        self.t: float = 0.0
        self.v: float = 0.0
        self.w: float = w
        self.direction: float = w - self.v * k
        self.energy: float = 0.0

    def slip(self, k: float) -> float:
        """Engine speed minus wheel speed referred to the engine side."""
        return self.w - self.v * k
