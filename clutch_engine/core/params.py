"""Physical and search parameters for the clutch launch simulation."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields

from clutch_engine.exceptions import ConfigurationError

# Gravitational acceleration used for the hill load (m/s^2).
GRAVITY: float = 9.8

# Fields allowed to be zero or negative; everything else must be > 0.
_SIGNED_FIELDS: frozenset[str] = frozenset({"hill_grade"})
_NON_NEGATIVE_FIELDS: frozenset[str] = frozenset({"engine_drag_torque"})


def rpm_to_w(rpm: float) -> float:
    """Convert engine RPM to the angular velocity used by the model."""
    return rpm * math.pi / 60.0


def w_to_rpm(w: float) -> float:
    """Inverse of :func:`rpm_to_w`."""
    return w * 60.0 / math.pi


@dataclass(frozen=True)
class SimulationParameters:
    """Immutable configuration shared by the simulator and the search.

    All values are SI units unless stated otherwise.

    Attributes:
        mass: Vehicle mass in kg.
        flywheel_inertia: Moment of inertia of the flywheel (kg m^2).
        gear_ratio: First gear times final drive ratio.
        wheel_radius: Driven wheel radius in m.
        dt: Integration time step in s.
        max_sim_time: A run that has neither stalled nor reached the speed
            goal by this time ends in a timeout.
        speed_goal: Vehicle speed (m/s) that counts as a successful launch.
        clutch_tolerance: Slip below which the clutch is treated as locked.
        hill_grade: Road slope; positive values resist forward motion.
        idle_rpm: Engine idle speed.  Below it the engine stalls.
        max_torque_rpm: Engine speed at which peak torque is reached.
        redline_rpm: Upper clamp for engine speed.
        idle_torque: Engine torque available at idle (N m).
        max_torque: Peak engine torque (N m).
        engine_drag_torque: Internal engine friction (N m, >= 0).
        max_clutch_torque: Clutch holding torque at full pedal (N m).
        population_size: Number of individuals in the search population.
    """

    mass: float = 1500.0
    flywheel_inertia: float = 0.07
    gear_ratio: float = 15.2
    wheel_radius: float = 0.24
    dt: float = 0.01
    max_sim_time: float = 30.0
    speed_goal: float = 5.0
    clutch_tolerance: float = 0.02
    hill_grade: float = 0.0
    idle_rpm: float = 800.0
    max_torque_rpm: float = 2500.0
    redline_rpm: float = 7000.0
    idle_torque: float = 136.0
    max_torque: float = 200.0
    engine_drag_torque: float = 3.0
    max_clutch_torque: float = 400.0
    population_size: int = 100

    def __post_init__(self) -> None:
        """Validate parameters."""
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(
                    f"{f.name} must be numeric, got {type(value).__name__}."
                )
            if not math.isfinite(value):
                raise ConfigurationError(f"{f.name} must be finite.")
            if f.name in _SIGNED_FIELDS:
                continue
            if f.name in _NON_NEGATIVE_FIELDS:
                if value < 0.0:
                    raise ConfigurationError(f"{f.name} must be >= 0.")
            elif value <= 0.0:
                raise ConfigurationError(f"{f.name} must be > 0.")
        if not isinstance(self.population_size, int):
            raise ConfigurationError("population_size must be an integer.")
        if self.max_torque_rpm <= self.idle_rpm:
            raise ConfigurationError("max_torque_rpm must be > idle_rpm.")
        if self.redline_rpm < self.max_torque_rpm:
            raise ConfigurationError("redline_rpm must be >= max_torque_rpm.")

    @property
    def k(self) -> float:
        """Engine angular velocity per unit of vehicle speed."""
        return self.gear_ratio / self.wheel_radius

    @property
    def idle_w(self) -> float:
        return rpm_to_w(self.idle_rpm)

    @property
    def max_torque_w(self) -> float:
        return rpm_to_w(self.max_torque_rpm)

    @property
    def redline_w(self) -> float:
        return rpm_to_w(self.redline_rpm)
