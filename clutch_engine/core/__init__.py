"""Core simulation and search modules for the clutch launch optimizer."""

from clutch_engine.core.engine import max_torque
from clutch_engine.core.evolution import EvolutionEngine
from clutch_engine.core.mutation import mutate
from clutch_engine.core.params import SimulationParameters, rpm_to_w, w_to_rpm
from clutch_engine.core.policy import ControlPolicy, pedal_position
from clutch_engine.core.simulator import (
    STALL_PENALTY,
    ClutchSimulator,
    Outcome,
    SimulationResult,
    TelemetryRow,
    locked_clutch_torque,
)
from clutch_engine.core.state import VehicleState
from clutch_engine.core.study import run_hill_study

__all__ = [
    "ClutchSimulator",
    "ControlPolicy",
    "EvolutionEngine",
    "Outcome",
    "STALL_PENALTY",
    "SimulationParameters",
    "SimulationResult",
    "TelemetryRow",
    "VehicleState",
    "locked_clutch_torque",
    "max_torque",
    "mutate",
    "pedal_position",
    "run_hill_study",
    "rpm_to_w",
    "w_to_rpm",
]
