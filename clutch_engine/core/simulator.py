"""Time-stepped engine/clutch/vehicle simulator.

Each run starts at idle with the vehicle at rest and integrates the coupled
engine and vehicle dynamics with explicit Euler steps.  The clutch is either
*locked* (engine and wheels turn as one body and the clutch torque follows
from the torque balance) or *slipping* (the clutch transmits a friction
torque set by the pedal and dissipates energy).

Every run ends in exactly one of three outcomes:

    STALL    engine speed fell below idle     score = -1e6 + v
    SUCCESS  vehicle reached the speed goal   score = 1 / (1 + energy)
    TIMEOUT  max_sim_time elapsed             score = -|w - v*K|

Scoring is deterministic: no random numbers are drawn here.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import NamedTuple

import pandas as pd

from clutch_engine.core.engine import max_torque
from clutch_engine.core.params import GRAVITY, SimulationParameters, w_to_rpm
from clutch_engine.core.policy import ControlPolicy
from clutch_engine.core.state import VehicleState

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

STALL_PENALTY: float = -1_000_000.0

TRACE_COLUMNS: tuple[str, ...] = (
    "time",
    "velocity",
    "acceleration",
    "rpm_thousands",
    "clutch",
    "gas",
)

# ---------------------------------------------------------------------------
# Result containers
# ---------------------------------------------------------------------------


class Outcome(enum.Enum):
    """How a simulation run terminated."""

    STALL = "stall"
    SUCCESS = "success"
    TIMEOUT = "timeout"


class TelemetryRow(NamedTuple):
    """One integration step of a recorded run."""

    time: float
    velocity: float
    acceleration: float
    rpm_thousands: float
    clutch: float
    gas: float


@dataclass(frozen=True)
class SimulationResult:
    """Outcome of a single simulation run.

    Attributes:
        outcome: Terminal classification of the run.
        score: Fitness value (higher is better).
        time: Simulated time at termination.
        speed: Final vehicle speed (m/s).
        engine_speed: Final engine angular velocity.
        energy: Energy dissipated by clutch slip (J).
        k: Engine-to-vehicle speed ratio used for the run.
        trace: Per-step telemetry; empty unless the run was recorded.
    """

    outcome: Outcome
    score: float
    time: float
    speed: float
    engine_speed: float
    energy: float
    k: float
    trace: tuple[TelemetryRow, ...] = ()

    @property
    def rpm_mismatch(self) -> float:
        """Residual engine/wheel speed difference, in RPM."""
        return w_to_rpm(abs(self.engine_speed - self.speed * self.k))

    def trace_frame(self) -> pd.DataFrame:
        """Return the recorded trace as a DataFrame, one row per step."""
        return pd.DataFrame(list(self.trace), columns=list(TRACE_COLUMNS))


# ---------------------------------------------------------------------------
# Clutch torque
# ---------------------------------------------------------------------------


def locked_clutch_torque(
    params: SimulationParameters,
    engine_torque: float,
    gravity_force: float,
    capacity: float,
) -> float:
    """Clutch torque that keeps engine and wheels rigidly coupled.

    Solves ``(T - c) / I == K * (F + c*K) / m`` for ``c``.  When the
    required torque exceeds *capacity* the clutch cannot hold, and the
    torque is limited to the capacity with its sign preserved.
    """
    k: float = params.k
    inertia: float = params.flywheel_inertia
    mass: float = params.mass
    torque: float = (engine_torque * mass - inertia * gravity_force * k) / (
        k * k * inertia + mass
    )
    if abs(torque) > capacity:
        torque = -capacity if torque < 0.0 else capacity
    return torque


# ---------------------------------------------------------------------------
# Simulator
# ---------------------------------------------------------------------------


class ClutchSimulator:
    """Scores control policies by simulating a launch from idle.

    Attributes:
        params: Simulation parameters.
        runs: Number of integrations performed so far.  Cached score
            lookups do not increment it.
    """

    def __init__(self, params: SimulationParameters) -> None:
        self.params: SimulationParameters = params
        self.runs: int = 0

    def score(self, policy: ControlPolicy, verbose: bool = False) -> float:
        """Return the fitness of *policy*.

        Non-verbose calls return the cached score when one exists and fill
        the cache otherwise.  Verbose calls always re-run the simulation
        through :meth:`rescore`; call that directly to keep the trace.
        """
        if verbose:
            return self.rescore(policy).score
        if policy.has_cached_score:
            return policy.cached_score  # type: ignore[return-value]
        result = self.evaluate(policy)
        policy.remember_score(result.score)
        return result.score

    def rescore(self, policy: ControlPolicy) -> SimulationResult:
        """Re-run a recorded simulation of *policy* and refresh its cache.

        Returns:
            The recorded :class:`SimulationResult`, trace included.
        """
        result = self.evaluate(policy, record=True)
        policy.remember_score(result.score)
        return result

    def evaluate(self, policy: ControlPolicy, record: bool = False) -> SimulationResult:
        """Run the simulation for *policy*, ignoring any cached score.

        Args:
            policy: Pedal curves to drive with.
            record: If True, collect one :class:`TelemetryRow` per step.

        Returns:
            A :class:`SimulationResult` for the run.
        """
        self.runs += 1
        p = self.params
        k: float = p.k
        dt: float = p.dt
        idle_w: float = p.idle_w
        redline_w: float = p.redline_w
        tolerance: float = p.clutch_tolerance
        inertia: float = p.flywheel_inertia
        mass: float = p.mass

        state = VehicleState(w=idle_w, k=k)
        trace: list[TelemetryRow] = []

        while state.t < p.max_sim_time:
            # 1. Lock-up: slip changed sign since the last step.
            if state.direction * state.slip(k) < 0.0:
                state.w = state.v * k
            state.direction = state.slip(k)

            gas: float = policy.gas_pedal(state.t)
            clutch: float = policy.clutch_pedal(state.t)
            capacity: float = clutch * p.max_clutch_torque

            # 2-3. Engine torque and road load.
            engine_torque: float = max_torque(p, state.w) * gas - p.engine_drag_torque
            gravity_force: float = -GRAVITY * p.hill_grade * mass

            # 4-5. Clutch torque: locked or slipping.
            if abs(state.direction) < tolerance:
                clutch_torque = locked_clutch_torque(
                    p, engine_torque, gravity_force, capacity
                )
            else:
                clutch_torque = capacity
                if state.w < state.v * k:
                    clutch_torque = -clutch_torque

            # 6-7. Integrate.
            net_torque: float = engine_torque - clutch_torque
            net_force: float = gravity_force + clutch_torque * k
            alpha: float = net_torque / inertia
            a: float = net_force / mass
            state.w += dt * alpha
            if state.w < 0.0:
                state.w = 0.0
            elif state.w > redline_w:
                state.w = redline_w
            state.v += dt * a

            # 8. Slip dissipation, judged on the pre-update slip.
            if abs(state.direction) > tolerance:
                state.energy += capacity * abs(state.slip(k)) * dt

            # 9. Record, then advance the clock.
            if record:
                trace.append(
                    TelemetryRow(
                        time=state.t,
                        velocity=state.v,
                        acceleration=a,
                        rpm_thousands=w_to_rpm(state.w) / 1000.0,
                        clutch=clutch,
                        gas=gas,
                    )
                )

            state.t += dt

            # 10. Termination, in priority order.
            if state.w < idle_w:
                return self._result(
                    Outcome.STALL, STALL_PENALTY + state.v, state, trace
                )
            if state.v >= p.speed_goal:
                return self._result(
                    Outcome.SUCCESS, 1.0 / (1.0 + state.energy), state, trace
                )

        return self._result(Outcome.TIMEOUT, -abs(state.slip(k)), state, trace)

    def _result(
        self,
        outcome: Outcome,
        score: float,
        state: VehicleState,
        trace: list[TelemetryRow],
    ) -> SimulationResult:
        return SimulationResult(
            outcome=outcome,
            score=score,
            time=state.t,
            speed=state.v,
            engine_speed=state.w,
            energy=state.energy,
            k=self.params.k,
            trace=tuple(trace),
        )
