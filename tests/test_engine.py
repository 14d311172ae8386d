"""Tests for the engine torque curve."""

import numpy as np

from clutch_engine.core.engine import max_torque
from clutch_engine.core.params import SimulationParameters


def _sample_params() -> SimulationParameters:
    return SimulationParameters()


def test_no_torque_below_idle() -> None:
    """Below idle speed the engine produces no torque."""
    params = _sample_params()
    assert max_torque(params, 0.0) == 0.0, "stopped engine must give no torque"
    assert max_torque(params, params.idle_w - 1e-6) == 0.0, (
        "just below idle must give no torque"
    )


def test_idle_breakpoint_returns_idle_torque() -> None:
    """At exactly idle speed the curve starts at idle_torque."""
    params = _sample_params()
    assert max_torque(params, params.idle_w) == params.idle_torque


def test_peak_breakpoint_returns_max_torque() -> None:
    """At exactly peak-torque speed the curve reaches max_torque."""
    params = _sample_params()
    assert max_torque(params, params.max_torque_w) == params.max_torque


def test_flat_top_above_peak() -> None:
    """Torque stays at the peak value above max_torque_w."""
    params = _sample_params()
    assert max_torque(params, params.max_torque_w + 1.0) == params.max_torque
    assert max_torque(params, params.redline_w) == params.max_torque, (
        "torque at redline must equal the peak"
    )


def test_linear_between_breakpoints() -> None:
    """Midway between idle and peak the torque is the midpoint value."""
    params = _sample_params()
    mid_w = 0.5 * (params.idle_w + params.max_torque_w)
    expected = 0.5 * (params.idle_torque + params.max_torque)
    assert abs(max_torque(params, mid_w) - expected) < 1e-9, "ramp must be linear"


def test_torque_curve_is_monotonic() -> None:
    """For every w1 < w2 the torque at w1 must not exceed the torque at w2."""
    params = _sample_params()
    speeds = np.linspace(0.0, params.redline_w * 1.2, 2001)
    torques = [max_torque(params, float(w)) for w in speeds]
    for lower, upper in zip(torques, torques[1:]):
        assert lower <= upper, "torque curve must be non-decreasing"
