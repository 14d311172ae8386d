"""Engine torque curve for the clutch launch simulation."""

from clutch_engine.core.params import SimulationParameters


def max_torque(params: SimulationParameters, w: float) -> float:
    """Return the maximum torque the engine can produce at speed *w*.

    The curve is piecewise linear and continuous:

        w < idle_w                  -> 0 (the engine cannot run below idle)
        idle_w <= w < max_torque_w  -> linear from idle_torque to max_torque
        w >= max_torque_w           -> max_torque (flat top)

    Args:
        params: Simulation parameters holding the curve breakpoints.
        w: Engine angular velocity.

    Returns:
        Available torque in N m at full throttle.
    """
    idle_w: float = params.idle_w
    if w < idle_w:
        return 0.0
    peak_w: float = params.max_torque_w
    if w < peak_w:
        rise: float = params.max_torque - params.idle_torque
        return params.idle_torque + rise * (w - idle_w) / (peak_w - idle_w)
    return params.max_torque
