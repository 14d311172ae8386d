"""Clutch Launch Optimizer Dashboard.

Interactive dashboard built with Streamlit and Plotly.  Runs the
evolutionary pedal-curve search and shows the best launch found: score
history, vehicle speed, engine RPM and the gas/clutch pedal curves.

Launch with::

    streamlit run dashboard/app.py
"""

from __future__ import annotations

import dataclasses

import plotly.graph_objects as go
import streamlit as st
from plotly.subplots import make_subplots

from clutch_engine.config import load_parameters
from clutch_engine.core.evolution import EvolutionEngine
from clutch_engine.core.simulator import SimulationResult
from clutch_engine.telemetry import format_status

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _run_search(
    hill_grade: float,
    speed_goal: float,
    population_size: int,
    sweeps: int,
    seed: int,
) -> tuple[SimulationResult, list[float]]:
    """Run *sweeps* sweeps and return the final best result and score history."""
    params = dataclasses.replace(
        load_parameters(),
        hill_grade=hill_grade,
        speed_goal=speed_goal,
        population_size=population_size,
    )
    engine = EvolutionEngine(params, seed=seed)
    history: list[float] = []

    progress = st.progress(0.0)

    def _on_sweep(result: SimulationResult) -> None:
        history.append(result.score)
        progress.progress(len(history) / sweeps)

    result = engine.search(sweeps, on_sweep=_on_sweep)
    return result, history


def _trajectory_figure(result: SimulationResult) -> go.Figure:
    frame = result.trace_frame()
    fig = make_subplots(
        rows=3,
        cols=1,
        shared_xaxes=True,
        subplot_titles=("Vehicle speed (m/s)", "Engine RPM x1000", "Pedals"),
    )
    fig.add_trace(
        go.Scatter(x=frame["time"], y=frame["velocity"], name="speed"),
        row=1,
        col=1,
    )
    fig.add_trace(
        go.Scatter(x=frame["time"], y=frame["rpm_thousands"], name="RPM x1000"),
        row=2,
        col=1,
    )
    fig.add_trace(
        go.Scatter(x=frame["time"], y=frame["gas"], name="gas"),
        row=3,
        col=1,
    )
    fig.add_trace(
        go.Scatter(x=frame["time"], y=frame["clutch"], name="clutch"),
        row=3,
        col=1,
    )
    fig.update_layout(height=700, xaxis3_title="Time (s)")
    return fig


# ---------------------------------------------------------------------------
# Streamlit app
# ---------------------------------------------------------------------------


def main() -> None:
    """Entry point for the Streamlit dashboard."""
    st.set_page_config(page_title="Clutch Launch Optimizer", layout="wide")
    st.title("Clutch Launch Optimizer")

    # ── Sidebar ──────────────────────────────────────────────────────────
    st.sidebar.header("Search Parameters")

    hill_grade: float = st.sidebar.slider(
        "Hill grade", min_value=-0.10, max_value=0.20, value=0.0, step=0.01
    )
    speed_goal: float = st.sidebar.slider(
        "Speed goal (m/s)", min_value=1.0, max_value=15.0, value=5.0, step=0.5
    )
    population_size: int = st.sidebar.slider(
        "Population size", min_value=10, max_value=200, value=50, step=10
    )
    sweeps: int = st.sidebar.slider(
        "Sweeps", min_value=1, max_value=100, value=20, step=1
    )
    seed: int = int(st.sidebar.number_input("Seed", value=42, step=1))

    # ── Section 1: Run search ────────────────────────────────────────────
    st.header("1 -- Evolutionary Search")

    if st.button("Run Search"):
        with st.spinner("Evolving pedal curves..."):
            result, history = _run_search(
                hill_grade, speed_goal, population_size, sweeps, seed
            )
        st.session_state["result"] = result
        st.session_state["history"] = history

    if "result" not in st.session_state:
        st.info('Configure parameters in the sidebar, then press "Run Search".')
        return

    result: SimulationResult = st.session_state["result"]
    history: list[float] = st.session_state["history"]

    col_o, col_s, col_e = st.columns(3)
    col_o.metric("Outcome", result.outcome.value)
    col_s.metric("Score", f"{result.score:.6g}")
    col_e.metric("Clutch energy (J)", f"{result.energy:.1f}")
    st.write(format_status(result))

    # ── Section 2: Score history ─────────────────────────────────────────
    st.header("2 -- Best Score per Sweep")

    fig_hist = go.Figure(
        go.Scatter(x=list(range(1, len(history) + 1)), y=history, mode="lines+markers")
    )
    fig_hist.update_layout(xaxis_title="Sweep", yaxis_title="Best score", height=350)
    st.plotly_chart(fig_hist, use_container_width=True)

    # ── Section 3: Best trajectory ───────────────────────────────────────
    st.header("3 -- Best Launch Trajectory")
    st.plotly_chart(_trajectory_figure(result), use_container_width=True)

    st.markdown("---")
    st.caption("Scores: success = 1/(1+energy), timeout = -slip, stall = -1e6 + speed.")


if __name__ == "__main__":
    main()
