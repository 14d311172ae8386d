"""Tests for simulation parameters and the YAML configuration loader."""

import dataclasses
import math
from pathlib import Path

import pytest

from clutch_engine.config import load_parameters
from clutch_engine.core.params import SimulationParameters, rpm_to_w, w_to_rpm
from clutch_engine.exceptions import ConfigurationError

# ---------------------------------------------------------------------------
# SimulationParameters
# ---------------------------------------------------------------------------


def test_default_values() -> None:
    """Defaults describe the reference car and search."""
    params = SimulationParameters()
    assert params.mass == 1500.0
    assert params.flywheel_inertia == 0.07
    assert params.speed_goal == 5.0
    assert params.population_size == 100
    assert params.hill_grade == 0.0, "default road must be flat"


def test_derived_constants() -> None:
    """K and the engine-speed breakpoints follow from the raw fields."""
    params = SimulationParameters()
    assert params.k == pytest.approx(15.2 / 0.24), "K = gear_ratio / wheel_radius"
    assert params.idle_w == pytest.approx(800.0 * math.pi / 60.0)
    assert params.redline_w == pytest.approx(7000.0 * math.pi / 60.0)


def test_rpm_conversion_round_trip() -> None:
    """w_to_rpm undoes rpm_to_w."""
    assert w_to_rpm(rpm_to_w(2500.0)) == pytest.approx(2500.0)


def test_parameters_are_immutable() -> None:
    """Parameters cannot be changed after construction."""
    params = SimulationParameters()
    with pytest.raises(dataclasses.FrozenInstanceError):
        params.mass = 1.0  # type: ignore[misc]


def test_fields_independently_overridable() -> None:
    """dataclasses.replace changes only the named fields."""
    params = dataclasses.replace(SimulationParameters(), hill_grade=0.1, speed_goal=8.0)
    assert params.hill_grade == 0.1
    assert params.speed_goal == 8.0
    assert params.mass == 1500.0, "untouched fields keep their defaults"


@pytest.mark.parametrize(
    "field_name",
    ["mass", "flywheel_inertia", "wheel_radius", "dt", "max_clutch_torque"],
)
def test_non_positive_physical_values_rejected(field_name: str) -> None:
    """Physical quantities must be strictly positive."""
    with pytest.raises(ConfigurationError):
        SimulationParameters(**{field_name: 0.0})
    with pytest.raises(ConfigurationError):
        SimulationParameters(**{field_name: -1.0})


def test_signed_hill_grade_and_zero_drag_allowed() -> None:
    """Downhill grades and a frictionless engine are valid."""
    params = SimulationParameters(hill_grade=-0.05, engine_drag_torque=0.0)
    assert params.hill_grade == -0.05, "negative grade is downhill"
    assert params.engine_drag_torque == 0.0


def test_negative_drag_rejected() -> None:
    """Engine drag cannot push the engine forward."""
    with pytest.raises(ConfigurationError):
        SimulationParameters(engine_drag_torque=-1.0)


def test_empty_population_rejected() -> None:
    """A search needs at least one individual; zero fails before any engine exists."""
    with pytest.raises(ConfigurationError, match="population_size"):
        SimulationParameters(population_size=0)
    with pytest.raises(ConfigurationError, match="population_size"):
        load_parameters(overrides={"population_size": 0})


def test_fractional_population_rejected() -> None:
    """Population size must be a whole number."""
    with pytest.raises(ConfigurationError):
        SimulationParameters(population_size=2.5)  # type: ignore[arg-type]


def test_torque_curve_breakpoints_must_be_ordered() -> None:
    """idle < peak-torque <= redline."""
    with pytest.raises(ConfigurationError):
        SimulationParameters(idle_rpm=3000.0, max_torque_rpm=2500.0)
    with pytest.raises(ConfigurationError):
        SimulationParameters(redline_rpm=2000.0)


def test_configuration_error_is_value_error() -> None:
    """Callers catching ValueError also catch configuration errors."""
    with pytest.raises(ValueError):
        SimulationParameters(mass=-5.0)


# ---------------------------------------------------------------------------
# load_parameters
# ---------------------------------------------------------------------------


def test_packaged_defaults_match_dataclass_defaults() -> None:
    """The shipped YAML file reproduces the dataclass defaults."""
    assert load_parameters() == SimulationParameters(), "packaged YAML drifted"


def test_overrides_take_precedence() -> None:
    """Keyword overrides win over file values."""
    params = load_parameters(overrides={"hill_grade": 0.08, "population_size": 20})
    assert params.hill_grade == 0.08
    assert params.population_size == 20
    assert isinstance(params.population_size, int), "population_size must stay int"


def test_partial_file_keeps_defaults(tmp_path: Path) -> None:
    """Keys missing from the file fall back to defaults."""
    path = tmp_path / "params.yaml"
    path.write_text("simulation:\n  mass: 1200\n  speed_goal: 7\n", encoding="utf-8")
    params = load_parameters(path)
    assert params.mass == 1200.0
    assert params.speed_goal == 7.0
    assert params.wheel_radius == 0.24, "unlisted keys keep their defaults"


def test_unknown_key_rejected(tmp_path: Path) -> None:
    """Misspelled or unknown keys are errors, not silently ignored."""
    path = tmp_path / "params.yaml"
    path.write_text("simulation:\n  turbo_boost: 2.0\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="turbo_boost"):
        load_parameters(path)


def test_non_numeric_value_rejected(tmp_path: Path) -> None:
    """Every parameter value must be a number."""
    path = tmp_path / "params.yaml"
    path.write_text("simulation:\n  mass: heavy\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="mass"):
        load_parameters(path)


def test_out_of_range_value_rejected(tmp_path: Path) -> None:
    """File values go through the same validation as direct construction."""
    path = tmp_path / "params.yaml"
    path.write_text("simulation:\n  flywheel_inertia: 0\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_parameters(path)


def test_missing_file_raises(tmp_path: Path) -> None:
    """A missing config file is reported as FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_parameters(tmp_path / "missing.yaml")
