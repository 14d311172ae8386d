"""Configuration loader for the clutch launch optimizer."""

from __future__ import annotations

from dataclasses import fields
from pathlib import Path
from typing import Any

import yaml

from clutch_engine.core.params import SimulationParameters
from clutch_engine.exceptions import ConfigurationError

DATA_DIR: Path = Path(__file__).resolve().parent / "data"
DEFAULT_PARAMETERS_PATH: Path = DATA_DIR / "default_parameters.yaml"

_SECTION: str = "simulation"
_KNOWN_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(SimulationParameters))


def _check_entries(entries: dict[str, Any], source: str) -> None:
    for key, val in entries.items():
        if key not in _KNOWN_FIELDS:
            raise ConfigurationError(f"{source}: unknown parameter '{key}'")
        if isinstance(val, bool) or not isinstance(val, (int, float)):
            raise ConfigurationError(
                f"{source}: '{key}' must be numeric, got {type(val).__name__}"
            )


def load_parameters(
    path: Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> SimulationParameters:
    """Load simulation parameters from a YAML file.

    The file holds a ``simulation:`` mapping of parameter names to values.
    Omitted parameters keep their defaults; *overrides* are applied on top
    of the file contents.

    Args:
        path: Optional override for the parameter file path.
        overrides: Optional parameter values taking precedence over the file.

    Returns:
        Validated :class:`SimulationParameters`.

    Raises:
        FileNotFoundError: If the parameter file does not exist.
        ConfigurationError: If the file is malformed, names an unknown
            parameter, or a value is out of range.
    """
    params_path = path or DEFAULT_PARAMETERS_PATH
    if not params_path.exists():
        raise FileNotFoundError(f"Parameter file not found: {params_path}")

    with open(params_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}

    if not isinstance(data, dict):
        raise ConfigurationError(f"{params_path}: expected a mapping at top level")
    section = data.get(_SECTION, {}) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"{params_path}: '{_SECTION}' must be a mapping")

    values: dict[str, Any] = dict(section)
    _check_entries(values, str(params_path))
    if overrides:
        _check_entries(overrides, "overrides")
        values.update(overrides)

    kwargs: dict[str, Any] = {}
    for key, val in values.items():
        if key == "population_size":
            # 100.0 is accepted, 100.5 is left for validation to reject.
            kwargs[key] = int(val) if float(val).is_integer() else val
        else:
            kwargs[key] = float(val)
    return SimulationParameters(**kwargs)
