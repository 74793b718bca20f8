"""Scenario file loading.

Two document shapes are accepted, as JSON or YAML:

* a full scenario with ``station`` and/or ``simulation`` sections;
* a flat parameter file (the ``config.json`` layout), which gets default run
  settings.

Any failure is fatal and raised as :class:`ConfigError`; a caller never
receives a partially populated or zero-valued bundle.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from fuelstation_sim.config.scenario import Scenario
from fuelstation_sim.config.station import StationParameters

_YAML_SUFFIXES = {".yaml", ".yml"}
_SCENARIO_KEYS = {"station", "simulation"}


class ConfigError(Exception):
    """The configuration could not be read or is invalid."""


def parse_scenario(data: Any) -> Scenario:
    """Build a :class:`Scenario` from an already-decoded document."""
    if not isinstance(data, dict):
        raise ConfigError(f"expected a mapping at the top level, got {type(data).__name__}")
    try:
        if _SCENARIO_KEYS & data.keys():
            return Scenario.model_validate(data)
        return Scenario(station=StationParameters.model_validate(data))
    except ValidationError as exc:
        raise ConfigError(f"invalid configuration:\n{exc}") from exc


def load_scenario(path: str | Path) -> Scenario:
    """Read and validate a scenario file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read config file {path}: {exc}") from exc

    try:
        if path.suffix.lower() in _YAML_SUFFIXES:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"malformed config file {path}: {exc}") from exc

    return parse_scenario(data)
