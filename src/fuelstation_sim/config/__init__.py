"""Configuration models and scenario loading."""

from fuelstation_sim.config.fuel import FUEL_TYPES, FuelType, TankSizeRange, TimeRange
from fuelstation_sim.config.station import FuelProfile, StationParameters
from fuelstation_sim.config.scenario import Scenario, SimulationConfig
from fuelstation_sim.config.loader import ConfigError, load_scenario, parse_scenario

__all__ = [
    "FUEL_TYPES",
    "FuelType",
    "TankSizeRange",
    "TimeRange",
    "FuelProfile",
    "StationParameters",
    "SimulationConfig",
    "Scenario",
    "ConfigError",
    "load_scenario",
    "parse_scenario",
]
