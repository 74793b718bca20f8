"""Shared test fixtures — small, deterministic station layouts."""

from __future__ import annotations

import numpy as np
import pytest
import simpy

from fuelstation_sim.config import (
    FuelType,
    Scenario,
    SimulationConfig,
    StationParameters,
    TimeRange,
)
from fuelstation_sim.engine.entities import Car
from fuelstation_sim.engine.station import GasStation


@pytest.fixture
def env() -> simpy.Environment:
    return simpy.Environment()


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


@pytest.fixture
def single_pump_params() -> StationParameters:
    """One gas pump with a fixed 1 s service, one register with a fixed 0.5 s checkout."""
    return StationParameters(
        fuel_pricing=[2.0, 1.5, 1.0, 0.5],
        fuel_type_chance=[1.0, 0.0, 0.0, 0.0],
        fueling_time=[
            TimeRange(min=1.0, max=1.0),
            TimeRange(min=1.0, max=2.0),
            TimeRange(min=1.0, max=2.0),
            TimeRange(min=1.0, max=2.0),
        ],
        station_counts=[1, 0, 0, 0],
        cash_register_count=1,
        checkout_time=TimeRange(min=0.5, max=0.5),
        car_spawn_chance=0.5,
        car_wait_time_bias=5.0,
        simulation_length=10.0,
    )


@pytest.fixture
def station_params() -> StationParameters:
    """Every fuel type served, moderate load."""
    return StationParameters(
        fuel_pricing=[1.65, 1.55, 0.85, 0.45],
        fuel_type_chance=[0.4, 0.3, 0.2, 0.1],
        fueling_time=[
            TimeRange(min=1.0, max=3.0),
            TimeRange(min=1.0, max=4.0),
            TimeRange(min=2.0, max=4.0),
            TimeRange(min=3.0, max=6.0),
        ],
        station_counts=[3, 2, 1, 1],
        cash_register_count=2,
        checkout_time=TimeRange(min=0.5, max=1.5),
        car_spawn_chance=0.4,
        car_wait_time_bias=4.0,
        simulation_length=20.0,
    )


@pytest.fixture
def scenario(station_params: StationParameters) -> Scenario:
    return Scenario(
        station=station_params,
        simulation=SimulationConfig(random_seed=7),
    )


@pytest.fixture
def make_car():
    """Factory for cars with explicit patience; ids are only labels here."""
    def _make(car_id: int = 1, fuel: FuelType = FuelType.GAS,
              patience: float = 5.0, tank_size: int = 50) -> Car:
        return Car(id=car_id, fuel=fuel, patience=patience, tank_size=tank_size)
    return _make


@pytest.fixture
def make_station(env, rng):
    def _make(params: StationParameters, **settings) -> GasStation:
        return GasStation(env, params, SimulationConfig(**settings), rng)
    return _make
