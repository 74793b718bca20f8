"""Simulation entities — cars, pumps, registers — and the car factory.

Cars are mutable: the refuel workflow writes the receipt and the time the
car joined the checkout queue.  Stations and registers never change after
pool initialisation and are hashable, so pools can track who holds them.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from fuelstation_sim.config.fuel import FUEL_TYPES, FuelType, TankSizeRange, TimeRange
from fuelstation_sim.config.station import StationParameters

_car_ids = itertools.count()


@dataclass
class Car:
    id: int
    fuel: FuelType
    patience: float
    """Longest time (s) the car waits for a pump before leaving."""

    tank_size: int
    receipt: float = 0.0
    checkout_queue_entered_at: float | None = None


@dataclass(frozen=True)
class Station:
    """One pump (or charger) serving a single fuel type."""

    id: int
    fuel: FuelType
    fueling_time: TimeRange


@dataclass(frozen=True)
class CashRegister:
    id: int


def select_fuel_type(weights: Sequence[float], draw: float) -> FuelType:
    """Map a uniform draw in [0, 1] onto a fuel type by cumulative weight.

    Weights are normalised by their sum, so the last boundary is exactly 1.0
    and every draw lands in some interval.  Each category owns
    ``[low, high]``; when intervals touch (zero-width ones included) the last
    match wins.
    """
    weights = np.asarray(weights, dtype=np.float64)
    total = weights.sum()
    if total <= 0:
        raise ValueError("at least one fuel weight must be positive")
    bounds = np.cumsum(weights) / total

    selected = FUEL_TYPES[0]
    low = 0.0
    for fuel, high in zip(FUEL_TYPES, bounds):
        if low <= draw <= high:
            selected = fuel
        low = high
    return selected


def sample_tank_size(tank: TankSizeRange, rng: np.random.Generator) -> int:
    slots = (tank.max - tank.min) // tank.step
    return tank.min + tank.step * int(rng.integers(0, slots + 1))


class CarFactory:
    """Builds arriving cars from the station parameters.

    Parameters
    ----------
    params : StationParameters
        Supplies the fuel weights, patience bias and tank ranges.
    rng : numpy.random.Generator
        The run's generator; every draw goes through it.
    """

    def __init__(self, params: StationParameters, rng: np.random.Generator) -> None:
        self._params = params
        self._rng = rng
        self._profiles = params.fuel_profiles()
        self._weights = [self._profiles[fuel].weight for fuel in FUEL_TYPES]

    def choose_fuel(self) -> FuelType:
        return select_fuel_type(self._weights, self._rng.random())

    def sample_patience(self) -> float:
        bias = self._params.car_wait_time_bias
        return float(self._rng.uniform(bias / 1.5, bias * 2))

    def new_car(self, fuel: FuelType | None = None) -> Car:
        if fuel is None:
            fuel = self.choose_fuel()
        return Car(
            id=next(_car_ids),
            fuel=fuel,
            patience=self.sample_patience(),
            tank_size=sample_tank_size(self._profiles[fuel].tank_size, self._rng),
        )
