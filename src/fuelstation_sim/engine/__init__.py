"""Engine — concurrent gas-station simulation on simpy."""

from fuelstation_sim.engine.entities import Car, CarFactory, CashRegister, Station, select_fuel_type
from fuelstation_sim.engine.pool import PoolMisuseError, ResourcePool
from fuelstation_sim.engine.stats import StationStats
from fuelstation_sim.engine.clock import Ticker
from fuelstation_sim.engine.station import GasStation
from fuelstation_sim.engine.workflows import checkout_car, refuel_car
from fuelstation_sim.engine.dispatcher import dispatch
from fuelstation_sim.engine.arrivals import generate_arrivals
from fuelstation_sim.engine.summary import summarize
from fuelstation_sim.engine.controller import run_simulation

__all__ = [
    "Car",
    "CarFactory",
    "CashRegister",
    "Station",
    "select_fuel_type",
    "PoolMisuseError",
    "ResourcePool",
    "StationStats",
    "Ticker",
    "GasStation",
    "refuel_car",
    "checkout_car",
    "dispatch",
    "generate_arrivals",
    "summarize",
    "run_simulation",
]
