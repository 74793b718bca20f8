"""Arrival generator — samples one possible arrival per clock tick.

A fixed-cadence Bernoulli draw is a coarse approximation of Poisson
arrivals with rate ``car_spawn_chance / tick_interval``.
"""

from __future__ import annotations

import logging

import simpy

from fuelstation_sim.engine.clock import Ticker
from fuelstation_sim.engine.station import GasStation

logger = logging.getLogger(__name__)


def generate_arrivals(station: GasStation, ticker: Ticker, shutdown: simpy.Event):
    """Process generator; returns once ``shutdown`` has fired."""
    spawn_chance = station.params.car_spawn_chance

    while True:
        yield ticker.tick | shutdown
        if shutdown.triggered:
            return

        if station.rng.random() < spawn_chance:
            car = station.car_factory.new_car()
            station.stats.record_arrival()
            logger.debug("t=%.2f car %d arrived (%s, patience %.2fs, tank %d)",
                         station.env.now, car.id, car.fuel.value, car.patience, car.tank_size)
            yield station.arrivals.put(car)
