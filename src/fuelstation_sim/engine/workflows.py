"""Per-customer workflows, each run as its own simpy process.

Refuel:  Arrived → WaitingForStation → Refueling → HandedToCheckout
                                     ↘ Abandoned (patience ran out)

Checkout: a freed register takes the next car from the checkout queue,
serves it and goes back to its pool, which lets the dispatcher start the
next checkout.

Abandonment is recorded in the statistics and never raised.  Nothing is
retried: each car gets one pump attempt and one checkout.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fuelstation_sim.engine.entities import Car, CashRegister

if TYPE_CHECKING:
    from fuelstation_sim.engine.station import GasStation

logger = logging.getLogger(__name__)


def refuel_car(station: GasStation, car: Car):
    env = station.env
    stats = station.stats
    pumps = station.pumps[car.fuel]

    stats.enter_refuel_queue()
    pump = yield from pumps.acquire(timeout=car.patience)
    stats.leave_refuel_queue()

    if pump is None:
        stats.record_abandonment(car.patience)
        logger.debug("t=%.2f car %d (%s) left after %.2fs without a pump",
                     env.now, car.id, car.fuel.value, car.patience)
        return

    window = pump.fueling_time
    duration = float(station.rng.uniform(window.min, window.max))
    logger.debug("t=%.2f car %d refueling %s at pump %d for %.2fs",
                 env.now, car.id, car.fuel.value, pump.id, duration)
    yield env.timeout(duration)

    units = (duration / window.max) * car.tank_size
    car.receipt = units * station.params.fuel_profile(car.fuel).price
    stats.record_refuel(car.fuel, units, duration)
    logger.debug("t=%.2f car %d done: %.1f %s, receipt %.2f",
                 env.now, car.id, units, car.fuel.unit, car.receipt)

    car.checkout_queue_entered_at = env.now
    pumps.release(pump)

    yield station.checkout_queue.put(car)
    stats.enter_checkout_queue()


def checkout_car(station: GasStation, register: CashRegister):
    env = station.env
    stats = station.stats

    car: Car = yield station.checkout_queue.get()
    stats.leave_checkout_queue(env.now - car.checkout_queue_entered_at)

    window = station.params.checkout_time
    duration = float(station.rng.uniform(window.min, window.max))
    stats.record_checkout(car.fuel, duration, car.receipt)
    logger.debug("t=%.2f car %d checking out at register %d for %.2fs (receipt %.2f)",
                 env.now, car.id, register.id, duration, car.receipt)
    yield env.timeout(duration)

    stats.record_checked_out(car.fuel)
    station.registers.release(register)
