"""Dispatcher — the only place new workflow processes are started.

Waits on two sources at once: a new car in the arrivals inbox and a free
register.  Each item starts one independent process and the loop goes
straight back to waiting.  It never ends on its own; shutdown stops the
arrivals, not the dispatcher.
"""

from __future__ import annotations

from fuelstation_sim.engine.station import GasStation
from fuelstation_sim.engine.workflows import checkout_car, refuel_car


def dispatch(station: GasStation):
    env = station.env
    car_request = station.arrivals.get()
    register_request = station.registers.get()

    while True:
        yield car_request | register_request

        # Both requests may have fired in the same step; serve each, and
        # keep an unfired request pending so no item is ever dropped.
        if car_request.triggered:
            env.process(refuel_car(station, car_request.value))
            car_request = station.arrivals.get()
        if register_request.triggered:
            env.process(checkout_car(station, register_request.value))
            register_request = station.registers.get()
