"""Statistics aggregate — the one shared record every workflow writes to.

Fields are private and change only through the ``record_*``/queue methods,
each of which holds the lock for its own read-modify-write.  There is no
transaction across methods: a reader may see a checkout counted before the
matching revenue arrives.  ``snapshot`` copies everything under the lock.
"""

from __future__ import annotations

import threading

from fuelstation_sim.config.fuel import FUEL_TYPES, FuelType
from fuelstation_sim.models.results import FuelTotals, StatsSnapshot


class StationStats:
    """Run-wide counters, live queue gauges and running sums."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

        self._total_arrivals = 0
        self._not_served = 0
        self._in_refuel_queue = 0
        self._in_checkout_queue = 0

        self._refueled = dict.fromkeys(FUEL_TYPES, 0)
        self._checked_out = dict.fromkeys(FUEL_TYPES, 0)
        self._revenue = dict.fromkeys(FUEL_TYPES, 0.0)
        self._units = dict.fromkeys(FUEL_TYPES, 0.0)
        self._refuel_time = dict.fromkeys(FUEL_TYPES, 0.0)

        self._checkout_time_total = 0.0
        self._wait_before_leaving_total = 0.0
        self._checkout_queue_wait_total = 0.0

    # ── Arrivals ────────────────────────────────────────────────────────

    def record_arrival(self) -> None:
        with self._lock:
            self._total_arrivals += 1

    # ── Refuel stage ────────────────────────────────────────────────────

    def enter_refuel_queue(self) -> None:
        with self._lock:
            self._in_refuel_queue += 1

    def leave_refuel_queue(self) -> None:
        with self._lock:
            self._in_refuel_queue -= 1

    def record_abandonment(self, waited: float) -> None:
        with self._lock:
            self._wait_before_leaving_total += waited
            self._not_served += 1

    def record_refuel(self, fuel: FuelType, units: float, duration: float) -> None:
        with self._lock:
            self._units[fuel] += units
            self._refuel_time[fuel] += duration
            self._refueled[fuel] += 1

    # ── Checkout stage ──────────────────────────────────────────────────

    def enter_checkout_queue(self) -> None:
        with self._lock:
            self._in_checkout_queue += 1

    def leave_checkout_queue(self, waited: float) -> None:
        with self._lock:
            self._in_checkout_queue -= 1
            self._checkout_queue_wait_total += waited

    def record_checkout(self, fuel: FuelType, duration: float, receipt: float) -> None:
        """Book checkout service time and revenue as service starts."""
        with self._lock:
            self._checkout_time_total += duration
            self._revenue[fuel] += receipt

    def record_checked_out(self, fuel: FuelType) -> None:
        with self._lock:
            self._checked_out[fuel] += 1

    # ── Read side ───────────────────────────────────────────────────────

    @property
    def total_arrivals(self) -> int:
        with self._lock:
            return self._total_arrivals

    def snapshot(self, now: float = 0.0) -> StatsSnapshot:
        with self._lock:
            per_fuel = {
                fuel: FuelTotals(
                    refueled=self._refueled[fuel],
                    checked_out=self._checked_out[fuel],
                    revenue=self._revenue[fuel],
                    units=self._units[fuel],
                    refuel_time=self._refuel_time[fuel],
                )
                for fuel in FUEL_TYPES
            }
            return StatsSnapshot(
                taken_at=now,
                total_arrivals=self._total_arrivals,
                not_served=self._not_served,
                in_refuel_queue=self._in_refuel_queue,
                in_checkout_queue=self._in_checkout_queue,
                per_fuel=per_fuel,
                checkout_time_total=self._checkout_time_total,
                wait_before_leaving_total=self._wait_before_leaving_total,
                checkout_queue_wait_total=self._checkout_queue_wait_total,
            )
