"""Result types — the contract between engine, report, CLI and API.

Everything here is a read-only view.  The live, concurrently updated
aggregate is ``engine.stats.StationStats``; it hands out
:class:`StatsSnapshot` copies.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from fuelstation_sim.config.fuel import FUEL_TYPES, FuelType
from fuelstation_sim.config.scenario import Scenario


# ═══════════════════════════════════════════════════════════════════════════
# Statistics snapshot
# ═══════════════════════════════════════════════════════════════════════════

class FuelTotals(BaseModel):
    """Counters and running sums for one fuel type."""

    model_config = ConfigDict(frozen=True)

    refueled: int = 0
    """Cars that got a pump and finished dispensing."""

    checked_out: int = 0
    """Cars whose checkout service completed."""

    revenue: float = 0.0
    """Sum of receipts taken at the registers."""

    units: float = 0.0
    """Units dispensed (l, kg or kWh)."""

    refuel_time: float = 0.0
    """Sum of pump service times (s)."""


def _empty_per_fuel() -> dict[FuelType, FuelTotals]:
    return {fuel: FuelTotals() for fuel in FUEL_TYPES}


class StatsSnapshot(BaseModel):
    """Point-in-time copy of the statistics aggregate.

    Fields are copied together under the aggregate's lock, but the
    workflows update related fields in separate steps, so a snapshot taken
    mid-run may show e.g. a checkout counted before its revenue is added.
    """

    model_config = ConfigDict(frozen=True)

    taken_at: float = 0.0
    """Simulation time of the snapshot (s)."""

    total_arrivals: int = 0
    not_served: int = 0
    """Cars that abandoned the pump queue when their patience ran out."""

    in_refuel_queue: int = 0
    """Live gauge: cars waiting for a pump."""

    in_checkout_queue: int = 0
    """Live gauge: refueled cars waiting for a register."""

    per_fuel: dict[FuelType, FuelTotals] = Field(default_factory=_empty_per_fuel)

    checkout_time_total: float = 0.0
    wait_before_leaving_total: float = 0.0
    """Patience spent by cars that left unserved (s)."""

    checkout_queue_wait_total: float = 0.0
    """Time refueled cars spent waiting for a register (s)."""

    @property
    def total_refueled(self) -> int:
        return sum(t.refueled for t in self.per_fuel.values())

    @property
    def total_checked_out(self) -> int:
        return sum(t.checked_out for t in self.per_fuel.values())

    @property
    def total_revenue(self) -> float:
        return sum(t.revenue for t in self.per_fuel.values())

    @property
    def total_units(self) -> float:
        return sum(t.units for t in self.per_fuel.values())

    @property
    def total_refuel_time(self) -> float:
        return sum(t.refuel_time for t in self.per_fuel.values())


class ProgressSample(BaseModel):
    """One periodic progress reading taken on the clock."""

    model_config = ConfigDict(frozen=True)

    time: float
    total_arrivals: int
    in_refuel_queue: int
    in_checkout_queue: int
    checked_out: int


class PoolStatus(BaseModel):
    """Occupancy of one resource pool when the run ended."""

    name: str
    capacity: int
    available: int
    held: int


# ═══════════════════════════════════════════════════════════════════════════
# Derived summary
# ═══════════════════════════════════════════════════════════════════════════

class RunSummary(BaseModel):
    """Rates and averages derived from a snapshot.

    Every ratio is ``None`` when its denominator is zero (e.g. no diesel
    car ever checked out); renderers decide how to show that.
    """

    checked_out_rate: float | None
    """Checked-out cars / arrivals."""

    not_served_rate: float | None
    """Abandoned cars / arrivals."""

    avg_receipt: float | None
    avg_receipt_by_fuel: dict[FuelType, float | None]

    avg_units: float | None
    """Units dispensed per checked-out car."""
    avg_units_by_fuel: dict[FuelType, float | None]

    avg_refuel_time: float | None
    avg_refuel_time_by_fuel: dict[FuelType, float | None]

    avg_checkout_time: float | None
    avg_wait_before_leaving: float | None
    avg_checkout_queue_wait: float | None

    avg_time_at_station: float | None
    """(refuel time + checkout time + checkout queue wait) per checked-out car."""


# ═══════════════════════════════════════════════════════════════════════════
# Full run result
# ═══════════════════════════════════════════════════════════════════════════

class SimulationResult(BaseModel):
    """Complete output of one ``run_simulation`` call."""

    scenario: Scenario
    stats: StatsSnapshot
    summary: RunSummary
    progress: list[ProgressSample] = Field(default_factory=list)
    pools: list[PoolStatus] = Field(default_factory=list)

    in_flight: int = 0
    """Customers still inside a workflow when the snapshot was read.
    Non-zero means the grace period did not fully drain the station."""

    wall_time_seconds: float = 0.0
