"""Result models — simulation output contracts."""

from fuelstation_sim.models.results import (
    FuelTotals,
    PoolStatus,
    ProgressSample,
    RunSummary,
    SimulationResult,
    StatsSnapshot,
)

__all__ = [
    "FuelTotals",
    "PoolStatus",
    "ProgressSample",
    "RunSummary",
    "SimulationResult",
    "StatsSnapshot",
]
