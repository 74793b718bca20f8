"""Gas station — owns the pools, queues and statistics of one run.

The workflows, dispatcher and arrival generator all receive the same
``GasStation`` and share state only through it.
"""

from __future__ import annotations

import numpy as np
import simpy

from fuelstation_sim.config.fuel import FUEL_TYPES, FuelType
from fuelstation_sim.config.scenario import SimulationConfig
from fuelstation_sim.config.station import StationParameters
from fuelstation_sim.engine.entities import CarFactory, CashRegister, Station
from fuelstation_sim.engine.pool import ResourcePool
from fuelstation_sim.engine.stats import StationStats
from fuelstation_sim.models.results import PoolStatus, ProgressSample


class GasStation:
    """Shared state of one simulated station.

    Attributes
    ----------
    pumps : dict[FuelType, ResourcePool]
        One pool of :class:`Station` per fuel type. Station ids run on across
        fuel types in category order, so they are unique station-wide.
    registers : ResourcePool
        Pool of :class:`CashRegister`.
    arrivals : simpy.Store
        Unbounded inbox from the arrival generator to the dispatcher.
    checkout_queue : simpy.Store
        Bounded queue of refueled cars; a full queue blocks the hand-off.
    """

    def __init__(
        self,
        env: simpy.Environment,
        params: StationParameters,
        settings: SimulationConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.env = env
        self.params = params
        self.settings = settings or SimulationConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.settings.random_seed)

        self.stats = StationStats()
        self.car_factory = CarFactory(params, self.rng)
        self.progress: list[ProgressSample] = []

        self.pumps: dict[FuelType, ResourcePool] = {}
        next_id = 0
        for fuel in FUEL_TYPES:
            profile = params.fuel_profile(fuel)
            stations = [
                Station(id=next_id + i, fuel=fuel, fueling_time=profile.fueling_time)
                for i in range(profile.station_count)
            ]
            next_id += profile.station_count
            self.pumps[fuel] = ResourcePool(env, stations, name=f"{fuel.value}-pumps")

        self.registers = ResourcePool(
            env,
            [CashRegister(id=i) for i in range(params.cash_register_count)],
            name="registers",
        )
        self.arrivals = simpy.Store(env)
        self.checkout_queue = simpy.Store(env, capacity=self.settings.checkout_queue_capacity)

    def pool_status(self) -> list[PoolStatus]:
        pools = [*self.pumps.values(), self.registers]
        return [
            PoolStatus(
                name=pool.name,
                capacity=pool.capacity,
                available=pool.available_count,
                held=pool.held_count,
            )
            for pool in pools
        ]
