"""Station parameters — the immutable bundle every simulation component reads.

The file format keeps the legacy four-element arrays (one entry per
``FuelType`` in declaration order).  Inside the engine every per-category
value is looked up through :meth:`StationParameters.fuel_profile`, never by
raw index.
"""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, model_validator

from fuelstation_sim.config.fuel import FUEL_TYPES, FuelType, TankSizeRange, TimeRange


@dataclass(frozen=True)
class FuelProfile:
    """Everything the engine needs to know about one fuel category."""

    fuel: FuelType
    price: float
    weight: float
    fueling_time: TimeRange
    station_count: int
    tank_size: TankSizeRange


def _per_fuel(default: tuple, description: str):
    return Field(
        default=default,
        min_length=len(FUEL_TYPES),
        max_length=len(FUEL_TYPES),
        description=description,
    )


class StationParameters(BaseModel):
    """Station layout, demand and pricing inputs for one run."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    fuel_pricing: tuple[float, ...] = _per_fuel(
        (1.65, 1.55, 0.85, 0.45),
        "Price per unit dispensed, per fuel type (€/l, €/l, €/kg, €/kWh)",
    )
    fuel_type_chance: tuple[float, ...] = _per_fuel(
        (0.55, 0.25, 0.10, 0.10),
        "Relative arrival weight per fuel type. Normalised by their sum, "
        "so [2, 1, 1, 0] and [0.5, 0.25, 0.25, 0] are equivalent.",
    )
    fueling_time: tuple[TimeRange, ...] = _per_fuel(
        (
            TimeRange(min=2.0, max=5.0),
            TimeRange(min=2.0, max=6.0),
            TimeRange(min=3.0, max=7.0),
            TimeRange(min=8.0, max=20.0),
        ),
        "Service-time range per fuel type (s). Dispensed units scale with "
        "service_time / max.",
    )
    station_counts: tuple[int, ...] = _per_fuel(
        (4, 2, 1, 2),
        "Number of pumps/chargers per fuel type",
    )
    tank_sizes: tuple[TankSizeRange, ...] = _per_fuel(
        (
            TankSizeRange(min=40, max=120),
            TankSizeRange(min=45, max=145),
            TankSizeRange(min=35, max=120),
            TankSizeRange(min=30, max=120),
        ),
        "Tank capacity range per fuel type (l, l, kg, kWh)",
    )
    cash_register_count: int = Field(default=2, ge=0, description="Number of checkout registers")
    checkout_time: TimeRange = Field(
        default_factory=lambda: TimeRange(min=1.0, max=3.0),
        description="Checkout service-time range (s)",
    )
    car_spawn_chance: float = Field(
        default=0.3, ge=0, le=1.0,
        description="Probability that a car arrives on any one tick",
    )
    car_wait_time_bias: float = Field(
        default=5.0, ge=0,
        description="Scales patience: each car waits U(bias/1.5, bias*2) seconds for a pump",
    )
    simulation_length: float = Field(default=60.0, gt=0, description="Run duration (simulated s)")

    @model_validator(mode="after")
    def _check_fuel_arrays(self) -> "StationParameters":
        if any(price < 0 for price in self.fuel_pricing):
            raise ValueError("fuel_pricing entries must be >= 0")
        if any(weight < 0 for weight in self.fuel_type_chance):
            raise ValueError("fuel_type_chance entries must be >= 0")
        if sum(self.fuel_type_chance) <= 0:
            raise ValueError("fuel_type_chance must contain at least one positive weight")
        if any(count < 0 for count in self.station_counts):
            raise ValueError("station_counts entries must be >= 0")
        for fuel, window in zip(FUEL_TYPES, self.fueling_time):
            if window.max <= 0:
                raise ValueError(f"fueling_time max for {fuel.value} must be > 0")
        return self

    # ── Per-category views ──────────────────────────────────────────────

    def fuel_profile(self, fuel: FuelType) -> FuelProfile:
        i = FUEL_TYPES.index(fuel)
        return FuelProfile(
            fuel=fuel,
            price=self.fuel_pricing[i],
            weight=self.fuel_type_chance[i],
            fueling_time=self.fueling_time[i],
            station_count=self.station_counts[i],
            tank_size=self.tank_sizes[i],
        )

    def fuel_profiles(self) -> dict[FuelType, FuelProfile]:
        return {fuel: self.fuel_profile(fuel) for fuel in FUEL_TYPES}
