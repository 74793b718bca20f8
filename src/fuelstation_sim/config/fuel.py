"""Fuel categories and the small value types shared by the config layer."""

from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


class FuelType(str, Enum):
    """Closed set of fuel categories.

    Declaration order is the index order of every four-element array in a
    parameter file: gas, diesel, LPG, electric.
    """

    GAS = "gas"
    DIESEL = "diesel"
    LPG = "lpg"
    ELECTRIC = "electric"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def unit(self) -> str:
        """Unit of dispensed quantity (litres, kilograms, kilowatt-hours)."""
        return _UNITS[self]


FUEL_TYPES: tuple[FuelType, ...] = tuple(FuelType)
"""Fixed category ordering used by every per-category array and report."""

_DISPLAY_NAMES = {
    FuelType.GAS: "Gas",
    FuelType.DIESEL: "Diesel",
    FuelType.LPG: "LPG",
    FuelType.ELECTRIC: "Electric",
}

_UNITS = {
    FuelType.GAS: "l",
    FuelType.DIESEL: "l",
    FuelType.LPG: "kg",
    FuelType.ELECTRIC: "kWh",
}


class TimeRange(BaseModel):
    """Closed service-time interval in simulated seconds.

    Accepts the capitalised ``Min``/``Max`` keys written by older config files.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    min: float = Field(
        default=1.0, ge=0,
        validation_alias=AliasChoices("min", "Min"),
        description="Shortest service time (s)",
    )
    max: float = Field(
        default=5.0, ge=0,
        validation_alias=AliasChoices("max", "Max"),
        description="Longest service time (s)",
    )

    @model_validator(mode="after")
    def _check_order(self) -> "TimeRange":
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) must not exceed max ({self.max})")
        return self


class TankSizeRange(BaseModel):
    """Inclusive tank capacity range, sampled on a ``step`` grid."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    min: int = Field(default=40, ge=1, description="Smallest tank (units of the fuel type)")
    max: int = Field(default=120, ge=1, description="Largest tank (units of the fuel type)")
    step: int = Field(default=5, ge=1, description="Granularity of sampled tank sizes")

    @model_validator(mode="after")
    def _check_order(self) -> "TankSizeRange":
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) must not exceed max ({self.max})")
        return self
