"""Top-level scenario — bundles the station parameters with run settings."""

from pydantic import BaseModel, ConfigDict, Field

from fuelstation_sim.config.station import StationParameters


class SimulationConfig(BaseModel):
    """Run-level settings: clock cadence, drain period, queue bound, RNG, pacing."""

    model_config = ConfigDict(extra="forbid")

    tick_interval: float = Field(
        default=0.1, gt=0,
        description="Clock period (s). Each tick is one arrival check; "
                    "0.1 = ten checks per simulated second.",
    )
    report_every_ticks: int = Field(
        default=10, ge=1,
        description="Emit one progress sample every N ticks.",
    )
    grace_period: float = Field(
        default=0.2, ge=0,
        description="Time allowed after shutdown for in-flight customers to finish "
                    "before statistics are read. Best-effort, not a full drain.",
    )
    checkout_queue_capacity: int = Field(
        default=10, ge=1,
        description="Bound on refueled cars waiting for a register. A full queue "
                    "blocks the hand-off from the pump.",
    )
    random_seed: int | None = Field(
        default=None,
        description="Optional RNG seed for reproducible runs. None = non-deterministic.",
    )
    realtime_factor: float | None = Field(
        default=None, gt=0,
        description="Wall-clock seconds per simulated second. None = run in virtual "
                    "time as fast as possible; 1.0 = real time.",
    )


class Scenario(BaseModel):
    """Complete input bundle for one simulation run."""

    model_config = ConfigDict(extra="forbid")

    station: StationParameters = Field(default_factory=StationParameters)
    simulation: SimulationConfig = Field(default_factory=SimulationConfig)
