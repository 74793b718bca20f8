"""FastAPI server — HTTP access to the gas-station simulator.

Run with:
    uvicorn fuelstation_sim.api.server:app --reload --port 8000

Or:
    fuelstation-sim-api

Endpoints:
    GET  /                   — welcome message
    GET  /health             — liveness probe
    GET  /schema             — full JSON Schema for Scenario inputs
    GET  /scenario/defaults  — complete default scenario as JSON
    POST /simulate           — run one simulation (partial or full Scenario)

Simulations requested over HTTP always run in virtual time; a
``realtime_factor`` in the request is ignored.
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from fuelstation_sim.config.loader import ConfigError, parse_scenario
from fuelstation_sim.config.scenario import Scenario
from fuelstation_sim.engine.controller import run_simulation
from fuelstation_sim.api.report import render_report


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Fuel Station Simulator API",
    version="1.0",
    description=(
        "Simulates cars competing for fuel pumps and checkout registers. "
        "Send a partial scenario to POST /simulate; missing fields use defaults."
    ),
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class SimulateRequest(BaseModel):
    """Request body for /simulate. All fields optional — defaults used for missing."""
    scenario: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial or full Scenario JSON. Missing fields use defaults. "
                    "Example: {'station': {'car_spawn_chance': 0.5}, 'simulation': {'random_seed': 7}}",
    )


class SimulateResponse(BaseModel):
    """Response from /simulate."""
    result: dict[str, Any]
    report: str


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _build_scenario(overrides: dict[str, Any]) -> Scenario:
    """Build a Scenario from partial overrides merged onto defaults."""
    defaults = Scenario().model_dump(mode="json")
    _deep_merge(defaults, overrides)
    if isinstance(defaults.get("simulation"), dict):
        defaults["simulation"]["realtime_factor"] = None
    return parse_scenario(defaults)


def _deep_merge(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into base dict."""
    for key, val in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(val, dict):
            _deep_merge(base[key], val)
        else:
            base[key] = val
    return base


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/")
def root():
    return {
        "name": "Fuel Station Simulator API",
        "version": "1.0",
        "docs": "GET /docs (interactive Swagger UI)",
        "start_here": "GET /scenario/defaults",
    }


@app.get("/schema")
def get_schema():
    """Full JSON Schema for Scenario — all inputs with types, defaults, constraints."""
    return Scenario.model_json_schema()


@app.get("/scenario/defaults")
def get_defaults():
    """Complete default Scenario as JSON. Use as a starting point for modifications."""
    return Scenario().model_dump(mode="json")


@app.post("/simulate", response_model=SimulateResponse)
def simulate(req: SimulateRequest):
    """Run one simulation.

    Example minimal request:
    ```json
    {"scenario": {"station": {"station_counts": [2, 1, 1, 1]}, "simulation": {"random_seed": 42}}}
    ```
    """
    try:
        scenario = _build_scenario(req.scenario)
    except ConfigError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    result = run_simulation(scenario)
    return SimulateResponse(
        result=result.model_dump(mode="json"),
        report=render_report(result),
    )


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn
    uvicorn.run(
        "fuelstation_sim.api.server:app",
        host="0.0.0.0",
        port=8000,
    )


if __name__ == "__main__":
    main()
