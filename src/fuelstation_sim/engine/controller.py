"""Run controller — wires one simulation, runs it and drains the statistics.

Sequence of one run:
  start clock, dispatcher, arrival generator and progress reporter
  → run for ``simulation_length``
  → stop the clock and fire ``shutdown`` (no new arrivals, no more progress)
  → run ``grace_period`` longer so in-flight customers can finish
  → snapshot the statistics.

In-flight refuel/checkout processes are never cancelled.  Whatever has not
finished by the end of the grace period is simply missing from the totals
(reported as ``SimulationResult.in_flight``); short or abrupt runs undercount.

Entry point: ``run_simulation(scenario)``.
"""

from __future__ import annotations

import logging
import time

import numpy as np
import simpy
import simpy.rt

from fuelstation_sim.config.scenario import Scenario, SimulationConfig
from fuelstation_sim.engine.arrivals import generate_arrivals
from fuelstation_sim.engine.clock import Ticker
from fuelstation_sim.engine.dispatcher import dispatch
from fuelstation_sim.engine.station import GasStation
from fuelstation_sim.engine.summary import summarize
from fuelstation_sim.models.results import ProgressSample, SimulationResult

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# Public entry point
# ═══════════════════════════════════════════════════════════════════════════

def run_simulation(scenario: Scenario) -> SimulationResult:
    """Run one simulation and return its final statistics.

    Runs in virtual time unless ``scenario.simulation.realtime_factor`` is
    set, in which case the run is paced against the wall clock.
    """
    params = scenario.station
    settings = scenario.simulation

    env = make_environment(settings)
    station = GasStation(env, params, settings, np.random.default_rng(settings.random_seed))
    ticker = Ticker(env, settings.tick_interval)
    shutdown = env.event()

    env.process(ticker.run())
    env.process(dispatch(station))
    env.process(generate_arrivals(station, ticker, shutdown))
    env.process(report_progress(station, ticker, shutdown, settings.report_every_ticks))

    logger.info("Simulation started: %.1fs, %d pumps, %d registers",
                params.simulation_length, sum(params.station_counts), params.cash_register_count)
    started = time.perf_counter()

    env.run(until=params.simulation_length)
    ticker.stop()
    shutdown.succeed()
    logger.info("Shutdown at t=%.2f; draining for %.2fs", env.now, settings.grace_period)

    if settings.grace_period > 0:
        env.run(until=params.simulation_length + settings.grace_period)

    snapshot = station.stats.snapshot(env.now)
    in_flight = snapshot.total_arrivals - snapshot.not_served - snapshot.total_checked_out
    logger.info("Finished: %d arrivals, %d checked out, %d not served, %d still in flight",
                snapshot.total_arrivals, snapshot.total_checked_out, snapshot.not_served, in_flight)

    return SimulationResult(
        scenario=scenario,
        stats=snapshot,
        summary=summarize(snapshot),
        progress=list(station.progress),
        pools=station.pool_status(),
        in_flight=in_flight,
        wall_time_seconds=time.perf_counter() - started,
    )


def make_environment(settings: SimulationConfig) -> simpy.Environment:
    if settings.realtime_factor is None:
        return simpy.Environment()
    return simpy.rt.RealtimeEnvironment(factor=settings.realtime_factor, strict=False)


# ═══════════════════════════════════════════════════════════════════════════
# Progress reporter
# ═══════════════════════════════════════════════════════════════════════════

def report_progress(station: GasStation, ticker: Ticker, shutdown: simpy.Event, every: int):
    """Process generator: sample the statistics every ``every`` ticks."""
    while True:
        yield ticker.tick | shutdown
        if shutdown.triggered:
            return
        if ticker.count % every:
            continue

        snap = station.stats.snapshot(station.env.now)
        sample = ProgressSample(
            time=snap.taken_at,
            total_arrivals=snap.total_arrivals,
            in_refuel_queue=snap.in_refuel_queue,
            in_checkout_queue=snap.in_checkout_queue,
            checked_out=snap.total_checked_out,
        )
        station.progress.append(sample)
        logger.info("t=%6.1f arrivals=%d refuel_queue=%d checkout_queue=%d checked_out=%d",
                    sample.time, sample.total_arrivals, sample.in_refuel_queue,
                    sample.in_checkout_queue, sample.checked_out)
