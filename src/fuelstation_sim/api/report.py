"""Report generator — plain-text rendering of a simulation result.

Ratios the summary could not compute (zero denominators, e.g. no LPG car
ever checked out) are shown as ``n/a``.
"""

from __future__ import annotations

from fuelstation_sim.config.fuel import FUEL_TYPES
from fuelstation_sim.models.results import SimulationResult

NOT_AVAILABLE = "n/a"


def _fmt(value: float | None, suffix: str = "", scale: float = 1.0) -> str:
    if value is None:
        return NOT_AVAILABLE
    return f"{value * scale:.2f}{suffix}"


def render_report(result: SimulationResult) -> str:
    """Render the end-of-run report.

    Sections:
      1. Customer totals and rates
      2. Receipts (overall and per fuel type)
      3. Units dispensed
      4. Time spent at the station
      5. Run notes (pools, undrained customers) when relevant
    """
    s = result.stats
    m = result.summary

    sections: list[str] = []

    # ── 1. Totals ──
    sections.append("=" * 60)
    sections.append("CUSTOMERS")
    sections.append("=" * 60)
    sections.append(
        f"Total cars: {s.total_arrivals}\n"
        f"Cars refueled total: {s.total_refueled}\n"
        f"Cars refueled by fuel type: "
        + ", ".join(f"{f.display_name} {s.per_fuel[f].refueled}" for f in FUEL_TYPES)
        + f"\nCars checked out total: {s.total_checked_out}\n"
        f"Cars not served: {s.not_served}\n"
        f"Cars checked out rate: {_fmt(m.checked_out_rate, ' %', 100)}\n"
        f"Cars not served rate: {_fmt(m.not_served_rate, ' %', 100)}"
    )

    # ── 2. Receipts ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("RECEIPTS")
    sections.append("=" * 60)
    sections.append(f"Average receipt: {_fmt(m.avg_receipt, ' €')}")
    for fuel in FUEL_TYPES:
        sections.append(f"  {fuel.display_name:10s} {_fmt(m.avg_receipt_by_fuel[fuel], ' €')}")

    # ── 3. Units ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("UNITS DISPENSED")
    sections.append("=" * 60)
    sections.append(f"Average units refueled: {_fmt(m.avg_units)}")
    for fuel in FUEL_TYPES:
        sections.append(
            f"  {fuel.display_name:10s} {_fmt(m.avg_units_by_fuel[fuel], ' ' + fuel.unit)}"
        )

    # ── 4. Time ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("TIME")
    sections.append("=" * 60)
    sections.append(f"Average time spent refueling: {_fmt(m.avg_refuel_time, ' s')}")
    for fuel in FUEL_TYPES:
        sections.append(
            f"  {fuel.display_name:10s} {_fmt(m.avg_refuel_time_by_fuel[fuel], ' s')}"
        )
    sections.append(
        f"Average time spent checking out: {_fmt(m.avg_checkout_time, ' s')}\n"
        f"Average time in checkout queue: {_fmt(m.avg_checkout_queue_wait, ' s')}\n"
        f"Average time in queue before leaving: {_fmt(m.avg_wait_before_leaving, ' s')}\n"
        f"Average time spent at gas station: {_fmt(m.avg_time_at_station, ' s')}"
    )

    # ── 5. Notes ──
    if result.in_flight > 0:
        sections.append("")
        sections.append(
            f"Note: {result.in_flight} car(s) were still at the station when the "
            f"statistics were read; totals above exclude their outcome."
        )

    sections.append("=" * 60)
    return "\n".join(sections)
