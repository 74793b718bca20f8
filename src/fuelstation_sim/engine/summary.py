"""Derived rates and averages for a statistics snapshot."""

from __future__ import annotations

from fuelstation_sim.config.fuel import FUEL_TYPES
from fuelstation_sim.models.results import RunSummary, StatsSnapshot


def _ratio(numerator: float, denominator: float) -> float | None:
    if denominator == 0:
        return None
    return numerator / denominator


def summarize(snapshot: StatsSnapshot) -> RunSummary:
    """Compute every report ratio; ``None`` wherever the denominator is zero."""
    s = snapshot
    arrivals = s.total_arrivals
    checked_out = s.total_checked_out
    per_fuel = s.per_fuel

    return RunSummary(
        checked_out_rate=_ratio(checked_out, arrivals),
        not_served_rate=_ratio(s.not_served, arrivals),
        avg_receipt=_ratio(s.total_revenue, checked_out),
        avg_receipt_by_fuel={
            f: _ratio(per_fuel[f].revenue, per_fuel[f].checked_out) for f in FUEL_TYPES
        },
        # Units are booked at the pump, but averaged per paying customer.
        avg_units=_ratio(s.total_units, checked_out),
        avg_units_by_fuel={
            f: _ratio(per_fuel[f].units, per_fuel[f].checked_out) for f in FUEL_TYPES
        },
        avg_refuel_time=_ratio(s.total_refuel_time, s.total_refueled),
        avg_refuel_time_by_fuel={
            f: _ratio(per_fuel[f].refuel_time, per_fuel[f].refueled) for f in FUEL_TYPES
        },
        avg_checkout_time=_ratio(s.checkout_time_total, checked_out),
        avg_wait_before_leaving=_ratio(s.wait_before_leaving_total, s.not_served),
        avg_checkout_queue_wait=_ratio(s.checkout_queue_wait_total, checked_out),
        avg_time_at_station=_ratio(
            s.total_refuel_time + s.checkout_time_total + s.checkout_queue_wait_total,
            checked_out,
        ),
    )
