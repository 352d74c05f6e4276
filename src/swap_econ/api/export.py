"""Exporters: pure formatters over an already-computed snapshot."""

from __future__ import annotations

import csv
import io
import math

from swap_econ.config.scenario import Scenario
from swap_econ.models.results import Computed, Snapshot

CSV_HEADER = ["Scope", "Metric", "Value", "Unit"]

def _fmt(value: float | int | None, digits: int = 2) -> str:
    if value is None:
        return ""
    if isinstance(value, int):
        return str(value)
    return f"{value:.{digits}f}" if math.isfinite(value) else ""
    return f"{value:.2f}" if math.isfinite(value) else ""


def metric_rows(computed: Computed) -> list[list[str]]:
    """Battery, hub and fleet headline metrics as CSV rows (no header)."""
    pb = computed.per_battery
    hub = computed.per_hub
    fleet = computed.fleet
    return [
        ["Per-battery/month", "Revenue", _fmt(pb.revenue), "USD"],
        ["Per-battery/month", "Commission", _fmt(pb.commission), "USD"],
        ["Per-battery/month", "Servicing", _fmt(pb.servicing), "USD"],
        ["Per-battery/month", "Losses (damage/theft)", _fmt(pb.attrition_cost), "USD"],
        ["Per-battery/month", "Cash contribution", _fmt(pb.contribution_margin), "USD"],
        ["Per-battery/month", "Breakeven cycles (capex recovery)", _fmt(pb.breakeven_cycles), "cycles"],
        ["Per-battery/month", "Payback months (battery, cash)", _fmt(pb.payback_months_battery), "months"],
        ["Per-hub/month", "Revenue", _fmt(hub.revenue), "USD"],
        ["Per-hub/month", "EBITDA", _fmt(hub.ebitda), "USD"],
        ["Per-hub/month", "Payback month", _fmt(hub.payback_months), "months"],
        ["Per-hub/month", "IRR (monthly)", _fmt(hub.irr.rate, digits=6), "rate"],
        ["Fleet", "Monthly EBITDA", _fmt(fleet.ebitda_monthly), "USD"],
        ["Fleet", "NPV (horizon)", _fmt(fleet.npv_horizon), "USD"],
    ]


def export_csv(computed: Computed) -> str:
    """CSV text with a ``Scope,Metric,Value,Unit`` header."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    writer.writerows(metric_rows(computed))
    return buf.getvalue()


def export_snapshot_json(scenario: Scenario, computed: Computed, indent: int = 2) -> str:
    """Inputs + computed results as pretty-printed JSON."""
    return Snapshot(inputs=scenario, computed=computed).model_dump_json(indent=indent)
