"""Orchestrator: Scenario → Computed snapshot.

  resolve → demand → per battery → per hub → fleet → badges → pass/fail

Entry point: ``compute_all(scenario)``.  Referentially transparent: no
caching, no shared state, every record is rebuilt on each call.
"""

from __future__ import annotations

from swap_econ.config.scenario import Scenario
from swap_econ.config.targets import DEFAULT_TARGETS, Targets
from swap_econ.engine.cashflow import compute_per_battery, compute_per_hub, compute_swap_waterfall
from swap_econ.engine.demand import compute_demand
from swap_econ.engine.effective import describe_active_effects, resolve_effective
from swap_econ.engine.fleet import compute_fleet
from swap_econ.models.results import (
    Computed,
    FleetKPIs,
    KPIBadges,
    PassFail,
    PerHubMonthly,
    Snapshot,
)


def compute_badges(per_hub: PerHubMonthly, fleet: FleetKPIs) -> KPIBadges:
    return KPIBadges(
        hub_ebitda=per_hub.ebitda,
        breakeven_months=per_hub.payback_months,
        fleet_npv=fleet.npv_horizon,
    )


def evaluate_pass_fail(
    per_hub: PerHubMonthly,
    fleet: FleetKPIs,
    targets: Targets = DEFAULT_TARGETS,
) -> PassFail:
    """Threshold chips.  An undefined payback never passes the breakeven check."""
    payback = per_hub.payback_months
    return PassFail(
        breakeven_lt_18m=payback is not None and payback < targets.breakeven_months_max,
        hub_ebitda_gt_target=per_hub.ebitda > targets.target_hub_ebitda,
        npv_positive=fleet.npv_horizon > 0,
    )


def compute_all(scenario: Scenario, targets: Targets = DEFAULT_TARGETS) -> Computed:
    """Run the full chain for one scenario."""
    effective = resolve_effective(scenario)
    demand = compute_demand(effective)

    per_battery = compute_per_battery(effective, demand.per_day)
    projection = compute_per_hub(effective, demand.per_day, demand.utilization_ratio)
    fleet = compute_fleet(effective, projection.per_hub, projection.cash_series)

    return Computed(
        effective=effective,
        demand=demand,
        per_battery=per_battery,
        per_hub=projection.per_hub,
        fleet=fleet,
        badges=compute_badges(projection.per_hub, fleet),
        pass_fail=evaluate_pass_fail(projection.per_hub, fleet, targets),
        swap_waterfall=compute_swap_waterfall(effective, per_battery),
        active_effects=describe_active_effects(scenario),
    )


def build_snapshot(scenario: Scenario, targets: Targets = DEFAULT_TARGETS) -> Snapshot:
    """Inputs bundled with their computed results."""
    return Snapshot(inputs=scenario, computed=compute_all(scenario, targets))
