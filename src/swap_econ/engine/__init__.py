"""Engine: deterministic unit-economics computation."""

from swap_econ.engine.effective import STRESS_EFFECTS, describe_active_effects, resolve_effective
from swap_econ.engine.demand import (
    compute_demand,
    price_elasticity_multiplier,
    utilization_cap_per_day,
)
from swap_econ.engine.cashflow import (
    build_cash_series,
    compute_per_battery,
    compute_per_hub,
    compute_swap_waterfall,
)
from swap_econ.engine.fleet import compute_fleet
from swap_econ.engine.orchestrator import build_snapshot, compute_all

__all__ = [
    "STRESS_EFFECTS",
    "resolve_effective",
    "describe_active_effects",
    "compute_demand",
    "price_elasticity_multiplier",
    "utilization_cap_per_day",
    "build_cash_series",
    "compute_per_battery",
    "compute_per_hub",
    "compute_swap_waterfall",
    "compute_fleet",
    "compute_all",
    "build_snapshot",
]
