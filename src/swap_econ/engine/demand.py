"""Demand model: price elasticity capped by physical swap capacity.

  multiplier = (P / P0)^ε                       (constant elasticity, ε < 0)
  physical   = base swaps/day × multiplier × demand shock
  cap        = utilization × (1440 min / swap minutes)
  realized   = min(physical, cap)
"""

from __future__ import annotations

from swap_econ.models.results import DemandResult, EffectiveParams

MIN_PRICE = 0.01
"""Floor on the baseline and on the price ratio so the power is always finite."""

MINUTES_PER_DAY = 24 * 60


def price_elasticity_multiplier(price: float, baseline: float, elasticity: float) -> float:
    """Demand multiplier relative to the baseline price.

    Exactly 1.0 when ``price == baseline``.
    """
    ratio = max(MIN_PRICE, price / max(MIN_PRICE, baseline))
    return ratio ** elasticity


def utilization_cap_per_day(utilization_pct: float, swap_time_minutes: float) -> float:
    """Maximum swaps/day one battery slot can serve at the target utilization."""
    util_frac = max(0.0, min(1.0, utilization_pct / 100))
    theoretical_per_day = MINUTES_PER_DAY / max(1.0, swap_time_minutes)
    return util_frac * theoretical_per_day


def compute_demand(effective: EffectiveParams) -> DemandResult:
    """Realized swaps/day per battery for the effective parameters."""
    multiplier = price_elasticity_multiplier(
        effective.price, effective.baseline_price, effective.elasticity,
    )
    physical = effective.base_swaps_per_day * multiplier * effective.demand_multiplier
    cap = utilization_cap_per_day(effective.utilization_target_pct, effective.swap_time_minutes)

    # Capacity is a hard ceiling regardless of how cheap the swap is.
    per_day = min(physical, cap)
    utilization_ratio = per_day / cap if cap > 0 else 0.0

    return DemandResult(
        per_day=per_day,
        cap=cap,
        utilization_ratio=utilization_ratio,
        elasticity_multiplier=multiplier,
        physical_demand=physical,
    )
