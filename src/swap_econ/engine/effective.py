"""Effective-parameter resolver.

Scenario → EffectiveParams as a fold of ordered steps over one flat record:

  1. base        - copy the base assumptions
  2. sensitivity - multipliers, then direct overrides (replace the base value)
  3. stress      - ``STRESS_EFFECTS`` applied in declaration order

Each step writes only the fields it owns.  Stress effects on the same field
compound left-to-right in table order; effects on disjoint fields commute.
The function is pure and total: zero or extreme values flow through and are
guarded downstream.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal

from swap_econ.config.scenario import Scenario
from swap_econ.models.results import EffectiveParams


@dataclass(frozen=True)
class StressEffect:
    """One field perturbation owned by a stress toggle."""

    toggle: str
    """Name of the boolean on ``StressConfig``."""

    field: str
    """Effective field it writes."""

    op: Literal["mul", "add"]
    operand: float

    def apply(self, value: float) -> float:
        if self.op == "mul":
            return value * self.operand
        return value + self.operand


STRESS_EFFECTS: tuple[StressEffect, ...] = (
    StressEffect("demand_shock_10", "demand_multiplier", "mul", 0.9),
    StressEffect("life_drop_20", "life", "mul", 0.8),
    StressEffect("fx_minus_15_capex", "capex_batt", "mul", 1.15),
    StressEffect("fx_minus_15_capex", "capex_hub", "mul", 1.15),
    StressEffect("hub_opex_plus_20", "hub_opex", "mul", 1.2),
    StressEffect("theft_damage_plus_2pct", "replace_pct", "add", 2.0),
    StressEffect("price_minus_10_vs_fuel", "price", "mul", 0.9),
)

_Step = Callable[[dict, Scenario], dict]


def _base_step(_: dict, scenario: Scenario) -> dict:
    p = scenario.pricing
    b = scenario.battery
    h = scenario.hub
    sc = scenario.scale
    fin = scenario.finance
    return {
        "price": p.price_per_swap,
        "commission_pct": h.agent_commission_pct_of_gross,
        "replace_pct": b.failure_replacement_rate_monthly_pct,
        "life": b.expected_life_cycles,
        "capex_batt": b.battery_capex,
        "capex_hub": h.hub_capex,
        "hub_opex": h.hub_opex_per_month,
        "utilization_target_pct": sc.utilization_target_pct,
        "demand_multiplier": 1.0,
        "servicing_per_cycle": b.servicing_cost_per_cycle,
        "days_per_month": p.hub_active_days_per_month,
        "base_swaps_per_day": p.swaps_per_battery_per_day,
        "elasticity": p.elasticity,
        "swap_time_minutes": sc.swap_time_minutes,
        "batteries_per_hub": sc.batteries_per_hub,
        "hubs_in_model": sc.hubs_in_model,
        "discount_rate_pct": fin.discount_rate_pct,
        "horizon_months": fin.analysis_horizon_months,
        "baseline_price": scenario.baselines.baseline_price,
    }


def _sensitivity_step(record: dict, scenario: Scenario) -> dict:
    s = scenario.sensitivity
    out = dict(record)
    out["price"] = record["price"] * s.price_multiplier
    out["life"] = record["life"] * s.life_multiplier
    if s.commission_pct_override is not None:
        out["commission_pct"] = s.commission_pct_override
    if s.replacement_pct_override is not None:
        out["replace_pct"] = s.replacement_pct_override
    if s.utilization_target_pct_override is not None:
        out["utilization_target_pct"] = s.utilization_target_pct_override
    return out


def _stress_step(record: dict, scenario: Scenario) -> dict:
    out = dict(record)
    for effect in STRESS_EFFECTS:
        if getattr(scenario.stress, effect.toggle):
            out[effect.field] = effect.apply(out[effect.field])
    return out


RESOLUTION_STEPS: tuple[_Step, ...] = (_base_step, _sensitivity_step, _stress_step)


def resolve_effective(scenario: Scenario) -> EffectiveParams:
    """Resolve the effective parameter set for one computation."""
    record: dict = {}
    for step in RESOLUTION_STEPS:
        record = step(record, scenario)
    return EffectiveParams(**record)


def describe_active_effects(scenario: Scenario) -> list[str]:
    """Labels for every non-neutral sensitivity setting and active toggle."""
    s = scenario.sensitivity
    st = scenario.stress
    out: list[str] = []
    if s.price_multiplier != 1:
        out.append(f"Price x{s.price_multiplier:.2f}")
    if s.life_multiplier != 1:
        out.append(f"Life x{s.life_multiplier:.2f}")
    if s.utilization_target_pct_override is not None:
        out.append(f"Utilization {s.utilization_target_pct_override:g}%")
    if s.commission_pct_override is not None:
        out.append(f"Commission {s.commission_pct_override:g}%")
    if s.replacement_pct_override is not None:
        out.append(f"Replacement {s.replacement_pct_override:g}%")
    if st.demand_shock_10:
        out.append("Demand −10%")
    if st.life_drop_20:
        out.append("Life −20%")
    if st.fx_minus_15_capex:
        out.append("FX −15% (capex↑)")
    if st.hub_opex_plus_20:
        out.append("Hub opex +20%")
    if st.theft_damage_plus_2pct:
        out.append("Theft/damage +2%/mo")
    if st.price_minus_10_vs_fuel:
        out.append("Price −10% vs fuel")
    return out
