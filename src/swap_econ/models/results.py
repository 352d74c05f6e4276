"""Result types: the contract between engine, finance, API and exporters.

Every record is frozen and freshly built on each ``compute_all`` call.
Values that can be unreachable (breakeven, payback, IRR) are ``None``
rather than a sentinel number, so a caller cannot confuse "never" with zero.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from swap_econ.config.scenario import Scenario


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ═══════════════════════════════════════════════════════════════════════════
# Effective parameters
# ═══════════════════════════════════════════════════════════════════════════

class EffectiveParams(_Frozen):
    """Scenario flattened after sensitivity overrides and stress toggles."""

    # --- Resolved (may be touched by overrides / stress) ---
    price: float
    commission_pct: float
    replace_pct: float
    life: float
    capex_batt: float
    capex_hub: float
    hub_opex: float
    utilization_target_pct: float
    demand_multiplier: float

    # --- Pass-through ---
    servicing_per_cycle: float
    days_per_month: float
    base_swaps_per_day: float
    elasticity: float
    swap_time_minutes: float
    batteries_per_hub: int
    hubs_in_model: int
    discount_rate_pct: float
    horizon_months: int
    baseline_price: float


# ═══════════════════════════════════════════════════════════════════════════
# Demand
# ═══════════════════════════════════════════════════════════════════════════

class DemandResult(_Frozen):
    """Realized swap volume per battery."""

    per_day: float
    """Realized swaps/day = min(physical demand, cap)."""

    cap: float
    """Theoretical capacity swaps/day at the utilization target."""

    utilization_ratio: float
    """per_day / cap, or 0 when cap is 0."""

    elasticity_multiplier: float
    """(price / baseline)^elasticity."""

    physical_demand: float
    """Uncapped demand after elasticity and the demand shock."""


# ═══════════════════════════════════════════════════════════════════════════
# Financial roll-up
# ═══════════════════════════════════════════════════════════════════════════

class IRRResult(_Frozen):
    """Monthly IRR together with how (and whether) it was found."""

    rate: float | None
    """Monthly IRR, or None when no real root was found."""

    method: Literal["newton", "bisection"] | None = None
    iterations: int = 0

    @property
    def defined(self) -> bool:
        return self.rate is not None

    @property
    def annual_rate(self) -> float | None:
        """Compounded annual equivalent (1 + r)^12 − 1."""
        if self.rate is None:
            return None
        return (1 + self.rate) ** 12 - 1


class PerBatteryMonthly(_Frozen):
    """One battery, one month. Hub opex is not allocated at this level."""

    swaps_per_day: float
    swaps_per_month: float
    revenue: float
    commission: float
    servicing: float
    attrition_cost: float
    """Expected monthly loss: replace_pct/100 × battery capex / 12."""

    contribution_margin: float
    """Cash basis: revenue − commission − servicing − attrition."""

    depreciation_economic: float
    """Non-cash wear: capex / life × swaps this month. Excluded from margin."""

    per_cycle_margin: float
    breakeven_cycles: float | None
    """capex / per-cycle margin; None when the margin is not positive."""

    payback_months_battery: int | None
    """ceil(capex / contribution); None when contribution is not positive."""


class PerHubMonthly(_Frozen):
    """One hub, one steady-state month."""

    revenue: float
    commission: float
    servicing: float
    attrition_cost: float
    opex: float
    ebitda: float
    payback_months: int | None
    """First month index whose cumulative cash is ≥ 0 (0 = investment month)."""

    irr: IRRResult
    utilization_ratio: float

    @property
    def irr_monthly(self) -> float | None:
        return self.irr.rate


class HubProjection(_Frozen):
    """Hub monthly figures plus its horizon cash series."""

    per_hub: PerHubMonthly
    cash_series: list[float]
    """Index 0 = initial outflow, then one EBITDA value per horizon month."""

    npv_total: float


class SwapWaterfall(_Frozen):
    """Per-swap margin bridge: price down to contribution per swap."""

    price: float
    commission: float
    servicing: float
    losses: float
    contribution: float


# ═══════════════════════════════════════════════════════════════════════════
# Fleet & KPIs
# ═══════════════════════════════════════════════════════════════════════════

class FleetKPIs(_Frozen):
    """All hubs, identical and opened together at month 0."""

    hubs: int
    ebitda_monthly: float
    cash_flow: list[float]
    npv_horizon: float
    cumulative_cash: list[float]


class KPIBadges(_Frozen):
    """Headline numbers shown on the KPI badges."""

    hub_ebitda: float
    breakeven_months: int | None
    fleet_npv: float


class PassFail(_Frozen):
    """Threshold chips."""

    breakeven_lt_18m: bool
    hub_ebitda_gt_target: bool
    npv_positive: bool


class Computed(_Frozen):
    """One full snapshot of derived results."""

    effective: EffectiveParams
    demand: DemandResult
    per_battery: PerBatteryMonthly
    per_hub: PerHubMonthly
    fleet: FleetKPIs
    badges: KPIBadges
    pass_fail: PassFail
    swap_waterfall: SwapWaterfall
    active_effects: list[str]


class Snapshot(_Frozen):
    """Inputs and their computed results, as handed to exporters."""

    inputs: Scenario
    computed: Computed
