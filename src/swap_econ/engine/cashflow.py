"""Financial roll-up: per battery → per hub → hub cash projection.

Key distinction:
  - contribution margin is a battery-level cash figure; hub opex is never
    allocated to batteries and is subtracted once per hub.
  - depreciation_economic is a non-cash wear metric; it is reported but
    never enters margin, EBITDA, payback or breakeven.
  - the projection is steady state: one month-0 investment followed by the
    same EBITDA every month of the horizon.
"""

from __future__ import annotations

import math

from swap_econ.finance.dcf import compute_irr, compute_npv, compute_payback_month, monthly_rate
from swap_econ.models.results import (
    EffectiveParams,
    HubProjection,
    PerBatteryMonthly,
    PerHubMonthly,
    SwapWaterfall,
)


def compute_per_cycle_margin(effective: EffectiveParams) -> float:
    """Cash margin of one swap before attrition: price − commission − servicing."""
    e = effective
    return e.price - (e.commission_pct / 100) * e.price - e.servicing_per_cycle


def compute_per_battery(effective: EffectiveParams, swaps_per_day: float) -> PerBatteryMonthly:
    """Monthly economics of a single battery."""
    e = effective

    swaps_month = swaps_per_day * e.days_per_month
    revenue = swaps_month * e.price
    commission = revenue * (e.commission_pct / 100)
    servicing = swaps_month * e.servicing_per_cycle
    attrition = (e.replace_pct / 100) * e.capex_batt / 12
    contribution = revenue - commission - servicing - attrition

    depreciation = (e.capex_batt / max(1.0, e.life)) * swaps_month

    per_cycle_margin = compute_per_cycle_margin(e)
    breakeven_cycles = e.capex_batt / per_cycle_margin if per_cycle_margin > 0 else None
    if breakeven_cycles is not None and not math.isfinite(breakeven_cycles):
        breakeven_cycles = None

    # A vanishing positive contribution can push the quotient to inf.
    payback = None
    if contribution > 0:
        months = e.capex_batt / contribution
        payback = math.ceil(months) if math.isfinite(months) else None

    return PerBatteryMonthly(
        swaps_per_day=swaps_per_day,
        swaps_per_month=swaps_month,
        revenue=revenue,
        commission=commission,
        servicing=servicing,
        attrition_cost=attrition,
        contribution_margin=contribution,
        depreciation_economic=depreciation,
        per_cycle_margin=per_cycle_margin,
        breakeven_cycles=breakeven_cycles,
        payback_months_battery=payback,
    )


def build_cash_series(effective: EffectiveParams, hub_ebitda: float) -> list[float]:
    """Month-0 investment followed by ``horizon_months`` of constant EBITDA."""
    e = effective
    initial_outflow = -(e.capex_hub + e.capex_batt * e.batteries_per_hub)
    return [initial_outflow] + [hub_ebitda] * e.horizon_months


def compute_per_hub(
    effective: EffectiveParams,
    swaps_per_day: float,
    utilization_ratio: float,
) -> HubProjection:
    """Hub monthly P&L plus its cash series, NPV, payback and IRR."""
    e = effective
    n = e.batteries_per_hub
    pb = compute_per_battery(e, swaps_per_day)

    revenue = pb.revenue * n
    commission = pb.commission * n
    servicing = pb.servicing * n
    attrition = pb.attrition_cost * n
    opex = e.hub_opex
    ebitda = revenue - commission - servicing - attrition - opex

    cash = build_cash_series(e, ebitda)

    per_hub = PerHubMonthly(
        revenue=revenue,
        commission=commission,
        servicing=servicing,
        attrition_cost=attrition,
        opex=opex,
        ebitda=ebitda,
        payback_months=compute_payback_month(cash),
        irr=compute_irr(cash),
        utilization_ratio=utilization_ratio,
    )

    return HubProjection(
        per_hub=per_hub,
        cash_series=cash,
        npv_total=compute_npv(cash, monthly_rate(e.discount_rate_pct)),
    )


def compute_swap_waterfall(effective: EffectiveParams, per_battery: PerBatteryMonthly) -> SwapWaterfall:
    """Bridge from price to contribution for one swap.

    Losses spread the monthly attrition over the month's swaps (at least one).
    """
    e = effective
    commission = -(e.commission_pct / 100) * e.price
    servicing = -e.servicing_per_cycle
    losses = -per_battery.attrition_cost / max(1.0, per_battery.swaps_per_month)
    return SwapWaterfall(
        price=e.price,
        commission=commission,
        servicing=servicing,
        losses=losses,
        contribution=e.price + commission + servicing + losses,
    )
