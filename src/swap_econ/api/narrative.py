"""Narrative generator: one-paragraph plain-English reading of a snapshot."""

from __future__ import annotations

import math

from swap_econ.config.scenario import Scenario
from swap_econ.models.results import Computed


def format_money(value: float) -> str:
    """Compact money format: 1.2m, 3.4k, 512.  Non-finite values render as a dash."""
    if not math.isfinite(value):
        return "—"
    sign = "-" if value < 0 else ""
    v = abs(value)
    if v >= 1_000_000:
        return f"{sign}{v / 1_000_000:.1f}m"
    if v >= 1_000:
        return f"{sign}{v / 1_000:.1f}k"
    return f"{sign}{v:.0f}"


def generate_narrative(scenario: Scenario, computed: Computed) -> str:
    """Summarise price, volume, battery contribution, hub EBITDA, payback and NPV."""
    price = scenario.pricing.price_per_swap
    swaps = computed.per_battery.swaps_per_day
    contribution = computed.per_battery.contribution_margin
    batteries = scenario.scale.batteries_per_hub
    opex = scenario.hub.hub_opex_per_month
    ebitda = computed.per_hub.ebitda
    payback = computed.per_hub.payback_months
    horizon = scenario.finance.analysis_horizon_months
    npv = computed.fleet.npv_horizon

    payback_text = str(payback) if payback is not None else "—"
    return (
        f"At ${price:.2f}/swap and {swaps:.1f} swaps/day, each battery contributes "
        f"${format_money(contribution)}/month (cash). With {batteries} batteries and "
        f"${format_money(opex)} opex, the hub delivers ${format_money(ebitda)} EBITDA "
        f"and breaks even in {payback_text} months; fleet NPV over {horizon} months "
        f"is ${format_money(npv)}."
    )
