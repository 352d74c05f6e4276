"""Fleet aggregator: N identical hubs opened together at month 0.

Every month of the hub cash series, the initial investment included, is
scaled by the hub count.  Staggered roll-out is not modelled.
"""

from __future__ import annotations

import numpy as np

from swap_econ.finance.dcf import compute_npv, monthly_rate
from swap_econ.models.results import EffectiveParams, FleetKPIs, PerHubMonthly


def compute_fleet(
    effective: EffectiveParams,
    per_hub: PerHubMonthly,
    cash_series: list[float],
) -> FleetKPIs:
    """Scale one hub's projection to the whole fleet."""
    hubs = effective.hubs_in_model
    cash_fleet = np.asarray(cash_series, dtype=np.float64) * hubs
    cumulative = np.cumsum(cash_fleet)

    return FleetKPIs(
        hubs=hubs,
        ebitda_monthly=per_hub.ebitda * hubs,
        cash_flow=cash_fleet.tolist(),
        npv_horizon=compute_npv(cash_fleet.tolist(), monthly_rate(effective.discount_rate_pct)),
        cumulative_cash=cumulative.tolist(),
    )
