"""Result models: computation output contracts."""

from swap_econ.models.results import (
    Computed,
    DemandResult,
    EffectiveParams,
    FleetKPIs,
    HubProjection,
    IRRResult,
    KPIBadges,
    PassFail,
    PerBatteryMonthly,
    PerHubMonthly,
    Snapshot,
    SwapWaterfall,
)

__all__ = [
    "Computed",
    "DemandResult",
    "EffectiveParams",
    "FleetKPIs",
    "HubProjection",
    "IRRResult",
    "KPIBadges",
    "PassFail",
    "PerBatteryMonthly",
    "PerHubMonthly",
    "Snapshot",
    "SwapWaterfall",
]
