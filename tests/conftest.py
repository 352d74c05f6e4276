"""Shared test fixtures: sample configs matching scenarios/base_case.yaml."""

from __future__ import annotations

import pytest

from swap_econ.config import (
    BaselineConfig,
    BatteryConfig,
    FinanceConfig,
    HubConfig,
    PricingConfig,
    ScaleConfig,
    Scenario,
    SensitivityConfig,
    StressConfig,
)
from swap_econ.engine.effective import resolve_effective
from swap_econ.models.results import EffectiveParams


@pytest.fixture
def pricing() -> PricingConfig:
    return PricingConfig(
        price_per_swap=4.0,
        swaps_per_battery_per_day=0.9,
        hub_active_days_per_month=26,
        elasticity=-1.0,
    )


@pytest.fixture
def battery() -> BatteryConfig:
    return BatteryConfig(
        battery_capex=800,
        expected_life_cycles=1_200,
        failure_replacement_rate_monthly_pct=1.0,
        servicing_cost_per_cycle=0.4,
    )


@pytest.fixture
def hub() -> HubConfig:
    return HubConfig(
        hub_capex=15_000,
        hub_opex_per_month=400,
        agent_commission_pct_of_gross=18,
    )


@pytest.fixture
def scale() -> ScaleConfig:
    return ScaleConfig(
        batteries_per_hub=30,
        hubs_in_model=5,
        utilization_target_pct=85,
        swap_time_minutes=30,
    )


@pytest.fixture
def finance() -> FinanceConfig:
    return FinanceConfig(discount_rate_pct=18, analysis_horizon_months=36)


@pytest.fixture
def scenario(
    pricing: PricingConfig,
    battery: BatteryConfig,
    hub: HubConfig,
    scale: ScaleConfig,
    finance: FinanceConfig,
) -> Scenario:
    return Scenario(
        pricing=pricing,
        battery=battery,
        hub=hub,
        scale=scale,
        finance=finance,
        sensitivity=SensitivityConfig(),
        stress=StressConfig(),
        baselines=BaselineConfig(baseline_price=4.0),
    )


@pytest.fixture
def effective(scenario: Scenario) -> EffectiveParams:
    return resolve_effective(scenario)
