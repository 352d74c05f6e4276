"""Stress-test toggles: adverse scenario switches."""

from pydantic import BaseModel, Field


class StressConfig(BaseModel):
    """Each toggle perturbs one or more effective parameters when ``True``.

    The exact effect of every toggle is declared in
    ``swap_econ.engine.effective.STRESS_EFFECTS``.
    """

    demand_shock_10: bool = Field(default=False, description="Physical demand −10%")
    life_drop_20: bool = Field(default=False, description="Battery life −20%")
    fx_minus_15_capex: bool = Field(default=False, description="Local currency −15%: battery and hub capex +15%")
    hub_opex_plus_20: bool = Field(default=False, description="Hub opex +20%")
    theft_damage_plus_2pct: bool = Field(default=False, description="Replacement rate +2 percentage points")
    price_minus_10_vs_fuel: bool = Field(default=False, description="Price −10% to compete with fuel")
