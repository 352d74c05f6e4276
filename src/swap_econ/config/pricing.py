"""Pricing & demand inputs."""

from pydantic import BaseModel, Field


class PricingConfig(BaseModel):
    """Swap price and the demand it is expected to generate."""

    price_per_swap: float = Field(default=4.0, ge=0, description="Gross price charged per swap ($)")
    swaps_per_battery_per_day: float = Field(
        default=0.9, ge=0,
        description="Baseline swaps per battery per day at the baseline price.",
    )
    hub_active_days_per_month: float = Field(
        default=26.0, gt=0, le=31,
        description="Days per month the hub is open for swaps.",
    )
    elasticity: float = Field(
        default=-1.0, lt=0,
        description="Constant price elasticity of demand. Negative: "
                    "Q' = Q × (P / P0)^elasticity, so a price rise lowers volume.",
    )
