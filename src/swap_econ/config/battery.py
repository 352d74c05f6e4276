"""Battery cost & performance inputs."""

from pydantic import BaseModel, Field


class BatteryConfig(BaseModel):
    """Per-battery capital cost, lifetime and running cost."""

    battery_capex: float = Field(default=800.0, ge=0, description="Purchase price per battery ($)")
    expected_life_cycles: float = Field(
        default=1_200.0, gt=0,
        description="Rated swap cycles before the battery is worn out.",
    )
    failure_replacement_rate_monthly_pct: float = Field(
        default=1.0, ge=0, le=100,
        description="Expected loss from failure, theft or damage, as % of capex. "
                    "Amortised monthly as rate/100 × capex / 12.",
    )
    servicing_cost_per_cycle: float = Field(
        default=0.4, ge=0,
        description="Charging energy + handling cost per swap ($)",
    )
