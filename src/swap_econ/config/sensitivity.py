"""Sensitivity overrides: slider-style adjustments on top of the base case."""

from pydantic import BaseModel, Field


class SensitivityConfig(BaseModel):
    """Multipliers and optional direct overrides.

    An override, when set, replaces the base field before any stress toggle
    is applied. ``None`` means "use the base value".
    """

    price_multiplier: float = Field(default=1.0, ge=0, description="Scales price_per_swap (0.8..1.2 typical)")
    life_multiplier: float = Field(default=1.0, ge=0, description="Scales expected_life_cycles (0.7..1.3 typical)")
    utilization_target_pct_override: float | None = Field(
        default=None, ge=0, le=100,
        description="Replaces scale.utilization_target_pct when set.",
    )
    commission_pct_override: float | None = Field(
        default=None, ge=0, le=100,
        description="Replaces hub.agent_commission_pct_of_gross when set.",
    )
    replacement_pct_override: float | None = Field(
        default=None, ge=0, le=100,
        description="Replaces battery.failure_replacement_rate_monthly_pct when set.",
    )
