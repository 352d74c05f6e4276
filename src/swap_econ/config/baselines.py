"""Elasticity anchor."""

from pydantic import BaseModel, Field


class BaselineConfig(BaseModel):
    """Reference price at which ``swaps_per_battery_per_day`` was observed."""

    baseline_price: float = Field(default=4.0, ge=0, description="Price anchor for the elasticity model ($)")
