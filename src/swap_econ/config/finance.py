"""Discounting assumptions."""

from pydantic import BaseModel, Field


class FinanceConfig(BaseModel):
    """Discount rate and projection horizon.

    The monthly discount rate used for NPV is the simple rate
    ``discount_rate_pct / 100 / 12``.
    """

    discount_rate_pct: float = Field(default=18.0, ge=0, description="Annual discount rate (%)")
    analysis_horizon_months: int = Field(
        default=36, ge=1, le=360,
        description="Months of steady-state EBITDA after the month-0 investment.",
    )
