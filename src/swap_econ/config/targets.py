"""Pass/fail thresholds for the KPI chips."""

from pydantic import BaseModel, ConfigDict, Field


class Targets(BaseModel):
    """Fixed thresholds the orchestrator checks every snapshot against."""

    model_config = ConfigDict(frozen=True)

    breakeven_months_max: int = Field(
        default=18, ge=1,
        description="Hub payback must land strictly before this month.",
    )
    target_hub_ebitda: float = Field(
        default=500.0,
        description="Monthly hub EBITDA must exceed this value ($).",
    )


DEFAULT_TARGETS = Targets()
