"""Scale & operations inputs."""

from pydantic import BaseModel, Field


class ScaleConfig(BaseModel):
    """Network size and physical throughput limits."""

    batteries_per_hub: int = Field(default=30, ge=1, description="Batteries in circulation per hub")
    hubs_in_model: int = Field(default=5, ge=1, description="Identical hubs in the fleet")
    utilization_target_pct: float = Field(
        default=85.0, ge=0, le=100,
        description="Share of the 24h swap window a battery can realistically be in use.",
    )
    swap_time_minutes: float = Field(
        default=30.0, gt=0,
        description="Minutes one swap occupies a battery slot. Sets the capacity ceiling.",
    )
