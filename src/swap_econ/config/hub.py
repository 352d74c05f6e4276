"""Hub cost inputs."""

from pydantic import BaseModel, Field


class HubConfig(BaseModel):
    """Hub-level capital and operating cost, plus the agent's cut."""

    hub_capex: float = Field(default=15_000.0, ge=0, description="Cabinet, chargers, fit-out ($)")
    hub_opex_per_month: float = Field(
        default=400.0, ge=0,
        description="Rent, staff and utilities per hub per month ($). "
                    "Charged once per hub, never allocated per battery.",
    )
    agent_commission_pct_of_gross: float = Field(
        default=18.0, ge=0, le=100,
        description="Agent commission as % of gross swap revenue.",
    )
