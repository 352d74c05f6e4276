"""Context manifest: makes the engine self-describing for API clients.

Produces the input sections with per-parameter types, defaults and
constraints, extracted straight from the pydantic config models, plus the
key formulas at ``detail_level="full"``.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

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


# ═══════════════════════════════════════════════════════════════════════════
# Public response models
# ═══════════════════════════════════════════════════════════════════════════

class ParameterInfo(BaseModel):
    """One configurable parameter, machine-readable."""
    name: str
    type: str
    default: Any
    description: str
    constraints: dict[str, Any] = Field(default_factory=dict)


class SectionSchema(BaseModel):
    """Schema for one configuration section (e.g. pricing, hub)."""
    section: str
    description: str
    parameters: list[ParameterInfo]


class EngineContext(BaseModel):
    """Self-describing manifest."""
    name: str
    version: str
    description: str
    key_formulas: list[dict[str, str]]
    input_sections: list[SectionSchema]


# ═══════════════════════════════════════════════════════════════════════════
# Schema extraction from Pydantic models
# ═══════════════════════════════════════════════════════════════════════════

def _get_field_metadata(field_info: Any, attr: str) -> Any:
    """Extract constraint metadata from Pydantic field info."""
    for m in getattr(field_info, "metadata", []):
        if hasattr(m, attr):
            return getattr(m, attr)
    return None


def _extract_params(model_cls: type[BaseModel]) -> list[ParameterInfo]:
    """Extract parameter info from a Pydantic model class."""
    params: list[ParameterInfo] = []
    for name, field_info in model_cls.model_fields.items():
        constraints: dict[str, Any] = {}
        for attr in ("ge", "gt", "le", "lt"):
            meta_val = _get_field_metadata(field_info, attr)
            if meta_val is not None:
                constraints[attr] = meta_val

        type_str = str(field_info.annotation) if field_info.annotation else "Any"
        type_str = type_str.replace("typing.", "").replace("<class '", "").replace("'>", "")

        params.append(ParameterInfo(
            name=name,
            type=type_str,
            default=field_info.default,
            description=field_info.description or "",
            constraints=constraints,
        ))
    return params


# ═══════════════════════════════════════════════════════════════════════════
# Context builders
# ═══════════════════════════════════════════════════════════════════════════

_KEY_FORMULAS = [
    {
        "name": "Realized swaps/day",
        "formula": "min(base × (P / P0)^elasticity × demand_shock, utilization × 1440 / swap_minutes)",
    },
    {
        "name": "Battery contribution",
        "formula": "revenue − commission − servicing − replace% × capex / 12",
    },
    {
        "name": "Hub EBITDA",
        "formula": "batteries × (revenue − commission − servicing − attrition) − hub opex",
    },
    {
        "name": "Hub cash series",
        "formula": "[−(hub capex + battery capex × batteries)] + [EBITDA] × horizon",
    },
    {
        "name": "NPV",
        "formula": "Σ CF_t / (1 + annual% / 100 / 12)^t, t = 0 undiscounted",
    },
    {
        "name": "Payback month",
        "formula": "first t with cumulative cash ≥ 0",
    },
]

_INPUT_SECTIONS = [
    ("pricing", PricingConfig, "Swap price, baseline demand and elasticity"),
    ("battery", BatteryConfig, "Battery capex, life, attrition and servicing"),
    ("hub", HubConfig, "Hub capex, opex and agent commission"),
    ("scale", ScaleConfig, "Batteries per hub, hubs, utilization and swap time"),
    ("finance", FinanceConfig, "Discount rate and horizon"),
    ("sensitivity", SensitivityConfig, "Multipliers and optional overrides"),
    ("stress", StressConfig, "Adverse scenario toggles"),
    ("baselines", BaselineConfig, "Elasticity price anchor"),
]


# ═══════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════

def build_context(detail_level: Literal["compact", "full"] = "full") -> EngineContext:
    """Build the self-describing context manifest."""
    sections = [
        SectionSchema(section=name, description=desc, parameters=_extract_params(model_cls))
        for name, model_cls, desc in _INPUT_SECTIONS
    ]
    return EngineContext(
        name="Battery Swap Unit Economics Engine",
        version="1.0",
        description=(
            "Deterministic unit economics for a battery-swapping business: per-battery "
            "contribution, hub EBITDA, payback, IRR and fleet NPV, with sensitivity "
            "overrides and stress toggles."
        ),
        key_formulas=_KEY_FORMULAS if detail_level == "full" else [],
        input_sections=sections,
    )


def get_scenario_schema() -> dict:
    """Return the full JSON Schema for Scenario."""
    return Scenario.model_json_schema()


def get_default_scenario() -> dict:
    """Return default Scenario as a JSON-serializable dict."""
    return Scenario().model_dump()
