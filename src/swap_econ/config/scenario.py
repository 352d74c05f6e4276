"""Top-level scenario: the full Inputs record for one computation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from swap_econ.config.pricing import PricingConfig
from swap_econ.config.battery import BatteryConfig
from swap_econ.config.hub import HubConfig
from swap_econ.config.scale import ScaleConfig
from swap_econ.config.finance import FinanceConfig
from swap_econ.config.sensitivity import SensitivityConfig
from swap_econ.config.stress import StressConfig
from swap_econ.config.baselines import BaselineConfig


class Scenario(BaseModel):
    """Complete input bundle. Callers always supply it in full."""

    pricing: PricingConfig = Field(default_factory=PricingConfig)
    battery: BatteryConfig = Field(default_factory=BatteryConfig)
    hub: HubConfig = Field(default_factory=HubConfig)
    scale: ScaleConfig = Field(default_factory=ScaleConfig)
    finance: FinanceConfig = Field(default_factory=FinanceConfig)
    sensitivity: SensitivityConfig = Field(default_factory=SensitivityConfig)
    stress: StressConfig = Field(default_factory=StressConfig)
    baselines: BaselineConfig = Field(default_factory=BaselineConfig)


def deep_merge(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into base dict (in place)."""
    for key, val in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(val, dict):
            deep_merge(base[key], val)
        else:
            base[key] = val
    return base


def merge_overrides(scenario: Scenario, overrides: dict[str, Any]) -> Scenario:
    """Return a new, re-validated Scenario with a partial patch applied.

    The input scenario is never mutated.
    """
    data = scenario.model_dump()
    deep_merge(data, overrides)
    return Scenario(**data)


def load_scenario(path: str | Path) -> Scenario:
    """Load a (possibly partial) scenario from YAML; missing fields use defaults."""
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    return merge_overrides(Scenario(), data)
