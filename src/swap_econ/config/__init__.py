"""Configuration models: the grouped Inputs record."""

from swap_econ.config.pricing import PricingConfig
from swap_econ.config.battery import BatteryConfig
from swap_econ.config.hub import HubConfig
from swap_econ.config.scale import ScaleConfig
from swap_econ.config.finance import FinanceConfig
from swap_econ.config.sensitivity import SensitivityConfig
from swap_econ.config.stress import StressConfig
from swap_econ.config.baselines import BaselineConfig
from swap_econ.config.targets import DEFAULT_TARGETS, Targets
from swap_econ.config.scenario import Scenario, load_scenario, merge_overrides

__all__ = [
    "PricingConfig",
    "BatteryConfig",
    "HubConfig",
    "ScaleConfig",
    "FinanceConfig",
    "SensitivityConfig",
    "StressConfig",
    "BaselineConfig",
    "Targets",
    "DEFAULT_TARGETS",
    "Scenario",
    "load_scenario",
    "merge_overrides",
]
