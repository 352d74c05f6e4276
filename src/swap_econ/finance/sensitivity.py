"""Sensitivity / tornado analysis.

Vary one sensitivity setting at a time between a low and a high value,
recompute the whole snapshot, and measure the swing in one output metric.

Default sweep set (values, not percentages):
  - price multiplier          0.8 .. 1.2
  - utilization override      40 .. 95 %
  - life multiplier           0.7 .. 1.3
  - commission override       5 .. 25 %
  - replacement override      0 .. 3 %/month
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from swap_econ.config.scenario import Scenario, merge_overrides
from swap_econ.config.sensitivity import SensitivityConfig
from swap_econ.engine.orchestrator import compute_all
from swap_econ.models.results import Computed

Metric = Literal["hub_ebitda", "fleet_npv"]


@dataclass(frozen=True)
class TornadoBar:
    """One bar in the tornado chart."""

    param_name: str
    """Human-readable parameter name."""

    param_path: str
    """Field on ``SensitivityConfig`` (e.g. 'price_multiplier')."""

    low_value: float
    high_value: float

    metric_at_low: float
    metric_at_high: float

    delta: float
    """metric_at_high − metric_at_low (signed)."""


@dataclass
class SensitivityResult:
    """Complete sensitivity analysis output."""

    metric: str
    base_value: float
    bars: list[TornadoBar] = field(default_factory=list)
    """Sorted by |delta|, largest swing first."""


DEFAULT_SWEEPS: list[tuple[str, str, float, float]] = [
    ("Price", "price_multiplier", 0.8, 1.2),
    ("Utilization", "utilization_target_pct_override", 40.0, 95.0),
    ("Life", "life_multiplier", 0.7, 1.3),
    ("Commission", "commission_pct_override", 5.0, 25.0),
    ("Attrition", "replacement_pct_override", 0.0, 3.0),
]


def _metric_value(computed: Computed, metric: Metric) -> float:
    if metric == "fleet_npv":
        return computed.fleet.npv_horizon
    return computed.per_hub.ebitda


def _run_metric(scenario: Scenario, path: str, value: float, metric: Metric) -> float:
    swept = merge_overrides(scenario, {"sensitivity": {path: value}})
    return _metric_value(compute_all(swept), metric)


def run_sensitivity(
    scenario: Scenario,
    sweeps: list[tuple[str, str, float, float]] | None = None,
    metric: Metric = "hub_ebitda",
) -> SensitivityResult:
    """Run a one-at-a-time sweep over sensitivity settings.

    Parameters
    ----------
    scenario : Scenario
        Base scenario. Never mutated.
    sweeps : list[tuple[name, path, low, high]] | None
        ``path`` names a ``SensitivityConfig`` field. None = DEFAULT_SWEEPS.
    metric : "hub_ebitda" | "fleet_npv"
        Output measured at each end of the sweep.

    Raises
    ------
    ValueError
        If a sweep path is not a ``SensitivityConfig`` field.
    """
    if sweeps is None:
        sweeps = DEFAULT_SWEEPS

    base_value = _metric_value(compute_all(scenario), metric)

    bars: list[TornadoBar] = []
    for name, path, low, high in sweeps:
        if path not in SensitivityConfig.model_fields:
            raise ValueError(f"Unknown sensitivity field: {path!r}")
        at_low = _run_metric(scenario, path, low, metric)
        at_high = _run_metric(scenario, path, high, metric)
        bars.append(TornadoBar(
            param_name=name,
            param_path=path,
            low_value=low,
            high_value=high,
            metric_at_low=at_low,
            metric_at_high=at_high,
            delta=at_high - at_low,
        ))

    bars.sort(key=lambda b: abs(b.delta), reverse=True)

    return SensitivityResult(metric=metric, base_value=base_value, bars=bars)
