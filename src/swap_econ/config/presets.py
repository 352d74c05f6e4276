"""Market presets: pre-built partial patches to a Scenario."""

from __future__ import annotations

from typing import Any, Literal

from swap_econ.config.scenario import Scenario, merge_overrides

PresetKey = Literal["nigeria", "drc", "generic"]

PRESETS: dict[str, dict[str, Any]] = {
    "nigeria": {
        "pricing": {"price_per_swap": 4.5, "swaps_per_battery_per_day": 1.0},
        "hub": {"hub_opex_per_month": 380.0, "agent_commission_pct_of_gross": 18.0},
        "scale": {"utilization_target_pct": 88.0},
    },
    "drc": {
        "pricing": {"price_per_swap": 5.2, "swaps_per_battery_per_day": 1.1},
        "hub": {"hub_opex_per_month": 450.0, "agent_commission_pct_of_gross": 20.0},
        "scale": {"utilization_target_pct": 85.0},
    },
    "generic": {
        "pricing": {"price_per_swap": 4.0, "swaps_per_battery_per_day": 0.9},
        "hub": {"hub_opex_per_month": 400.0, "agent_commission_pct_of_gross": 18.0},
        "scale": {"utilization_target_pct": 85.0},
    },
}

PRESET_NARRATIVE: dict[str, str] = {
    "nigeria": "Higher demand from outages; moderate opex; mid commission.",
    "drc": "Higher opex/logistics; strong generator-replacement demand.",
    "generic": "Neutral baseline for quick comparisons.",
}

# (label, section, field) of the headline inputs a preset may move
_TRACKED_FIELDS = [
    ("price", "pricing", "price_per_swap"),
    ("swaps/day", "pricing", "swaps_per_battery_per_day"),
    ("hub opex", "hub", "hub_opex_per_month"),
    ("commission", "hub", "agent_commission_pct_of_gross"),
    ("utilization target", "scale", "utilization_target_pct"),
]


def apply_preset(scenario: Scenario, key: PresetKey) -> Scenario:
    """Merge a preset onto ``scenario`` and re-anchor the elasticity baseline.

    The baseline price follows the preset's new price so that loading a
    preset never shows up as an elasticity-driven demand change.

    Raises
    ------
    KeyError
        If ``key`` is not a known preset.
    """
    patch = PRESETS[key]
    updated = merge_overrides(scenario, patch)
    return merge_overrides(
        updated, {"baselines": {"baseline_price": updated.pricing.price_per_swap}},
    )


def preset_changes(before: Scenario, after: Scenario) -> list[str]:
    """Human-readable deltas of the tracked headline fields, e.g. ``price +0.50``."""
    changes: list[str] = []
    for label, section, name in _TRACKED_FIELDS:
        old = getattr(getattr(before, section), name)
        new = getattr(getattr(after, section), name)
        if old != new:
            delta = new - old
            sign = "+" if delta >= 0 else ""
            changes.append(f"{label} {sign}{delta:.2f}")
    return changes
