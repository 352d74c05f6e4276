"""Tests for engine/effective.py: override and stress-toggle resolution.

Covers:
  - Pass-through of untouched fields
  - Sensitivity multipliers and direct overrides
  - Every stress toggle's effect
  - Overrides applied before stress effects
  - Toggle composability and idempotence
  - Inputs never mutated
  - Active-effect labels
"""

from __future__ import annotations

import pytest

from swap_econ.config import Scenario, merge_overrides
from swap_econ.engine.effective import (
    RESOLUTION_STEPS,
    STRESS_EFFECTS,
    describe_active_effects,
    resolve_effective,
)


# ═══════════════════════════════════════════════════════════════════════════
# Base & sensitivity
# ═══════════════════════════════════════════════════════════════════════════

class TestBaseResolution:
    def test_neutral_scenario_copies_base(self, scenario: Scenario):
        e = resolve_effective(scenario)
        assert e.price == 4.0
        assert e.commission_pct == 18
        assert e.replace_pct == 1.0
        assert e.life == 1_200
        assert e.capex_batt == 800
        assert e.capex_hub == 15_000
        assert e.hub_opex == 400
        assert e.utilization_target_pct == 85
        assert e.demand_multiplier == 1.0

    def test_pass_through_fields(self, scenario: Scenario):
        e = resolve_effective(scenario)
        assert e.days_per_month == 26
        assert e.base_swaps_per_day == 0.9
        assert e.elasticity == -1.0
        assert e.swap_time_minutes == 30
        assert e.batteries_per_hub == 30
        assert e.hubs_in_model == 5
        assert e.discount_rate_pct == 18
        assert e.horizon_months == 36
        assert e.servicing_per_cycle == 0.4
        assert e.baseline_price == 4.0

    def test_steps_are_ordered(self):
        names = [step.__name__ for step in RESOLUTION_STEPS]
        assert names == ["_base_step", "_sensitivity_step", "_stress_step"]


class TestSensitivity:
    def test_price_multiplier(self, scenario: Scenario):
        s = merge_overrides(scenario, {"sensitivity": {"price_multiplier": 0.9}})
        assert resolve_effective(s).price == pytest.approx(3.6)

    def test_life_multiplier(self, scenario: Scenario):
        s = merge_overrides(scenario, {"sensitivity": {"life_multiplier": 1.3}})
        assert resolve_effective(s).life == pytest.approx(1_560)

    def test_overrides_replace_base(self, scenario: Scenario):
        s = merge_overrides(scenario, {"sensitivity": {
            "commission_pct_override": 5,
            "replacement_pct_override": 3,
            "utilization_target_pct_override": 40,
        }})
        e = resolve_effective(s)
        assert e.commission_pct == 5
        assert e.replace_pct == 3
        assert e.utilization_target_pct == 40

    def test_zero_override_is_not_ignored(self, scenario: Scenario):
        """0 is a real override value, distinct from None."""
        s = merge_overrides(scenario, {"sensitivity": {"commission_pct_override": 0}})
        assert resolve_effective(s).commission_pct == 0


# ═══════════════════════════════════════════════════════════════════════════
# Stress toggles
# ═══════════════════════════════════════════════════════════════════════════

class TestStressToggles:
    @pytest.mark.parametrize("toggle, field, expected", [
        ("demand_shock_10", "demand_multiplier", 0.9),
        ("life_drop_20", "life", 960.0),
        ("fx_minus_15_capex", "capex_batt", 920.0),
        ("fx_minus_15_capex", "capex_hub", 17_250.0),
        ("hub_opex_plus_20", "hub_opex", 480.0),
        ("theft_damage_plus_2pct", "replace_pct", 3.0),
        ("price_minus_10_vs_fuel", "price", 3.6),
    ])
    def test_single_toggle(self, scenario: Scenario, toggle, field, expected):
        s = merge_overrides(scenario, {"stress": {toggle: True}})
        assert getattr(resolve_effective(s), field) == pytest.approx(expected)

    def test_every_toggle_has_an_effect(self):
        from swap_econ.config import StressConfig
        toggles = {effect.toggle for effect in STRESS_EFFECTS}
        assert toggles == set(StressConfig.model_fields)

    def test_stress_applies_after_override(self, scenario: Scenario):
        """Override replaces the base value, then the +2pt theft effect stacks on top."""
        s = merge_overrides(scenario, {
            "sensitivity": {"replacement_pct_override": 0.5},
            "stress": {"theft_damage_plus_2pct": True},
        })
        assert resolve_effective(s).replace_pct == pytest.approx(2.5)

    def test_price_multiplier_and_fuel_toggle_compound(self, scenario: Scenario):
        s = merge_overrides(scenario, {
            "sensitivity": {"price_multiplier": 1.2},
            "stress": {"price_minus_10_vs_fuel": True},
        })
        assert resolve_effective(s).price == pytest.approx(4.0 * 1.2 * 0.9)

    def test_life_multiplier_and_life_drop_compound(self, scenario: Scenario):
        s = merge_overrides(scenario, {
            "sensitivity": {"life_multiplier": 0.7},
            "stress": {"life_drop_20": True},
        })
        assert resolve_effective(s).life == pytest.approx(1_200 * 0.7 * 0.8)


class TestComposability:
    def test_disjoint_toggles_commute(self, scenario: Scenario):
        """Building the scenario in either order gives the same effective set."""
        a = merge_overrides(
            merge_overrides(scenario, {"stress": {"hub_opex_plus_20": True}}),
            {"stress": {"demand_shock_10": True}},
        )
        b = merge_overrides(
            merge_overrides(scenario, {"stress": {"demand_shock_10": True}}),
            {"stress": {"hub_opex_plus_20": True}},
        )
        assert resolve_effective(a) == resolve_effective(b)

    def test_enabling_toggle_twice_is_idempotent(self, scenario: Scenario):
        once = merge_overrides(scenario, {"stress": {"fx_minus_15_capex": True}})
        twice = merge_overrides(once, {"stress": {"fx_minus_15_capex": True}})
        assert resolve_effective(once) == resolve_effective(twice)

    def test_repeated_resolution_is_idempotent(self, scenario: Scenario):
        s = merge_overrides(scenario, {"stress": {k: True for k in (
            "demand_shock_10", "life_drop_20", "fx_minus_15_capex",
            "hub_opex_plus_20", "theft_damage_plus_2pct", "price_minus_10_vs_fuel",
        )}})
        assert resolve_effective(s) == resolve_effective(s)

    def test_input_not_mutated(self, scenario: Scenario):
        s = merge_overrides(scenario, {
            "sensitivity": {"price_multiplier": 0.5},
            "stress": {"price_minus_10_vs_fuel": True, "hub_opex_plus_20": True},
        })
        before = s.model_dump()
        resolve_effective(s)
        assert s.model_dump() == before


# ═══════════════════════════════════════════════════════════════════════════
# Labels
# ═══════════════════════════════════════════════════════════════════════════

class TestDescribeActiveEffects:
    def test_neutral_is_empty(self, scenario: Scenario):
        assert describe_active_effects(scenario) == []

    def test_lists_sensitivity_then_stress(self, scenario: Scenario):
        s = merge_overrides(scenario, {
            "sensitivity": {"price_multiplier": 0.9, "commission_pct_override": 20},
            "stress": {"hub_opex_plus_20": True},
        })
        assert describe_active_effects(s) == ["Price x0.90", "Commission 20%", "Hub opex +20%"]
