"""Tests for engine/orchestrator.py: full snapshot, badges, pass/fail.

Covers:
  - Chain wiring (demand → battery → hub → fleet)
  - Determinism: equal inputs → equal snapshots
  - Threshold chips against default and custom targets
  - Undefined fields do not poison independent ones
  - Scenario files load and compute
"""

from __future__ import annotations

from pathlib import Path

import pytest

from swap_econ.config import DEFAULT_TARGETS, Scenario, Targets, load_scenario, merge_overrides
from swap_econ.engine.orchestrator import build_snapshot, compute_all, evaluate_pass_fail

SCENARIO_DIR = Path(__file__).parent.parent / "scenarios"


class TestComputeAll:
    def test_chain_wiring(self, scenario: Scenario):
        c = compute_all(scenario)
        assert c.demand.per_day == pytest.approx(0.9)
        assert c.per_battery.swaps_per_day == c.demand.per_day
        assert c.per_hub.utilization_ratio == c.demand.utilization_ratio
        assert c.per_hub.ebitda == pytest.approx(1_601.76)
        assert c.fleet.ebitda_monthly == pytest.approx(c.per_hub.ebitda * 5)

    def test_badges(self, scenario: Scenario):
        c = compute_all(scenario)
        assert c.badges.hub_ebitda == c.per_hub.ebitda
        assert c.badges.breakeven_months == c.per_hub.payback_months == 25
        assert c.badges.fleet_npv == c.fleet.npv_horizon

    def test_base_case_pass_fail(self, scenario: Scenario):
        pf = compute_all(scenario).pass_fail
        assert pf.breakeven_lt_18m is False
        assert pf.hub_ebitda_gt_target is True
        assert pf.npv_positive is True

    def test_deterministic(self, scenario: Scenario):
        s = merge_overrides(scenario, {
            "sensitivity": {"price_multiplier": 1.1},
            "stress": {"fx_minus_15_capex": True, "theft_damage_plus_2pct": True},
        })
        twin = Scenario(**s.model_dump())
        assert compute_all(s) == compute_all(twin)
        assert compute_all(s).model_dump_json() == compute_all(twin).model_dump_json()

    def test_input_not_mutated(self, scenario: Scenario):
        before = scenario.model_dump()
        compute_all(scenario)
        assert scenario.model_dump() == before

    def test_active_effects_reported(self, scenario: Scenario):
        s = merge_overrides(scenario, {"stress": {"demand_shock_10": True}})
        assert compute_all(s).active_effects == ["Demand −10%"]

    def test_price_cut_with_elasticity(self, scenario: Scenario):
        s = merge_overrides(scenario, {"sensitivity": {"price_multiplier": 0.9}})
        c = compute_all(s)
        assert c.demand.elasticity_multiplier == pytest.approx(1 / 0.9)
        assert c.demand.per_day == pytest.approx(1.0)

    def test_unreachable_margin_degrades_gracefully(self, scenario: Scenario):
        s = merge_overrides(scenario, {"sensitivity": {"commission_pct_override": 100}})
        c = compute_all(s)
        assert c.per_battery.breakeven_cycles is None
        assert c.per_battery.payback_months_battery is None
        assert c.per_hub.payback_months is None
        assert not c.per_hub.irr.defined
        assert c.per_hub.ebitda < 0
        assert c.pass_fail.breakeven_lt_18m is False
        assert c.pass_fail.npv_positive is False

    def test_zero_price_flows_through(self, scenario: Scenario):
        s = merge_overrides(scenario, {"pricing": {"price_per_swap": 0.0}})
        c = compute_all(s)
        assert c.per_battery.revenue == 0.0
        assert c.demand.per_day <= c.demand.cap

    def test_vanishing_volume_never_raises(self, scenario: Scenario):
        s = merge_overrides(scenario, {
            "pricing": {"swaps_per_battery_per_day": 1e-308},
            "hub": {"agent_commission_pct_of_gross": 0.0},
            "battery": {"servicing_cost_per_cycle": 0.0, "failure_replacement_rate_monthly_pct": 0.0},
        })
        c = compute_all(s)
        assert c.per_battery.contribution_margin > 0
        assert c.per_battery.payback_months_battery is None
        assert c.per_hub.payback_months is None
        assert c.per_battery.breakeven_cycles == pytest.approx(200.0)


class TestPassFail:
    def test_fast_payback_passes(self, scenario: Scenario):
        s = merge_overrides(scenario, {"pricing": {"swaps_per_battery_per_day": 3.0}})
        c = compute_all(s)
        assert c.per_hub.payback_months is not None
        assert c.per_hub.payback_months < 18
        assert c.pass_fail.breakeven_lt_18m is True

    def test_custom_targets(self, scenario: Scenario):
        strict = Targets(breakeven_months_max=30, target_hub_ebitda=2_000)
        pf = compute_all(scenario, strict).pass_fail
        assert pf.breakeven_lt_18m is True
        assert pf.hub_ebitda_gt_target is False

    def test_defaults(self):
        assert DEFAULT_TARGETS.breakeven_months_max == 18
        assert DEFAULT_TARGETS.target_hub_ebitda == 500

    def test_evaluate_pass_fail_directly(self, scenario: Scenario):
        c = compute_all(scenario)
        assert evaluate_pass_fail(c.per_hub, c.fleet) == c.pass_fail


class TestSnapshot:
    def test_snapshot_bundles_inputs(self, scenario: Scenario):
        snap = build_snapshot(scenario)
        assert snap.inputs == scenario
        assert snap.computed == compute_all(scenario)


class TestScenarioFiles:
    def test_base_case_yaml_matches_defaults(self):
        loaded = load_scenario(SCENARIO_DIR / "base_case.yaml")
        assert loaded == Scenario()

    def test_stress_all_yaml(self):
        loaded = load_scenario(SCENARIO_DIR / "stress_all.yaml")
        assert all(loaded.stress.model_dump().values())
        c = compute_all(loaded)
        base = compute_all(Scenario())
        assert c.per_hub.ebitda < base.per_hub.ebitda
        assert len(c.active_effects) == 6
