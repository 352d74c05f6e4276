"""FastAPI server for the unit-economics engine.

Run with:
    uvicorn swap_econ.api.server:app --reload --port 8000

Or:
    python -m swap_econ.api.server

Endpoints:
    GET  /context                 self-describing manifest (sections + formulas)
    GET  /schema                  full JSON Schema for Scenario inputs
    GET  /scenario/defaults       complete default scenario as JSON
    GET  /presets                 market presets and their narratives
    POST /compute                 compute a snapshot (partial or full Scenario)
    POST /compute/preset/{key}    apply a preset, then compute
    POST /compute/sensitivity     tornado data over sensitivity settings
    POST /compute/narrative       plain-English summary + headline metrics
    POST /export/csv              headline metrics as CSV text
"""

from __future__ import annotations

import json
import logging
from typing import Any, Literal

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field, ValidationError

from swap_econ.config.presets import PRESET_NARRATIVE, PRESETS, PresetKey, apply_preset, preset_changes
from swap_econ.config.scenario import Scenario, merge_overrides
from swap_econ.engine.orchestrator import compute_all
from swap_econ.finance.sensitivity import run_sensitivity
from swap_econ.api.context import build_context, get_default_scenario, get_scenario_schema
from swap_econ.api.export import export_csv
from swap_econ.api.narrative import generate_narrative

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Battery Swap Unit Economics API",
    version="1.0",
    description=(
        "Compute per-battery, per-hub and fleet economics for a battery-swapping "
        "business from a (partial) scenario. Start with GET /context."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class ComputeRequest(BaseModel):
    """Request body for /compute. All fields optional; defaults fill the gaps."""
    scenario: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial or full Scenario JSON. Missing fields use defaults. "
                    "Example: {'pricing': {'price_per_swap': 4.5}, 'stress': {'demand_shock_10': true}}",
    )


class SensitivityRequest(BaseModel):
    """Request body for /compute/sensitivity."""
    scenario: dict[str, Any] = Field(default_factory=dict)
    metric: Literal["hub_ebitda", "fleet_npv"] = "hub_ebitda"
    sweep_params: list[dict[str, Any]] | None = Field(
        default=None,
        description="Optional override of sweeps. "
                    "Format: [{'name': 'Price', 'path': 'price_multiplier', 'low': 0.8, 'high': 1.2}]",
    )


class ComputeResponse(BaseModel):
    """Response from /compute."""
    computed: dict[str, Any]
    narrative: str = ""


class PresetResponse(ComputeResponse):
    """Response from /compute/preset/{key}."""
    preset: str
    preset_narrative: str
    changes: list[str]
    scenario: dict[str, Any]


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _build_scenario(overrides: dict[str, Any]) -> Scenario:
    """Build a Scenario from partial overrides merged onto defaults.

    Raises HTTP 422 when the merged scenario violates an input bound.
    """
    try:
        return merge_overrides(Scenario(), overrides)
    except ValidationError as exc:
        logger.info("Rejected scenario: %d validation error(s)", exc.error_count())
        raise HTTPException(status_code=422, detail=json.loads(exc.json())) from exc


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root: returns a welcome message and pointer to /context."""
    return {
        "name": "Battery Swap Unit Economics API",
        "version": "1.0",
        "start_here": "GET /context?detail_level=full",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/context")
def get_context(
    detail_level: Literal["compact", "full"] = Query(
        default="full",
        description="'compact' for schemas only, 'full' adds the key formulas",
    ),
):
    """Self-describing context manifest."""
    return build_context(detail_level)


@app.get("/schema")
def get_schema():
    """Full JSON Schema for Scenario: all inputs with types, defaults, constraints."""
    return get_scenario_schema()


@app.get("/scenario/defaults")
def get_defaults():
    """Complete default Scenario as JSON. Use as a starting point for modifications."""
    return get_default_scenario()


@app.get("/presets")
def list_presets():
    """Available market presets: their patches and one-line narratives."""
    return {
        key: {"patch": patch, "narrative": PRESET_NARRATIVE[key]}
        for key, patch in PRESETS.items()
    }


@app.post("/compute", response_model=ComputeResponse)
def compute(req: ComputeRequest):
    """Compute the full snapshot for a (partial) scenario."""
    scenario = _build_scenario(req.scenario)
    computed = compute_all(scenario)
    logger.info(
        "compute: hub_ebitda=%.2f fleet_npv=%.2f",
        computed.per_hub.ebitda, computed.fleet.npv_horizon,
    )
    return ComputeResponse(
        computed=computed.model_dump(),
        narrative=generate_narrative(scenario, computed),
    )


@app.post("/compute/preset/{key}", response_model=PresetResponse)
def compute_preset(key: PresetKey, req: ComputeRequest):
    """Apply a market preset on top of the given scenario and compute."""
    base = _build_scenario(req.scenario)
    scenario = apply_preset(base, key)
    computed = compute_all(scenario)
    return PresetResponse(
        preset=key,
        preset_narrative=PRESET_NARRATIVE[key],
        changes=preset_changes(base, scenario),
        scenario=scenario.model_dump(),
        computed=computed.model_dump(),
        narrative=generate_narrative(scenario, computed),
    )


@app.post("/compute/sensitivity")
def compute_sensitivity(req: SensitivityRequest):
    """One-at-a-time sweeps over sensitivity settings → tornado bars."""
    scenario = _build_scenario(req.scenario)

    sweeps = None
    if req.sweep_params:
        try:
            sweeps = [
                (sp.get("name", sp["path"]), sp["path"], float(sp["low"]), float(sp["high"]))
                for sp in req.sweep_params
            ]
        except (KeyError, TypeError, ValueError) as exc:
            raise HTTPException(status_code=422, detail=f"Malformed sweep_params: {exc}") from exc

    try:
        result = run_sensitivity(scenario, sweeps, req.metric)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return {
        "metric": result.metric,
        "base_value": result.base_value,
        "tornado_bars": [
            {
                "param_name": bar.param_name,
                "param_path": bar.param_path,
                "low_value": bar.low_value,
                "high_value": bar.high_value,
                "metric_at_low": bar.metric_at_low,
                "metric_at_high": bar.metric_at_high,
                "delta": bar.delta,
            }
            for bar in result.bars
        ],
    }


@app.post("/compute/narrative")
def compute_narrative(req: ComputeRequest):
    """Plain-English summary plus the headline metrics."""
    scenario = _build_scenario(req.scenario)
    computed = compute_all(scenario)
    return {
        "narrative": generate_narrative(scenario, computed),
        "headline_metrics": {
            "hub_ebitda": computed.badges.hub_ebitda,
            "breakeven_months": computed.badges.breakeven_months,
            "fleet_npv": computed.badges.fleet_npv,
            "irr_monthly": computed.per_hub.irr_monthly,
        },
        "pass_fail": computed.pass_fail.model_dump(),
        "active_effects": computed.active_effects,
    }


@app.post("/export/csv", response_class=PlainTextResponse)
def export_metrics_csv(req: ComputeRequest):
    """Headline battery, hub and fleet metrics as CSV."""
    scenario = _build_scenario(req.scenario)
    return PlainTextResponse(export_csv(compute_all(scenario)), media_type="text/csv")


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(
        "swap_econ.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
