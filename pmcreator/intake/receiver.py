"""PM plan endpoints: wizard submissions in, task lists out."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter

from pmcreator.catalog.models import ComponentType
from pmcreator.catalog.rules import RULE_CATALOG
from pmcreator.config import settings
from pmcreator.intake.models import PlanRequest, PlanResponse
from pmcreator.intake.normalizer import normalize_components, resolve_subsystems
from pmcreator.intake.subsystems import SUBSYSTEM_DEFAULTS, quick_add_options
from pmcreator.planning.engine import build_plan
from pmcreator.telemetry.metrics import (
    duplicates_removed_total,
    plan_generation_duration,
    plans_generated_total,
    tasks_emitted_total,
)

logger = logging.getLogger("pmcreator.intake")
router = APIRouter(prefix="/pm", tags=["planning"])


@router.post("/plan", response_model=PlanResponse)
async def create_plan(request: PlanRequest):
    """Normalize a wizard submission and generate its PM task list."""
    enabled = resolve_subsystems(request)
    components = normalize_components(request)
    criticality = request.asset.criticality

    start = time.perf_counter()
    plan = build_plan(
        criticality,
        request.asset.environment,
        components,
        enabled_subsystems=enabled,
        assign_roles=settings.assign_roles,
    )
    plan_generation_duration.observe(time.perf_counter() - start)

    plans_generated_total.labels(criticality=criticality.value, severe=str(plan.severe).lower()).inc()
    tasks_emitted_total.labels(criticality=criticality.value).inc(len(plan.tasks))
    duplicates_removed_total.inc(plan.duplicates_removed)

    logger.info(
        "Plan generated: asset=%r type=%s criticality=%s components=%d/%d tasks=%d severe=%s",
        request.asset.name,
        request.asset.asset_type,
        criticality.value,
        plan.components_considered,
        len(components),
        len(plan.tasks),
        plan.severe,
    )

    return PlanResponse(
        asset=request.asset,
        enabled_subsystems=enabled,
        severe=plan.severe,
        components_considered=plan.components_considered,
        tasks=plan.tasks,
    )


@router.get("/catalog")
async def list_catalog():
    return {
        ctype.value: [t.model_dump(mode="json") for t in templates]
        for ctype, templates in RULE_CATALOG.items()
    }


@router.get("/catalog/{component_type:path}")
async def get_catalog_entry(component_type: ComponentType):
    templates = RULE_CATALOG.get(component_type)
    if not templates:
        return {"error": f"No PM rules for component type {component_type.value!r}"}
    return {"component_type": component_type.value, "templates": [t.model_dump(mode="json") for t in templates]}


@router.get("/asset-types")
async def list_asset_types():
    return {
        asset_type: {
            "subsystems": [s.value for s in subsystems],
            "quick_add": quick_add_options(list(subsystems)),
        }
        for asset_type, subsystems in SUBSYSTEM_DEFAULTS.items()
    }
