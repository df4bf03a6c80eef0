"""Normalize wizard input into validated engine arguments."""

from __future__ import annotations

import logging

from pmcreator.catalog.models import Subsystem
from pmcreator.config import settings
from pmcreator.intake.models import ComponentEntry, PlanRequest
from pmcreator.intake.subsystems import DEFAULT_SUBSYSTEM, default_subsystems
from pmcreator.planning.models import Component

logger = logging.getLogger("pmcreator.intake")


def _parse_quantity(raw: int | float | str | None) -> int:
    if raw is None or isinstance(raw, bool):
        return settings.default_quantity
    try:
        value = int(float(raw))
    except (TypeError, ValueError, OverflowError):
        logger.info("Non-numeric quantity %r replaced with %d", raw, settings.default_quantity)
        return settings.default_quantity
    return value if value >= 1 else settings.default_quantity


def _clean_text(raw: str | None) -> str | None:
    if raw is None:
        return None
    return raw.strip() or None


def normalize_entry(entry: ComponentEntry) -> Component:
    fields = dict(
        subsystem=entry.subsystem or DEFAULT_SUBSYSTEM[entry.type],
        type=entry.type,
        quantity=_parse_quantity(entry.quantity),
        manufacturer=_clean_text(entry.manufacturer),
        model=_clean_text(entry.model),
        notes=_clean_text(entry.notes),
        attributes=entry.attributes,
    )
    if entry.id:
        fields["id"] = entry.id
    return Component(**fields)


def resolve_subsystems(request: PlanRequest) -> list[Subsystem]:
    """Explicit selection wins; otherwise the asset type's defaults."""
    if request.enabled_subsystems is not None:
        return list(dict.fromkeys(request.enabled_subsystems))
    return default_subsystems(request.asset.asset_type)


def normalize_components(request: PlanRequest) -> list[Component]:
    return [normalize_entry(entry) for entry in request.components]
