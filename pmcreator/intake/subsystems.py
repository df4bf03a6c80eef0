"""Subsystem defaults per asset type and the quick-add component table."""

from __future__ import annotations

import logging
from types import MappingProxyType

from pmcreator.catalog.models import ComponentType, Subsystem
from pmcreator.config import settings

logger = logging.getLogger("pmcreator.intake")

SUBSYSTEM_DEFAULTS = MappingProxyType({
    "Oven / Air House": (
        Subsystem.CONTROL,
        Subsystem.MOTORS,
        Subsystem.INSTRUMENTATION,
        Subsystem.PROCESS,
        Subsystem.MECHANICAL,
        Subsystem.SAFETY,
    ),
    "PT/ED Pump": (
        Subsystem.CONTROL,
        Subsystem.DRIVES_MOTION,
        Subsystem.MOTORS,
        Subsystem.INSTRUMENTATION,
        Subsystem.MECHANICAL,
        Subsystem.PNEUMATIC,
        Subsystem.SAFETY,
    ),
    "Paint Robot": (
        Subsystem.CONTROL,
        Subsystem.DRIVES_MOTION,
        Subsystem.INSTRUMENTATION,
        Subsystem.PNEUMATIC,
        Subsystem.SAFETY,
    ),
    "OPF / IPF": (
        Subsystem.CONTROL,
        Subsystem.INSTRUMENTATION,
        Subsystem.MOTORS,
        Subsystem.MECHANICAL,
        Subsystem.PNEUMATIC,
        Subsystem.SAFETY,
    ),
    "Trolley": (
        Subsystem.CONTROL,
        Subsystem.MOTORS,
        Subsystem.INSTRUMENTATION,
        Subsystem.MECHANICAL,
        Subsystem.SAFETY,
    ),
})

FALLBACK_ASSET_TYPE = "Oven / Air House"

# Subsystem a component lands in when added without one.
DEFAULT_SUBSYSTEM = MappingProxyType({
    ComponentType.PLC: Subsystem.CONTROL,
    ComponentType.IO_MODULE: Subsystem.CONTROL,
    ComponentType.HMI: Subsystem.CONTROL,
    ComponentType.VFD: Subsystem.DRIVES_MOTION,
    ComponentType.MOTOR: Subsystem.MOTORS,
    ComponentType.INDUCTIVE_SENSOR: Subsystem.INSTRUMENTATION,
    ComponentType.PHOTO_EYE: Subsystem.INSTRUMENTATION,
    ComponentType.LIMIT_SWITCH: Subsystem.INSTRUMENTATION,
    ComponentType.PRESSURE_GAUGE: Subsystem.INSTRUMENTATION,
    ComponentType.BEARING: Subsystem.MECHANICAL,
    ComponentType.GEAR_REDUCER: Subsystem.MECHANICAL,
    ComponentType.AIR_FILTER: Subsystem.PROCESS,
    ComponentType.SOLENOID_VALVE: Subsystem.PNEUMATIC,
    ComponentType.PNEUMATIC_CYLINDER: Subsystem.PNEUMATIC,
    ComponentType.GAS_BURNER: Subsystem.PROCESS,
})


def default_subsystems(asset_type: str | None) -> list[Subsystem]:
    """Suggested enabled subsystems for an asset type.

    Unknown types fall back to the configured default asset type, and to
    the built-in fallback if that is unknown too.
    """
    if asset_type in SUBSYSTEM_DEFAULTS:
        return list(SUBSYSTEM_DEFAULTS[asset_type])

    fallback = settings.default_asset_type
    if fallback not in SUBSYSTEM_DEFAULTS:
        fallback = FALLBACK_ASSET_TYPE
    logger.warning("Unknown asset type %r, using %r subsystem defaults", asset_type, fallback)
    return list(SUBSYSTEM_DEFAULTS[fallback])


def quick_add_options(enabled: list[Subsystem]) -> list[dict]:
    """Component types offered for quick entry under the enabled subsystems."""
    return [
        {"type": ctype.value, "subsystem": subsystem.value}
        for ctype, subsystem in DEFAULT_SUBSYSTEM.items()
        if subsystem in enabled
    ]
