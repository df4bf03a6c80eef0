"""Severity classifier: collapses environment flags into one signal."""

from __future__ import annotations

from pmcreator.planning.models import EnvFlag, EnvironmentContext

# Humidity, corrosion and restricted access are recognized but do not
# escalate frequencies; add them here to make them count.
SEVERITY_FLAGS: frozenset[EnvFlag] = frozenset({
    EnvFlag.HIGH_TEMPERATURE,
    EnvFlag.DUST_OVERSPRAY,
    EnvFlag.CONTINUOUS_OPERATION,
    EnvFlag.HIGH_CYCLING,
    EnvFlag.SOLVENT_EXPLOSIVE,
})


def is_severe(environment: EnvironmentContext) -> bool:
    return any(environment.is_set(flag) for flag in SEVERITY_FLAGS)
