"""PM rule-evaluation engine: components + context in, task list out.

Pure and stateless: the same arguments always give the same ordered list.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Mapping

from pydantic import BaseModel

from pmcreator.catalog.models import CriticalityTier, Subsystem
from pmcreator.catalog.rules import templates_for
from pmcreator.planning.dedup import deduplicate
from pmcreator.planning.frequency import escalate
from pmcreator.planning.models import Component, EnvFlag, EnvironmentContext, PMTask
from pmcreator.planning.roles import assign_role
from pmcreator.planning.severity import is_severe

logger = logging.getLogger("pmcreator.planning")


class PMPlan(BaseModel):
    """Engine output plus the facts that shaped it."""

    tasks: list[PMTask] = []
    severe: bool = False
    components_considered: int = 0
    duplicates_removed: int = 0


def filter_components(
    components: Iterable[Component],
    enabled_subsystems: Collection[Subsystem] | None,
) -> list[Component]:
    """Keep components of enabled subsystems. ``None`` means all enabled."""
    if enabled_subsystems is None:
        return list(components)
    enabled = set(enabled_subsystems)
    return [c for c in components if c.subsystem in enabled]


def build_plan(
    criticality: CriticalityTier,
    environment: EnvironmentContext | Mapping[EnvFlag, bool],
    components: Iterable[Component],
    enabled_subsystems: Collection[Subsystem] | None = None,
    assign_roles: bool = True,
) -> PMPlan:
    if not isinstance(environment, EnvironmentContext):
        environment = EnvironmentContext.from_flags(environment)

    considered = filter_components(components, enabled_subsystems)
    severe = is_severe(environment)

    # Quantity does not multiply tasks: generation is per component type.
    raw = [
        PMTask.from_template(
            template,
            frequency=escalate(template.frequency, severe),
            role=assign_role(criticality, template.method) if assign_roles else None,
        )
        for component in considered
        for template in templates_for(component.type, component.attributes)
    ]
    tasks = deduplicate(raw)

    logger.debug(
        "Generated %d PM tasks (%d duplicates) from %d components: criticality=%s severe=%s",
        len(tasks),
        len(raw) - len(tasks),
        len(considered),
        CriticalityTier(criticality).value,
        severe,
    )
    return PMPlan(
        tasks=tasks,
        severe=severe,
        components_considered=len(considered),
        duplicates_removed=len(raw) - len(tasks),
    )


def generate(
    criticality: CriticalityTier,
    environment: EnvironmentContext | Mapping[EnvFlag, bool],
    components: Iterable[Component],
    enabled_subsystems: Collection[Subsystem] | None = None,
    assign_roles: bool = True,
) -> list[PMTask]:
    """Generate the deduplicated PM task list for an asset."""
    return build_plan(
        criticality,
        environment,
        components,
        enabled_subsystems=enabled_subsystems,
        assign_roles=assign_roles,
    ).tasks
