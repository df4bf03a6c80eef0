"""Role assignment: who owns a task, by asset criticality and method."""

from __future__ import annotations

from types import MappingProxyType

from pmcreator.catalog.models import CriticalityTier, Method, Role

# Methods escalated to the higher role for each tier; everything else
# gets the tier's default role.
_ROLE_POLICY = MappingProxyType({
    CriticalityTier.A: (
        frozenset({Method.MEASUREMENT, Method.FUNCTIONAL_TEST, Method.ADJUSTMENT}),
        Role.SUPERVISOR,
        Role.TEAM_LEAD,
    ),
    CriticalityTier.B: (
        frozenset({Method.MEASUREMENT, Method.FUNCTIONAL_TEST}),
        Role.TEAM_LEAD,
        Role.TECHNICIAN,
    ),
    CriticalityTier.C: (
        frozenset(),
        Role.TECHNICIAN,
        Role.TECHNICIAN,
    ),
})


def assign_role(criticality: CriticalityTier, method: Method) -> Role:
    elevated_methods, elevated, default = _ROLE_POLICY[CriticalityTier(criticality)]
    return elevated if method in elevated_methods else default
