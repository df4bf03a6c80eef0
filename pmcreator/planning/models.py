"""Data models for PM plan generation."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, Field

from pmcreator.catalog.models import (
    ComponentType,
    Frequency,
    Method,
    Role,
    Subsystem,
    TaskTemplate,
)


class EnvFlag(str, Enum):
    HIGH_TEMPERATURE = "high_temperature"
    DUST_OVERSPRAY = "dust_overspray"
    HUMIDITY_WASHDOWN = "humidity_washdown"
    CORROSIVE = "corrosive"
    SOLVENT_EXPLOSIVE = "solvent_explosive"
    CONTINUOUS_OPERATION = "continuous_operation"
    HIGH_CYCLING = "high_cycling"
    RESTRICTED_ACCESS = "restricted_access"


class EnvironmentContext(BaseModel):
    """Environmental and operational conditions of the asset.

    Every recognized flag is an explicit field. Flags not listed in
    ``pmcreator.planning.severity.SEVERITY_FLAGS`` do not change
    frequencies yet.
    """

    model_config = {"frozen": True}

    high_temperature: bool = False
    dust_overspray: bool = False
    humidity_washdown: bool = False
    corrosive: bool = False
    solvent_explosive: bool = False
    continuous_operation: bool = False
    high_cycling: bool = False
    restricted_access: bool = False

    @classmethod
    def from_flags(cls, flags: Mapping[EnvFlag, bool]) -> EnvironmentContext:
        return cls(**{EnvFlag(flag).value: bool(on) for flag, on in flags.items()})

    def is_set(self, flag: EnvFlag) -> bool:
        return getattr(self, flag.value)

    def active_flags(self) -> list[EnvFlag]:
        return [flag for flag in EnvFlag if self.is_set(flag)]


class Component(BaseModel):
    """A physical component of the asset, as entered by the user."""

    id: str = Field(default_factory=lambda: uuid4().hex[:12])
    subsystem: Subsystem
    type: ComponentType
    quantity: int = 1
    manufacturer: str | None = None
    model: str | None = None
    notes: str | None = None
    attributes: dict[str, bool | float | str] = {}


class PMTask(BaseModel):
    """A catalog template bound to an escalated frequency and an owner."""

    model_config = {"frozen": True}

    component_type: ComponentType
    task: str
    method: Method
    frequency: Frequency
    acceptance: str
    rationale: str
    role: Role | None = None

    @classmethod
    def from_template(
        cls,
        template: TaskTemplate,
        frequency: Frequency,
        role: Role | None,
    ) -> PMTask:
        return cls(
            component_type=template.component_type,
            task=template.task,
            method=template.method,
            frequency=frequency,
            acceptance=template.acceptance,
            rationale=template.rationale,
            role=role,
        )

    @property
    def identity(self) -> tuple:
        return (self.component_type, self.task, self.method, self.frequency, self.role)
