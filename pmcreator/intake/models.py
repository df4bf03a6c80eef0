"""Request and response models for the plan intake boundary."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from pmcreator.catalog.models import ComponentType, CriticalityTier, Subsystem
from pmcreator.planning.models import EnvironmentContext, PMTask

_TRUE_STRINGS = frozenset({"true", "yes", "on", "1"})
_FALSE_STRINGS = frozenset({"false", "no", "off", "0", ""})


class AssetProfile(BaseModel):
    """Asset identity and context, as collected by the wizard."""

    name: str = ""
    area: str = ""
    asset_type: str = Field(alias="assetType", default="Oven / Air House")
    criticality: CriticalityTier = CriticalityTier.A
    environment: EnvironmentContext = EnvironmentContext()

    model_config = {"populate_by_name": True}


class ComponentEntry(BaseModel):
    """A component row as typed by the user; loosely validated."""

    id: str | None = None
    type: ComponentType
    subsystem: Subsystem | None = None
    quantity: int | float | str | None = Field(alias="qty", default=None)
    manufacturer: str | None = None
    model: str | None = None
    notes: str | None = None
    attributes: dict[str, bool | float | str] = {}

    model_config = {"populate_by_name": True}

    @field_validator("attributes")
    @classmethod
    def _coerce_flag_strings(cls, attributes: dict) -> dict:
        """Turn "true"/"false"-style strings into real booleans."""
        coerced = {}
        for key, value in attributes.items():
            if isinstance(value, str):
                lowered = value.strip().lower()
                if lowered in _TRUE_STRINGS:
                    value = True
                elif lowered in _FALSE_STRINGS:
                    value = False
            coerced[key] = value
        return coerced


class PlanRequest(BaseModel):
    asset: AssetProfile = AssetProfile()
    enabled_subsystems: list[Subsystem] | None = Field(alias="enabledSubsystems", default=None)
    components: list[ComponentEntry] = []

    model_config = {"populate_by_name": True}


class PlanResponse(BaseModel):
    asset: AssetProfile
    enabled_subsystems: list[Subsystem]
    severe: bool
    components_considered: int
    tasks: list[PMTask] = []
