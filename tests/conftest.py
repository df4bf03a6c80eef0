"""Shared fixtures for PM Creator tests."""

import pytest

from pmcreator.catalog.models import ComponentType, Subsystem
from pmcreator.intake.subsystems import DEFAULT_SUBSYSTEM
from pmcreator.planning.models import Component


def make_component(ctype: ComponentType, **kwargs) -> Component:
    kwargs.setdefault("subsystem", DEFAULT_SUBSYSTEM[ctype])
    return Component(type=ctype, **kwargs)


@pytest.fixture
def component_factory():
    return make_component


@pytest.fixture
def motor() -> Component:
    return make_component(ComponentType.MOTOR)


@pytest.fixture
def full_inventory() -> list[Component]:
    """One component of every type, in enumeration order."""
    return [make_component(ctype) for ctype in ComponentType]


@pytest.fixture
def all_subsystems() -> list[Subsystem]:
    return list(Subsystem)
