"""Closed vocabularies and the immutable task template record."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class CriticalityTier(str, Enum):
    A = "A"
    B = "B"
    C = "C"


class Subsystem(str, Enum):
    CONTROL = "Control"
    DRIVES_MOTION = "Drives / Motion"
    MOTORS = "Motors"
    INSTRUMENTATION = "Instrumentation"
    MECHANICAL = "Mechanical"
    PNEUMATIC = "Pneumatic"
    PROCESS = "Process"
    SAFETY = "Safety"


class ComponentType(str, Enum):
    PLC = "PLC"
    IO_MODULE = "I/O Module"
    HMI = "HMI"
    VFD = "VFD"
    MOTOR = "Motor"
    INDUCTIVE_SENSOR = "Inductive Sensor"
    PHOTO_EYE = "Photo Eye"
    LIMIT_SWITCH = "Limit Switch"
    PRESSURE_GAUGE = "Pressure Gauge / ΔP"
    BEARING = "Bearing"
    GEAR_REDUCER = "Gear Reducer"
    AIR_FILTER = "Air Filter"
    SOLENOID_VALVE = "Solenoid Valve"
    PNEUMATIC_CYLINDER = "Pneumatic Cylinder"
    GAS_BURNER = "Gas Burner"


class Method(str, Enum):
    VISUAL = "Visual"
    CLEANING = "Cleaning"
    MEASUREMENT = "Measurement"
    FUNCTIONAL_TEST = "Functional Test"
    LUBRICATION = "Lubrication"
    ADJUSTMENT = "Adjustment"


class Frequency(str, Enum):
    ANNUAL = "Annual"
    SEMIANNUAL = "Semiannual"
    QUARTERLY = "Quarterly"
    MONTHLY = "Monthly"
    WEEKLY = "Weekly"
    DAILY = "Daily"
    BY_CONDITION = "By condition"
    BY_HOURS = "By hours"


class Role(str, Enum):
    TECHNICIAN = "Technician"
    TEAM_LEAD = "Team Lead"
    SUPERVISOR = "Supervisor"


class TaskTemplate(BaseModel):
    """One catalog entry: what to do on a component type and how often."""

    model_config = {"frozen": True}

    component_type: ComponentType
    task: str
    method: Method
    frequency: Frequency
    acceptance: str
    rationale: str
    when: str | None = None  # component attribute that must be truthy
