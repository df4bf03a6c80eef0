"""Rule catalog: component type to ordered base task templates.

The catalog is plain data. Adding a component type means adding an entry
to ``_RULES``; the planning code never branches on component type.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from pmcreator.catalog.models import ComponentType, Frequency, Method, TaskTemplate

_Rule = tuple[str, Method, Frequency, str, str]


def _expand(types: Iterable[ComponentType], *rules: _Rule, when: str | None = None) -> dict:
    return {
        ctype: [
            TaskTemplate(
                component_type=ctype,
                task=task,
                method=method,
                frequency=frequency,
                acceptance=acceptance,
                rationale=rationale,
                when=when,
            )
            for task, method, frequency, acceptance, rationale in rules
        ]
        for ctype in types
    }


_CABINET_VISUAL: _Rule = (
    "Cabinet inspection: temperature, cleanliness, status LEDs, hardware and terminals.",
    Method.VISUAL,
    Frequency.MONTHLY,
    "No overtemperature; LEDs normal; terminals tight.",
    "Intermittent faults from heat, contamination and loosening are common.",
)

_SENSOR_FUNCTIONAL: _Rule = (
    "Functional test: verify signal change (LED / PLC input) during operation.",
    Method.FUNCTIONAL_TEST,
    Frequency.QUARTERLY,
    "No chatter; consistent response.",
    "Detects fatigued cable, marginal sensing distance and weak sensors.",
)


def _sensor_cleaning(frequency: Frequency) -> _Rule:
    return (
        "Clean sensor face / optics and verify alignment and mounting.",
        Method.CLEANING,
        frequency,
        "No overspray; bracket tight; stable detection.",
        "False triggers from contamination and misalignment.",
    )


_DP_MEASUREMENT: _Rule = (
    "Check filter condition and/or record ΔP; replace by condition.",
    Method.MEASUREMENT,
    Frequency.MONTHLY,
    "ΔP within range or acceptable condition; no bypass.",
    "ΔP is the best replacement indicator and protects fans and process.",
)


def _build_catalog() -> Mapping[ComponentType, tuple[TaskTemplate, ...]]:
    rules: dict[ComponentType, list[TaskTemplate]] = {}

    def merge(entries: dict) -> None:
        for ctype, templates in entries.items():
            rules.setdefault(ctype, []).extend(templates)

    merge(_expand(
        [ComponentType.MOTOR],
        (
            "Visual inspection: exterior cleanliness, ventilation, terminal boxes and conduits.",
            Method.VISUAL,
            Frequency.WEEKLY,
            "No excessive buildup, no loose cables, ventilation clear.",
            "Prevents overheating and failures from contamination or loosening.",
        ),
        (
            "Measure current (A) and compare with baseline under normal load.",
            Method.MEASUREMENT,
            Frequency.MONTHLY,
            "Within expected band; no abnormal phase imbalance.",
            "Detects friction, excessive load and electrical problems.",
        ),
    ))

    merge(_expand(
        [ComponentType.VFD],
        (
            "Clean / inspect fans, heatsink and cabinet filters (if fitted).",
            Method.CLEANING,
            Frequency.MONTHLY,
            "No obstructions; ventilation working; no thermal alarms.",
            "Heat plus dust is the leading cause of drive failures.",
        ),
        (
            "Review fault history and critical parameters; verify they match the standard.",
            Method.FUNCTIONAL_TEST,
            Frequency.QUARTERLY,
            "No recurring faults; parameters correct.",
            "Repeated faults point to an emerging mechanical or electrical problem.",
        ),
    ))
    merge(_expand(
        [ComponentType.VFD],
        (
            "Verify speed feedback (encoder / tachometer) signal and speed-loop response.",
            Method.FUNCTIONAL_TEST,
            Frequency.QUARTERLY,
            "Feedback stable across speed range; no following-error faults.",
            "Degraded feedback makes closed-loop drives hunt or trip.",
        ),
        when="closed_loop",
    ))

    merge(_expand([ComponentType.PLC, ComponentType.IO_MODULE], _CABINET_VISUAL))

    merge(_expand([ComponentType.PHOTO_EYE], _sensor_cleaning(Frequency.WEEKLY), _SENSOR_FUNCTIONAL))
    merge(_expand(
        [ComponentType.INDUCTIVE_SENSOR, ComponentType.LIMIT_SWITCH],
        _sensor_cleaning(Frequency.MONTHLY),
        _SENSOR_FUNCTIONAL,
    ))

    merge(_expand(
        [ComponentType.BEARING],
        (
            "Inspect noise, temperature and play; look for seal leakage.",
            Method.VISUAL,
            Frequency.WEEKLY,
            "No abnormal noise; normal temperature; no excessive play.",
            "Early detection avoids seizure and major damage.",
        ),
        (
            "Lubricate to standard (if applicable) and verify correct grease.",
            Method.LUBRICATION,
            Frequency.BY_CONDITION,
            "No over-greasing; clean grease of the correct type.",
            "Correct lubrication defines bearing life.",
        ),
    ))

    merge(_expand([ComponentType.AIR_FILTER, ComponentType.PRESSURE_GAUGE], _DP_MEASUREMENT))

    merge(_expand(
        [ComponentType.GEAR_REDUCER],
        (
            "Check oil level, leaks at seals and breather condition.",
            Method.VISUAL,
            Frequency.MONTHLY,
            "Level within sight-glass marks; no leaks; breather clear.",
            "Low oil and contamination drive gear and bearing wear.",
        ),
        (
            "Change gear oil per manufacturer operating-hour interval.",
            Method.LUBRICATION,
            Frequency.BY_HOURS,
            "Correct oil grade and fill level; drained oil free of metal particles.",
            "Oil degradation tracks running hours, not calendar time.",
        ),
    ))

    merge(_expand(
        [ComponentType.SOLENOID_VALVE],
        (
            "Cycle valve manually / from PLC and listen for leaks at exhaust ports.",
            Method.FUNCTIONAL_TEST,
            Frequency.QUARTERLY,
            "Clean switching; no continuous exhaust leak; coil not overheating.",
            "Sticking spools and worn seals cause slow or missed actuation.",
        ),
    ))

    merge(_expand(
        [ComponentType.PNEUMATIC_CYLINDER],
        (
            "Inspect rod for scoring, mounting for play and fittings for leaks.",
            Method.VISUAL,
            Frequency.MONTHLY,
            "Rod clean and undamaged; mounts tight; no audible leaks.",
            "Rod damage destroys seals and leads to air loss.",
        ),
        (
            "Check and adjust cushioning and flow controls for smooth end-of-stroke.",
            Method.ADJUSTMENT,
            Frequency.SEMIANNUAL,
            "No end-of-stroke impact; stroke time within standard.",
            "Hard impacts loosen tooling and shorten cylinder life.",
        ),
    ))

    return MappingProxyType({ctype: tuple(templates) for ctype, templates in rules.items()})


RULE_CATALOG: Mapping[ComponentType, tuple[TaskTemplate, ...]] = _build_catalog()


def templates_for(
    component_type: ComponentType,
    attributes: Mapping[str, object] | None = None,
) -> list[TaskTemplate]:
    """Base templates that apply to a component of this type and attributes.

    Unsupported types yield an empty list.
    """
    attributes = attributes or {}
    return [
        t for t in RULE_CATALOG.get(component_type, ())
        if t.when is None or bool(attributes.get(t.when))
    ]


def supported_types() -> list[ComponentType]:
    return [ctype for ctype in ComponentType if ctype in RULE_CATALOG]
