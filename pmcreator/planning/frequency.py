"""Frequency escalation on the ordered maintenance scale."""

from __future__ import annotations

from pmcreator.catalog.models import Frequency

# Coarsest to finest.
FREQUENCY_SCALE: tuple[Frequency, ...] = (
    Frequency.ANNUAL,
    Frequency.SEMIANNUAL,
    Frequency.QUARTERLY,
    Frequency.MONTHLY,
    Frequency.WEEKLY,
    Frequency.DAILY,
)

ANCHORS: frozenset[Frequency] = frozenset({Frequency.BY_CONDITION, Frequency.BY_HOURS})


def rank(frequency: Frequency) -> int | None:
    """Position on the scale, higher is more frequent. None for anchors."""
    if frequency in ANCHORS:
        return None
    return FREQUENCY_SCALE.index(frequency)


def escalate(base: Frequency, severe: bool) -> Frequency:
    """One step finer when severe; anchors and Daily stay put."""
    position = rank(base)
    if not severe or position is None:
        return base
    return FREQUENCY_SCALE[min(position + 1, len(FREQUENCY_SCALE) - 1)]
