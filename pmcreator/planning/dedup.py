"""Task deduplication: first occurrence wins, order preserved."""

from __future__ import annotations

from collections.abc import Iterable

from pmcreator.planning.models import PMTask


def deduplicate(tasks: Iterable[PMTask]) -> list[PMTask]:
    seen: set[tuple] = set()
    unique = []
    for task in tasks:
        if task.identity in seen:
            continue
        seen.add(task.identity)
        unique.append(task)
    return unique
