"""Prometheus metrics definitions."""

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

plans_generated_total = Counter(
    "pm_plans_generated_total",
    "Total number of PM plans generated",
    labelnames=["criticality", "severe"],
)

tasks_emitted_total = Counter(
    "pm_tasks_emitted_total",
    "Total PM tasks returned after deduplication",
    labelnames=["criticality"],
)

duplicates_removed_total = Counter(
    "pm_duplicate_tasks_removed_total",
    "Total generated tasks dropped as duplicates",
)

plan_generation_duration = Histogram(
    "pm_plan_generation_seconds",
    "Time spent generating a PM plan",
    buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1),
)


def get_metrics() -> tuple[bytes, str]:
    return generate_latest(), CONTENT_TYPE_LATEST
