"""Activity time accounting."""

from .aggregator import (
    MS_IN_HOUR,
    ActivityAggregator,
    ActivitySummary,
    day_start_ms,
    now_ms,
    tally_switches,
)
from .budgets import (
    WEEKDAY_ALLOCATIONS,
    WEEKEND_ALLOCATIONS,
    allocations_for,
    format_hours,
    format_summary,
    unallocated_hours,
)

__all__ = [
    "MS_IN_HOUR",
    "WEEKDAY_ALLOCATIONS",
    "WEEKEND_ALLOCATIONS",
    "ActivityAggregator",
    "ActivitySummary",
    "allocations_for",
    "day_start_ms",
    "format_hours",
    "format_summary",
    "now_ms",
    "tally_switches",
    "unallocated_hours",
]
