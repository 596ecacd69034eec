"""Daily time budgets per activity."""

from datetime import date

from ..models import Activity
from .aggregator import ActivitySummary

HOURS_IN_DAY = 24.0

# Sunday through Thursday. Anything not allocated is buffer time.
WEEKDAY_ALLOCATIONS: dict[Activity, float] = {
    Activity.SLEEP: 6.0,
    Activity.ROUTINES: 1.0,
    Activity.MEALS: 1.0,
    Activity.DEBUILD: 8.0,
    Activity.SCHOOL: 6.0,
}

# Friday and Saturday.
WEEKEND_ALLOCATIONS: dict[Activity, float] = {
    Activity.SLEEP: 6.0,
    Activity.ROUTINES: 1.0,
    Activity.MEALS: 2.0,
    Activity.SCHOOL: 4.0,
    Activity.READING: 4.0,
}

WEEKEND_DAYS = {4, 5}  # date.weekday(): Friday, Saturday


def allocations_for(day: date) -> dict[Activity, float]:
    """Budget that applies on the given day."""
    if day.weekday() in WEEKEND_DAYS:
        return dict(WEEKEND_ALLOCATIONS)
    return dict(WEEKDAY_ALLOCATIONS)


def unallocated_hours(totals: ActivitySummary, day_hours: float = HOURS_IN_DAY) -> float:
    """Hours of the day not covered by any total."""
    return day_hours - sum(totals.values())


def format_hours(hours: float) -> str:
    total_minutes = int(round(abs(hours) * 60))
    whole, minutes = divmod(total_minutes, 60)
    sign = "-" if hours < 0 and total_minutes else ""
    return f"{sign}{whole}h{minutes:02d}m"


def format_summary(totals: ActivitySummary, allocations: dict[Activity, float]) -> str:
    """Render a day summary: time spent against budget for each activity."""
    if not totals:
        return "Nothing tracked yet today. You are on buffered time."

    lines = ["Today so far:"]
    for activity in Activity:
        spent = totals.get(activity, 0.0)
        budget = allocations.get(activity)
        if budget is None:
            if spent > 0:
                lines.append(f"• {activity.value}: {format_hours(spent)}")
            continue
        line = f"• {activity.value}: {format_hours(spent)} of {format_hours(budget)}"
        if spent > budget:
            line += f" (over by {format_hours(spent - budget)})"
        lines.append(line)

    buffer_budget = unallocated_hours(allocations)
    lines.append(
        f"Rest of the day (buffer): {format_hours(unallocated_hours(totals))}"
        f" (buffer budget {format_hours(buffer_budget)})"
    )
    return "\n".join(lines)
