"""Per-activity time totals derived from the interaction log."""

import time
from datetime import datetime

from ..log import LogEntry, ReverseScanner
from ..models import Activity

MS_IN_HOUR = 60 * 60 * 1000

ActivitySummary = dict[Activity, float]


def now_ms() -> int:
    """Current time in milliseconds since the epoch."""
    return int(time.time() * 1000)


def day_start_ms(now: datetime | None = None) -> int:
    """Local midnight of the given day, in milliseconds since the epoch."""
    now = now or datetime.now()
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    return int(midnight.timestamp() * 1000)


def tally_switches(entries: list[LogEntry], now: int) -> ActivitySummary:
    """Accumulate hours per activity from a newest-first run of entries.

    Each switch owns the time until the next more recent switch, or until
    now for the most recent one. Entries that are not switches are skipped;
    they do not end the switch before them.
    """
    summary: ActivitySummary = {}
    later = now
    for entry in entries:
        if not entry.is_switch or entry.meta.activity is None:
            continue
        hours = (later - entry.timestamp) / MS_IN_HOUR
        summary[entry.meta.activity] = summary.get(entry.meta.activity, 0.0) + hours
        later = entry.timestamp
    return summary


class ActivityAggregator:
    """Answers time-spent questions about a user's interaction stream."""

    def __init__(self, scanner: ReverseScanner) -> None:
        self.scanner = scanner

    async def summarize(
        self,
        prefix: str,
        day_start: int | None = None,
        now: int | None = None,
    ) -> ActivitySummary:
        """Hours spent per activity since day_start.

        Time before the first switch of the day is not attributed to any
        activity; callers that want a remainder figure subtract the totals
        from the length of the day.

        Args:
            prefix: Stream prefix of the user's interactions.
            day_start: Window start in ms; defaults to local midnight.
            now: End of the window in ms; defaults to the current time.
        """
        if day_start is None:
            day_start = day_start_ms()
        if now is None:
            now = now_ms()
        entries = await self.scanner.collect_last(
            prefix, lambda e: e.timestamp > day_start
        )
        return tally_switches(entries, now)

    async def current_activity(self, prefix: str) -> Activity:
        """The activity of the most recent switch, or buffer if there is none."""
        last = await self.scanner.find_last(prefix, lambda e: e.is_switch)
        if last is None or last.meta.activity is None:
            return Activity.BUFFER
        return last.meta.activity
