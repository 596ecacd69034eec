"""Tests for ActivityAggregator."""

from datetime import datetime

import pytest

from tally.activity import ActivityAggregator, day_start_ms, tally_switches
from tally.log import AppendLog, ReverseScanner
from tally.models import Activity, Intent
from tally.store import InMemoryKVStore

HOUR = 60 * 60 * 1000
PREFIX = "users:test:interactions"
T = 1_700_000_000_000


@pytest.fixture
def aggregator(store: InMemoryKVStore) -> ActivityAggregator:
    return ActivityAggregator(ReverseScanner(store))


async def fill(store: InMemoryKVStore, entries) -> None:
    log = AppendLog(store)
    for entry in entries:
        await log.append(PREFIX, entry)


class TestSummarize:
    """Tests for per-activity totals."""

    @pytest.mark.asyncio
    async def test_empty_stream(self, aggregator: ActivityAggregator):
        assert await aggregator.summarize(PREFIX, day_start=T, now=T + HOUR) == {}

    @pytest.mark.asyncio
    async def test_single_switch_runs_until_now(self, store, aggregator, make_entry):
        await fill(store, [make_entry(T, Activity.SCHOOL)])

        summary = await aggregator.summarize(PREFIX, day_start=T - HOUR, now=T + 2 * HOUR)
        assert summary == {Activity.SCHOOL: pytest.approx(2.0)}

    @pytest.mark.asyncio
    async def test_each_switch_ends_at_the_next(self, store, aggregator, make_entry):
        """A at t, B at t+1h, A at t+3h, now t+4h: A 2h, B 2h."""
        await fill(store, [
            make_entry(T, Activity.DEBUILD),
            make_entry(T + HOUR, Activity.READING),
            make_entry(T + 3 * HOUR, Activity.DEBUILD),
        ])

        summary = await aggregator.summarize(PREFIX, day_start=T - HOUR, now=T + 4 * HOUR)
        assert summary == {
            Activity.DEBUILD: pytest.approx(2.0),
            Activity.READING: pytest.approx(2.0),
        }

    @pytest.mark.asyncio
    async def test_non_switch_entries_ignored(self, store, aggregator, make_entry):
        """A summary request between two switches doesn't split the time."""
        await fill(store, [
            make_entry(T, Activity.MEALS),
            make_entry(T + HOUR, intent=Intent.DAILY_SUMMARY),
            make_entry(T + 2 * HOUR, Activity.SLEEP),
        ])

        summary = await aggregator.summarize(PREFIX, day_start=T - HOUR, now=T + 3 * HOUR)
        assert summary == {
            Activity.MEALS: pytest.approx(2.0),
            Activity.SLEEP: pytest.approx(1.0),
        }

    @pytest.mark.asyncio
    async def test_entries_before_day_start_excluded(self, store, aggregator, make_entry):
        """Only entries after day_start count; earlier time is unattributed."""
        await fill(store, [
            make_entry(T - HOUR, Activity.SLEEP),
            make_entry(T + HOUR, Activity.ROUTINES),
        ])

        summary = await aggregator.summarize(PREFIX, day_start=T, now=T + 2 * HOUR)
        assert summary == {Activity.ROUTINES: pytest.approx(1.0)}

    @pytest.mark.asyncio
    async def test_only_summary_entries(self, store, aggregator, make_entry):
        await fill(store, [make_entry(T, intent=Intent.DAILY_SUMMARY)])
        assert await aggregator.summarize(PREFIX, day_start=T - HOUR, now=T + HOUR) == {}


class TestTallySwitches:
    """Tests for the duration arithmetic."""

    def test_fractional_hours(self, make_entry):
        entries = [make_entry(T + 30 * 60 * 1000, Activity.MEALS), make_entry(T, Activity.SLEEP)]
        summary = tally_switches(entries, now=T + HOUR)
        assert summary[Activity.MEALS] == pytest.approx(0.5)
        assert summary[Activity.SLEEP] == pytest.approx(0.5)

    def test_no_clamping(self, make_entry):
        """A switch stamped after now yields a negative duration."""
        summary = tally_switches([make_entry(T + HOUR, Activity.SLEEP)], now=T)
        assert summary[Activity.SLEEP] == pytest.approx(-1.0)


class TestCurrentActivity:
    """Tests for the current activity lookup."""

    @pytest.mark.asyncio
    async def test_defaults_to_buffer(self, aggregator: ActivityAggregator):
        assert await aggregator.current_activity(PREFIX) == Activity.BUFFER

    @pytest.mark.asyncio
    async def test_latest_switch(self, store, aggregator, make_entry):
        await fill(store, [
            make_entry(T, Activity.SLEEP),
            make_entry(T + HOUR, Activity.SCHOOL),
            make_entry(T + 2 * HOUR, intent=Intent.DAILY_SUMMARY),
        ])
        assert await aggregator.current_activity(PREFIX) == Activity.SCHOOL


class TestDayStart:
    def test_local_midnight(self):
        now = datetime(2024, 3, 5, 15, 30, 12)
        assert day_start_ms(now) == int(datetime(2024, 3, 5).timestamp() * 1000)

    def test_defaults_to_today(self):
        assert day_start_ms() == day_start_ms(datetime.now())
