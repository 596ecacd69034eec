"""Shared fixtures."""

from collections.abc import Callable

import pytest

from tally.errors import StoreUnavailable
from tally.log import EntryMeta, LogEntry
from tally.models import Activity, Intent
from tally.store import InMemoryKVStore

class FlakyStore(InMemoryKVStore):
    """In-memory store that fails reads or writes of chosen keys."""

    def __init__(self, data: dict[str, str] | None = None) -> None:
        super().__init__(data)
        self.fail_reads: set[str] = set()
        self.fail_writes: set[str] = set()

    async def get(self, key: str) -> str | None:
        if key in self.fail_reads:
            raise StoreUnavailable(f"read of {key} failed")
        return await super().get(key)

    async def put(self, key: str, value: str) -> None:
        if key in self.fail_writes:
            raise StoreUnavailable(f"write of {key} failed")
        await super().put(key, value)


@pytest.fixture
def store() -> InMemoryKVStore:
    return InMemoryKVStore()


@pytest.fixture
def flaky_store() -> FlakyStore:
    return FlakyStore()


@pytest.fixture
def make_entry() -> Callable[..., LogEntry]:
    """Factory for log entries; defaults to a switch to sleep."""

    def _make(
        timestamp: int,
        activity: Activity | None = Activity.SLEEP,
        intent: Intent = Intent.ACTIVITY_SWITCH,
        request: str = "msg",
    ) -> LogEntry:
        if intent != Intent.ACTIVITY_SWITCH:
            activity = None
        return LogEntry(
            timestamp=timestamp,
            request=request,
            response="ok",
            meta=EntryMeta(interface="telegram", intent=intent, activity=activity),
        )

    return _make
