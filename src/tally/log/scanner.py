"""Backward scans over a stream's slots."""

import logging
from collections.abc import AsyncIterator, Callable

from ..errors import Malformed
from ..store import KVStore
from .counter import SequenceCounter
from .entry import LogEntry, slot_key

logger = logging.getLogger(__name__)

Predicate = Callable[[LogEntry], bool]


class ReverseScanner:
    """Walks a stream from the newest slot back toward slot 1.

    The store has no range queries, so any "recent entries" query is a
    backward walk that stops as early as the predicate allows. A missing or
    undecodable slot ends the walk: everything older than it is out of
    reach. Store failures propagate and discard whatever was read so far.
    """

    def __init__(self, store: KVStore, counter: SequenceCounter | None = None) -> None:
        self.store = store
        self.counter = counter or SequenceCounter(store)

    async def _walk(self, prefix: str) -> AsyncIterator[LogEntry]:
        """Yield entries newest-first until a gap, a bad slot, or slot 1."""
        slot = await self.counter.peek(prefix) - 1
        while slot > 0:
            key = slot_key(prefix, slot)
            raw = await self.store.get(key)
            if raw is None:
                logger.debug("Scan of %s stopped at empty slot %d", prefix, slot)
                return
            try:
                entry = LogEntry.from_json(raw, key)
            except Malformed as e:
                logger.warning("Scan of %s stopped: %s", prefix, e)
                return
            yield entry
            slot -= 1

    async def find_last(self, prefix: str, predicate: Predicate) -> LogEntry | None:
        """Return the most recent entry matching predicate, or None."""
        async for entry in self._walk(prefix):
            if predicate(entry):
                return entry
        return None

    async def collect_last(self, prefix: str, predicate: Predicate) -> list[LogEntry]:
        """Return the newest-first run of entries matching predicate.

        The run ends at the first entry (walking backward) that fails the
        predicate; that entry is not included.
        """
        run: list[LogEntry] = []
        async for entry in self._walk(prefix):
            if not predicate(entry):
                break
            run.append(entry)
        return run
