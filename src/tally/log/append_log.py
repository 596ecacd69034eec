"""Append-only log over counter-indexed slots."""

from ..store import KVStore
from .counter import SequenceCounter
from .entry import LogEntry, slot_key


class AppendLog:
    """Writes immutable entries into consecutive slots of a stream.

    If the slot write fails after the counter has advanced, that slot stays
    empty forever. Readers treat an empty slot as the end of history.
    """

    def __init__(self, store: KVStore, counter: SequenceCounter | None = None) -> None:
        self.store = store
        self.counter = counter or SequenceCounter(store)

    async def append(self, prefix: str, entry: LogEntry) -> int:
        """Write entry to the next slot of the stream.

        Returns:
            The slot number the entry was written to.

        Raises:
            StoreUnavailable: If advancing the counter or writing the slot fails.
        """
        slot = await self.counter.advance(prefix)
        await self.store.put(slot_key(prefix, slot), entry.to_json())
        return slot
