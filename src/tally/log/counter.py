"""Per-stream sequence counter."""

import logging

from ..errors import Malformed
from ..store import KVStore
from .entry import counter_key

logger = logging.getLogger(__name__)


class SequenceCounter:
    """Tracks the next free slot number of each stream.

    The counter starts at 1; slot 0 is the counter itself. A stored value v
    means slots 1..v-1 have been handed out.

    Reads and writes are separate store calls with nothing in between to
    make them atomic: two writers advancing the same stream at once can both
    receive the same slot. Callers that need strict ordering must serialize
    appends to a stream themselves.
    """

    def __init__(self, store: KVStore) -> None:
        self.store = store

    async def _read(self, key: str) -> int | None:
        raw = await self.store.get(key)
        if raw is None:
            return None
        try:
            return int(raw)
        except ValueError as e:
            raise Malformed(key, f"counter is not an integer: {raw!r}") from e

    async def peek(self, prefix: str) -> int:
        """Return the next free slot without advancing.

        An absent counter is initialized to 1 and persisted, so this is a
        read with lazy init rather than a pure query.
        """
        key = counter_key(prefix)
        value = await self._read(key)
        if value is None:
            await self.store.put(key, "1")
            return 1
        return value

    async def advance(self, prefix: str) -> int:
        """Hand out the next free slot and move the counter past it."""
        key = counter_key(prefix)
        value = await self._read(key)
        if value is None:
            value = 1
        await self.store.put(key, str(value + 1))
        logger.debug("Advanced %s to %d", key, value + 1)
        return value
