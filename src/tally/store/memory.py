"""In-process key-value store."""

import asyncio

from ..errors import StoreUnavailable
from .base import KVStore


class InMemoryKVStore(KVStore):
    """Dict-backed store for tests and local runs.

    Every call yields to the event loop before touching the data, so
    concurrent tasks interleave between reads and writes the same way
    they would against a remote store.
    """

    def __init__(self, data: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(data or {})
        self.reads = 0
        self.writes = 0
        self._closed = False

    async def get(self, key: str) -> str | None:
        await asyncio.sleep(0)
        if self._closed:
            raise StoreUnavailable("Store is closed")
        self.reads += 1
        return self.data.get(key)

    async def put(self, key: str, value: str) -> None:
        await asyncio.sleep(0)
        if self._closed:
            raise StoreUnavailable("Store is closed")
        self.writes += 1
        self.data[key] = value

    def close(self) -> None:
        """Reject all further operations."""
        self._closed = True
