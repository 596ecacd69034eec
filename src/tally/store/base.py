"""Key-value store interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass
class StoreConfig:
    """Configuration for the backing store."""

    db_path: Path | None = None

    def __post_init__(self) -> None:
        if self.db_path is None:
            self.db_path = Path.home() / ".tally" / "tally.db"


class KVStore(ABC):
    """A flat string key-value store.

    Only two primitives are offered: get and put. There are no transactions,
    no range queries and no expiry. Implementations raise StoreUnavailable
    when the underlying storage cannot be reached.
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the value stored at key, or None if absent."""
        ...

    @abstractmethod
    async def put(self, key: str, value: str) -> None:
        """Store value at key, replacing any previous value."""
        ...
