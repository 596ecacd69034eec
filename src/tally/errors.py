"""Error types raised by the storage and log layers."""


class TallyError(Exception):
    """Base class for tally errors."""


class StoreUnavailable(TallyError):
    """A read or write against the backing key-value store failed."""


class Malformed(TallyError):
    """A stored value could not be decoded."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Malformed value at '{key}': {reason}")
        self.key = key
        self.reason = reason
