"""Sequential append log over a flat key-value store."""

from .append_log import AppendLog
from .counter import SequenceCounter
from .entry import EntryMeta, LogEntry, counter_key, interactions_prefix, slot_key
from .scanner import Predicate, ReverseScanner

__all__ = [
    "AppendLog",
    "EntryMeta",
    "LogEntry",
    "Predicate",
    "ReverseScanner",
    "SequenceCounter",
    "counter_key",
    "interactions_prefix",
    "slot_key",
]
