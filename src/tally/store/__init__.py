"""Backing key-value stores."""

from .base import KVStore, StoreConfig
from .memory import InMemoryKVStore
from .sqlite import SQLiteKVStore

__all__ = ["InMemoryKVStore", "KVStore", "SQLiteKVStore", "StoreConfig"]
