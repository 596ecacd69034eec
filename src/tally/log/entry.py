"""Log entry model and stream key layout."""

import json
from dataclasses import dataclass
from typing import Any

from ..errors import Malformed
from ..models import Activity, Intent

COUNTER_SLOT = 0


def counter_key(prefix: str) -> str:
    """Key holding the next free slot number of a stream."""
    return f"{prefix}:{COUNTER_SLOT}"


def slot_key(prefix: str, slot: int) -> str:
    """Key holding the entry written at a slot."""
    return f"{prefix}:{slot}"


def interactions_prefix(uid: str) -> str:
    """Stream prefix for a user's interaction log."""
    return f"users:{uid}:interactions"


@dataclass(frozen=True)
class EntryMeta:
    """Classification attached to a log entry.

    Attributes:
        interface: Where the message came from (e.g. 'telegram').
        intent: What the message was classified as.
        activity: The activity switched to; only set for activity switches.
    """

    interface: str
    intent: Intent
    activity: Activity | None = None


@dataclass(frozen=True)
class LogEntry:
    """One immutable interaction record.

    Attributes:
        timestamp: Milliseconds since the epoch.
        request: Raw text the user sent.
        response: Text the bot replied with.
        meta: Interface, intent and activity tags.
    """

    timestamp: int
    request: str
    response: str
    meta: EntryMeta

    @property
    def is_switch(self) -> bool:
        return self.meta.intent == Intent.ACTIVITY_SWITCH

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        meta: dict[str, Any] = {
            "interface": self.meta.interface,
            "intent": self.meta.intent.value,
        }
        if self.meta.activity is not None:
            meta["activity"] = self.meta.activity.value
        return {
            "timestamp": self.timestamp,
            "request": self.request,
            "response": self.response,
            "meta": meta,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LogEntry":
        """Create from dictionary."""
        meta = data["meta"]
        activity = meta.get("activity")
        return cls(
            timestamp=int(data["timestamp"]),
            request=str(data["request"]),
            response=str(data["response"]),
            meta=EntryMeta(
                interface=str(meta["interface"]),
                intent=Intent(meta["intent"]),
                activity=Activity(activity) if activity is not None else None,
            ),
        )

    @classmethod
    def from_json(cls, raw: str, key: str = "") -> "LogEntry":
        """Decode a stored entry.

        Raises:
            Malformed: If the value is not valid JSON or lacks required fields.
        """
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise Malformed(key, f"invalid JSON: {e}") from e
        if not isinstance(data, dict) or not isinstance(data.get("meta"), dict):
            raise Malformed(key, "expected an object with a 'meta' object")
        try:
            return cls.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            raise Malformed(key, f"invalid entry: {e}") from e
