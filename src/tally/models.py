"""Domain enums and the user record."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class Activity(str, Enum):
    """Activities a user can switch between."""

    SLEEP = "sleep"
    ROUTINES = "routines"
    MEALS = "meals"
    DEBUILD = "debuild"
    SCHOOL = "school"
    READING = "reading"
    BUFFER = "buffer"


class Intent(str, Enum):
    """What an incoming message asks the bot to do."""

    START_COMMAND = "start-cmd"
    DAILY_SUMMARY = "day-summary"
    ACTIVITY_SWITCH = "activity-switch"


@dataclass
class TelegramInterface:
    """How to reach a user on Telegram."""

    id: int
    chat: int
    username: str | None = None


@dataclass
class User:
    """A tracked user.

    Attributes:
        uid: Stable identifier, independent of any chat platform.
        firstname: Given name, filled from the first interface that knows it.
        lastname: Family name.
        email: Optional contact address.
        telegram: Telegram interface details, None until the user writes in.
    """

    uid: str
    firstname: str | None = None
    lastname: str | None = None
    email: str | None = None
    telegram: TelegramInterface | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        data = asdict(self)
        telegram = data.pop("telegram")
        data["interfaces"] = {"telegram": telegram} if telegram else {}
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "User":
        """Create from dictionary."""
        interfaces = data.get("interfaces") or {}
        telegram = interfaces.get("telegram")
        return cls(
            uid=data["uid"],
            firstname=data.get("firstname"),
            lastname=data.get("lastname"),
            email=data.get("email"),
            telegram=TelegramInterface(**telegram) if telegram else None,
        )


@dataclass
class Sender:
    """The author of an incoming chat message."""

    id: int
    chat_id: int
    first_name: str | None = None
    last_name: str | None = None
    username: str | None = None
