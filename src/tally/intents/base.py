"""Base interface for intent handlers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..models import Activity, Intent, User


@dataclass
class IntentRequest:
    """A classified message on its way to a handler."""

    user: User
    body: str
    activity: Activity | None = None


@dataclass
class IntentResponse:
    """What the bot answers."""

    message: str = ""


class IntentHandler(ABC):
    """Handles every message classified with one intent."""

    @property
    @abstractmethod
    def intent(self) -> Intent:
        """The intent this handler serves."""
        ...

    @abstractmethod
    async def handle(self, request: IntentRequest) -> IntentResponse:
        """Produce the response for a request."""
        ...
