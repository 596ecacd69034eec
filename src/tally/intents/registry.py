"""Intent registry for dispatching classified messages."""

from ..models import Intent
from .base import IntentHandler, IntentRequest, IntentResponse


class IntentRegistry:
    """Registry of handlers keyed by intent."""

    def __init__(self) -> None:
        self._handlers: dict[Intent, IntentHandler] = {}

    def register(self, handler: IntentHandler) -> None:
        """Register a handler."""
        if handler.intent in self._handlers:
            raise ValueError(f"Handler for '{handler.intent.value}' already registered")
        self._handlers[handler.intent] = handler

    def list_intents(self) -> list[Intent]:
        """List all intents with a registered handler."""
        return list(self._handlers.keys())

    async def dispatch(self, intent: Intent, request: IntentRequest) -> IntentResponse:
        """Run the handler registered for intent.

        Raises:
            LookupError: If no handler serves the intent.
        """
        handler = self._handlers.get(intent)
        if handler is None:
            raise LookupError(f"No handler for intent '{intent.value}'")
        return await handler.handle(request)
