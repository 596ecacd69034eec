"""Message handling pipeline: classify, dispatch, record."""

import asyncio
import logging
import time

from .activity import ActivityAggregator, now_ms
from .intents import IntentClassifier, IntentRegistry, IntentRequest, default_registry
from .log import AppendLog, EntryMeta, LogEntry, ReverseScanner, interactions_prefix
from .logging import JSONLLogger, get_logger
from .models import Intent, Sender
from .store import KVStore
from .users import UserDirectory

logger = logging.getLogger(__name__)


class InteractionService:
    """Turns one incoming message into a reply and a log entry.

    Every handled message is appended to the sender's interaction stream,
    whatever its intent. Activity switches carry the activity they switched
    to, which is what the daily summary is computed from.
    """

    def __init__(
        self,
        store: KVStore,
        classifier: IntentClassifier,
        registry: IntentRegistry | None = None,
        json_logger: JSONLLogger | None = None,
    ) -> None:
        self.store = store
        self.classifier = classifier
        self.append_log = AppendLog(store)
        self.aggregator = ActivityAggregator(ReverseScanner(store, self.append_log.counter))
        self.registry = registry or default_registry(self.aggregator)
        missing = [i.value for i in Intent if i not in self.registry.list_intents()]
        if missing:
            raise ValueError(f"No handler for intents: {', '.join(missing)}")
        self.users = UserDirectory(store)
        self.json_logger = json_logger or get_logger()

    async def handle_message(
        self, sender: Sender, text: str, interface: str = "telegram"
    ) -> str:
        """Handle a message and return the reply text."""
        started = time.monotonic()
        user, classification = await asyncio.gather(
            self.users.lookup_telegram(sender),
            self.classifier.classify(text),
        )

        request = IntentRequest(user=user, body=text, activity=classification.activity)
        response = await self.registry.dispatch(classification.intent, request)

        activity = None
        if classification.intent == Intent.ACTIVITY_SWITCH:
            activity = classification.activity
        entry = LogEntry(
            timestamp=now_ms(),
            request=text,
            response=response.message,
            meta=EntryMeta(
                interface=interface,
                intent=classification.intent,
                activity=activity,
            ),
        )
        slot = await self.append_log.append(interactions_prefix(user.uid), entry)

        self.json_logger.log_interaction(
            user.uid,
            classification.intent.value,
            interface=interface,
            activity=activity.value if activity else None,
            slot=slot,
            duration_ms=(time.monotonic() - started) * 1000,
        )
        logger.debug(f"Recorded {classification.intent.value} for {user.uid} at slot {slot}")
        return response.message
