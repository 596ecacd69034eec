"""Handlers for each intent."""

from datetime import datetime

from ..activity import ActivityAggregator, allocations_for, day_start_ms, format_summary
from ..log import interactions_prefix
from ..models import Intent
from .base import IntentHandler, IntentRequest, IntentResponse
from .registry import IntentRegistry

START_MESSAGE = "Hello! By default, you are currently on buffered time."


class StartHandler(IntentHandler):
    """Greets a new user."""

    @property
    def intent(self) -> Intent:
        return Intent.START_COMMAND

    async def handle(self, request: IntentRequest) -> IntentResponse:
        return IntentResponse(START_MESSAGE)


class ActivitySwitchHandler(IntentHandler):
    """Acknowledges a switch from the current activity to a new one.

    Switching to an activity implicitly ends the previous one, so a single
    message per transition is enough. The switch itself is recorded when
    the interaction is logged.
    """

    def __init__(self, aggregator: ActivityAggregator) -> None:
        self.aggregator = aggregator

    @property
    def intent(self) -> Intent:
        return Intent.ACTIVITY_SWITCH

    async def handle(self, request: IntentRequest) -> IntentResponse:
        if request.activity is None:
            raise ValueError("Activity switch request without an activity")
        current = await self.aggregator.current_activity(
            interactions_prefix(request.user.uid)
        )
        if current == request.activity:
            return IntentResponse(f"No change, still on {current.value}.")
        return IntentResponse(
            f"Switching from {current.value} to {request.activity.value}."
        )


class DailySummaryHandler(IntentHandler):
    """Reports time spent today against the day's budget."""

    def __init__(self, aggregator: ActivityAggregator) -> None:
        self.aggregator = aggregator

    @property
    def intent(self) -> Intent:
        return Intent.DAILY_SUMMARY

    async def handle(self, request: IntentRequest) -> IntentResponse:
        today = datetime.now()
        totals = await self.aggregator.summarize(
            interactions_prefix(request.user.uid),
            day_start=day_start_ms(today),
        )
        return IntentResponse(format_summary(totals, allocations_for(today.date())))


def default_registry(aggregator: ActivityAggregator) -> IntentRegistry:
    """Registry with a handler for every intent."""
    registry = IntentRegistry()
    registry.register(StartHandler())
    registry.register(ActivitySwitchHandler(aggregator))
    registry.register(DailySummaryHandler(aggregator))
    return registry
