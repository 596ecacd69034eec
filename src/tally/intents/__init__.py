"""Intent classification and handler dispatch."""

from .base import IntentHandler, IntentRequest, IntentResponse
from .classifier import (
    Classification,
    ClassificationError,
    ClassifierConfig,
    IntentClassifier,
    parse_activity,
)
from .handlers import (
    START_MESSAGE,
    ActivitySwitchHandler,
    DailySummaryHandler,
    StartHandler,
    default_registry,
)
from .llm_client import GroqLLMClient, LLMClient
from .registry import IntentRegistry

__all__ = [
    "START_MESSAGE",
    "ActivitySwitchHandler",
    "Classification",
    "ClassificationError",
    "ClassifierConfig",
    "DailySummaryHandler",
    "GroqLLMClient",
    "IntentClassifier",
    "IntentHandler",
    "IntentRegistry",
    "IntentRequest",
    "IntentResponse",
    "LLMClient",
    "StartHandler",
    "default_registry",
    "parse_activity",
]
