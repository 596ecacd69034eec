"""Intent and activity extraction from user messages."""

import logging
import os
from dataclasses import dataclass

from ..errors import TallyError
from ..models import Activity, Intent
from .llm_client import DEFAULT_MODEL, LLMClient

logger = logging.getLogger(__name__)

ACTIVITY_INSTRUCTIONS = """The following is a mapping from a user query and the corresponding new activity that they are doing.

The valid activities are:
- "sleep"
- "routines"
- "meals"
- "debuild"
- "school"
- "reading"
- "buffer"

User Query: Bedtime! goodnight.
Activity: sleep

User Query: starting morning routines.
Activity: routines

User Query: time to cook food
Activity: meals

User Query: working on debuild
Activity: debuild

User Query: gotta do some school work
Activity: school

User Query: time for some reading
Activity: reading

User Query: time for some downtime
Activity: buffer

User Query: its chill time
Activity: buffer"""

QUERY_PROMPT = "User Query: {query}\nActivity:"


class ClassificationError(TallyError):
    """The completion service could not be reached."""


@dataclass
class ClassifierConfig:
    """Configuration for the intent classifier."""

    model: str = DEFAULT_MODEL
    max_tokens: int = 100
    temperature: float = 0.5

    @classmethod
    def from_env(cls) -> "ClassifierConfig":
        return cls(model=os.getenv("GROQ_MODEL", DEFAULT_MODEL))


@dataclass(frozen=True)
class Classification:
    """Result of classifying one message."""

    intent: Intent
    activity: Activity | None = None


def parse_activity(text: str) -> Activity | None:
    """Map a completion to an activity, or None if it names none."""
    words = text.strip().strip('"').lower().split()
    if not words:
        return None
    try:
        return Activity(words[0].strip('".,'))
    except ValueError:
        return None


class IntentClassifier:
    """Decides what a message asks for.

    Commands and summary requests are recognized locally. Everything else is
    an activity switch, and the LLM picks which activity was switched to.
    """

    def __init__(self, llm: LLMClient, config: ClassifierConfig | None = None) -> None:
        self.llm = llm
        self.config = config or ClassifierConfig()

    async def classify(self, text: str) -> Classification:
        query = text.strip().lower()
        if "summary" in query:
            return Classification(Intent.DAILY_SUMMARY)
        if query == "/start":
            return Classification(Intent.START_COMMAND)
        return Classification(Intent.ACTIVITY_SWITCH, await self.extract_activity(query))

    async def extract_activity(self, query: str) -> Activity:
        """Ask the LLM which activity the user switched to.

        Raises:
            ClassificationError: If the completion request fails.
        """
        try:
            completion = await self.llm.complete(
                QUERY_PROMPT.format(query=query),
                system=ACTIVITY_INSTRUCTIONS,
                max_tokens=self.config.max_tokens,
                temperature=self.config.temperature,
                stop=["\n"],
            )
        except Exception as e:
            raise ClassificationError(f"Activity extraction failed: {e}") from e

        activity = parse_activity(completion)
        if activity is None:
            logger.warning(f"Unrecognized activity {completion!r}, using buffer")
            return Activity.BUFFER
        return activity
