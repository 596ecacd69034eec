"""Completion client behind activity classification."""

from typing import Any, Protocol

from groq import AsyncGroq

DEFAULT_MODEL = "llama-3.1-70b-versatile"


class LLMClient(Protocol):
    """Completes a short classification prompt into a single line of text."""

    async def complete(
        self, prompt: str, system: str | None = None, **options: Any
    ) -> str: ...


class GroqLLMClient:
    """Sends classification prompts to a Groq chat model.

    The system message carries the fixed instructions and worked examples;
    the user message carries only the query being classified. Sampling
    options such as temperature and stop sequences are passed through.
    """

    def __init__(self, client: AsyncGroq, model: str = DEFAULT_MODEL) -> None:
        self._client = client
        self._model = model

    @property
    def model(self) -> str:
        return self._model

    async def complete(
        self, prompt: str, system: str | None = None, **options: Any
    ) -> str:
        """Return the first choice's text, or an empty string if it has none."""
        messages: list[dict[str, Any]] = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        response = await self._client.chat.completions.create(
            model=self._model,
            messages=messages,
            **options,
        )
        return response.choices[0].message.content or ""
