"""Tests for GroqLLMClient."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from tally.intents import GroqLLMClient


def make_groq(content: str | None) -> MagicMock:
    """Create a mock AsyncGroq returning one choice."""
    mock_response = MagicMock()
    mock_response.choices = [MagicMock()]
    mock_response.choices[0].message.content = content

    mock_groq = MagicMock()
    mock_groq.chat.completions.create = AsyncMock(return_value=mock_response)
    return mock_groq


class TestGroqLLMClient:
    """Tests for GroqLLMClient wrapper."""

    def test_stores_model(self) -> None:
        client = GroqLLMClient(MagicMock(), model="test-model")
        assert client.model == "test-model"

    def test_default_model(self) -> None:
        client = GroqLLMClient(MagicMock())
        assert client.model == "llama-3.1-70b-versatile"

    @pytest.mark.asyncio
    async def test_complete_with_prompt_only(self) -> None:
        """Should call Groq with just user prompt."""
        mock_groq = make_groq("sleep")

        client = GroqLLMClient(mock_groq, model="test-model")
        result = await client.complete("Hello")

        assert result == "sleep"
        mock_groq.chat.completions.create.assert_called_once_with(
            model="test-model",
            messages=[{"role": "user", "content": "Hello"}],
        )

    @pytest.mark.asyncio
    async def test_complete_with_system_and_options(self) -> None:
        """System prompt and completion options are forwarded."""
        mock_groq = make_groq("meals")

        client = GroqLLMClient(mock_groq)
        await client.complete("User message", system="Classify", temperature=0.5, stop=["\n"])

        call_kwargs = mock_groq.chat.completions.create.call_args.kwargs
        assert call_kwargs["messages"] == [
            {"role": "system", "content": "Classify"},
            {"role": "user", "content": "User message"},
        ]
        assert call_kwargs["temperature"] == 0.5
        assert call_kwargs["stop"] == ["\n"]

    @pytest.mark.asyncio
    async def test_complete_returns_empty_on_none_content(self) -> None:
        """Should return empty string if content is None."""
        client = GroqLLMClient(make_groq(None))
        assert await client.complete("Hello") == ""
