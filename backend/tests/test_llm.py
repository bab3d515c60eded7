"""Tests for the OpenAI-backed ChatModel."""

import pytest
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

from openai import OpenAIError

from reasoner.errors import ExternalServiceFailure, StepDecodeError
from reasoner.schemas import ReasoningStep, ThoughtStep
from reasoner.services.llm import OpenAIChatModel, _extract_json


def _client(content: str | None) -> MagicMock:
    mock_response = MagicMock()
    mock_response.choices = [MagicMock()]
    mock_response.choices[0].message.content = content
    mock_response.usage = None

    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=mock_response)
    return client


class TestExtractJson:
    def test_plain(self) -> None:
        assert _extract_json('  {"a": 1} ') == '{"a": 1}'

    def test_markdown_fence(self) -> None:
        assert _extract_json('```json\n{"a": 1}\n```') == '{"a": 1}'


class TestOpenAIChatModel:
    @pytest.mark.asyncio
    async def test_generate_decodes_step(self) -> None:
        client = _client('{"thought": "look at the early career", "done": false, "confidence": 0.7}')
        model = OpenAIChatModel(client, default_model="test-model")

        step = await model.generate("system", "user", ReasoningStep)

        assert step.thought == "look at the early career"
        assert step.confidence == 0.7
        call_kwargs = client.chat.completions.create.call_args.kwargs
        assert call_kwargs["model"] == "test-model"
        assert call_kwargs["response_format"] == {"type": "json_object"}
        assert call_kwargs["messages"] == [
            {"role": "system", "content": "system"},
            {"role": "user", "content": "user"},
        ]

    @pytest.mark.asyncio
    async def test_generate_with_model_override(self) -> None:
        client = _client('{"thought": "x", "done": true}')
        model = OpenAIChatModel(client, default_model="test-model")

        await model.generate("s", "u", ThoughtStep, model="other-model")

        assert client.chat.completions.create.call_args.kwargs["model"] == "other-model"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", [
        "not json at all",
        '{"done": false}',
        '{"thought": "x", "done": false, "confidence": 1.5}',
        '{"thought": "x", "done": false, "action_needed": true}',
        None,
    ])
    async def test_generate_decode_errors(self, content) -> None:
        model = OpenAIChatModel(_client(content), default_model="m")

        with pytest.raises(StepDecodeError):
            await model.generate("s", "u", ReasoningStep)

    @pytest.mark.asyncio
    async def test_complete_returns_text_without_json_mode(self) -> None:
        client = _client("  A reflection.  ")
        model = OpenAIChatModel(client, default_model="m")

        text = await model.complete("s", "u")

        assert text == "A reflection."
        assert "response_format" not in client.chat.completions.create.call_args.kwargs

    @pytest.mark.asyncio
    async def test_service_errors_are_wrapped(self) -> None:
        client = MagicMock()
        client.chat.completions.create = AsyncMock(side_effect=OpenAIError("rate limited"))
        model = OpenAIChatModel(client, default_model="m")

        with pytest.raises(ExternalServiceFailure):
            await model.complete("s", "u")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("choices", [[], None])
    async def test_response_without_choices_is_service_failure(self, choices) -> None:
        client = MagicMock()
        client.chat.completions.create = AsyncMock(return_value=SimpleNamespace(choices=choices, usage=None))
        model = OpenAIChatModel(client, default_model="m")

        with pytest.raises(ExternalServiceFailure, match="no choices"):
            await model.generate("s", "u", ReasoningStep)
        with pytest.raises(ExternalServiceFailure, match="no choices"):
            await model.complete("s", "u")
