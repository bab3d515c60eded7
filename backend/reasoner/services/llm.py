"""
LLM service - structured and free-text calls to an OpenAI-compatible endpoint.
"""
import logging
from typing import Protocol, TypeVar

from openai import AsyncOpenAI, OpenAIError
from pydantic import BaseModel, ValidationError

from reasoner.config import Settings, get_settings
from reasoner.errors import ExternalServiceFailure, StepDecodeError

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def _extract_json(content: str) -> str:
    """Extract JSON from LLM response, handling markdown code blocks."""
    content = content.strip()
    if content.startswith("```"):
        first_newline = content.find("\n")
        if first_newline != -1:
            content = content[first_newline + 1:]
        if content.endswith("```"):
            content = content[:-3]
        content = content.strip()
    return content


class ChatModel(Protocol):
    """What the reasoning loop needs from a text-generation service."""

    async def generate(
        self,
        system: str,
        user: str,
        schema: type[SchemaT],
        model: str | None = None
    ) -> SchemaT: ...

    async def complete(self, system: str, user: str, model: str | None = None) -> str: ...


class OpenAIChatModel:
    """
    ChatModel over AsyncOpenAI chat completions.

    Holds no per-session state, so one instance can serve concurrent sessions.
    """

    def __init__(self, client: AsyncOpenAI, default_model: str, temperature: float = 0.2, max_tokens: int = 4096):
        self.client = client
        self.default_model = default_model
        self.temperature = temperature
        self.max_tokens = max_tokens

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "OpenAIChatModel":
        settings = settings or get_settings()
        client = AsyncOpenAI(
            api_key=settings.llm_api_key,
            base_url=settings.llm_base_url
        )
        return cls(
            client,
            default_model=settings.model_reasoning,
            temperature=settings.llm_temperature,
            max_tokens=settings.max_tokens
        )

    async def _call(self, system: str, user: str, model: str | None, json_mode: bool) -> str:
        kwargs = {}
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}  # Force valid JSON

        try:
            response = await self.client.chat.completions.create(
                model=model or self.default_model,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user}
                ],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                **kwargs
            )
        except OpenAIError as e:
            logger.error(f"LLM call failed: {e}")
            raise ExternalServiceFailure(f"LLM call failed: {e}") from e

        if not response.choices:
            logger.error("LLM call returned no choices")
            raise ExternalServiceFailure("LLM call returned no choices")

        content = response.choices[0].message.content or ""
        if response.usage:
            logger.debug(f"Tokens: prompt={response.usage.prompt_tokens}, "
                         f"completion={response.usage.completion_tokens}")
        logger.debug(f"LLM raw response:\n{content[:2000]}")
        return content

    async def generate(
        self,
        system: str,
        user: str,
        schema: type[SchemaT],
        model: str | None = None
    ) -> SchemaT:
        content = await self._call(system, user, model, json_mode=True)
        try:
            return schema.model_validate_json(_extract_json(content))
        except ValidationError as e:
            logger.warning(f"Response does not match {schema.__name__}: {e.error_count()} error(s)")
            logger.debug(f"Raw: {content[:500]}")
            raise StepDecodeError(f"LLM returned invalid {schema.__name__}: {e}", raw=content) from e

    async def complete(self, system: str, user: str, model: str | None = None) -> str:
        content = await self._call(system, user, model, json_mode=False)
        return content.strip()
