"""
Periodic reflection on reasoning progress.
"""
import logging

from reasoner.prompts import REFLECTION_SYSTEM_PROMPT, REFLECTION_USER_PROMPT
from reasoner.services.llm import ChatModel
from reasoner.services.reasoning.context import ReasoningContext

logger = logging.getLogger(__name__)


class ReflectionScheduler:
    """Asks the model to critique progress every `interval` iterations."""

    def __init__(self, llm: ChatModel, interval: int = 3, model: str | None = None):
        self.llm = llm
        self.interval = interval
        self.model = model

    def is_due(self, iteration: int) -> bool:
        return self.interval > 0 and iteration % self.interval == 0

    async def reflect(self, context: ReasoningContext) -> str:
        user = REFLECTION_USER_PROMPT.format(
            thoughts=" -> ".join(context.thoughts),
            key_findings=context.key_findings,
            unresolved_questions=context.unresolved_questions
        )
        reflection = await self.llm.complete(REFLECTION_SYSTEM_PROMPT, user, model=self.model)
        context.add_reflection(reflection)
        logger.info(f"[Reasoning] Reflection: {reflection[:200]}")
        return reflection

    async def maybe_reflect(self, iteration: int, context: ReasoningContext) -> str | None:
        if not self.is_due(iteration):
            return None
        return await self.reflect(context)
