"""
Step generator - asks the model for the next reasoning step.
"""
import logging

from reasoner.prompts import REASONING_CONTEXT_PROMPT, REASONING_USER_PROMPT
from reasoner.schemas import ReasoningStep, ThoughtStep
from reasoner.services.llm import ChatModel
from reasoner.services.reasoning.context import ReasoningContext

logger = logging.getLogger(__name__)

TOP_FINDINGS = 3


def determine_focus_area(context: ReasoningContext) -> str:
    """Label for what the next step should concentrate on, from the latest open question."""
    if not context.unresolved_questions:
        return "synthesize findings"

    latest_question = context.unresolved_questions[-1].lower()

    if "film" in latest_question:
        return "research films/roles"
    elif "year" in latest_question or "time" in latest_question:
        return "establish timeline"
    elif "category" in latest_question or "type" in latest_question:
        return "categorize"

    return "general research"


class StepGenerator:
    """Builds the context prompt and decodes one step per call."""

    def __init__(
        self,
        llm: ChatModel,
        system_prompt: str,
        step_schema: type[ThoughtStep] = ReasoningStep,
        model: str | None = None
    ):
        self.llm = llm
        self.system_prompt = system_prompt
        self.step_schema = step_schema
        self.model = model

    def build_prompt(self, context: ReasoningContext, available_actions: str = "") -> str:
        return REASONING_CONTEXT_PROMPT.format(
            task=context.task,
            goal=context.goal,
            step_count=context.step_count,
            previous_thought=context.thoughts[-1] if context.thoughts else "None",
            key_findings=context.key_findings[:TOP_FINDINGS],
            unresolved_questions=context.unresolved_questions,
            feedback=context.latest_feedback or "None",
            reflection=context.latest_reflection or "None",
            available_actions=available_actions,
            focus_area=determine_focus_area(context)
        )

    async def generate(self, context: ReasoningContext, available_actions: str = "") -> ReasoningStep:
        """
        Request the next step.

        Raises:
            StepDecodeError: response did not match the step schema
            ExternalServiceFailure: the model call itself failed
        """
        system = f"{self.system_prompt}\n\n{self.build_prompt(context, available_actions)}"
        step = await self.llm.generate(system, REASONING_USER_PROMPT, self.step_schema, model=self.model)
        return step.as_reasoning_step()
