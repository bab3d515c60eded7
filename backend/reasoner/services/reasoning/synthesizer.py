"""
Output synthesizer - turns the accumulated trace into the final artifact.
"""
import json
import logging
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from reasoner.errors import ExternalServiceFailure, StepDecodeError, SynthesisError
from reasoner.prompts import (
    REVIEW_SYSTEM_PROMPT,
    REVIEW_USER_PROMPT,
    STRUCTURED_OUTPUT_INSTRUCTIONS,
)
from reasoner.schemas import ReasoningStep
from reasoner.services.llm import ChatModel
from reasoner.services.reasoning.context import ReasoningContext

logger = logging.getLogger(__name__)

STEP_DELIMITER = "\n---\n"
NO_STEPS_TRACE = "No valid reasoning steps"

STEP_TEMPLATE = """Step: {thought}
Confidence: {confidence}
Key Findings: {key_findings}"""


@dataclass
class SynthesisOutput:
    output: Any  # Instance of the output schema, or text
    trace: str
    reviewed: bool


def format_trace(steps: list[ReasoningStep]) -> str:
    """One block per accepted step, separated by STEP_DELIMITER."""
    if not steps:
        return NO_STEPS_TRACE
    return STEP_DELIMITER.join(
        STEP_TEMPLATE.format(
            thought=step.thought,
            confidence=f"{step.confidence:.2f}" if step.confidence is not None else "n/a",
            key_findings=step.key_findings or []
        )
        for step in steps
    )


def format_observations(observations: list[Any]) -> str:
    if not observations:
        return "None"
    return "\n".join(f"- {obs}" for obs in observations)


class OutputSynthesizer:
    """Review pass (when the loop never reached done) followed by one final generation call."""

    def __init__(
        self,
        llm: ChatModel,
        system_prompt: str,
        user_prompt: str,
        output_schema: type[BaseModel] | None = None,
        model: str | None = None,
        review_model: str | None = None
    ):
        self.llm = llm
        self.system_prompt = system_prompt
        self.user_prompt = user_prompt
        self.output_schema = output_schema
        self.model = model
        self.review_model = review_model

    async def review(self, trace: str) -> str:
        return await self.llm.complete(
            REVIEW_SYSTEM_PROMPT,
            REVIEW_USER_PROMPT.format(trace=trace),
            model=self.review_model
        )

    async def synthesize(self, steps: list[ReasoningStep], context: ReasoningContext) -> SynthesisOutput:
        """
        Produce the final artifact.

        Raises:
            SynthesisError: review or final call failed; carries the context and trace
        """
        trace = format_trace(steps)
        reviewed = not any(step.done for step in steps)

        try:
            if reviewed:
                logger.info("[Reasoning] No completion reached, adding review step")
                trace = f"{trace}{STEP_DELIMITER}Review: {await self.review(trace)}"

            user = self.user_prompt.format(
                task=context.task,
                goal=context.goal,
                trace=trace,
                observations=format_observations(context.observations),
                key_findings=context.key_findings
            )

            if self.output_schema is None:
                output = await self.llm.complete(self.system_prompt, user, model=self.model)
            else:
                system = self.system_prompt + STRUCTURED_OUTPUT_INSTRUCTIONS.format(
                    schema=json.dumps(self.output_schema.model_json_schema())
                )
                output = await self.llm.generate(system, user, self.output_schema, model=self.model)

        except (ExternalServiceFailure, StepDecodeError) as e:
            logger.error(f"[Reasoning] Synthesis failed: {e}")
            raise SynthesisError(f"Synthesis failed: {e}", context=context, trace=trace) from e

        return SynthesisOutput(output=output, trace=trace, reviewed=reviewed)
