"""
Reasoning profiles - the per-use-case parts of a session (prompts and schemas).

The loop itself is shared; a profile only decides what is asked and what comes out.
"""
from dataclasses import dataclass

from pydantic import BaseModel

from reasoner.prompts import (
    REASONING_STEP_SYSTEM_PROMPT,
    THOUGHT_STEP_SYSTEM_PROMPT,
    FILMOGRAPHY_TASK,
    FILMOGRAPHY_GOAL,
    FILMOGRAPHY_SYSTEM_PROMPT,
    FILMOGRAPHY_USER_PROMPT,
    ISSUE_OPERATION_TASK,
    ISSUE_OPERATION_GOAL,
    ISSUE_OPERATION_SYSTEM_PROMPT,
    ISSUE_OPERATION_USER_PROMPT,
    GENERIC_SYSTEM_PROMPT,
    GENERIC_USER_PROMPT,
)
from reasoner.schemas import Filmography, IssueOperationProposal, ReasoningStep, ThoughtStep


@dataclass(frozen=True)
class ReasoningProfile:
    name: str
    task: str
    goal: str
    step_schema: type[ThoughtStep]
    step_system_prompt: str          # Formatted with {min_words}
    synthesis_system_prompt: str
    synthesis_user_prompt: str
    output_schema: type[BaseModel] | None = None  # None: free-text output


def filmography_profile() -> ReasoningProfile:
    return ReasoningProfile(
        name="filmography",
        task=FILMOGRAPHY_TASK,
        goal=FILMOGRAPHY_GOAL,
        step_schema=ReasoningStep,
        step_system_prompt=REASONING_STEP_SYSTEM_PROMPT,
        synthesis_system_prompt=FILMOGRAPHY_SYSTEM_PROMPT,
        synthesis_user_prompt=FILMOGRAPHY_USER_PROMPT,
        output_schema=Filmography
    )


def issue_operation_profile(issue_id: str, request: str) -> ReasoningProfile:
    """Reduced {thought, done} steps; the artifact is a proposal, no actions are requested by the model."""
    return ReasoningProfile(
        name="issue_operation",
        task=ISSUE_OPERATION_TASK.format(request=request, issue_id=issue_id),
        goal=ISSUE_OPERATION_GOAL.format(issue_id=issue_id),
        step_schema=ThoughtStep,
        step_system_prompt=THOUGHT_STEP_SYSTEM_PROMPT,
        synthesis_system_prompt=ISSUE_OPERATION_SYSTEM_PROMPT,
        synthesis_user_prompt=ISSUE_OPERATION_USER_PROMPT,
        output_schema=IssueOperationProposal
    )


def generic_profile(task: str, goal: str) -> ReasoningProfile:
    return ReasoningProfile(
        name="generic",
        task=task,
        goal=goal,
        step_schema=ReasoningStep,
        step_system_prompt=REASONING_STEP_SYSTEM_PROMPT,
        synthesis_system_prompt=GENERIC_SYSTEM_PROMPT,
        synthesis_user_prompt=GENERIC_USER_PROMPT,
        output_schema=None
    )
