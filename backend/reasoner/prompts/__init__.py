"""
Centralized prompts for the reasoning service.

All prompts are organized by component:
- reasoning: step generation, reflection and review prompts
- synthesis: final artifact prompts per profile
"""

from reasoner.prompts.reasoning import (
    REASONING_STEP_SYSTEM_PROMPT,
    THOUGHT_STEP_SYSTEM_PROMPT,
    REASONING_CONTEXT_PROMPT,
    REASONING_USER_PROMPT,
    REFLECTION_SYSTEM_PROMPT,
    REFLECTION_USER_PROMPT,
    REVIEW_SYSTEM_PROMPT,
    REVIEW_USER_PROMPT,
)

from reasoner.prompts.synthesis import (
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
    STRUCTURED_OUTPUT_INSTRUCTIONS,
)

__all__ = [
    # Reasoning loop
    "REASONING_STEP_SYSTEM_PROMPT",
    "THOUGHT_STEP_SYSTEM_PROMPT",
    "REASONING_CONTEXT_PROMPT",
    "REASONING_USER_PROMPT",
    "REFLECTION_SYSTEM_PROMPT",
    "REFLECTION_USER_PROMPT",
    "REVIEW_SYSTEM_PROMPT",
    "REVIEW_USER_PROMPT",
    # Synthesis
    "FILMOGRAPHY_TASK",
    "FILMOGRAPHY_GOAL",
    "FILMOGRAPHY_SYSTEM_PROMPT",
    "FILMOGRAPHY_USER_PROMPT",
    "ISSUE_OPERATION_TASK",
    "ISSUE_OPERATION_GOAL",
    "ISSUE_OPERATION_SYSTEM_PROMPT",
    "ISSUE_OPERATION_USER_PROMPT",
    "GENERIC_SYSTEM_PROMPT",
    "GENERIC_USER_PROMPT",
    "STRUCTURED_OUTPUT_INSTRUCTIONS",
]
