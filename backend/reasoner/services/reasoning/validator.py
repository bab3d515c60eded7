"""
Step validator - acceptance rules for generated reasoning steps.

Blocking rules reject the step; suggestions are advisory only.
"""
import logging
import re

from reasoner.schemas import ReasoningStep, ValidationResult
from reasoner.services.reasoning.context import ReasoningContext

logger = logging.getLogger(__name__)

UNCERTAINTY_MARKERS = ("i don't know", "not sure")
WORD_PATTERN = re.compile(r"\w+(?:'\w+)*")


class StepValidator:
    """Decides whether a generated step may enter the trace."""

    def __init__(self, min_words: int = 15):
        self.min_words = min_words

    def validate(self, step: ReasoningStep | None, context: ReasoningContext) -> ValidationResult:
        if step is None:
            return ValidationResult(valid=False, error="Step is missing")

        errors = []
        suggestions = []
        thought = step.thought
        word_count = len(thought.split())

        # Blocking: depth of reasoning
        if word_count < self.min_words:
            errors.append(f"Thought too brief ({word_count} words, need {self.min_words})")
            suggestions.append("Expand reasoning with more analysis")

        # Blocking: loops
        if context.has_seen_thought(thought):
            errors.append("Duplicate thought detected")
            suggestions.append("Build on previous findings instead of repeating them")

        # Advisory
        lower = thought.lower()
        if any(marker in lower for marker in UNCERTAINTY_MARKERS):
            suggestions.append("Re-frame uncertainty as specific questions to investigate")

        if step.confidence is not None and step.confidence > 0.9 and step.action_needed:
            suggestions.append("High confidence with action needed - consider if action is necessary")

        if context.thoughts and not errors:
            previous_words = WORD_PATTERN.findall(context.thoughts[-1].lower())
            if previous_words and previous_words[0] not in WORD_PATTERN.findall(lower):
                suggestions.append("Weak connection to previous thought - reference what was established")

        if errors:
            return ValidationResult(valid=False, error="; ".join(errors), suggestions=suggestions)
        return ValidationResult(valid=True, suggestions=suggestions)
