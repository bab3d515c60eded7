"""
Termination policy - when to stop generating steps.
"""
import logging

from reasoner.schemas import ReasoningStep, TerminationReason
from reasoner.services.reasoning.context import ReasoningContext
from reasoner.services.reasoning.stagnation import StagnationDetector

logger = logging.getLogger(__name__)


class TerminationPolicy:
    """Independent stop conditions, any one of which ends the loop."""

    def __init__(
        self,
        max_iterations: int = 10,
        confidence_threshold: float = 0.8,
        stagnation: StagnationDetector | None = None
    ):
        self.max_iterations = max_iterations
        self.confidence_threshold = confidence_threshold
        self.stagnation = stagnation or StagnationDetector()

    def check(self, step: ReasoningStep, context: ReasoningContext, iteration: int) -> TerminationReason | None:
        """Return why the loop should stop, or None to continue."""
        if step.done:
            return TerminationReason.DONE

        if (
            step.confidence is not None
            and step.confidence >= self.confidence_threshold
            and not context.unresolved_questions
        ):
            return TerminationReason.CONFIDENT

        if iteration >= self.max_iterations:
            logger.warning("[Reasoning] Max iterations reached without completion")
            return TerminationReason.MAX_ITERATIONS

        if self.stagnation.is_stagnant(context.recent_thoughts):
            logger.warning("[Reasoning] Reasoning appears stagnant - terminating")
            return TerminationReason.STAGNATION

        return None
