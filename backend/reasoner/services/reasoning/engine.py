"""
Reasoning Engine - bounded generate/validate/act/reflect loop.

Each cycle:
1. Generate the next step from the current context
2. Validate it (rejected steps are dropped but still use up the cycle)
3. Update the context with the accepted step
4. Run the requested action, if any
5. Reflect every few cycles
6. Check termination
After the loop the accumulated trace is synthesized into the final artifact.
"""
import logging
import time
from dataclasses import dataclass
from typing import Any

from reasoner.config import Settings, get_settings
from reasoner.errors import ExternalServiceFailure, StepDecodeError
from reasoner.schemas import ReasoningStep, TerminationReason
from reasoner.services.llm import ChatModel
from reasoner.services.reasoning.actions import ActionDispatcher, ActionInvoker, ToolRegistry
from reasoner.services.reasoning.context import ReasoningContext
from reasoner.services.reasoning.generator import StepGenerator
from reasoner.services.reasoning.profiles import ReasoningProfile
from reasoner.services.reasoning.reflection import ReflectionScheduler
from reasoner.services.reasoning.signals import RegexSignalExtractor, SignalExtractor
from reasoner.services.reasoning.stagnation import StagnationDetector
from reasoner.services.reasoning.synthesizer import OutputSynthesizer
from reasoner.services.reasoning.termination import TerminationPolicy
from reasoner.services.reasoning.validator import StepValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineConfig:
    """Loop thresholds and model selection for one engine."""
    max_iterations: int = 10
    confidence_threshold: float = 0.8
    min_thought_words: int = 15
    stagnation_window: int = 3
    diversity_cutoff: float = 0.3
    reflection_interval: int = 3
    recent_thoughts_capacity: int = 5
    fail_fast: bool = False
    step_model: str | None = None
    reflection_model: str | None = None
    synthesis_model: str | None = None

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "EngineConfig":
        settings = settings or get_settings()
        return cls(
            max_iterations=settings.reasoning_max_iterations,
            confidence_threshold=settings.reasoning_confidence_threshold,
            min_thought_words=settings.reasoning_min_thought_words,
            stagnation_window=settings.reasoning_stagnation_window,
            diversity_cutoff=settings.reasoning_diversity_cutoff,
            reflection_interval=settings.reasoning_reflection_interval,
            recent_thoughts_capacity=settings.reasoning_recent_thoughts_capacity,
            fail_fast=settings.reasoning_fail_fast,
            step_model=settings.model_reasoning,
            reflection_model=settings.model_reflection,
            synthesis_model=settings.model_synthesis
        )


@dataclass
class ReasoningResult:
    """Result of one reasoning session."""
    output: Any
    steps: list[ReasoningStep]       # Accepted steps only
    trace: str
    termination_reason: TerminationReason
    iterations: int
    generation_calls: int
    context: ReasoningContext
    total_duration_ms: int


class ReasoningEngine:
    """
    One loop implementation parameterized by a profile and a config.

    The engine keeps only read-only collaborators; every run() gets a fresh
    ReasoningContext, so a single engine can serve concurrent sessions.
    """

    def __init__(
        self,
        llm: ChatModel,
        profile: ReasoningProfile,
        config: EngineConfig | None = None,
        invoker: ActionInvoker | None = None,
        extractor: SignalExtractor | None = None
    ):
        self.profile = profile
        self.config = config or EngineConfig()
        cfg = self.config

        self.extractor = extractor or RegexSignalExtractor()
        self.generator = StepGenerator(
            llm,
            system_prompt=profile.step_system_prompt.format(min_words=cfg.min_thought_words),
            step_schema=profile.step_schema,
            model=cfg.step_model
        )
        self.validator = StepValidator(min_words=cfg.min_thought_words)
        self.dispatcher = ActionDispatcher(invoker or ToolRegistry())
        self.reflection = ReflectionScheduler(llm, interval=cfg.reflection_interval, model=cfg.reflection_model)
        self.termination = TerminationPolicy(
            max_iterations=cfg.max_iterations,
            confidence_threshold=cfg.confidence_threshold,
            stagnation=StagnationDetector(window=cfg.stagnation_window, diversity_cutoff=cfg.diversity_cutoff)
        )
        self.synthesizer = OutputSynthesizer(
            llm,
            system_prompt=profile.synthesis_system_prompt,
            user_prompt=profile.synthesis_user_prompt,
            output_schema=profile.output_schema,
            model=cfg.synthesis_model,
            review_model=cfg.reflection_model
        )

    def _absorb(self, error: ExternalServiceFailure, context: ReasoningContext, what: str) -> None:
        """Apply the configured failure policy to an external call error."""
        if self.config.fail_fast:
            logger.error(f"[Reasoning] {what} failed, aborting session: {error}")
            error.context = context
            raise error
        logger.error(f"[Reasoning] {what} failed, continuing: {error}")
        context.add_feedback(f"{what} failed: {error}")

    def _update_context(self, step: ReasoningStep, context: ReasoningContext) -> None:
        context.add_thought(step.thought)
        context.add_key_findings(step.key_findings)
        context.add_unresolved_questions(self.extractor.extract_questions(step.thought))
        context.add_confidence_score(step.confidence)
        context.add_mentioned_entities(self.extractor.extract_entities(step.thought))

    async def run(self, task: str | None = None, goal: str | None = None) -> ReasoningResult:
        """
        Run one session to completion.

        Raises:
            SynthesisError: final artifact could not be produced
            ExternalServiceFailure: only when fail_fast is configured
        """
        start_time = time.time()
        cfg = self.config

        context = ReasoningContext(
            task=task or self.profile.task,
            goal=goal or self.profile.goal,
            recent_thoughts_capacity=cfg.recent_thoughts_capacity
        )
        available_actions = self.dispatcher.available_actions()

        steps: list[ReasoningStep] = []
        reason = TerminationReason.MAX_ITERATIONS
        generation_calls = 0
        iterations = 0

        logger.info(f"[Reasoning] Starting {self.profile.name} session: {context.task[:80]}")

        for iteration in range(1, cfg.max_iterations + 1):
            iterations = iteration
            logger.info(f"[Reasoning] === Reasoning Cycle {iteration}/{cfg.max_iterations} ===")

            # 1. Generate
            step: ReasoningStep | None = None
            generation_calls += 1
            try:
                step = await self.generator.generate(context, available_actions)
            except StepDecodeError as e:
                logger.warning(f"[Reasoning] Step {iteration} could not be decoded: {e}")
            except ExternalServiceFailure as e:
                self._absorb(e, context, "Step generation")
                continue

            # 2. Validate
            validation = self.validator.validate(step, context)
            if not validation.valid:
                logger.warning(f"[Reasoning] Step {iteration} rejected: {validation.error}")
                context.add_feedback(
                    "; ".join([f"Previous step rejected: {validation.error}", *validation.suggestions])
                )
                continue
            if validation.suggestions:
                logger.debug(f"[Reasoning] Suggestions: {validation.suggestions}")

            # 3. Accept
            steps.append(step)
            self._update_context(step, context)
            logger.info(f"[Reasoning] Step {iteration} accepted: {step.thought[:200]}")
            logger.info(f"[Reasoning] Confidence: {step.confidence}, action needed: {step.action_needed}")

            # 4. Act
            if step.action_needed:
                try:
                    await self.dispatcher.dispatch(step.action_request, context)
                except ExternalServiceFailure as e:
                    self._absorb(e, context, "Action")

            # 5. Reflect
            try:
                await self.reflection.maybe_reflect(iteration, context)
            except ExternalServiceFailure as e:
                self._absorb(e, context, "Reflection")

            # 6. Terminate?
            stop = self.termination.check(step, context, iteration)
            if stop is not None:
                reason = stop
                logger.info(f"[Reasoning] Terminating after {iteration} cycles ({reason.value})")
                break

        synthesis = await self.synthesizer.synthesize(steps, context)

        total_duration_ms = int((time.time() - start_time) * 1000)
        logger.info(
            f"[Reasoning] Completed in {total_duration_ms}ms, {iterations} cycles, "
            f"{len(steps)} accepted steps, {len(context.observations)} observations"
        )

        return ReasoningResult(
            output=synthesis.output,
            steps=steps,
            trace=synthesis.trace,
            termination_reason=reason,
            iterations=iterations,
            generation_calls=generation_calls,
            context=context,
            total_duration_ms=total_duration_ms
        )
