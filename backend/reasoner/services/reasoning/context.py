"""
Per-session reasoning state.

A context is created by ReasoningEngine.run() and owned by that single session.
It is never shared between sessions.
"""
from collections import deque
from dataclasses import dataclass, field
from typing import Any


@dataclass
class ReasoningContext:
    """Accumulator for everything learned during one reasoning session."""
    task: str
    goal: str
    recent_thoughts_capacity: int = 5

    key_findings: list[str] = field(default_factory=list)
    unresolved_questions: list[str] = field(default_factory=list)
    feedback: list[str] = field(default_factory=list)
    reflections: list[str] = field(default_factory=list)
    observations: list[Any] = field(default_factory=list)
    confidence_scores: list[float] = field(default_factory=list)
    # dict keys keep insertion order and stay unique
    _entities: dict[str, None] = field(default_factory=dict, init=False, repr=False)
    thoughts: list[str] = field(default_factory=list)
    step_count: int = 0

    def __post_init__(self):
        self._recent: deque[str] = deque(maxlen=self.recent_thoughts_capacity)

    @property
    def recent_thoughts(self) -> list[str]:
        return list(self._recent)

    @property
    def mentioned_entities(self) -> list[str]:
        return list(self._entities)

    @property
    def latest_feedback(self) -> str | None:
        return self.feedback[-1] if self.feedback else None

    @property
    def latest_reflection(self) -> str | None:
        return self.reflections[-1] if self.reflections else None

    def add_thought(self, thought: str) -> None:
        if not thought or not thought.strip():
            return
        self._recent.append(thought)
        self.thoughts.append(thought)
        self.step_count += 1

    def add_feedback(self, item: str | None) -> None:
        if item and item.strip():
            self.feedback.append(item)

    def add_reflection(self, reflection: str | None) -> None:
        if reflection and reflection.strip():
            self.reflections.append(reflection)

    def add_observation(self, observation: Any) -> None:
        if observation is not None:
            self.observations.append(observation)

    def add_key_findings(self, findings: list[str] | None) -> None:
        for finding in findings or []:
            if finding and finding.strip():
                self.key_findings.append(finding)

    def add_unresolved_questions(self, questions: list[str] | None) -> None:
        for question in questions or []:
            if question and question.strip():
                self.unresolved_questions.append(question)

    def add_confidence_score(self, score: float | None) -> None:
        if score is not None:
            self.confidence_scores.append(score)

    def add_mentioned_entities(self, entities: list[str] | None) -> None:
        for entity in entities or []:
            if entity and entity.strip():
                self._entities.setdefault(entity, None)

    def has_seen_thought(self, thought: str) -> bool:
        """Case-insensitive, trimmed match against every accepted thought."""
        normalized = thought.strip().lower()
        return any(t.strip().lower() == normalized for t in self.thoughts)
