"""
Heuristic text signals pulled out of free-form thoughts.

Both extractors are best-effort regex heuristics, not real language understanding.
Entity extraction in particular also picks up sentence-initial capitalised words.
The loop only depends on the SignalExtractor protocol, so a proper NER/question
detection component can replace RegexSignalExtractor without touching it.
"""
import re
from typing import Protocol

FALLBACK_QUESTION = "What information is missing?"
MISSING_INFO_MARKERS = ("missing", "need", "unknown", "to find")

MIN_QUESTION_LENGTH = 5
MAX_QUESTIONS = 5
MAX_ENTITIES = 10

_SENTENCE_BOUNDARY = re.compile(r"[\n\r.]+")
# 1-4 consecutive capitalised words (Upper followed by lowercase letters)
_ENTITY_PATTERN = re.compile(r"\b[A-Z][a-z]+(?:\s+[A-Z][a-z]+){0,3}\b")


class SignalExtractor(Protocol):
    def extract_questions(self, thought: str) -> list[str]: ...

    def extract_entities(self, thought: str) -> list[str]: ...


def _unique(items: list[str], limit: int) -> list[str]:
    seen: dict[str, None] = {}
    for item in items:
        seen.setdefault(item, None)
        if len(seen) >= limit:
            break
    return list(seen)


def extract_unresolved_questions(thought: str) -> list[str]:
    """
    Pull open questions out of a thought.

    Every '?'-terminated fragment contributes the last sentence before its '?'.
    Text after the final '?' is not a question. When there is no '?' at all but the
    thought talks about missing information, a generic fallback question is returned.
    """
    if not thought or not thought.strip():
        return []

    questions = []
    if "?" in thought:
        for fragment in thought.split("?")[:-1]:
            if not fragment.strip():
                continue
            sentences = [s.strip() for s in _SENTENCE_BOUNDARY.split(fragment) if s.strip()]
            if sentences:
                questions.append(sentences[-1] + "?")
    else:
        lower = thought.lower()
        if any(marker in lower for marker in MISSING_INFO_MARKERS):
            questions.append(FALLBACK_QUESTION)

    questions = [q.strip() for q in questions if len(q.strip()) >= MIN_QUESTION_LENGTH]
    return _unique(questions, MAX_QUESTIONS)


def extract_entities(thought: str) -> list[str]:
    """Capitalised word runs, in first-seen order."""
    if not thought or not thought.strip():
        return []

    candidates = [m.group().strip() for m in _ENTITY_PATTERN.finditer(thought)]
    return _unique([c for c in candidates if len(c) >= 2], MAX_ENTITIES)


class RegexSignalExtractor:
    """Default SignalExtractor backed by the regex heuristics above."""

    def extract_questions(self, thought: str) -> list[str]:
        return extract_unresolved_questions(thought)

    def extract_entities(self, thought: str) -> list[str]:
        return extract_entities(thought)
