"""
Lexical-diversity check over the most recent thoughts.
"""
import logging

logger = logging.getLogger(__name__)


class StagnationDetector:
    """Flags stagnation when recent thoughts mostly reuse the same words."""

    def __init__(self, window: int = 3, diversity_cutoff: float = 0.3):
        self.window = window
        self.diversity_cutoff = diversity_cutoff

    def diversity_ratio(self, thoughts: list[str]) -> float:
        """
        Unique tokens / total tokens over the last `window` thoughts.

        A window of verbatim repeats (case-insensitive, trimmed) scores 0.0.
        """
        last_n = thoughts[-self.window:]
        if len(last_n) > 1 and len({t.strip().lower() for t in last_n}) == 1 and last_n[0].strip():
            return 0.0
        token_lists = [t.split() for t in last_n]
        total = sum(len(tokens) for tokens in token_lists)
        if total == 0:
            return 1.0
        unique = set()
        for tokens in token_lists:
            unique.update(tokens)
        return len(unique) / total

    def is_stagnant(self, thoughts: list[str]) -> bool:
        if len(thoughts) < self.window:
            return False
        ratio = self.diversity_ratio(thoughts)
        logger.debug(f"[Reasoning] Diversity ratio over last {self.window} thoughts: {ratio:.2f}")
        return ratio < self.diversity_cutoff
