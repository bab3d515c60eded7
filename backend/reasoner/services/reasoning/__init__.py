"""
Reasoning loop - iterative step generation toward a goal.

The engine repeatedly:
1. Asks the model for the next reasoning step
2. Validates and records it
3. Runs a requested action and reflects periodically
4. Stops on completion, confidence, stagnation or the iteration limit
and finally synthesizes a structured artifact from the trace.
"""

from .engine import EngineConfig, ReasoningEngine, ReasoningResult
from .profiles import ReasoningProfile, filmography_profile, generic_profile, issue_operation_profile

__all__ = [
    "EngineConfig",
    "ReasoningEngine",
    "ReasoningResult",
    "ReasoningProfile",
    "filmography_profile",
    "generic_profile",
    "issue_operation_profile",
]
