"""
Error taxonomy for reasoning sessions.
"""
from typing import Any


class ReasoningError(Exception):
    """Base class for reasoning session failures."""
    context: Any = None  # Partial ReasoningContext, when the session got that far


class StepDecodeError(ReasoningError):
    """Model response did not match the requested schema."""

    def __init__(self, message: str, raw: str | None = None):
        super().__init__(message)
        self.raw = raw


class ExternalServiceFailure(ReasoningError):
    """The text-generation service or an action collaborator raised."""


class SynthesisError(ReasoningError):
    """Final artifact could not be produced. Terminal for the session."""

    def __init__(self, message: str, context: Any = None, trace: str = ""):
        super().__init__(message)
        self.context = context
        self.trace = trace
