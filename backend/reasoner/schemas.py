from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TerminationReason(str, Enum):
    """Why the reasoning loop stopped."""
    DONE = "done"                      # Step reported done=true
    CONFIDENT = "confident"            # Confidence over threshold, nothing unresolved
    MAX_ITERATIONS = "max_iterations"  # Iteration budget spent (normal exit)
    STAGNATION = "stagnation"          # Recent thoughts repeat themselves


# =============================================================================
# Reasoning steps (model output schemas)
# =============================================================================

class ThoughtStep(BaseModel):
    """Reduced step schema: a thought and a completion flag."""
    model_config = ConfigDict(frozen=True)

    thought: str = Field(..., min_length=1, description="Analytical thought for this step")
    done: bool = Field(..., description="True when ready to produce the final output")

    def as_reasoning_step(self) -> "ReasoningStep":
        return ReasoningStep(thought=self.thought, done=self.done)


class ReasoningStep(ThoughtStep):
    """One generated reasoning unit with optional action request."""
    action_needed: bool = Field(default=False, description="Whether an external action should run")
    confidence: float | None = Field(default=None, ge=0.0, le=1.0)
    action_request: dict[str, Any] | None = Field(
        default=None,
        description="Tool call request, e.g. {\"name\": ..., \"arguments\": {...}}"
    )
    key_findings: list[str] | None = None

    @model_validator(mode="after")
    def _check_action_request(self) -> "ReasoningStep":
        if self.action_needed and not self.action_request:
            raise ValueError("action_request is required when action_needed is true")
        return self

    def as_reasoning_step(self) -> "ReasoningStep":
        return self


class ValidationResult(BaseModel):
    """Outcome of step validation. Suggestions never block acceptance."""
    valid: bool
    error: str | None = None
    suggestions: list[str] = Field(default_factory=list)


# =============================================================================
# Final artifacts
# =============================================================================

class FilmEntry(BaseModel):
    title: str
    year: int | None = None
    role: str | None = None


class FilmCategory(BaseModel):
    name: str = Field(..., description="e.g. Major Roles, Supporting Roles, Cameos")
    films: list[FilmEntry] = Field(default_factory=list)


class Filmography(BaseModel):
    """Structured filmography produced from the reasoning trace."""
    actor_overview: str
    film_categories: list[FilmCategory] = Field(default_factory=list)
    timeline_analysis: str = ""
    notable_collaborations: list[str] = Field(default_factory=list)
    career_highlights: list[str] = Field(default_factory=list)
    gaps: list[str] = Field(default_factory=list, description="Information that could not be established")


class IssueOperationProposal(BaseModel):
    """Operation the reasoning settled on for an issue. Nothing is executed against the tracker."""
    issue_id: str
    operation: str = Field(..., description="show, status, comment, assign or transition")
    details: str = Field("", description="Comment text, assignee or target status, when the operation needs one")
    rationale: str = ""


# =============================================================================
# API schemas
# =============================================================================

class IssueOperationRequest(BaseModel):
    """Request to reason about an issue operation and propose it."""
    issue_id: str = Field(..., min_length=1, description="Issue id or readable id")
    request: str = Field(
        ...,
        description="What to do with the issue, e.g. 'show', 'comment: ...', 'assign to bob', 'close'",
        min_length=1,
        max_length=2000
    )


class ReasoningRunRequest(BaseModel):
    """Request for a free-form reasoning session."""
    task: str = Field(..., min_length=1, max_length=4000)
    goal: str = Field(..., min_length=1, max_length=2000)


class ReasoningStepInfo(BaseModel):
    """Information about a single accepted step."""
    thought: str
    done: bool
    action_needed: bool = False
    confidence: float | None = None
    key_findings: list[str] = Field(default_factory=list)


class ReasoningResponse(BaseModel):
    """Response from a reasoning session."""
    output: Any = Field(..., description="Final artifact (structured or text)")
    termination_reason: TerminationReason
    iterations: int = Field(default=0, description="Generation cycles used")
    accepted_steps: int = Field(default=0)
    total_duration_ms: int = Field(default=0, description="Total execution time in ms")
    trace: str = Field(default="", description="Reasoning trace passed to synthesis")
    observations: list[str] = Field(default_factory=list)

    # Execution trace (verbose)
    steps: list[ReasoningStepInfo] = Field(default_factory=list)
