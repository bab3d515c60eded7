"""
Reasoning API routes - iterative reasoning sessions that end in a synthesized artifact.
"""
import logging
import traceback

from fastapi import APIRouter, HTTPException

from reasoner.config import get_settings
from reasoner.errors import ExternalServiceFailure, SynthesisError
from reasoner.schemas import (
    IssueOperationRequest,
    ReasoningResponse,
    ReasoningRunRequest,
    ReasoningStepInfo,
)
from reasoner.services.llm import OpenAIChatModel
from reasoner.services.reasoning import (
    EngineConfig,
    ReasoningEngine,
    ReasoningProfile,
    ReasoningResult,
    filmography_profile,
    generic_profile,
    issue_operation_profile,
)

logger = logging.getLogger(__name__)
router = APIRouter()
settings = get_settings()


def create_engine(profile: ReasoningProfile) -> ReasoningEngine:
    """Engine for one request, wired from settings."""
    return ReasoningEngine(
        llm=OpenAIChatModel.from_settings(settings),
        profile=profile,
        config=EngineConfig.from_settings(settings)
    )


def to_response(result: ReasoningResult) -> ReasoningResponse:
    steps = [
        ReasoningStepInfo(
            thought=step.thought,
            done=step.done,
            action_needed=step.action_needed,
            confidence=step.confidence,
            key_findings=step.key_findings or []
        )
        for step in result.steps
    ] if settings.reasoning_verbose else []

    output = result.output
    if hasattr(output, "model_dump"):
        output = output.model_dump()

    return ReasoningResponse(
        output=output,
        termination_reason=result.termination_reason,
        iterations=result.iterations,
        accepted_steps=len(result.steps),
        total_duration_ms=result.total_duration_ms,
        trace=result.trace,
        observations=[str(obs)[:500] for obs in result.context.observations],  # Truncate long observations
        steps=steps
    )


async def run_session(profile: ReasoningProfile) -> ReasoningResponse:
    try:
        result = await create_engine(profile).run()
        return to_response(result)

    except (SynthesisError, ExternalServiceFailure) as e:
        logger.error(f"[Reasoning] Upstream error: {e}")
        raise HTTPException(
            status_code=502,
            detail=f"Reasoning session failed: {str(e)}"
        )
    except Exception as e:
        logger.error(f"[Reasoning] Error: {e}")
        logger.debug(f"[Reasoning] Traceback: {traceback.format_exc()}")
        raise HTTPException(
            status_code=500,
            detail=f"Reasoning session failed: {str(e)}"
        )


@router.get("/filmography", response_model=ReasoningResponse)
async def generate_filmography() -> ReasoningResponse:
    """
    Reason step-by-step about a random actor, then produce a structured filmography.
    """
    logger.info("[Reasoning] Request: filmography")
    return await run_session(filmography_profile())


@router.post("/issue-operation", response_model=ReasoningResponse)
async def issue_operation(request: IssueOperationRequest) -> ReasoningResponse:
    """
    Reason about an operation on an issue (show, status, comment, assign, transition)
    using short {thought, done} steps, then return the proposed operation.
    The operation is not executed.
    """
    logger.info(f"[Reasoning] Request: issue={request.issue_id}, request={request.request[:50]}...")
    return await run_session(issue_operation_profile(request.issue_id, request.request))


@router.post("/run", response_model=ReasoningResponse)
async def run_reasoning(request: ReasoningRunRequest) -> ReasoningResponse:
    """Free-form reasoning session with a text answer."""
    logger.info(f"[Reasoning] Request: task={request.task[:50]}...")
    return await run_session(generic_profile(request.task, request.goal))
