"""
Interview API endpoints

Handles interview session lifecycle:
- Creating sessions
- Starting interviews
- Submitting answers
- Completing or abandoning interviews
- History and analytics
"""

from typing import Generic, TypeVar

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from skillsync.api.dependencies import get_orchestrator
from skillsync.api.security import get_current_user_id
from skillsync.core.interview_orchestrator import InterviewOrchestrator
from skillsync.models.base import CamelModel
from skillsync.models.interview import InterviewSession, InterviewSetup
from skillsync.models.report import HistoryEntry, InterviewAnalytics

router = APIRouter()

T = TypeVar("T")


# ============================================================================
# REQUEST/RESPONSE MODELS
# ============================================================================

class ApiResponse(BaseModel, Generic[T]):
    """Envelope wrapping every successful response."""
    success: bool = True
    data: T


class AnswerRequest(CamelModel):
    """Request model for submitting an answer."""
    answer: str
    time_spent: float | None = Field(default=None, ge=0)


# ============================================================================
# SESSION ENDPOINTS
# ============================================================================

@router.post(
    "/session",
    response_model=ApiResponse[InterviewSession],
    status_code=status.HTTP_201_CREATED,
)
async def create_session(
    setup: InterviewSetup,
    user_id: str = Depends(get_current_user_id),
    orchestrator: InterviewOrchestrator = Depends(get_orchestrator),
):
    """
    Create a new interview session.

    Questions are generated up front; the session starts in
    not_started state.
    """
    session = await orchestrator.create_session(user_id, setup)
    return ApiResponse(data=session)


@router.get("/session/{session_id}", response_model=ApiResponse[InterviewSession])
async def get_session(
    session_id: str,
    user_id: str = Depends(get_current_user_id),
    orchestrator: InterviewOrchestrator = Depends(get_orchestrator),
):
    """Get an interview session."""
    session = await orchestrator.get_session(session_id, user_id)
    return ApiResponse(data=session)


@router.put("/session/{session_id}/start", response_model=ApiResponse[InterviewSession])
async def start_session(
    session_id: str,
    user_id: str = Depends(get_current_user_id),
    orchestrator: InterviewOrchestrator = Depends(get_orchestrator),
):
    """Start the interview."""
    session = await orchestrator.start_session(session_id, user_id)
    return ApiResponse(data=session)


@router.put(
    "/session/{session_id}/answer/{question_id}",
    response_model=ApiResponse[InterviewSession],
)
async def submit_answer(
    session_id: str,
    question_id: str,
    request: AnswerRequest,
    user_id: str = Depends(get_current_user_id),
    orchestrator: InterviewOrchestrator = Depends(get_orchestrator),
):
    """
    Submit an answer for one question.

    The answer is scored and session statistics are refreshed.
    """
    session = await orchestrator.submit_answer(
        session_id=session_id,
        owner_id=user_id,
        question_id=question_id,
        answer=request.answer,
        time_spent=request.time_spent,
    )
    return ApiResponse(data=session)


@router.put("/session/{session_id}/complete", response_model=ApiResponse[InterviewSession])
async def complete_session(
    session_id: str,
    user_id: str = Depends(get_current_user_id),
    orchestrator: InterviewOrchestrator = Depends(get_orchestrator),
):
    """Complete the interview and compute results."""
    session = await orchestrator.complete_session(session_id, user_id)
    return ApiResponse(data=session)


@router.put("/session/{session_id}/abandon", response_model=ApiResponse[InterviewSession])
async def abandon_session(
    session_id: str,
    user_id: str = Depends(get_current_user_id),
    orchestrator: InterviewOrchestrator = Depends(get_orchestrator),
):
    """Abandon an in-progress interview."""
    session = await orchestrator.abandon_session(session_id, user_id)
    return ApiResponse(data=session)


# ============================================================================
# HISTORY & ANALYTICS
# ============================================================================

@router.get("/history", response_model=ApiResponse[list[HistoryEntry]])
async def get_history(
    user_id: str = Depends(get_current_user_id),
    orchestrator: InterviewOrchestrator = Depends(get_orchestrator),
):
    """Get the caller's past sessions, newest first."""
    history = await orchestrator.get_history(user_id)
    return ApiResponse(data=history)


@router.get("/analytics", response_model=ApiResponse[InterviewAnalytics])
async def get_analytics(
    user_id: str = Depends(get_current_user_id),
    orchestrator: InterviewOrchestrator = Depends(get_orchestrator),
):
    """Get performance analytics over the caller's completed sessions."""
    analytics = await orchestrator.get_analytics(user_id)
    return ApiResponse(data=analytics)
