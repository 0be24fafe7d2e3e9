"""
API Dependencies

Provides dependency injection for API endpoints.
Core components are built once at startup and held on app.state.
"""

from fastapi import Request

from skillsync.config.settings import Settings
from skillsync.core.ai_reasoning import AIReasoningLayer
from skillsync.core.interview_orchestrator import InterviewOrchestrator
from skillsync.storage import create_session_store


def build_orchestrator(settings: Settings) -> InterviewOrchestrator:
    """Wire the orchestrator with the configured store and AI provider."""
    return InterviewOrchestrator(
        store=create_session_store(settings),
        ai_reasoning=AIReasoningLayer(settings),
        settings=settings,
    )


def get_orchestrator(request: Request) -> InterviewOrchestrator:
    """Get the orchestrator created during application startup."""
    return request.app.state.orchestrator


async def cleanup(orchestrator: InterviewOrchestrator | None):
    """Cleanup resources on shutdown."""
    if orchestrator is None:
        return

    if orchestrator.ai_reasoning:
        await orchestrator.ai_reasoning.close()

    await orchestrator.store.close()
