"""Shared fixtures for SkillSync tests."""

import random

import pytest
from fastapi.testclient import TestClient

from skillsync.api.dependencies import get_orchestrator
from skillsync.api.security import create_access_token
from skillsync.config.settings import Settings, get_settings
from skillsync.core.interview_orchestrator import InterviewOrchestrator
from skillsync.core.question_parser import TextQuestionParser
from skillsync.storage.memory import InMemorySessionStore


QUESTION_TEXT = """1. How would you design a caching system for a read-heavy API?
Answer: Cache aside with TTL based eviction and metrics.
2. Tell me about a conflict in your team and how you resolved it.
Answer: Listen first, align on goals, agree on next steps.
3. How would you store user sessions for fast lookup?
Answer: A hash map keyed by session id.
4. Explain the architecture of a service you built.
Answer: Layers, boundaries, data flow and deployment.
5. What would you do if a deadline slipped?
Answer: Communicate early and renegotiate scope."""


class StubAIReasoning:
    """AI layer double returning fixed question text."""

    provider_name = "stub"

    def __init__(self, text: str = QUESTION_TEXT):
        self.text = text
        self.calls: list[tuple[str, list[str]]] = []

    async def generate_interview_questions(self, job_role: str, skills: list[str]) -> str:
        self.calls.append((job_role, skills))
        return self.text

    async def close(self):
        return None


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        openai_api_key="",
        gemini_api_key="",
        jwt_secret_key="test-secret",
        storage_backend="memory",
        default_job_role="Software Developer",
    )


@pytest.fixture
def ai_stub():
    return StubAIReasoning()


@pytest.fixture
def store():
    return InMemorySessionStore()


@pytest.fixture
def orchestrator(store, ai_stub, settings):
    return InterviewOrchestrator(
        store=store,
        ai_reasoning=ai_stub,
        question_parser=TextQuestionParser(rng=random.Random(7)),
        settings=settings,
    )


@pytest.fixture
def client(orchestrator, settings):
    from main import app

    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(settings):
    token = create_access_token("user-1", settings)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_auth_headers(settings):
    token = create_access_token("user-2", settings)
    return {"Authorization": f"Bearer {token}"}
