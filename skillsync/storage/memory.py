"""
In-memory session storage

Used for local development and tests. Contents are lost on restart.
"""

import logging

from skillsync.models.interview import InterviewSession
from skillsync.storage.base import SessionStore

logger = logging.getLogger(__name__)


class InMemorySessionStore(SessionStore):
    """Dict-backed store holding deep copies of session documents."""

    def __init__(self):
        self._sessions: dict[str, InterviewSession] = {}

    async def create(self, session: InterviewSession) -> InterviewSession:
        self._sessions[session.id] = session.model_copy(deep=True)
        return session

    async def get(self, session_id: str, owner_id: str) -> InterviewSession | None:
        session = self._sessions.get(session_id)
        if session is None or session.owner_id != owner_id:
            return None
        return session.model_copy(deep=True)

    async def save(self, session: InterviewSession) -> InterviewSession:
        session.touch()
        self._sessions[session.id] = session.model_copy(deep=True)
        return session

    async def list_for_owner(self, owner_id: str) -> list[InterviewSession]:
        return [
            session.model_copy(deep=True)
            for session in self._sessions.values()
            if session.owner_id == owner_id
        ]
