"""
Session storage interface for SkillSync
"""

from abc import ABC, abstractmethod

from skillsync.models.interview import InterviewSession


class SessionStore(ABC):
    """
    Durable record of interview sessions keyed by session ID.

    Reads are scoped to the owning user. Implementations return copies,
    so callers persist changes with save().
    """

    @abstractmethod
    async def create(self, session: InterviewSession) -> InterviewSession:
        ...

    @abstractmethod
    async def get(self, session_id: str, owner_id: str) -> InterviewSession | None:
        """Get a session by ID if it belongs to owner_id."""
        ...

    @abstractmethod
    async def save(self, session: InterviewSession) -> InterviewSession:
        """Replace the stored document for session.id."""
        ...

    @abstractmethod
    async def list_for_owner(self, owner_id: str) -> list[InterviewSession]:
        ...

    async def close(self) -> None:
        """Release resources held by the store."""
        return None
