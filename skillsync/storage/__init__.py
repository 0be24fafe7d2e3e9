"""
Session storage backends for SkillSync

- InMemorySessionStore: process-local, for development and tests
- SqlSessionStore: SQLAlchemy-backed durable storage
"""

from skillsync.config.settings import Settings
from skillsync.storage.base import SessionStore
from skillsync.storage.memory import InMemorySessionStore
from skillsync.storage.sql import SqlSessionStore


def create_session_store(settings: Settings) -> SessionStore:
    """Build the store selected by settings.storage_backend."""
    backend = settings.storage_backend.lower()
    if backend == "memory":
        return InMemorySessionStore()
    if backend == "sql":
        return SqlSessionStore(settings.database_url)
    raise ValueError(f"Unknown storage backend: {settings.storage_backend}")


__all__ = [
    "SessionStore",
    "InMemorySessionStore",
    "SqlSessionStore",
    "create_session_store",
]
