"""
SQL session storage

Stores each session as a JSON document alongside indexed owner,
status and creation columns. Works with any SQLAlchemy URL;
SQLite is the default.

SQLAlchemy calls are blocking, so every store operation runs in a
worker thread via asyncio.to_thread and the event loop stays free.
"""

import asyncio
import logging

from sqlalchemy import Column, DateTime, String, Text, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from skillsync.models.interview import InterviewSession
from skillsync.storage.base import SessionStore

logger = logging.getLogger(__name__)

Base = declarative_base()


class InterviewSessionRecord(Base):
    __tablename__ = "interview_sessions"

    id = Column(String(36), primary_key=True)
    owner_id = Column(String, nullable=False, index=True)
    status = Column(String, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
    document = Column(Text, nullable=False)

    def to_session(self) -> InterviewSession:
        return InterviewSession.model_validate_json(self.document)


class SqlSessionStore(SessionStore):
    """SQLAlchemy-backed session store."""

    def __init__(self, database_url: str):
        connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
        self.engine = create_engine(database_url, connect_args=connect_args)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

        # Create tables
        Base.metadata.create_all(bind=self.engine)
        logger.info(f"SQL session store ready ({self.engine.url.get_backend_name()})")

    def _apply(self, record: InterviewSessionRecord, session: InterviewSession) -> None:
        record.owner_id = session.owner_id
        record.status = session.status.value
        record.created_at = session.created_at
        record.updated_at = session.updated_at
        record.document = session.model_dump_json()

    # =========================================================================
    # BLOCKING OPERATIONS (run in a worker thread)
    # =========================================================================

    def _insert(self, session: InterviewSession) -> None:
        with self.SessionLocal() as db:
            record = InterviewSessionRecord(id=session.id)
            self._apply(record, session)
            db.add(record)
            db.commit()

    def _fetch(self, session_id: str, owner_id: str) -> InterviewSession | None:
        with self.SessionLocal() as db:
            record = db.query(InterviewSessionRecord).filter(
                InterviewSessionRecord.id == session_id,
                InterviewSessionRecord.owner_id == owner_id,
            ).first()
            return record.to_session() if record else None

    def _upsert(self, session: InterviewSession) -> None:
        with self.SessionLocal() as db:
            record = db.get(InterviewSessionRecord, session.id)
            if record is None:
                record = InterviewSessionRecord(id=session.id)
                db.add(record)
            self._apply(record, session)
            db.commit()

    def _fetch_for_owner(self, owner_id: str) -> list[InterviewSession]:
        with self.SessionLocal() as db:
            records = db.query(InterviewSessionRecord).filter(
                InterviewSessionRecord.owner_id == owner_id
            ).order_by(InterviewSessionRecord.created_at.desc()).all()
            return [record.to_session() for record in records]

    # =========================================================================
    # SessionStore API
    # =========================================================================

    async def create(self, session: InterviewSession) -> InterviewSession:
        await asyncio.to_thread(self._insert, session)
        return session

    async def get(self, session_id: str, owner_id: str) -> InterviewSession | None:
        return await asyncio.to_thread(self._fetch, session_id, owner_id)

    async def save(self, session: InterviewSession) -> InterviewSession:
        session.touch()
        await asyncio.to_thread(self._upsert, session)
        return session

    async def list_for_owner(self, owner_id: str) -> list[InterviewSession]:
        return await asyncio.to_thread(self._fetch_for_owner, owner_id)

    async def close(self) -> None:
        await asyncio.to_thread(self.engine.dispose)
