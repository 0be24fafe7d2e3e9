"""
Interview Orchestrator - State machine for managing interview lifecycle.

This is the central coordinator for interview practice sessions.
It manages state transitions, coordinates question generation,
scoring and results, and persists every change through the
configured session store.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from skillsync.config.settings import Settings, get_settings
from skillsync.core.evaluation_engine import EvaluationEngine
from skillsync.core.exceptions import (
    QuestionNotFoundError,
    SessionNotFoundError,
    StateTransitionError,
)
from skillsync.core.question_parser import QuestionParser, TextQuestionParser
from skillsync.core.report_generator import ReportGenerator
from skillsync.models.interview import (
    InterviewSession,
    InterviewSetup,
    SessionSettings,
    SessionStatus,
)
from skillsync.models.report import HistoryEntry, InterviewAnalytics
from skillsync.storage.base import SessionStore

logger = logging.getLogger(__name__)


class InterviewOrchestrator:
    """
    Manages the interview lifecycle using a state machine pattern.

    States:
        NOT_STARTED → IN_PROGRESS → COMPLETED
                           ↓
                       ABANDONED

    Answers are accepted only while IN_PROGRESS. COMPLETED and
    ABANDONED are terminal; a completed session is frozen.

    The orchestrator coordinates between:
    - AI Reasoning Layer (question text)
    - Question Parser
    - Evaluation Engine (scoring, stats)
    - Report Generator (results, history, analytics)
    - Session Storage
    """

    # Valid state transitions
    VALID_TRANSITIONS: dict[SessionStatus, list[SessionStatus]] = {
        SessionStatus.NOT_STARTED: [SessionStatus.IN_PROGRESS, SessionStatus.COMPLETED],
        SessionStatus.IN_PROGRESS: [SessionStatus.COMPLETED, SessionStatus.ABANDONED],
        SessionStatus.COMPLETED: [],  # Terminal state
        SessionStatus.ABANDONED: [],  # Terminal state
    }

    def __init__(
        self,
        store: SessionStore,
        ai_reasoning=None,  # AIReasoningLayer
        question_parser: QuestionParser | None = None,
        evaluation_engine: EvaluationEngine | None = None,
        report_generator: ReportGenerator | None = None,
        settings: Settings | None = None,
    ):
        """
        Initialize the orchestrator with component dependencies.

        Args:
            store: Session storage backend
            ai_reasoning: AI layer producing raw question text
            question_parser: Parser turning that text into questions
            evaluation_engine: Answer scoring and statistics
            report_generator: Results and analytics
            settings: Application settings
        """
        self.store = store
        self.ai_reasoning = ai_reasoning
        self.question_parser = question_parser or TextQuestionParser()
        self.evaluation_engine = evaluation_engine or EvaluationEngine()
        self.report_generator = report_generator or ReportGenerator(self.evaluation_engine)
        self.settings = settings or get_settings()

        # Serializes read-modify-write per session within this process.
        # Entries live only while a caller holds or waits on the lock.
        self._locks: dict[str, asyncio.Lock] = {}
        self._lock_users: dict[str, int] = {}

    @asynccontextmanager
    async def _locked_session(self, session_id: str, owner_id: str):
        """
        Load a session under its write lock.

        Ownership is checked before any lock is created, and the session
        is re-read once the lock is held.

        Raises:
            SessionNotFoundError: If absent or owned by someone else
        """
        await self.get_session(session_id, owner_id)

        lock = self._locks.get(session_id)
        if lock is None:
            lock = self._locks[session_id] = asyncio.Lock()
        self._lock_users[session_id] = self._lock_users.get(session_id, 0) + 1

        try:
            async with lock:
                yield await self.get_session(session_id, owner_id)
        finally:
            self._lock_users[session_id] -= 1
            if not self._lock_users[session_id]:
                del self._lock_users[session_id]
                del self._locks[session_id]

    # =========================================================================
    # SESSION MANAGEMENT
    # =========================================================================

    async def create_session(self, owner_id: str, setup: InterviewSetup) -> InterviewSession:
        """
        Create a new interview session seeded with generated questions.

        Args:
            owner_id: ID of the requesting user
            setup: User's session configuration

        Returns:
            New InterviewSession in NOT_STARTED state
        """
        job_role = setup.job_role or self.settings.default_job_role

        if self.ai_reasoning:
            raw_text = await self.ai_reasoning.generate_interview_questions(job_role, setup.skills)
        else:
            raw_text = ""

        questions = self.question_parser.parse(
            raw_text,
            count=setup.question_count,
            difficulty=setup.difficulty,
        )
        if not questions:
            logger.warning(f"Creating session for role '{job_role}' with no questions")

        session = InterviewSession(
            owner_id=owner_id,
            job_role=job_role,
            difficulty=setup.difficulty,
            category=setup.category,
            questions=questions,
            session_settings=SessionSettings(
                question_count=setup.question_count,
                time_limit=setup.time_limit,
                categories=setup.category.question_types(),
                include_timer=True,
            ),
        )
        self.evaluation_engine.recompute_stats(session)

        await self.store.create(session)

        logger.info(f"Created interview session: {session.id} ({len(questions)} questions)")
        return session

    async def get_session(self, session_id: str, owner_id: str) -> InterviewSession:
        """
        Get a session owned by the caller.

        Raises:
            SessionNotFoundError: If absent or owned by someone else
        """
        session = await self.store.get(session_id, owner_id)
        if session is None:
            raise SessionNotFoundError()
        return session

    # =========================================================================
    # STATE MACHINE
    # =========================================================================

    def transition_state(self, session: InterviewSession, new_state: SessionStatus) -> None:
        """
        Move a session to a new state and stamp the relevant timestamp.

        Raises:
            StateTransitionError: If transition is invalid
        """
        old_state = session.status

        valid_next_states = self.VALID_TRANSITIONS.get(old_state, [])
        if new_state not in valid_next_states:
            raise StateTransitionError(
                f"Cannot move session from {old_state.value} to {new_state.value}"
            )

        session.session_stats.status = new_state

        now = datetime.now(timezone.utc)
        if new_state == SessionStatus.IN_PROGRESS:
            session.session_stats.started_at = now
        elif new_state in (SessionStatus.COMPLETED, SessionStatus.ABANDONED):
            session.session_stats.completed_at = now

        logger.info(f"Session {session.id}: {old_state.value} → {new_state.value}")

    # =========================================================================
    # INTERVIEW FLOW
    # =========================================================================

    async def start_session(self, session_id: str, owner_id: str) -> InterviewSession:
        """
        Start the interview.

        Starting a session that is already in progress is a no-op.
        """
        async with self._locked_session(session_id, owner_id) as session:
            if session.status == SessionStatus.IN_PROGRESS:
                return session

            self.transition_state(session, SessionStatus.IN_PROGRESS)
            return await self.store.save(session)

    async def submit_answer(
        self,
        session_id: str,
        owner_id: str,
        question_id: str,
        answer: str,
        time_spent: float | None = None,
    ) -> InterviewSession:
        """
        Record and score an answer, then refresh session statistics.

        Args:
            session_id: Session ID
            owner_id: Caller's user ID
            question_id: Question being answered
            answer: Candidate's answer text
            time_spent: Seconds spent on the question

        Returns:
            Updated session
        """
        async with self._locked_session(session_id, owner_id) as session:
            question = session.get_question(question_id)
            if question is None:
                raise QuestionNotFoundError()

            if session.status != SessionStatus.IN_PROGRESS:
                raise StateTransitionError(
                    f"Cannot submit answers in state: {session.status.value}"
                )

            question.record_answer(
                answer=answer,
                time_spent=time_spent or 0,
                answered_at=datetime.now(timezone.utc),
            )
            question.score = self.evaluation_engine.score_answer(question)

            stats = self.evaluation_engine.recompute_stats(session)
            logger.debug(
                f"Session {session_id}: question {question_id} scored {question.score}, "
                f"{stats.answered_questions}/{stats.total_questions} answered"
            )

            return await self.store.save(session)

    async def complete_session(self, session_id: str, owner_id: str) -> InterviewSession:
        """Finish the interview and compute final results."""
        async with self._locked_session(session_id, owner_id) as session:
            self.transition_state(session, SessionStatus.COMPLETED)
            self.evaluation_engine.recompute_stats(session)
            session.results = self.report_generator.generate_results(session)

            return await self.store.save(session)

    async def abandon_session(self, session_id: str, owner_id: str) -> InterviewSession:
        """Stop an in-progress interview without results."""
        async with self._locked_session(session_id, owner_id) as session:
            self.transition_state(session, SessionStatus.ABANDONED)

            return await self.store.save(session)

    # =========================================================================
    # HISTORY & ANALYTICS
    # =========================================================================

    async def get_history(self, owner_id: str) -> list[HistoryEntry]:
        sessions = await self.store.list_for_owner(owner_id)
        return self.report_generator.build_history(sessions)

    async def get_analytics(self, owner_id: str) -> InterviewAnalytics:
        sessions = await self.store.list_for_owner(owner_id)
        return self.report_generator.build_analytics(sessions)
