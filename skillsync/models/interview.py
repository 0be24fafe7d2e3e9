"""
Interview session and state models for SkillSync
"""

from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

from pydantic import Field

from skillsync.models.base import CamelModel
from skillsync.models.question import Difficulty, Question, QuestionType


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InterviewCategory(str, Enum):
    """Session-level question mix."""

    TECHNICAL = "Technical"
    BEHAVIORAL = "Behavioral"
    MIXED = "Mixed"

    def question_types(self) -> list[QuestionType]:
        """Question types a session of this category practices."""
        if self is InterviewCategory.MIXED:
            return [QuestionType.TECHNICAL, QuestionType.BEHAVIORAL]
        return [QuestionType(self.value.lower())]


class SessionStatus(str, Enum):
    """Interview session state machine states."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    ABANDONED = "abandoned"  # Terminal, reachable from IN_PROGRESS


class SessionSettings(CamelModel):
    """User's session configuration."""

    question_count: int = Field(default=10, ge=5, le=20)
    time_limit: int = Field(
        default=300, ge=60, le=600,
        description="Seconds per question"
    )
    categories: list[QuestionType] = Field(default_factory=list)
    include_timer: bool = True


class InterviewSetup(CamelModel):
    """User's request for a new practice session."""

    job_role: str | None = Field(
        default=None,
        description="Target role; the configured default role when omitted"
    )
    difficulty: Difficulty = Difficulty.MEDIUM
    category: InterviewCategory = InterviewCategory.MIXED
    question_count: int = Field(default=10, ge=5, le=20)
    time_limit: int = Field(default=300, ge=60, le=600)
    skills: list[str] = Field(
        default_factory=list,
        description="Candidate skills used to personalize questions"
    )


class SessionStats(CamelModel):
    """Cheap, always-recomputable summary of a session's questions."""

    total_questions: int = 0
    answered_questions: int = 0
    total_time_spent: float = 0
    average_score: float = 0
    started_at: datetime | None = None
    completed_at: datetime | None = None
    status: SessionStatus = SessionStatus.NOT_STARTED


class InterviewResults(CamelModel):
    """Score breakdown and guidance produced at completion."""

    overall_score: float | None = Field(default=None, ge=0, le=10)
    technical_score: float | None = Field(default=None, ge=0, le=10)
    behavioral_score: float | None = Field(default=None, ge=0, le=10)
    strengths: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    next_steps: str = ""


class InterviewSession(CamelModel):
    """Complete interview session state."""

    # Identification
    id: str = Field(default_factory=lambda: str(uuid4()))
    owner_id: str

    # Setup
    job_role: str
    difficulty: Difficulty = Difficulty.MEDIUM
    category: InterviewCategory = InterviewCategory.MIXED
    session_settings: SessionSettings = Field(default_factory=SessionSettings)

    # Questions, in presentation order
    questions: list[Question] = Field(default_factory=list)

    # Derived
    session_stats: SessionStats = Field(default_factory=SessionStats)
    results: InterviewResults = Field(default_factory=InterviewResults)

    # Timing
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def status(self) -> SessionStatus:
        return self.session_stats.status

    def get_question(self, question_id: str) -> Question | None:
        """Find a question by ID."""
        for question in self.questions:
            if question.id == question_id:
                return question
        return None

    def answered_questions(self) -> list[Question]:
        return [q for q in self.questions if q.answered]

    def touch(self) -> None:
        self.updated_at = utcnow()
