"""
Question models for SkillSync
"""

from datetime import datetime
from enum import Enum
from uuid import uuid4

from pydantic import Field

from skillsync.models.base import CamelModel


class Difficulty(str, Enum):
    """Difficulty levels shared by sessions and questions."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class QuestionType(str, Enum):
    """Types of interview questions."""

    TECHNICAL = "technical"
    BEHAVIORAL = "behavioral"
    SITUATIONAL = "situational"


class Question(CamelModel):
    """A single interview question and the candidate's answer to it."""

    # Identification
    id: str = Field(default_factory=lambda: uuid4().hex)

    # Content
    question: str
    type: QuestionType
    difficulty: Difficulty = Difficulty.MEDIUM

    # Evaluation guidance
    expected_answer: str = ""
    key_points: list[str] = Field(default_factory=list)

    # Answer (set once answered)
    user_answer: str | None = None
    answered: bool = False
    answered_at: datetime | None = None
    time_spent: float | None = Field(default=None, ge=0)
    score: int | None = Field(default=None, ge=0, le=10)
    feedback: str | None = None

    def record_answer(self, answer: str, time_spent: float, answered_at: datetime) -> None:
        """Store the candidate's answer. Score is applied separately."""
        self.user_answer = answer
        self.answered = True
        self.answered_at = answered_at
        self.time_spent = time_spent
