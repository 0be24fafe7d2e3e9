"""
History and analytics models for SkillSync

Cross-session views of a user's interview practice.
"""

from datetime import datetime

from pydantic import Field

from skillsync.models.base import CamelModel
from skillsync.models.interview import Difficulty, SessionStatus


class HistoryEntry(CamelModel):
    """Summary projection of one past session."""

    id: str
    job_role: str
    difficulty: Difficulty
    status: SessionStatus
    completed_at: datetime | None = None
    overall_score: float | None = None
    created_at: datetime


class CategoryAverage(CamelModel):
    """Average score for one question category across sessions."""

    average: float = 0
    count: int = 0


class CategoryPerformance(CamelModel):
    technical: CategoryAverage = Field(default_factory=CategoryAverage)
    behavioral: CategoryAverage = Field(default_factory=CategoryAverage)


class RecentPerformance(CamelModel):
    date: datetime | None = None
    score: float | None = None
    job_role: str


class InterviewAnalytics(CamelModel):
    """Aggregates over a user's completed sessions."""

    total_interviews: int = 0
    average_score: float = 0
    category_performance: CategoryPerformance = Field(default_factory=CategoryPerformance)
    recent_performance: list[RecentPerformance] = Field(default_factory=list)
