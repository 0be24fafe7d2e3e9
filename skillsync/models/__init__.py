"""
Data models and schemas for SkillSync

Contains Pydantic models for:
- Interview sessions, settings, stats and results
- Questions and answers
- History and analytics views
"""

from skillsync.models.interview import (
    InterviewSession,
    InterviewCategory,
    InterviewResults,
    InterviewSetup,
    SessionSettings,
    SessionStats,
    SessionStatus,
)
from skillsync.models.question import Question, QuestionType, Difficulty
from skillsync.models.report import (
    HistoryEntry,
    InterviewAnalytics,
    CategoryAverage,
    CategoryPerformance,
    RecentPerformance,
)

__all__ = [
    # Interview
    "InterviewSession",
    "InterviewCategory",
    "InterviewResults",
    "InterviewSetup",
    "SessionSettings",
    "SessionStats",
    "SessionStatus",
    # Question
    "Question",
    "QuestionType",
    "Difficulty",
    # Report
    "HistoryEntry",
    "InterviewAnalytics",
    "CategoryAverage",
    "CategoryPerformance",
    "RecentPerformance",
]
