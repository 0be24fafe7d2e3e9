"""
Report Generator for SkillSync

Generates:
- Session results on completion (scores, strengths, improvements)
- History summaries
- Cross-session performance analytics
"""

import logging
from datetime import datetime, timezone

from skillsync.models.interview import InterviewResults, InterviewSession, SessionStatus
from skillsync.models.question import QuestionType
from skillsync.models.report import (
    CategoryAverage,
    CategoryPerformance,
    HistoryEntry,
    InterviewAnalytics,
    RecentPerformance,
)
from skillsync.core.evaluation_engine import EvaluationEngine, average_score

logger = logging.getLogger(__name__)


STRONG_SCORE = 8
SOLID_SCORE = 6
RECENT_PERFORMANCE_LIMIT = 10

RECOMMENDATIONS = [
    "Continue practicing with mock interviews",
    "Review common interview questions in your field",
]
NEXT_STEPS = (
    "Keep practicing and focus on areas that need improvement. "
    "Consider scheduling more practice sessions."
)


def round_score(score: float | None) -> float | None:
    if score is None:
        return None
    return round(score, 1)


class ReportGenerator:
    """
    Generates interview results and performance summaries.

    Results are derived fresh from the session's questions so they
    never depend on previously stored statistics.
    """

    def __init__(self, evaluation_engine: EvaluationEngine | None = None):
        self.evaluation_engine = evaluation_engine or EvaluationEngine()

    # =========================================================================
    # SESSION RESULTS
    # =========================================================================

    def generate_results(self, session: InterviewSession) -> InterviewResults:
        """
        Generate results for a completed session.

        Args:
            session: Session being completed

        Returns:
            InterviewResults with scores and canned guidance
        """
        answered = session.answered_questions()
        overall = average_score(answered) or 0

        results = InterviewResults(
            overall_score=round(overall, 1),
            technical_score=round_score(
                self.evaluation_engine.category_score(answered, QuestionType.TECHNICAL)
            ),
            behavioral_score=round_score(
                self.evaluation_engine.category_score(answered, QuestionType.BEHAVIORAL)
            ),
            recommendations=list(RECOMMENDATIONS),
            next_steps=NEXT_STEPS,
        )

        # Thresholds apply to the unrounded average
        if overall >= STRONG_SCORE:
            results.strengths = [
                "Excellent communication skills",
                "Strong technical knowledge",
            ]
        elif overall >= SOLID_SCORE:
            results.strengths = ["Good foundational knowledge"]
            results.improvements = ["Work on providing more detailed answers"]
        else:
            results.improvements = [
                "Focus on fundamental concepts",
                "Practice articulating thoughts clearly",
            ]

        logger.info(
            f"Generated results for session {session.id}: "
            f"overall={results.overall_score} answered={len(answered)}/{len(session.questions)}"
        )
        return results

    # =========================================================================
    # HISTORY & ANALYTICS
    # =========================================================================

    def summarize(self, session: InterviewSession) -> HistoryEntry:
        """Project a session to its history summary."""
        return HistoryEntry(
            id=session.id,
            job_role=session.job_role,
            difficulty=session.difficulty,
            status=session.status,
            completed_at=session.session_stats.completed_at,
            overall_score=session.results.overall_score,
            created_at=session.created_at,
        )

    def build_history(self, sessions: list[InterviewSession]) -> list[HistoryEntry]:
        """History summaries, newest first."""
        ordered = sorted(sessions, key=lambda s: s.created_at, reverse=True)
        return [self.summarize(session) for session in ordered]

    def build_analytics(self, sessions: list[InterviewSession]) -> InterviewAnalytics:
        """
        Aggregate performance across a user's completed sessions.

        Sessions in any other state are ignored.
        """
        completed = [s for s in sessions if s.status == SessionStatus.COMPLETED]
        analytics = InterviewAnalytics(total_interviews=len(completed))

        if not completed:
            return analytics

        total = sum(s.results.overall_score or 0 for s in completed)
        analytics.average_score = round(total / len(completed), 1)

        oldest = datetime.min.replace(tzinfo=timezone.utc)
        by_completion = sorted(
            completed,
            key=lambda s: s.session_stats.completed_at or oldest,
            reverse=True,
        )
        analytics.recent_performance = [
            RecentPerformance(
                date=s.session_stats.completed_at,
                score=s.results.overall_score,
                job_role=s.job_role,
            )
            for s in by_completion[:RECENT_PERFORMANCE_LIMIT]
        ]

        analytics.category_performance = CategoryPerformance(
            technical=self._category_average(
                [s.results.technical_score for s in completed]
            ),
            behavioral=self._category_average(
                [s.results.behavioral_score for s in completed]
            ),
        )

        return analytics

    def _category_average(self, scores: list[float | None]) -> CategoryAverage:
        # A zero score counts as absent
        present = [score for score in scores if score]
        if not present:
            return CategoryAverage()
        return CategoryAverage(
            average=round(sum(present) / len(present), 1),
            count=len(present),
        )
