"""Tests for completion results, history and analytics."""

from datetime import datetime, timedelta, timezone

import pytest

from skillsync.core.report_generator import NEXT_STEPS, RECOMMENDATIONS, ReportGenerator
from skillsync.models.interview import InterviewResults, InterviewSession, SessionStatus
from skillsync.models.question import Question, QuestionType


generator = ReportGenerator()
BASE_TIME = datetime(2024, 3, 1, tzinfo=timezone.utc)


def scored(score: int, question_type: QuestionType = QuestionType.TECHNICAL) -> Question:
    return Question(
        question="Q?",
        type=question_type,
        user_answer="some answer text",
        answered=True,
        answered_at=BASE_TIME,
        time_spent=60,
        score=score,
    )


def session_with(questions: list[Question], **kwargs) -> InterviewSession:
    kwargs.setdefault("job_role", "Developer")
    return InterviewSession(owner_id="user-1", questions=questions, **kwargs)


def completed_session(
    overall: float,
    days_ago: int = 0,
    technical: float | None = None,
    behavioral: float | None = None,
    job_role: str = "Developer",
) -> InterviewSession:
    session = session_with([], job_role=job_role)
    session.session_stats.status = SessionStatus.COMPLETED
    session.session_stats.completed_at = BASE_TIME - timedelta(days=days_ago)
    session.created_at = BASE_TIME - timedelta(days=days_ago, hours=1)
    session.results = InterviewResults(
        overall_score=overall,
        technical_score=technical,
        behavioral_score=behavioral,
    )
    return session


# =============================================================================
# RESULTS
# =============================================================================

def test_results_with_no_answers():
    results = generator.generate_results(session_with([Question(question="Q?", type=QuestionType.TECHNICAL)]))

    assert results.overall_score == 0
    assert results.technical_score is None
    assert results.behavioral_score is None
    assert len(results.improvements) == 2
    assert results.strengths == []


def test_overall_score_is_rounded_to_one_decimal():
    results = generator.generate_results(session_with([scored(7), scored(8), scored(8)]))
    assert results.overall_score == 7.7


@pytest.mark.parametrize(
    "scores, strengths, improvements",
    [
        ([8, 8], 2, 0),
        ([10, 6], 2, 0),
        ([6, 6], 1, 1),
        ([7, 8], 1, 1),
        ([5, 6], 0, 2),
        ([0], 0, 2),
    ],
)
def test_threshold_buckets(scores, strengths, improvements):
    results = generator.generate_results(session_with([scored(s) for s in scores]))

    assert len(results.strengths) == strengths
    assert len(results.improvements) == improvements


def test_bucket_uses_unrounded_average():
    # 7.95 rounds to 8.0 for display but stays in the middle bucket
    questions = [scored(8)] * 19 + [scored(7)]
    results = generator.generate_results(session_with(questions))

    assert results.overall_score == 8.0
    assert len(results.strengths) == 1


def test_recommendations_and_next_steps_are_fixed():
    results = generator.generate_results(session_with([scored(9)]))

    assert results.recommendations == RECOMMENDATIONS
    assert results.next_steps == NEXT_STEPS


def test_results_category_scores():
    questions = [
        scored(9, QuestionType.TECHNICAL),
        scored(6, QuestionType.TECHNICAL),
        scored(4, QuestionType.BEHAVIORAL),
    ]

    results = generator.generate_results(session_with(questions))

    assert results.technical_score == 7.5
    assert results.behavioral_score == 4


def test_unanswered_questions_do_not_count():
    questions = [scored(9), Question(question="Skipped", type=QuestionType.TECHNICAL)]

    results = generator.generate_results(session_with(questions))

    assert results.overall_score == 9


# =============================================================================
# HISTORY
# =============================================================================

def test_history_is_newest_first_with_summary_fields():
    older = completed_session(6.0, days_ago=5, job_role="Analyst")
    newer = session_with([], job_role="Engineer")
    newer.created_at = BASE_TIME

    history = generator.build_history([older, newer])

    assert [entry.job_role for entry in history] == ["Engineer", "Analyst"]
    assert history[1].overall_score == 6.0
    assert history[1].status == SessionStatus.COMPLETED
    assert history[0].completed_at is None


# =============================================================================
# ANALYTICS
# =============================================================================

def test_analytics_without_completed_sessions():
    analytics = generator.build_analytics([session_with([])])

    assert analytics.total_interviews == 0
    assert analytics.average_score == 0
    assert analytics.recent_performance == []
    assert analytics.category_performance.technical.count == 0


def test_analytics_average_of_completed_sessions():
    analytics = generator.build_analytics([
        completed_session(6.0, days_ago=2),
        completed_session(8.0, days_ago=1),
        session_with([]),
    ])

    assert analytics.total_interviews == 2
    assert analytics.average_score == 7.0


def test_analytics_average_is_rounded():
    analytics = generator.build_analytics([
        completed_session(6.0),
        completed_session(7.0),
        completed_session(7.0),
    ])
    assert analytics.average_score == 6.7


def test_recent_performance_is_last_ten_by_completion():
    sessions = [completed_session(float(i % 10), days_ago=i, job_role=f"Role {i}") for i in range(12)]

    analytics = generator.build_analytics(sessions)

    assert len(analytics.recent_performance) == 10
    assert analytics.recent_performance[0].job_role == "Role 0"
    assert analytics.recent_performance[-1].job_role == "Role 9"
    dates = [entry.date for entry in analytics.recent_performance]
    assert dates == sorted(dates, reverse=True)


def test_category_performance_only_counts_sessions_with_scores():
    analytics = generator.build_analytics([
        completed_session(6.0, technical=6.0, behavioral=5.0),
        completed_session(8.0, technical=7.0),
        completed_session(7.0),
    ])

    technical = analytics.category_performance.technical
    behavioral = analytics.category_performance.behavioral
    assert (technical.average, technical.count) == (6.5, 2)
    assert (behavioral.average, behavioral.count) == (5.0, 1)


def test_category_performance_skips_zero_scores():
    analytics = generator.build_analytics([
        completed_session(4.0, technical=0.0, behavioral=8.0),
        completed_session(6.0, technical=6.0, behavioral=0.0),
    ])

    technical = analytics.category_performance.technical
    behavioral = analytics.category_performance.behavioral
    assert (technical.average, technical.count) == (6.0, 1)
    assert (behavioral.average, behavioral.count) == (8.0, 1)
