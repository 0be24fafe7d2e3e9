"""
Evaluation Engine for SkillSync

Handles heuristic answer scoring and session statistics.
Scores are a rough signal of effort and relevance, not a
correctness judgment.
"""

import logging

from skillsync.models.interview import InterviewSession, SessionStats
from skillsync.models.question import Question, QuestionType

logger = logging.getLogger(__name__)


MIN_ANSWER_LENGTH = 10
BASE_SCORE = 5
MAX_SCORE = 10
QUICK_RESPONSE_SECONDS = 300


def average_score(questions: list[Question]) -> float | None:
    """Mean score over questions, missing scores count as 0. None if empty."""
    if not questions:
        return None
    return sum(q.score or 0 for q in questions) / len(questions)


class EvaluationEngine:
    """
    Central evaluation component for interview answers.

    Responsibilities:
    - Score individual answers
    - Aggregate session statistics
    - Maintain per-category score splits
    """

    # =========================================================================
    # ANSWER SCORING
    # =========================================================================

    def score_answer(self, question: Question) -> int:
        """
        Score an answered question on a 0-10 scale.

        Base score of 5 for any answer of at least 10 non-blank characters,
        plus bonuses for length, for mentioning any word of the expected
        answer, and for answering in under five minutes.
        """
        answer = question.user_answer
        if not answer or len(answer.strip()) < MIN_ANSWER_LENGTH:
            return 0

        answer_length = len(answer)
        answer_lower = answer.lower()
        # Split on single spaces: an empty expected answer yields [""], which
        # every answer contains
        has_keywords = any(
            word in answer_lower
            for word in (question.expected_answer or "").lower().split(" ")
        )

        score = BASE_SCORE
        if answer_length > 100:
            score += 1
        if answer_length > 200:
            score += 1
        if has_keywords:
            score += 2
        if question.time_spent and question.time_spent < QUICK_RESPONSE_SECONDS:
            score += 1

        return min(score, MAX_SCORE)

    # =========================================================================
    # SESSION STATISTICS
    # =========================================================================

    def recompute_stats(self, session: InterviewSession) -> SessionStats:
        """
        Recompute session statistics from the question list.

        Idempotent. Status and timestamps are carried over unchanged.
        Category splits and the provisional overall score are written to
        session.results in the same pass so the two never disagree.
        """
        answered = session.answered_questions()

        stats = session.session_stats.model_copy(
            update={
                "total_questions": len(session.questions),
                "answered_questions": len(answered),
                "total_time_spent": sum(q.time_spent or 0 for q in answered),
                "average_score": average_score(answered) or 0,
            }
        )
        session.session_stats = stats

        if answered:
            technical = self.category_score(answered, QuestionType.TECHNICAL)
            behavioral = self.category_score(answered, QuestionType.BEHAVIORAL)
            if technical is not None:
                session.results.technical_score = technical
            if behavioral is not None:
                session.results.behavioral_score = behavioral
            session.results.overall_score = stats.average_score

        return stats

    def category_score(
        self,
        answered: list[Question],
        question_type: QuestionType
    ) -> float | None:
        """Average score for answered questions of one type."""
        return average_score([q for q in answered if q.type == question_type])
