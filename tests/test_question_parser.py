"""Tests for turning provider text into questions."""

import random

from skillsync.core.question_parser import (
    TextQuestionParser,
    VARIATION_PREFIX,
    infer_question_type,
)
from skillsync.models.question import Difficulty, QuestionType


def make_parser(seed: int = 1) -> TextQuestionParser:
    return TextQuestionParser(rng=random.Random(seed))


def test_numbered_questions_take_following_answer_lines():
    text = (
        "1. What is a database index?\n"
        "Answer: A structure that speeds up lookups.\n"
        "2. Describe a conflict with a teammate.\n"
        "Answer: Stay calm and listen.\n"
        "3. How do you plan your week?\n"
        "Answer: Prioritize by impact.\n"
    )

    questions = make_parser().parse(text, count=3)

    assert len(questions) == 3
    assert [q.question for q in questions] == [
        "What is a database index?",
        "Describe a conflict with a teammate.",
        "How do you plan your week?",
    ]
    assert questions[0].expected_answer == "Answer: A structure that speeds up lookups."
    assert questions[1].expected_answer == "Answer: Stay calm and listen."
    assert questions[2].expected_answer == "Answer: Prioritize by impact."


def test_new_questions_start_unanswered_with_requested_difficulty():
    questions = make_parser().parse("1. Explain recursion", count=1, difficulty=Difficulty.HARD)

    question = questions[0]
    assert question.difficulty == Difficulty.HARD
    assert question.answered is False
    assert question.key_points == []
    assert question.expected_answer == ""
    assert question.user_answer is None


def test_default_difficulty_is_medium():
    questions = make_parser().parse("1. Explain recursion", count=1)
    assert questions[0].difficulty == Difficulty.MEDIUM


def test_last_answer_line_wins():
    text = (
        "1. What is caching?\n"
        "Answer: first version\n"
        "Key points: second version\n"
    )

    questions = make_parser().parse(text, count=1)

    assert questions[0].expected_answer == "Key points: second version"


def test_lines_mentioning_question_start_a_new_question():
    text = (
        "Here are your interview questions:\n"
        "1. What is polymorphism?\n"
    )

    questions = make_parser().parse(text, count=2)

    assert [q.question for q in questions] == [
        "Here are your interview questions:",
        "What is polymorphism?",
    ]


def test_answer_lines_before_any_question_are_ignored():
    text = "Answer: orphaned\n1. What is a closure?"

    questions = make_parser().parse(text, count=1)

    assert questions[0].expected_answer == ""


def test_blank_lines_are_skipped():
    text = "\n\n1. What is a queue?\n   \nAnswer: FIFO structure\n\n"

    questions = make_parser().parse(text, count=1)

    assert len(questions) == 1
    assert questions[0].expected_answer == "Answer: FIFO structure"


def test_padding_fills_with_variations():
    questions = make_parser().parse("1. Walk me through a project you led.", count=5)

    assert len(questions) == 5
    variations = [q for q in questions if q.question.startswith(VARIATION_PREFIX)]
    assert len(variations) == 4
    assert questions[0].question == "Walk me through a project you led."
    assert variations[0].question == "Variation: Walk me through a project you led."
    assert len({q.id for q in questions}) == 5


def test_output_is_truncated_to_count():
    text = "\n".join(f"{i}. Question number {i}" for i in range(1, 9))

    questions = make_parser().parse(text, count=5)

    assert len(questions) == 5
    assert questions[-1].question == "Question number 5"


def test_unparseable_text_yields_no_questions():
    questions = make_parser().parse("Nothing useful here\nStill nothing", count=5)
    assert questions == []


def test_empty_text_yields_no_questions():
    assert make_parser().parse("", count=5) == []


def test_question_type_inference():
    assert infer_question_type("Design a database for orders") == QuestionType.TECHNICAL
    assert infer_question_type("Tell me about a team conflict") == QuestionType.BEHAVIORAL
    assert infer_question_type("What would you do on day one?") == QuestionType.SITUATIONAL


def test_technical_keywords_take_precedence():
    # "challenge" is behavioral but "system" wins
    assert infer_question_type("Biggest challenge scaling a system?") == QuestionType.TECHNICAL


def test_type_is_inferred_from_the_question_line():
    text = "1. Tell me about your leadership style\nAnswer: Mention the system you used"

    questions = make_parser().parse(text, count=1)

    assert questions[0].type == QuestionType.BEHAVIORAL
