"""
Question Parser for SkillSync

Turns provider output into structured Question records.

The free-text parser follows the numbered "question / answer" layout
the interviewer prompt asks for. It sits behind the QuestionParser
interface so a structured (JSON) parser can replace it without
touching the orchestrator.
"""

import logging
import random
import re
from abc import ABC, abstractmethod
from uuid import uuid4

from skillsync.models.question import Difficulty, Question, QuestionType

logger = logging.getLogger(__name__)


NUMBERED_LINE = re.compile(r"^\d+\.")
NUMBER_PREFIX = re.compile(r"^\d+\.\s*")

TECHNICAL_KEYWORDS = [
    "code", "algorithm", "system", "database",
    "programming", "technical", "architecture",
]
BEHAVIORAL_KEYWORDS = [
    "team", "conflict", "leadership", "challenge",
    "experience", "situation",
]

VARIATION_PREFIX = "Variation: "


def infer_question_type(text: str) -> QuestionType:
    """Classify a question by keyword. Technical keywords take precedence."""
    lowered = text.lower()
    if any(word in lowered for word in TECHNICAL_KEYWORDS):
        return QuestionType.TECHNICAL
    if any(word in lowered for word in BEHAVIORAL_KEYWORDS):
        return QuestionType.BEHAVIORAL
    return QuestionType.SITUATIONAL


class QuestionParser(ABC):
    """Converts raw provider text into at most `count` questions."""

    @abstractmethod
    def parse(
        self,
        text: str,
        count: int,
        difficulty: Difficulty = Difficulty.MEDIUM,
    ) -> list[Question]:
        ...


class TextQuestionParser(QuestionParser):
    """
    Line-oriented parser for free-text provider output.

    A line that starts with "<n>." or mentions "question" opens a new
    question. While a question is open, a line mentioning "answer" or
    "key points" becomes its expected answer (the last one wins).

    When fewer than `count` questions are found, the list is padded
    with "Variation: " copies of randomly chosen parsed questions.
    """

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def parse(
        self,
        text: str,
        count: int,
        difficulty: Difficulty = Difficulty.MEDIUM,
    ) -> list[Question]:
        questions: list[Question] = []
        current: Question | None = None

        lines = [line for line in text.split("\n") if line.strip()]

        for line in lines:
            lowered = line.lower()
            if NUMBERED_LINE.match(line) or "question" in lowered:
                if current is not None:
                    questions.append(current)
                current = Question(
                    question=NUMBER_PREFIX.sub("", line).strip(),
                    type=infer_question_type(line),
                    difficulty=difficulty,
                )
            elif current is not None and ("answer" in lowered or "key points" in lowered):
                current.expected_answer = line

        if current is not None:
            questions.append(current)

        if not questions:
            logger.warning("No questions could be parsed from provider output")
            return []

        parsed_count = len(questions)
        while len(questions) < count:
            source = questions[self.rng.randrange(parsed_count)]
            questions.append(
                source.model_copy(
                    update={
                        "id": uuid4().hex,
                        "question": f"{VARIATION_PREFIX}{source.question}",
                    },
                    deep=True,
                )
            )

        if len(questions) > parsed_count:
            logger.info(f"Padded {parsed_count} parsed questions to {count}")

        return questions[:count]
