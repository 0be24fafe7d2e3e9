"""
Core business logic modules for SkillSync

Contains:
- Interview Orchestrator: State machine for session lifecycle
- AI Reasoning: Interview question text from LLM providers
- Question Parser: Provider text to structured questions
- Evaluation Engine: Answer scoring and session statistics
- Report Generator: Results, history and analytics
"""

from skillsync.core.interview_orchestrator import InterviewOrchestrator
from skillsync.core.ai_reasoning import AIReasoningLayer
from skillsync.core.question_parser import QuestionParser, TextQuestionParser
from skillsync.core.evaluation_engine import EvaluationEngine
from skillsync.core.report_generator import ReportGenerator

__all__ = [
    "InterviewOrchestrator",
    "AIReasoningLayer",
    "QuestionParser",
    "TextQuestionParser",
    "EvaluationEngine",
    "ReportGenerator",
]
