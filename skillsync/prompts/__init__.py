"""
AI prompt templates for SkillSync

Contains prompts for:
- Interview question generation
- Fallback question content
"""

from skillsync.prompts.interviewer import InterviewerPrompts

__all__ = [
    "InterviewerPrompts",
]
