"""
SkillSync - Interview Practice Service

Backend for AI-seeded mock interview sessions with heuristic scoring,
session history and performance analytics.
"""

__version__ = "0.1.0"
__author__ = "SkillSync Team"
