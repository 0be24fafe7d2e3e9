"""
API layer for SkillSync

Contains FastAPI routers for:
- Interview session lifecycle
- Interview history and analytics
"""

from skillsync.api.router import api_router

__all__ = ["api_router"]
