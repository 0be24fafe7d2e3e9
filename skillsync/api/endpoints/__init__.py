"""
API endpoint modules for SkillSync
"""

from skillsync.api.endpoints import interview

__all__ = ["interview"]
