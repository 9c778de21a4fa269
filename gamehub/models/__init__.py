"""
Database models for GameHub accounts and finished games.

Architecture: User → QuizResult / PictureGameResult.
"""

from gamehub.models.game_result import DIFFICULTIES, PictureGameResult, QuizResult
from gamehub.models.user import User

__all__ = [
    "User",
    "QuizResult",
    "PictureGameResult",
    "DIFFICULTIES",
]
