from gamehub.db_handlers.base import BaseDBHandler, check_local_db
from gamehub.db_handlers.game_result import (
    GameResultDBHandler,
    PictureGameResultDBHandler,
    QuizResultDBHandler,
)
from gamehub.db_handlers.user import UserDBHandler

__all__ = [
    "BaseDBHandler",
    "check_local_db",
    "GameResultDBHandler",
    "PictureGameResultDBHandler",
    "QuizResultDBHandler",
    "UserDBHandler",
]
