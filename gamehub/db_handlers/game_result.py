from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from gamehub.config import settings
from gamehub.db_handlers.base import BaseDBHandler, ModelType, check_local_db
from gamehub.models import PictureGameResult, QuizResult
from gamehub.models.base import utc_now
from gamehub.utils.logger import setup_logger

logger = setup_logger("db_handlers.game_result")


class GameResultDBHandler(BaseDBHandler[ModelType]):
    """
    Append-only store of finished games, scoped to their owner.

    Every query filters on ``owner_id``; there is no way to read another
    user's results through this handler.
    """

    @check_local_db
    async def save(
        self, owner_id: UUID, payload: dict[str, Any], *, db: AsyncSession = None
    ) -> ModelType:
        """Persist a finished game with a server-assigned completion time."""
        obj_dict = dict(payload)
        obj_dict["owner_id"] = owner_id
        obj_dict["completed_at"] = utc_now()
        result = await self.create(obj_dict, db=db)
        logger.info(
            f"Saved {self.model.__name__} {result.id} for user {owner_id} (score={result.score})"
        )
        return result

    @check_local_db
    async def history(
        self,
        owner_id: UUID,
        limit: int | None = None,
        *,
        db: AsyncSession = None,
    ) -> list[ModelType]:
        """Most recent results of one owner, newest first."""
        return await self.get_multi_by_attributes(
            db=db,
            owner_id=owner_id,
            limit=settings.history_limit if limit is None else limit,
            order_by=[self.model.completed_at.desc(), self.model.id.desc()],
        )

    @check_local_db
    async def all_for_owner(
        self, owner_id: UUID, *, db: AsyncSession = None
    ) -> list[ModelType]:
        """Full history of one owner, used to compute statistics."""
        return await self.get_multi_by_attributes(
            db=db, owner_id=owner_id, limit=None
        )


class QuizResultDBHandler(GameResultDBHandler[QuizResult]):
    def __init__(self):
        super().__init__(QuizResult)


class PictureGameResultDBHandler(GameResultDBHandler[PictureGameResult]):
    def __init__(self):
        super().__init__(PictureGameResult)
