from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from gamehub.db_handlers.base import BaseDBHandler, check_local_db
from gamehub.exceptions import DuplicateUserError
from gamehub.models.user import User
from gamehub.utils.logger import setup_logger

logger = setup_logger("db_handlers.user")


class UserDBHandler(BaseDBHandler[User]):
    def __init__(self):
        super().__init__(User)

    @check_local_db
    async def create_user(
        self, username: str, hashed_password: str, *, db: AsyncSession = None
    ) -> User:
        """
        Insert a user, relying on the unique username index.

        There is no lookup before the insert: the constraint decides, so
        concurrent signups with one name produce exactly one row.
        """
        try:
            return await self.create(
                {"username": username, "hashed_password": hashed_password}, db=db
            )
        except IntegrityError as e:
            logger.info(f"Signup rejected, username '{username}' already exists")
            raise DuplicateUserError() from e

    @check_local_db
    async def get_user_by_username(
        self, username: str, *, db: AsyncSession = None
    ) -> User | None:
        """Get a user by exact, case-sensitive username."""
        stmt = select(User).filter(User.username == username)
        result = await db.execute(stmt)
        return result.scalar_one_or_none()
