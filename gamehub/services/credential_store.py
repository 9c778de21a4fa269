"""
Credential store: account creation, password verification and profile lookup.

Passwords are hashed with bcrypt before they reach the database. Sign-in
failures are reported with one error whatever the cause, so callers cannot
tell an unknown username from a wrong password.
"""

import asyncio
from functools import lru_cache
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from gamehub.db_handlers.user import UserDBHandler
from gamehub.exceptions import InvalidCredentialsError, NotFoundError
from gamehub.models import User
from gamehub.utils.auth import get_password_hash, verify_password
from gamehub.utils.logger import setup_logger

logger = setup_logger("credential_store")


@lru_cache
def _dummy_password_hash() -> str:
    # Compared against when the username is unknown, so both failure paths cost one bcrypt check
    return get_password_hash("gamehub-dummy-password")


class CredentialStore:
    def __init__(self, user_db_handler: UserDBHandler | None = None):
        self.users = user_db_handler or UserDBHandler()

    async def create(
        self, username: str, password: str, *, db: AsyncSession = None
    ) -> User:
        """Create an account. Raises DuplicateUserError if the username is taken."""
        hashed_password = await asyncio.to_thread(get_password_hash, password)
        user = await self.users.create_user(username, hashed_password, db=db)
        logger.info(f"Created user {user.id} ('{user.username}')")
        return user

    async def verify(
        self, username: str, password: str, *, db: AsyncSession = None
    ) -> User:
        """Return the user owning these credentials or raise InvalidCredentialsError."""
        user = await self.users.get_user_by_username(username, db=db)

        if user is None:
            dummy_hash = await asyncio.to_thread(_dummy_password_hash)
            await asyncio.to_thread(verify_password, password, dummy_hash)
            logger.info("Sign-in rejected: invalid credentials")
            raise InvalidCredentialsError()

        if not await asyncio.to_thread(
            verify_password, password, user.hashed_password
        ):
            logger.info("Sign-in rejected: invalid credentials")
            raise InvalidCredentialsError()

        return user

    async def get_by_id(self, user_id: UUID, *, db: AsyncSession = None) -> User:
        user = await self.users.get(user_id, db=db)
        if user is None:
            raise NotFoundError("User not found")
        return user
