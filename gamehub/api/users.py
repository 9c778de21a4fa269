"""
User API Routes - profile and combined statistics of the authenticated user.
"""

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from gamehub.api.auth import get_credential_store
from gamehub.db import get_app_db
from gamehub.db_handlers import PictureGameResultDBHandler, QuizResultDBHandler
from gamehub.dependencies.auth import get_current_user_id
from gamehub.schemas import DataResponse, OverallStats, UserProfile
from gamehub.services.credential_store import CredentialStore
from gamehub.services.statistics import overall_stats

router = APIRouter(prefix="/api/user", tags=["User"])


@router.get("/profile", response_model=DataResponse[UserProfile])
async def get_profile(
    user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_app_db),
    credential_store: CredentialStore = Depends(get_credential_store),
):
    """Profile of the current user. The password hash is never included."""
    user = await credential_store.get_by_id(user_id, db=db)
    return DataResponse[UserProfile](data=UserProfile.model_validate(user))


@router.get("/overall-stats", response_model=DataResponse[OverallStats])
async def get_overall_stats(
    user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_app_db),
    quiz_db_handler: QuizResultDBHandler = Depends(),
    picture_db_handler: PictureGameResultDBHandler = Depends(),
):
    """
    Quiz and picture-game summaries side by side.

    The two games are aggregated independently; ``totalGamesPlayed`` is just
    the sum of both game counts.
    """
    quiz_results = await quiz_db_handler.all_for_owner(user_id, db=db)
    picture_results = await picture_db_handler.all_for_owner(user_id, db=db)
    return DataResponse[OverallStats](
        data=overall_stats(quiz_results, picture_results)
    )
