"""
Picture Game API Routes - saving finished picture-identification games and
reading them back. Bearer token required on every route.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from gamehub.db import get_app_db
from gamehub.db_handlers import PictureGameResultDBHandler
from gamehub.dependencies.auth import get_current_user_id
from gamehub.schemas import (
    DataResponse,
    PictureResultResponse,
    PictureSaveRequest,
    PictureStats,
    SavedResponse,
)
from gamehub.services.statistics import picture_stats

router = APIRouter(prefix="/api/picture", tags=["Picture Game"])


@router.post(
    "/save",
    response_model=SavedResponse[PictureResultResponse],
    status_code=status.HTTP_201_CREATED,
)
async def save_picture_game_result(
    game_data: PictureSaveRequest,
    user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_app_db),
    picture_db_handler: PictureGameResultDBHandler = Depends(),
):
    result = await picture_db_handler.save(user_id, game_data.to_record(), db=db)
    return SavedResponse[PictureResultResponse](
        message="Picture game results saved successfully",
        data=PictureResultResponse.model_validate(result),
    )


@router.get("/history", response_model=DataResponse[list[PictureResultResponse]])
async def get_picture_game_history(
    user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_app_db),
    picture_db_handler: PictureGameResultDBHandler = Depends(),
):
    results = await picture_db_handler.history(user_id, db=db)
    return DataResponse[list[PictureResultResponse]](
        data=[PictureResultResponse.model_validate(r) for r in results]
    )


@router.get("/stats", response_model=DataResponse[PictureStats])
async def get_picture_game_stats(
    user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_app_db),
    picture_db_handler: PictureGameResultDBHandler = Depends(),
):
    results = await picture_db_handler.all_for_owner(user_id, db=db)
    return DataResponse[PictureStats](data=picture_stats(results))
