"""
Quiz API Routes - saving finished quizzes and reading them back.

Every route requires a bearer token and only ever touches the caller's own
results.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from gamehub.db import get_app_db
from gamehub.db_handlers import QuizResultDBHandler
from gamehub.dependencies.auth import get_current_user_id
from gamehub.schemas import (
    DataResponse,
    QuizResultResponse,
    QuizSaveRequest,
    QuizStats,
    SavedResponse,
)
from gamehub.services.statistics import quiz_stats

router = APIRouter(prefix="/api/quiz", tags=["Quiz"])


@router.post(
    "/save",
    response_model=SavedResponse[QuizResultResponse],
    status_code=status.HTTP_201_CREATED,
)
async def save_quiz_result(
    quiz_data: QuizSaveRequest,
    user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_app_db),
    quiz_db_handler: QuizResultDBHandler = Depends(),
):
    """Store a finished quiz for the current user."""
    result = await quiz_db_handler.save(user_id, quiz_data.to_record(), db=db)
    return SavedResponse[QuizResultResponse](
        message="Quiz results saved successfully",
        data=QuizResultResponse.model_validate(result),
    )


@router.get("/history", response_model=DataResponse[list[QuizResultResponse]])
async def get_quiz_history(
    user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_app_db),
    quiz_db_handler: QuizResultDBHandler = Depends(),
):
    """The current user's most recent quizzes, newest first."""
    results = await quiz_db_handler.history(user_id, db=db)
    return DataResponse[list[QuizResultResponse]](
        data=[QuizResultResponse.model_validate(r) for r in results]
    )


@router.get("/stats", response_model=DataResponse[QuizStats])
async def get_quiz_stats(
    user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_app_db),
    quiz_db_handler: QuizResultDBHandler = Depends(),
):
    """Aggregate statistics over the current user's whole quiz history."""
    results = await quiz_db_handler.all_for_owner(user_id, db=db)
    return DataResponse[QuizStats](data=quiz_stats(results))
