from datetime import datetime
from typing import Generic, Literal, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


DataT = TypeVar("DataT")

Difficulty = Literal["easy", "medium", "hard"]


class CamelModel(BaseModel):
    """Accepts snake_case or camelCase input and serializes to camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ===== Authentication =====


class UserRegister(BaseModel):
    username: str = Field(
        ..., min_length=3, max_length=50, description="Username for the new account"
    )
    password: str = Field(
        ..., min_length=6, max_length=100, description="Password for the new account"
    )


class UserLogin(BaseModel):
    username: str = Field(..., description="Username for login")
    password: str = Field(..., description="Password for login")


class UserSummary(CamelModel):
    id: UUID = Field(..., description="User unique identifier")
    username: str = Field(..., description="Username")


class UserProfile(UserSummary):
    created_at: datetime = Field(..., description="Account creation timestamp")


class AuthResponse(CamelModel):
    message: str
    token: str = Field(..., description="Bearer token for the Authorization header")
    user: UserSummary


class LogoutResponse(CamelModel):
    success: bool = True
    message: str


class IsAuthResponse(CamelModel):
    success: bool
    user: UserProfile | None = None
    message: str | None = None


class MessageResponse(BaseModel):
    message: str = Field(..., description="Response message")


# ===== Game results =====


class AnswerRecord(CamelModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    question_id: str | None = None
    question: str | None = None
    user_answer: str | None = None
    correct_answer: str | None = None
    is_correct: bool = False


class ImageRecord(CamelModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    image_id: str | None = None
    image_name: str | None = None
    category: str | None = None
    is_correct: bool = False
    time_spent: float | None = Field(default=None, ge=0, description="Seconds")


class QuizSaveRequest(CamelModel):
    # score is points awarded by the client and may exceed total_questions
    score: int = Field(..., ge=0)
    total_questions: int = Field(..., ge=0)
    difficulty: Difficulty
    topic: str | None = Field(default=None, max_length=200)
    answers: list[AnswerRecord] = Field(default_factory=list)

    def to_record(self) -> dict:
        """Column values for QuizResult, with answers kept in wire format."""
        return {
            "score": self.score,
            "total_questions": self.total_questions,
            "difficulty": self.difficulty,
            "topic": self.topic,
            "answers": [a.model_dump(by_alias=True) for a in self.answers],
        }


class PictureSaveRequest(CamelModel):
    score: int = Field(..., ge=0)
    level: int = Field(default=1, ge=1)
    images_identified: list[ImageRecord] = Field(default_factory=list)
    total_time: float | None = Field(default=None, ge=0, description="Seconds")

    def to_record(self) -> dict:
        return {
            "score": self.score,
            "level": self.level,
            "images_identified": [
                i.model_dump(by_alias=True) for i in self.images_identified
            ],
            "total_time": self.total_time,
        }


class QuizResultResponse(CamelModel):
    id: UUID
    owner_id: UUID
    score: int
    total_questions: int
    difficulty: Difficulty
    topic: str | None = None
    answers: list[AnswerRecord] = Field(default_factory=list)
    completed_at: datetime


class PictureResultResponse(CamelModel):
    id: UUID
    owner_id: UUID
    score: int
    level: int
    images_identified: list[ImageRecord] = Field(default_factory=list)
    total_time: float | None = None
    completed_at: datetime


# ===== Statistics =====


class DifficultyBreakdown(CamelModel):
    easy: int = 0
    medium: int = 0
    hard: int = 0


class GameSummary(CamelModel):
    total_games: int = 0
    average_score: float = 0
    best_score: int = 0


class QuizStats(GameSummary):
    total_score: int = 0
    by_difficulty: DifficultyBreakdown = Field(default_factory=DifficultyBreakdown)


class PictureStats(GameSummary):
    total_score: int = 0
    highest_level: int = 0
    total_images_identified: int = 0


class OverallStats(CamelModel):
    quiz: GameSummary
    picture: GameSummary
    total_games_played: int = 0


# ===== Envelopes =====


class DataResponse(BaseModel, Generic[DataT]):
    data: DataT


class SavedResponse(BaseModel, Generic[DataT]):
    message: str
    data: DataT
