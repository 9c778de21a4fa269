"""
Finished-game records for the quiz and the picture-identification game.

Both tables are append-only: a row is written once when a game ends and is
never updated. Each row belongs to exactly one user through ``owner_id``,
which is indexed because statistics scan a user's whole history.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Uuid,
)
from sqlalchemy.orm import relationship, validates

from gamehub.models.base import (
    Base,
    JSONType,
    UUIDMixin,
    qualified,
    table_args,
    utc_now,
)

DIFFICULTIES = ("easy", "medium", "hard")


class QuizResult(Base, UUIDMixin):
    """One completed quiz, including every answered question."""

    __tablename__ = "quiz_results"
    __table_args__ = table_args(
        Index("ix_quiz_results_owner_id", "owner_id"),
        Index("ix_quiz_results_owner_completed", "owner_id", "completed_at"),
        CheckConstraint(
            "difficulty IN ('easy', 'medium', 'hard')",
            name="ck_quiz_results_difficulty",
        ),
    )

    owner_id = Column(
        Uuid(as_uuid=True),
        ForeignKey(qualified("users.id"), ondelete="CASCADE"),
        nullable=False,
        comment="User who played the quiz",
    )

    score = Column(Integer, nullable=False, comment="Points earned in the quiz")

    total_questions = Column(
        Integer, nullable=False, comment="Number of questions asked"
    )

    difficulty = Column(
        String(10), nullable=False, comment="Difficulty bucket: easy/medium/hard"
    )

    topic = Column(String(200), nullable=True, comment="Optional topic label")

    answers = Column(
        JSONType,
        nullable=False,
        default=list,
        comment="Ordered per-question answer records",
    )

    completed_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        comment="Server-assigned completion time",
    )

    owner = relationship("User", back_populates="quiz_results")

    @validates("difficulty")
    def validate_difficulty(self, key, value):
        if value not in DIFFICULTIES:
            raise ValueError(f"Invalid difficulty: {value}")
        return value

    def __repr__(self):
        return (
            f"<QuizResult(id={self.id}, owner_id={self.owner_id}, "
            f"score={self.score}/{self.total_questions}, difficulty='{self.difficulty}')>"
        )


class PictureGameResult(Base, UUIDMixin):
    """One completed picture-identification game."""

    __tablename__ = "picture_game_results"
    __table_args__ = table_args(
        Index("ix_picture_game_results_owner_id", "owner_id"),
        Index(
            "ix_picture_game_results_owner_completed", "owner_id", "completed_at"
        ),
    )

    owner_id = Column(
        Uuid(as_uuid=True),
        ForeignKey(qualified("users.id"), ondelete="CASCADE"),
        nullable=False,
        comment="User who played the game",
    )

    score = Column(Integer, nullable=False, comment="Points earned in the game")

    level = Column(
        Integer, nullable=False, default=1, comment="Level reached in the game"
    )

    images_identified = Column(
        JSONType,
        nullable=False,
        default=list,
        comment="Ordered per-image identification records",
    )

    total_time = Column(
        Float, nullable=True, comment="Total time spent in seconds"
    )

    completed_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        comment="Server-assigned completion time",
    )

    owner = relationship("User", back_populates="picture_game_results")

    def __repr__(self):
        return (
            f"<PictureGameResult(id={self.id}, owner_id={self.owner_id}, "
            f"score={self.score}, level={self.level})>"
        )
