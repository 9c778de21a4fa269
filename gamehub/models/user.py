"""
User model for authentication and game result ownership.

Architecture:
    User → QuizResult
    User → PictureGameResult

Key Features:
    - bcrypt password hashes, never the plain password
    - Case-sensitive usernames, unique at the database level
    - Automatic creation timestamp
"""

from sqlalchemy import Column, Index, String
from sqlalchemy.orm import relationship

from gamehub.models.base import Base, TimestampMixin, UUIDMixin, table_args


class User(Base, UUIDMixin, TimestampMixin):
    """
    Registered player account.

    Uniqueness of ``username`` is enforced by the ``ix_users_username`` unique
    index, so two concurrent signups with the same name cannot both commit.
    """

    __tablename__ = "users"
    __table_args__ = table_args(
        Index("ix_users_username", "username", unique=True),
    )

    username = Column(
        String(50),
        nullable=False,
        comment="Unique username for user identification and login",
    )

    hashed_password = Column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password for secure authentication",
    )

    quiz_results = relationship(
        "QuizResult",
        back_populates="owner",
        cascade="all, delete-orphan",
        doc="Finished quiz games of this user",
    )

    picture_game_results = relationship(
        "PictureGameResult",
        back_populates="owner",
        cascade="all, delete-orphan",
        doc="Finished picture-identification games of this user",
    )

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}')>"
