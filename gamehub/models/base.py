"""
Base configurations and mixins for database models.

Provides the declarative base shared by every GameHub table, plus mixins for
UUID primary keys and automatic timestamps. Column types are the portable
SQLAlchemy ones so the same models run on Postgres and on SQLite.
"""

import uuid
from datetime import UTC, datetime

from sqlalchemy import JSON, Column, DateTime, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql.functions import now as db_now

from gamehub.config import settings

# JSONB on Postgres, plain JSON elsewhere
JSONType = JSON().with_variant(JSONB(), "postgresql")

Base = declarative_base()


def utc_now() -> datetime:
    return datetime.now(UTC)


class TimestampMixin:
    """
    Adds database-managed ``created_at`` and ``updated_at`` columns.
    """

    created_at = Column(
        DateTime(timezone=True),
        server_default=db_now(),
        nullable=False,
        comment="Timestamp when the record was created",
    )
    updated_at = Column(
        DateTime(timezone=True),
        server_default=db_now(),
        onupdate=db_now(),
        nullable=False,
        comment="Timestamp when the record was last updated",
    )


class UUIDMixin:
    """
    Adds a UUID4 primary key generated on the application side.
    """

    id = Column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        index=True,
        comment="Primary key using UUID4 format",
    )


SCHEMA_NAME = settings.schema_name


def table_args(*args) -> tuple:
    """Append the schema option to ``__table_args__`` when one is configured."""
    if SCHEMA_NAME:
        return (*args, {"schema": SCHEMA_NAME})
    return args


def qualified(column_path: str) -> str:
    """Schema-qualify a ``table.column`` foreign key target."""
    if SCHEMA_NAME:
        return f"{SCHEMA_NAME}.{column_path}"
    return column_path


__all__ = [
    "Base",
    "JSONType",
    "SCHEMA_NAME",
    "TimestampMixin",
    "UUIDMixin",
    "qualified",
    "table_args",
    "utc_now",
]
