"""
SQLAlchemy Base Model.

Base class for all database models with common fields and utilities.
"""

from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from learning_journal.backend.core.utils import utc_now


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class TimestampMixin:
    """
    Mixin that adds created_at and updated_at timestamps.

    updated_at is also assigned explicitly on every update, since
    onupdate only fires when some other column changed.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utc_now,
        nullable=False,
        index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
    )


# Largest value an INTEGER primary key holds on every supported backend
MAX_INTEGER_ID = 2**31 - 1


class IntegerIdMixin:
    """Mixin that adds a database-assigned integer primary key."""

    id: Mapped[int] = mapped_column(
        primary_key=True,
        autoincrement=True,
    )
