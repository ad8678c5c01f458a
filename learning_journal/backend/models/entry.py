"""
Entry Model.

A single journal record. Tags are attached through the entry_tags
association table and loaded eagerly whenever entries are selected.
"""

from typing import TYPE_CHECKING

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from learning_journal.backend.models.base import Base, IntegerIdMixin, TimestampMixin

if TYPE_CHECKING:
    from learning_journal.backend.models.tag import Tag


class Entry(IntegerIdMixin, TimestampMixin, Base):
    """Journal entry database model."""

    __tablename__ = "entries"

    title: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # Read-only view of the association rows; writes go through
    # EntryRepository.replace_tags so the set is always replaced whole.
    tags: Mapped[list["Tag"]] = relationship(
        secondary="entry_tags",
        viewonly=True,
        lazy="selectin",
        order_by="Tag.name",
    )

    def __repr__(self) -> str:
        return f"<Entry(id={self.id}, title={self.title!r})>"
