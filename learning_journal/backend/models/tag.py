"""
Tag and EntryTag Models.

Tag names are stored normalized (trimmed, lowercased) and are unique,
which is what keeps concurrent get-or-create calls from producing
duplicates. EntryTag rows cascade away with either side.
"""

from sqlalchemy import ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column

from learning_journal.backend.models.base import Base, IntegerIdMixin


class Tag(IntegerIdMixin, Base):
    """Tag database model."""

    __tablename__ = "tags"

    name: Mapped[str] = mapped_column(
        Text,
        unique=True,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Tag(id={self.id}, name={self.name!r})>"


class EntryTag(Base):
    """Association between an entry and a tag."""

    __tablename__ = "entry_tags"

    entry_id: Mapped[int] = mapped_column(
        ForeignKey("entries.id", ondelete="CASCADE"),
        primary_key=True,
    )
    tag_id: Mapped[int] = mapped_column(
        ForeignKey("tags.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<EntryTag(entry_id={self.entry_id}, tag_id={self.tag_id})>"
