# Database models package
from learning_journal.backend.models.base import Base, IntegerIdMixin, TimestampMixin
from learning_journal.backend.models.entry import Entry
from learning_journal.backend.models.tag import EntryTag, Tag

__all__ = [
    "Base",
    "Entry",
    "EntryTag",
    "IntegerIdMixin",
    "Tag",
    "TimestampMixin",
]
