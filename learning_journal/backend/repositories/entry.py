"""
Entry Repository.

Data access layer for journal entries. Handles entry queries,
the entry/tag association rows, and substring search.
"""

from sqlalchemy import delete, insert, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from learning_journal.backend.core.exceptions import NotFoundError
from learning_journal.backend.models.entry import Entry
from learning_journal.backend.models.tag import EntryTag, Tag
from learning_journal.backend.repositories.base import BaseRepository


class EntryRepository(BaseRepository[Entry]):
    """
    Repository for Entry model.

    Inherits standard CRUD operations from BaseRepository
    and adds tag association and search queries.
    """

    model = Entry

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def get_all_newest_first(self) -> list[Entry]:
        """
        Get every entry, most recently created first.

        Returns:
            Entries with their tags loaded
        """
        result = await self.session.execute(
            select(Entry).order_by(Entry.created_at.desc(), Entry.id.desc())
        )
        return list(result.scalars().all())

    async def reload(self, id: int) -> Entry:
        """
        Re-read an entry and its tags from the database.

        Used after the association rows were rewritten, so the
        identity-mapped instance reflects the new tag set.

        Raises:
            NotFoundError: If entry not found
        """
        result = await self.session.execute(
            select(Entry)
            .where(Entry.id == id)
            .options(selectinload(Entry.tags))
            .execution_options(populate_existing=True)
        )
        entry = result.scalar_one_or_none()
        if entry is None:
            raise NotFoundError("Entry not found")
        return entry

    async def attach_tags(self, entry_id: int, tags: list[Tag]) -> None:
        """Insert one association row per tag."""
        if not tags:
            return
        await self.session.execute(
            insert(EntryTag).values(
                [{"entry_id": entry_id, "tag_id": tag.id} for tag in tags]
            )
        )

    async def detach_all_tags(self, entry_id: int) -> None:
        """Delete every association row of an entry. The tags themselves stay."""
        await self.session.execute(
            delete(EntryTag).where(EntryTag.entry_id == entry_id)
        )

    async def replace_tags(self, entry_id: int, tags: list[Tag]) -> None:
        """
        Replace the whole tag set of an entry.

        Every existing association row is deleted, then one row per tag
        is inserted. No diffing of old and new sets.

        Args:
            entry_id: Entry whose tags are replaced
            tags: Resolved tags, may be empty
        """
        await self.detach_all_tags(entry_id)
        await self.attach_tags(entry_id, tags)

    async def delete_by_id(self, id: int) -> bool:
        """
        Delete an entry; its association rows go with it via ON DELETE CASCADE.

        Returns:
            True if a row was deleted
        """
        result = await self.session.execute(delete(Entry).where(Entry.id == id))
        return result.rowcount > 0

    async def search(self, query: str) -> list[Entry]:
        """
        Find entries whose title, content or any tag name contains `query`.

        Matching is case-insensitive substring containment; `%` and `_`
        in the query match literally. Each entry appears once.

        Args:
            query: Search text

        Returns:
            Matching entries, most recently created first
        """
        result = await self.session.execute(
            select(Entry)
            .where(
                or_(
                    Entry.title.icontains(query, autoescape=True),
                    Entry.content.icontains(query, autoescape=True),
                    Entry.tags.any(Tag.name.icontains(query, autoescape=True)),
                )
            )
            .order_by(Entry.created_at.desc(), Entry.id.desc())
        )
        return list(result.scalars().all())
