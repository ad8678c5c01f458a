"""
Entry Service.

Business logic layer for journal entries. Orchestrates the entry and
tag repositories so that each create or update touches the entry row,
the tags and the association rows within the request's transaction.
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from learning_journal.backend.core.exceptions import NotFoundError, ValidationError
from learning_journal.backend.core.utils import utc_now
from learning_journal.backend.models.base import MAX_INTEGER_ID
from learning_journal.backend.models.entry import Entry
from learning_journal.backend.repositories.entry import EntryRepository
from learning_journal.backend.repositories.tag import TagRepository
from learning_journal.backend.schemas.entry import EntryCreate, EntryUpdate
from learning_journal.backend.services.base import BaseService


def _is_storable_id(entry_id: int) -> bool:
    """Ids beyond the column range cannot exist and are never sent to the database."""
    return 0 <= entry_id <= MAX_INTEGER_ID


class EntryService(BaseService):
    """
    Service for entry business logic.

    Every method returns entries with their tags loaded. Database
    failures surface as DatabaseError; unknown ids as NotFoundError.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = EntryRepository(session)
        self.tag_repo = TagRepository(session)

    async def create_entry(self, data: EntryCreate) -> Entry:
        """
        Create an entry and attach its tags.

        Args:
            data: Entry creation data

        Returns:
            Created entry with resolved tags
        """
        self._log_operation("Creating entry", title=data.title, tag_count=len(data.tags))

        entry = await self._execute_db_operation(
            "create entry",
            self._create(data),
        )

        self._log_debug("Entry created", entry_id=entry.id)
        return entry

    async def _create(self, data: EntryCreate) -> Entry:
        now = utc_now()
        entry = await self.repo.create(
            title=data.title,
            content=data.content,
            created_at=now,
            updated_at=now,
        )
        tags = await self.tag_repo.get_or_create(data.tags)
        await self.repo.attach_tags(entry.id, tags)
        return await self.repo.reload(entry.id)

    async def get_entry(self, entry_id: int) -> Entry:
        """
        Get an entry by ID.

        Raises:
            NotFoundError: If entry not found
        """
        self._require_storable_id(entry_id)
        return await self._execute_db_operation(
            "fetch entry",
            self.repo.get_by_id(entry_id),
        )

    async def list_entries(self) -> list[Entry]:
        """List every entry, newest first."""
        return await self._execute_db_operation(
            "fetch entries",
            self.repo.get_all_newest_first(),
        )

    async def update_entry(self, entry_id: int, data: EntryUpdate) -> Entry:
        """
        Update an existing entry.

        Only fields present in the request are written. updated_at is
        refreshed even when nothing else changes. When `tags` is present
        the tag set is replaced entirely, otherwise it is left alone.

        Args:
            entry_id: Entry ID to update
            data: Update data

        Returns:
            Updated entry with its tags

        Raises:
            NotFoundError: If entry not found
        """
        self._require_storable_id(entry_id)
        fields = data.model_dump(exclude_unset=True)
        tag_names = fields.pop("tags", None)

        self._log_operation(
            "Updating entry",
            entry_id=entry_id,
            fields=list(fields.keys()),
            replace_tags=tag_names is not None,
        )

        return await self._execute_db_operation(
            "update entry",
            self._update(entry_id, fields, tag_names),
        )

    async def _update(
        self,
        entry_id: int,
        fields: dict[str, Any],
        tag_names: list[str] | None,
    ) -> Entry:
        await self.repo.update(entry_id, **fields, updated_at=utc_now())
        if tag_names is not None:
            tags = await self.tag_repo.get_or_create(tag_names)
            await self.repo.replace_tags(entry_id, tags)
        return await self.repo.reload(entry_id)

    async def delete_entry(self, entry_id: int) -> None:
        """
        Delete an entry.

        Deleting an id that does not exist is not an error.
        """
        if not _is_storable_id(entry_id):
            self._log_debug("Entry to delete did not exist", entry_id=entry_id)
            return

        self._log_operation("Deleting entry", entry_id=entry_id)

        deleted = await self._execute_db_operation(
            "delete entry",
            self.repo.delete_by_id(entry_id),
        )

        if not deleted:
            self._log_debug("Entry to delete did not exist", entry_id=entry_id)

    @staticmethod
    def _require_storable_id(entry_id: int) -> None:
        if not _is_storable_id(entry_id):
            raise NotFoundError("Entry not found")

    async def search_entries(self, query: str | None) -> list[Entry]:
        """
        Search entries by title, content and tag name.

        Raises:
            ValidationError: If the query is missing or empty
        """
        if not query:
            raise ValidationError("Search query is required")

        self._log_debug("Searching entries", query=query)
        return await self._execute_db_operation(
            "search entries",
            self.repo.search(query),
        )
