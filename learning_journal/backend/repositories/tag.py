"""
Tag Repository.

Data access layer for tags, including the batched get-or-create
used whenever an entry is saved with tag names.
"""

from sqlalchemy import insert, select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from learning_journal.backend.core.logging import get_logger
from learning_journal.backend.core.utils import normalize_tag_names
from learning_journal.backend.models.tag import Tag
from learning_journal.backend.repositories.base import BaseRepository

logger = get_logger(__name__)


class TagRepository(BaseRepository[Tag]):
    """Repository for Tag model."""

    model = Tag

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def get_all_by_name(self) -> list[Tag]:
        """Get every tag ordered alphabetically."""
        result = await self.session.execute(select(Tag).order_by(Tag.name))
        return list(result.scalars().all())

    async def get_by_names(self, names: list[str]) -> list[Tag]:
        """
        Get the tags whose stored name is in `names`, in one query.

        Names are compared as given; callers pass normalized names.
        """
        if not names:
            return []
        result = await self.session.execute(
            select(Tag).where(Tag.name.in_(names))
        )
        return list(result.scalars().all())

    async def get_or_create(self, raw_names: list[str]) -> list[Tag]:
        """
        Resolve raw tag names to Tag rows, creating the missing ones.

        Names are trimmed and lowercased, empty ones dropped and
        duplicates collapsed. Existing tags come first in the result,
        followed by the newly created ones.

        Missing names are inserted with ON CONFLICT DO NOTHING and then
        looked up again, so a tag created by a concurrent request in the
        meantime resolves to that row instead of failing.

        Args:
            raw_names: Tag names as typed by the user

        Returns:
            Resolved tags, no query issued when nothing is left to resolve
        """
        names = normalize_tag_names(raw_names)
        if not names:
            return []

        existing = await self.get_by_names(names)
        existing_names = {tag.name for tag in existing}
        missing = [name for name in names if name not in existing_names]

        if not missing:
            return existing

        result = await self.session.execute(
            self._insert_ignoring_duplicates().values(
                [{"name": name} for name in missing]
            )
        )

        created = {tag.name: tag for tag in await self.get_by_names(missing)}
        logger.debug(
            "Tags resolved",
            extra={
                "existing": len(existing),
                "missing": len(missing),
                "inserted": result.rowcount,
            },
        )
        return existing + [created[name] for name in missing if name in created]

    def _insert_ignoring_duplicates(self):
        """Build an INSERT into tags that skips names already present."""
        dialect = self.session.get_bind().dialect.name
        if dialect == "postgresql":
            return postgresql_insert(Tag).on_conflict_do_nothing(index_elements=["name"])
        if dialect == "sqlite":
            return sqlite_insert(Tag).on_conflict_do_nothing(index_elements=["name"])
        return insert(Tag)
