"""
Tag Service.

Read access to the global tag list.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from learning_journal.backend.models.tag import Tag
from learning_journal.backend.repositories.tag import TagRepository
from learning_journal.backend.services.base import BaseService


class TagService(BaseService):
    """Service for tag queries."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = TagRepository(session)

    async def list_tags(self) -> list[Tag]:
        """List every tag, including orphaned ones, sorted by name."""
        return await self._execute_db_operation(
            "fetch tags",
            self.repo.get_all_by_name(),
        )
