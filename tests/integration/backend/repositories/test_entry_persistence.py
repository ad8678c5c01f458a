"""
Integration Tests for Entry Persistence.

Exercises EntryService end to end against a real database: tag
attachment, replacement, cascade deletes and search.
"""

from datetime import datetime

import pytest
from sqlalchemy import func, select

from learning_journal.backend.core.exceptions import NotFoundError
from learning_journal.backend.models import Entry, EntryTag, Tag
from learning_journal.backend.schemas.entry import EntryCreate, EntryUpdate
from learning_journal.backend.services.entry import EntryService
from learning_journal.backend.services.tag import TagService


async def _count(session, model) -> int:
    result = await session.execute(select(func.count()).select_from(model))
    return result.scalar_one()


def _names(entry: Entry) -> list[str]:
    return [tag.name for tag in entry.tags]


@pytest.fixture
def service(db_session):
    return EntryService(db_session)


class TestCreate:
    """Tests for entry creation."""

    @pytest.mark.asyncio
    async def test_create_with_tags(self, service, db_session):
        entry = await service.create_entry(
            EntryCreate(title="Hooks", content="useEffect", tags=["React", "JS", " react "])
        )

        assert entry.id is not None
        assert _names(entry) == ["js", "react"]
        assert entry.created_at == entry.updated_at
        assert await _count(db_session, EntryTag) == 2

    @pytest.mark.asyncio
    async def test_tags_shared_between_entries(self, service, db_session):
        first = await service.create_entry(EntryCreate(title="A", content="a", tags=["python"]))
        second = await service.create_entry(EntryCreate(title="B", content="b", tags=["Python"]))

        assert first.tags[0].id == second.tags[0].id
        assert await _count(db_session, Tag) == 1

    @pytest.mark.asyncio
    async def test_create_without_tags(self, service, db_session):
        entry = await service.create_entry(EntryCreate(title="Plain", content="text"))

        assert entry.tags == []
        assert await _count(db_session, EntryTag) == 0


class TestUpdate:
    """Tests for partial updates and tag replacement."""

    @pytest.mark.asyncio
    async def test_replacing_tags_leaves_orphans(self, service, db_session):
        entry = await service.create_entry(
            EntryCreate(title="T", content="C", tags=["a", "b"])
        )

        updated = await service.update_entry(entry.id, EntryUpdate(tags=["b", "c"]))

        assert _names(updated) == ["b", "c"]
        tags = await TagService(db_session).list_tags()
        assert [t.name for t in tags] == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_omitted_tags_are_kept(self, service):
        entry = await service.create_entry(EntryCreate(title="T", content="C", tags=["keep"]))

        updated = await service.update_entry(entry.id, EntryUpdate(content="New"))

        assert updated.content == "New"
        assert updated.title == "T"
        assert _names(updated) == ["keep"]

    @pytest.mark.asyncio
    async def test_empty_tags_clear_the_set(self, service, db_session):
        entry = await service.create_entry(EntryCreate(title="T", content="C", tags=["x"]))

        updated = await service.update_entry(entry.id, EntryUpdate(tags=[]))

        assert updated.tags == []
        assert await _count(db_session, EntryTag) == 0
        assert await _count(db_session, Tag) == 1

    @pytest.mark.asyncio
    async def test_updated_at_refreshed(self, service, db_session):
        entry = await service.create_entry(EntryCreate(title="T", content="C"))
        old = datetime(2020, 1, 1)
        entry.created_at = old
        entry.updated_at = old
        await db_session.flush()

        updated = await service.update_entry(entry.id, EntryUpdate(title="T2"))

        assert updated.updated_at > old
        assert updated.created_at == old

    @pytest.mark.asyncio
    async def test_unknown_entry(self, service):
        with pytest.raises(NotFoundError):
            await service.update_entry(999, EntryUpdate(title="x"))


class TestDelete:
    """Tests for deletion and cascade."""

    @pytest.mark.asyncio
    async def test_delete_cascades_association_rows(self, service, db_session):
        entry = await service.create_entry(
            EntryCreate(title="T", content="C", tags=["a", "b"])
        )

        await service.delete_entry(entry.id)

        assert await _count(db_session, Entry) == 0
        assert await _count(db_session, EntryTag) == 0
        assert await _count(db_session, Tag) == 2

    @pytest.mark.asyncio
    async def test_get_after_delete(self, service):
        entry = await service.create_entry(EntryCreate(title="T", content="C"))
        await service.delete_entry(entry.id)

        with pytest.raises(NotFoundError):
            await service.get_entry(entry.id)

    @pytest.mark.asyncio
    async def test_delete_missing_is_silent(self, service):
        await service.delete_entry(12345)


class TestListAndSearch:
    """Tests for listing order and search semantics."""

    @pytest.fixture
    async def seeded(self, service, db_session):
        react = await service.create_entry(
            EntryCreate(title="React hooks", content="state", tags=["frontend"])
        )
        tagged = await service.create_entry(
            EntryCreate(title="Weekly notes", content="misc", tags=["React"])
        )
        body = await service.create_entry(
            EntryCreate(title="Bundlers", content="vite builds REACT apps", tags=[])
        )
        other = await service.create_entry(
            EntryCreate(title="Rust", content="ownership", tags=["systems"])
        )
        # Distinct creation times, oldest first
        for minute, entry in enumerate([react, tagged, body, other]):
            entry.created_at = datetime(2024, 3, 1, 12, minute)
        await db_session.flush()
        return {"react": react, "tagged": tagged, "body": body, "other": other}

    @pytest.mark.asyncio
    async def test_list_newest_first(self, service, seeded):
        entries = await service.list_entries()

        assert [e.title for e in entries] == ["Rust", "Bundlers", "Weekly notes", "React hooks"]

    @pytest.mark.asyncio
    async def test_search_matches_title_content_and_tags(self, service, seeded):
        results = await service.search_entries("react")

        assert [e.title for e in results] == ["Bundlers", "Weekly notes", "React hooks"]

    @pytest.mark.asyncio
    async def test_search_entry_appears_once(self, service, db_session):
        await service.create_entry(
            EntryCreate(title="python", content="python", tags=["python", "python3"])
        )

        results = await service.search_entries("python")

        assert len(results) == 1

    @pytest.mark.asyncio
    async def test_search_results_carry_full_tag_list(self, service):
        await service.create_entry(
            EntryCreate(title="Go", content="goroutines", tags=["concurrency", "golang"])
        )

        results = await service.search_entries("golang")

        assert _names(results[0]) == ["concurrency", "golang"]

    @pytest.mark.asyncio
    async def test_wildcards_match_literally(self, service):
        await service.create_entry(EntryCreate(title="50% done", content="x"))
        await service.create_entry(EntryCreate(title="500 done", content="x"))
        await service.create_entry(EntryCreate(title="snake_case", content="x"))
        await service.create_entry(EntryCreate(title="snakeXcase", content="x"))

        assert [e.title for e in await service.search_entries("50%")] == ["50% done"]
        assert [e.title for e in await service.search_entries("e_c")] == ["snake_case"]

    @pytest.mark.asyncio
    async def test_no_match(self, service, seeded):
        assert await service.search_entries("haskell") == []
