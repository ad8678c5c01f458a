"""
Integration Tests for the Journal Client.

Runs JournalClient against the real app through ASGITransport, covering
the paths the CLI takes: CRUD, search, streaks, and export/import.
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession

from learning_journal.backend.core.database import get_db_session
from learning_journal.client.api import ApiError, JournalClient
from learning_journal.client.export import build_export, import_entries, read_export, write_export
from learning_journal.client.grouping import group_by_tag, neighbours
from learning_journal.client.streak import compute_streak_stats


@pytest.fixture
async def journal(db_session: AsyncSession) -> AsyncGenerator[JournalClient, None]:
    """JournalClient wired to an in-process app sharing the test session."""

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        yield db_session
        await db_session.flush()

    from learning_journal.backend.main import create_app

    app = create_app()
    app.dependency_overrides[get_db_session] = override_get_db_session

    async with JournalClient(
        base_url="http://test",
        timeout=5,
        api_prefix="/api",
        transport=ASGITransport(app=app),
    ) as client:
        yield client

    app.dependency_overrides.clear()


class TestCrud:
    """Entry lifecycle through the client."""

    @pytest.mark.asyncio
    async def test_lifecycle(self, journal):
        created = await journal.create_entry("Title", "Body", tags=["Python"])
        assert [t.name for t in created.tags] == ["python"]

        updated = await journal.update_entry(created.id, content="New body")
        assert updated.content == "New body"
        assert [t.name for t in updated.tags] == ["python"]

        cleared = await journal.update_entry(created.id, tags=[])
        assert cleared.tags == []

        await journal.delete_entry(created.id)
        with pytest.raises(ApiError) as exc_info:
            await journal.get_entry(created.id)
        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Entry not found"

    @pytest.mark.asyncio
    async def test_validation_error_carries_issues(self, journal):
        with pytest.raises(ApiError) as exc_info:
            await journal.create_entry("", "Body")

        error = exc_info.value
        assert error.status_code == 400
        issues = error.details["validation_errors"]
        assert any("title" in issue["field"] for issue in issues)

    @pytest.mark.asyncio
    async def test_search(self, journal):
        await journal.create_entry("Async IO", "event loops", tags=["python"])
        await journal.create_entry("Borrow checker", "lifetimes", tags=["rust"])

        results = await journal.search_entries("PYTHON")

        assert [e.title for e in results] == ["Async IO"]

    @pytest.mark.asyncio
    async def test_health(self, journal):
        assert await journal.health() == {"status": "healthy"}


class TestDerivedViews:
    """Client-side views computed from fetched entries."""

    @pytest.mark.asyncio
    async def test_tag_groups_and_neighbours(self, journal):
        first = await journal.create_entry("One", "a", tags=["python"])
        second = await journal.create_entry("Two", "b", tags=["python", "web"])
        third = await journal.create_entry("Three", "c")

        entries = await journal.list_entries()
        groups = group_by_tag(entries, await journal.list_tags())

        assert [(g.tag.name, g.count) for g in groups] == [("python", 2), ("web", 1)]
        assert neighbours(entries, second.id) == (third.id, first.id)

    @pytest.mark.asyncio
    async def test_streak_counts_today(self, journal):
        await journal.create_entry("Today", "written now")

        entries = await journal.list_entries()
        stats = compute_streak_stats(entries)

        assert stats.current_streak == 1
        assert stats.longest_streak == 1


class TestExportImport:
    """Backup written by one journal replays into the same shape."""

    @pytest.mark.asyncio
    async def test_round_trip(self, journal, tmp_path):
        await journal.create_entry("Oldest", "1", tags=["b", "a"])
        await journal.create_entry("Newest", "2")

        document = build_export(await journal.list_entries())
        path = write_export(document, tmp_path / "backup.json")
        loaded = read_export(path)

        for entry in await journal.list_entries():
            await journal.delete_entry(entry.id)

        created = await import_entries(journal, loaded)

        assert [e.title for e in created] == ["Oldest", "Newest"]
        restored = await journal.list_entries()
        assert [e.title for e in restored] == ["Newest", "Oldest"]
        assert [t.name for t in restored[1].tags] == ["a", "b"]
        assert loaded["totalEntries"] == 2
