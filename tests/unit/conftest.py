"""
Unit Test Fixtures.

Fixtures for unit tests - all external dependencies are mocked.
Unit tests should be fast and isolated, never touching real databases.
"""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from learning_journal.backend.schemas.entry import EntryResponse, TagResponse


# =============================================================================
# Database Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_db_session() -> AsyncMock:
    """
    Mock database session for unit tests.

    Usage:
        def test_service(mock_db_session: AsyncMock):
            service = EntryService(mock_db_session)
    """
    session = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.execute = AsyncMock()
    session.add = MagicMock()
    return session


# =============================================================================
# Settings Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_app_config() -> MagicMock:
    """
    Mock YAML application configuration with attribute access.

    Usage:
        def test_with_config(mock_app_config):
            with patch("module.get_app_config", return_value=mock_app_config):
                ...
    """
    config = MagicMock()
    config.application.name = "Test Journal"
    config.application.version = "1.0.0"
    config.application.environment = "test"
    config.application.api_prefix = "/api"
    config.application.server.host = "127.0.0.1"
    config.application.server.port = 8000
    config.application.timeouts.database = 5
    config.application.timeouts.external_api = 10
    config.features.api_request_logging = False
    config.features.api_detailed_errors = False
    return config


# =============================================================================
# Entry Builders
# =============================================================================


_TAG_IDS: dict[str, int] = {}


def tag_id(name: str) -> int:
    """Stable id per tag name across one test run."""
    return _TAG_IDS.setdefault(name, len(_TAG_IDS) + 1)


def build_entry(
    entry_id: int,
    created_at: datetime,
    title: str | None = None,
    tags: list[str] | None = None,
) -> EntryResponse:
    """Build an API-shaped entry."""
    return EntryResponse(
        id=entry_id,
        title=title or f"Entry {entry_id}",
        content=f"Content {entry_id}",
        created_at=created_at,
        updated_at=created_at,
        tags=[TagResponse(id=tag_id(name), name=name) for name in tags or []],
    )


@pytest.fixture
def entry_builder():
    """Provide build_entry to tests."""
    return build_entry


@pytest.fixture
def tag_builder():
    """Build a TagResponse whose id matches the one build_entry uses."""

    def _build(name: str) -> TagResponse:
        return TagResponse(id=tag_id(name), name=name)

    return _build
