"""
Integration Test Fixtures.

Fixtures for integration tests - uses a real database and the real app.
These fixtures build on the root conftest.py database fixtures.
"""

from collections.abc import AsyncGenerator
from pathlib import Path
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from learning_journal.backend.core.database import get_db_session

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@pytest.fixture(autouse=True)
def in_project_root(monkeypatch):
    """Config files are located from the working directory."""
    monkeypatch.chdir(PROJECT_ROOT)


# =============================================================================
# API Client Fixtures
# =============================================================================


@pytest.fixture
async def client(
    db_session: AsyncSession,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with database session override.

    Every request in the test shares the test session, so data written
    by one request is visible to the next.

    Usage:
        async def test_list_entries(client: AsyncClient):
            response = await client.get("/api/entries")
            assert response.status_code == 200
    """

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        try:
            yield db_session
            await db_session.flush()
        except Exception:
            await db_session.rollback()
            raise

    from learning_journal.backend.main import create_app

    app = create_app()
    app.dependency_overrides[get_db_session] = override_get_db_session

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# API Response Assertion Helpers
# =============================================================================


class ApiAssertions:
    """Helper class for API response assertions."""

    @staticmethod
    def assert_ok(response: Any, expected_status: int = 200) -> Any:
        """
        Assert API response is successful and return its JSON body.

        Successful responses carry the resource itself, no envelope.
        """
        assert response.status_code == expected_status, (
            f"Expected status {expected_status}, got {response.status_code}: "
            f"{response.text}"
        )
        return response.json()

    @staticmethod
    def assert_error(
        response: Any,
        expected_status: int,
        expected_code: str | None = None,
        expected_message: str | None = None,
    ) -> dict[str, Any]:
        """
        Assert API response is an error envelope.

        Returns:
            Response JSON data
        """
        assert response.status_code == expected_status, (
            f"Expected status {expected_status}, got {response.status_code}: "
            f"{response.text}"
        )
        data = response.json()
        assert data.get("success") is False, f"Response should be error: {data}"
        assert data.get("error") is not None, f"Missing error details: {data}"

        if expected_code:
            actual_code = data["error"].get("code")
            assert actual_code == expected_code, (
                f"Expected error code {expected_code}, got {actual_code}"
            )
        if expected_message:
            assert data["error"]["message"] == expected_message

        return data

    @staticmethod
    def assert_validation_error(
        response: Any,
        field: str | None = None,
    ) -> dict[str, Any]:
        """Assert API response is a request validation error (400)."""
        data = ApiAssertions.assert_error(response, 400, "VAL_REQUEST_INVALID")

        if field:
            errors = data["error"].get("details", {}).get("validation_errors", [])
            fields = [e.get("field", "") for e in errors]
            assert any(field in f for f in fields), (
                f"Expected validation error for field '{field}', "
                f"got errors for: {fields}"
            )

        return data


@pytest.fixture
def api() -> ApiAssertions:
    """Provide API assertion helpers."""
    return ApiAssertions()
