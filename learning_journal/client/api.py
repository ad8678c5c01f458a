"""
HTTP Client for the Journal API.

Async httpx client used by the terminal front end.
All requests include X-Frontend-ID: cli header for log routing.
"""

from typing import Any

import httpx

from learning_journal.backend.core.config import get_app_config, get_server_base_url
from learning_journal.backend.core.logging import get_logger, log_with_source
from learning_journal.backend.schemas.entry import EntryResponse, TagResponse

logger = get_logger(__name__)


class ApiError(Exception):
    """Non-2xx response from the journal API."""

    def __init__(
        self,
        status_code: int,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.details = details
        super().__init__(f"{status_code}: {message}")

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ApiError":
        """Build from an error envelope, falling back to the raw body."""
        try:
            body = response.json()
        except ValueError:
            return cls(response.status_code, response.text or response.reason_phrase)

        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict):
            return cls(
                response.status_code,
                error.get("message", response.reason_phrase),
                error.get("details"),
            )
        # HTTPException bodies (e.g. readiness 503) use "detail"
        if isinstance(body, dict) and "detail" in body:
            return cls(response.status_code, str(body["detail"]))
        return cls(response.status_code, response.reason_phrase)


class JournalClient:
    """
    HTTP client for the journal API.

    Features:
    - Base URL and timeout from application.yaml
    - X-Frontend-ID header for log routing
    - Typed results parsed into the API response schemas
    - ApiError carrying the server message on any non-2xx response

    Usage:
        client = JournalClient()
        entries = await client.list_entries()
        await client.close()
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        api_prefix: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: Server base URL. If None, reads from application.yaml.
            timeout: Request timeout in seconds. If None, reads from application.yaml.
            api_prefix: Path prefix of the REST API. If None, reads from application.yaml.
            transport: Optional httpx transport, e.g. ASGITransport in tests.
        """
        if base_url is None or timeout is None:
            config_base_url, config_timeout = get_server_base_url()
            base_url = base_url or config_base_url
            timeout = timeout if timeout is not None else config_timeout
        if api_prefix is None:
            api_prefix = get_app_config().application.api_prefix

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.api_prefix = api_prefix.rstrip("/")
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={"X-Frontend-ID": "cli"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "JournalClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """
        Make an HTTP request and fail on non-2xx status.

        Raises:
            ApiError: On a non-2xx response
            httpx.HTTPError: On transport failure
        """
        client = await self._get_client()

        log_with_source(logger, "cli", "debug", "API request", method=method, path=path)

        try:
            response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            log_with_source(
                logger,
                "cli",
                "error",
                "API request failed",
                method=method,
                path=path,
                error=str(e),
            )
            raise

        log_with_source(
            logger,
            "cli",
            "debug",
            "API response",
            method=method,
            path=path,
            status_code=response.status_code,
        )

        if response.is_error:
            raise ApiError.from_response(response)
        return response

    def _api(self, path: str) -> str:
        return f"{self.api_prefix}{path}"

    # -- entries ---------------------------------------------------------

    async def list_entries(self) -> list[EntryResponse]:
        response = await self.request("GET", self._api("/entries"))
        return [EntryResponse.model_validate(item) for item in response.json()]

    async def get_entry(self, entry_id: int) -> EntryResponse:
        response = await self.request("GET", self._api(f"/entries/{entry_id}"))
        return EntryResponse.model_validate(response.json())

    async def search_entries(self, query: str) -> list[EntryResponse]:
        response = await self.request(
            "GET", self._api("/entries/search"), params={"q": query}
        )
        return [EntryResponse.model_validate(item) for item in response.json()]

    async def create_entry(
        self,
        title: str,
        content: str,
        tags: list[str] | None = None,
    ) -> EntryResponse:
        payload = {"title": title, "content": content, "tags": tags or []}
        response = await self.request("POST", self._api("/entries"), json=payload)
        return EntryResponse.model_validate(response.json())

    async def update_entry(self, entry_id: int, **fields: Any) -> EntryResponse:
        """
        Update an entry. Only the given fields are sent.

        Pass tags=[] to clear the tag set; leave tags out to keep it.
        """
        response = await self.request(
            "PUT", self._api(f"/entries/{entry_id}"), json=fields
        )
        return EntryResponse.model_validate(response.json())

    async def delete_entry(self, entry_id: int) -> None:
        await self.request("DELETE", self._api(f"/entries/{entry_id}"))

    # -- tags ------------------------------------------------------------

    async def list_tags(self) -> list[TagResponse]:
        response = await self.request("GET", self._api("/tags"))
        return [TagResponse.model_validate(item) for item in response.json()]

    # -- health ----------------------------------------------------------

    async def health(self) -> dict[str, Any]:
        """Liveness probe."""
        response = await self.request("GET", "/health")
        return response.json()

    async def readiness(self) -> dict[str, Any]:
        """Readiness probe; a 503 raises ApiError."""
        response = await self.request("GET", "/health/ready")
        return response.json()
