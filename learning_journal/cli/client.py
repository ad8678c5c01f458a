"""
Client plumbing for CLI commands.

Holds the JournalClient singleton and runs async client calls from
synchronous Typer commands, turning API and connection failures into
a red message and exit code 1.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

import httpx
import typer
from rich.console import Console

from learning_journal.client.api import ApiError, JournalClient

T = TypeVar("T")

console = Console()

# Module-level client instance
_client: JournalClient | None = None


def get_journal_client() -> JournalClient:
    """Get or create the API client singleton."""
    global _client
    if _client is None:
        _client = JournalClient()
    return _client


async def close_journal_client() -> None:
    """Close the API client."""
    global _client
    if _client:
        await _client.close()
        _client = None


def run_client_call(call: Callable[[JournalClient], Awaitable[T]]) -> T:
    """
    Run `call` with the shared client on a fresh event loop.

    Raises:
        typer.Exit: With code 1 on ApiError or transport failure
    """

    async def _run() -> T:
        client = get_journal_client()
        try:
            return await call(client)
        finally:
            await close_journal_client()

    try:
        return asyncio.run(_run())
    except ApiError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        if e.details:
            for issue in e.details.get("validation_errors", []):
                console.print(f"[dim]  {issue['field']}: {issue['message']}[/dim]")
        raise typer.Exit(1)
    except httpx.ConnectError:
        console.print("[red]Error: Cannot connect to backend[/red]")
        console.print("[dim]Is the server running? Start with: cli.py server start[/dim]")
        raise typer.Exit(1)
    except httpx.HTTPError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
