"""
Entry Commands.

Commands for browsing, writing, searching and backing up journal entries.
"""

from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console

from learning_journal.cli.client import run_client_call
from learning_journal.cli.output import entries_table, entry_panel
from learning_journal.client.export import (
    backup_filename,
    build_export,
    import_entries,
    read_export,
    write_export,
)
from learning_journal.client.grouping import neighbours

app = typer.Typer(help="Journal entry commands")
console = Console()


@app.command("list")
def list_entries() -> None:
    """
    List all entries, newest first.

    Examples:
        cli.py entries list
    """
    entries = run_client_call(lambda client: client.list_entries())
    if not entries:
        console.print("[dim]No entries yet. Add one with: cli.py entries add[/dim]")
        return
    console.print(entries_table(entries))


@app.command()
def show(entry_id: int = typer.Argument(..., help="Entry ID")) -> None:
    """
    Show one entry with the ids of its newer and older neighbours.

    Examples:
        cli.py entries show 3
    """

    async def _show(client):
        entry = await client.get_entry(entry_id)
        return entry, await client.list_entries()

    entry, all_entries = run_client_call(_show)
    previous_id, next_id = neighbours(all_entries, entry.id)

    console.print(entry_panel(entry))
    console.print(
        f"[dim]Previous: {f'#{previous_id}' if previous_id else '-'}"
        f"   Next: {f'#{next_id}' if next_id else '-'}[/dim]"
    )


@app.command()
def add(
    title: str = typer.Option(..., "--title", "-t", prompt=True, help="Entry title"),
    content: str = typer.Option(..., "--content", "-c", prompt=True, help="Entry content"),
    tags: Optional[list[str]] = typer.Option(None, "--tag", "-g", help="Tag name (repeatable)"),
) -> None:
    """
    Create an entry.

    Examples:
        cli.py entries add -t "Descriptors" -c "__get__ runs on access" -g python
    """
    entry = run_client_call(
        lambda client: client.create_entry(title=title, content=content, tags=tags or [])
    )
    console.print(f"[green]Created entry #{entry.id}[/green]")
    console.print(entry_panel(entry))


@app.command()
def edit(
    entry_id: int = typer.Argument(..., help="Entry ID"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="New title"),
    content: Optional[str] = typer.Option(None, "--content", "-c", help="New content"),
    tags: Optional[list[str]] = typer.Option(
        None, "--tag", "-g", help="Replacement tag name (repeatable)"
    ),
    clear_tags: bool = typer.Option(False, "--clear-tags", help="Remove all tags"),
) -> None:
    """
    Update an entry. Only the given fields change; --tag replaces all tags.

    Examples:
        cli.py entries edit 3 -t "New title"
        cli.py entries edit 3 -g python -g async
        cli.py entries edit 3 --clear-tags
    """
    fields: dict[str, Any] = {}
    if title is not None:
        fields["title"] = title
    if content is not None:
        fields["content"] = content
    if clear_tags:
        fields["tags"] = []
    elif tags:
        fields["tags"] = tags

    if not fields:
        console.print("[yellow]Nothing to update. Pass --title, --content, --tag or --clear-tags.[/yellow]")
        raise typer.Exit(1)

    entry = run_client_call(lambda client: client.update_entry(entry_id, **fields))
    console.print(f"[green]Updated entry #{entry.id}[/green]")
    console.print(entry_panel(entry))


@app.command()
def delete(
    entry_id: int = typer.Argument(..., help="Entry ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """
    Delete an entry. Its tags stay available.

    Examples:
        cli.py entries delete 3 --yes
    """
    if not yes:
        typer.confirm(f"Delete entry #{entry_id}?", abort=True)
    run_client_call(lambda client: client.delete_entry(entry_id))
    console.print(f"[green]Deleted entry #{entry_id}[/green]")


@app.command()
def search(query: str = typer.Argument(..., help="Text to look for")) -> None:
    """
    Search titles, contents and tag names (case-insensitive).

    Examples:
        cli.py entries search python
    """
    entries = run_client_call(lambda client: client.search_entries(query))
    if not entries:
        console.print(f"[dim]No entries match '{query}'[/dim]")
        return
    console.print(entries_table(entries, title=f"Results for '{query}'"))


@app.command("export")
def export_entries(
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Target file (default: learning-journal-backup-<date>.json)"
    ),
) -> None:
    """
    Write every entry to a JSON backup file.

    Examples:
        cli.py entries export
        cli.py entries export -o backup.json
    """
    entries = run_client_call(lambda client: client.list_entries())
    document = build_export(entries)
    path = write_export(document, output or Path(backup_filename()))
    console.print(f"[green]Exported {document['totalEntries']} entries to {path}[/green]")


@app.command("import")
def import_backup(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Backup file"),
) -> None:
    """
    Re-create the entries of a JSON backup file.

    Entries get new ids; titles, contents and tags are kept.

    Examples:
        cli.py entries import learning-journal-backup-2024-03-01.json
    """
    try:
        document = read_export(path)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    created = run_client_call(lambda client: import_entries(client, document))
    console.print(f"[green]Imported {len(created)} entries from {path}[/green]")
