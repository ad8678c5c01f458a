"""
Rich rendering helpers shared by the CLI commands.
"""

from datetime import datetime, timezone

from rich.panel import Panel
from rich.table import Table

from learning_journal.backend.schemas.entry import EntryResponse


def format_timestamp(timestamp: datetime) -> str:
    """Local wall-clock time; naive timestamps are UTC."""
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone().strftime("%Y-%m-%d %H:%M")


def format_tags(entry: EntryResponse) -> str:
    return ", ".join(f"#{tag.name}" for tag in entry.tags) or "-"


def entries_table(entries: list[EntryResponse], title: str = "Entries") -> Table:
    """One row per entry, in the given order."""
    table = Table(title=title, show_header=True)
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Title")
    table.add_column("Tags", style="magenta")
    table.add_column("Created", style="dim")

    for entry in entries:
        table.add_row(
            str(entry.id),
            entry.title,
            format_tags(entry),
            format_timestamp(entry.created_at),
        )
    return table


def entry_panel(entry: EntryResponse) -> Panel:
    """Full entry with title, tags and timestamps."""
    body = (
        f"{entry.content}\n\n"
        f"[magenta]{format_tags(entry)}[/magenta]\n"
        f"[dim]Created {format_timestamp(entry.created_at)}"
        f" · Updated {format_timestamp(entry.updated_at)}[/dim]"
    )
    return Panel(body, title=f"#{entry.id} {entry.title}", title_align="left")
