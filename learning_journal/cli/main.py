"""
Journal CLI.

Command-line client for the learning journal.
Built with Typer for type-safe commands and Rich for formatted output.

Usage:
    journal --help

    # Server and database
    journal server start              # Start FastAPI server
    journal server initdb             # Create tables (SQLite)
    journal db upgrade                # Apply migrations

    # Entries
    journal entries list
    journal entries add -t "Title" -c "Content" -g python
    journal entries edit 3 --clear-tags
    journal entries search descriptors
    journal entries export -o backup.json

    # Tags and statistics
    journal tags groups
    journal stats streak --month 2024-02

Options:
    --verbose, -v     Enable verbose output
    --debug           Enable debug mode (detailed logging)
    --help            Show help message
"""

import typer
from rich.console import Console

from learning_journal.backend.core.config import validate_project_root
from learning_journal.backend.core.logging import setup_logging
from learning_journal.cli.commands import (
    db_app,
    entries_app,
    health_app,
    server_app,
    stats_app,
    tags_app,
)

# Create main app
app = typer.Typer(
    name="journal",
    help="Learning Journal CLI - entries, tags, streaks, backups and server management.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

# Register command groups
app.add_typer(server_app, name="server")
app.add_typer(db_app, name="db")
app.add_typer(entries_app, name="entries")
app.add_typer(tags_app, name="tags")
app.add_typer(stats_app, name="stats")
app.add_typer(health_app, name="health")


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
) -> None:
    """
    Learning Journal CLI.

    Talks to the journal API over HTTP; run `server start` first.
    """
    validate_project_root()

    # Configure logging based on flags
    if debug:
        setup_logging(level="DEBUG", format_type="console")
        console.print("[dim]Debug mode enabled[/dim]")
    elif verbose:
        setup_logging(level="INFO", format_type="console")
    else:
        setup_logging(level="WARNING", format_type="console")


if __name__ == "__main__":
    app()
