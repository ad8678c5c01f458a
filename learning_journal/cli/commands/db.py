"""
Database Commands.

Commands for database migrations using Alembic.
"""

import subprocess
import sys
from pathlib import Path

import typer
from rich.console import Console

app = typer.Typer(help="Database migration commands")
console = Console()

PROJECT_ROOT = Path(__file__).resolve().parents[3]
ALEMBIC_INI = PROJECT_ROOT / "learning_journal" / "backend" / "migrations" / "alembic.ini"


def _check_alembic() -> None:
    """Check that alembic.ini exists."""
    if not ALEMBIC_INI.exists():
        console.print("[red]Error: learning_journal/backend/migrations/alembic.ini not found[/red]")
        raise typer.Exit(1)


def _run_alembic(args: list[str]) -> None:
    """Run an alembic command."""
    cmd = [sys.executable, "-m", "alembic", "-c", str(ALEMBIC_INI)] + args

    result = subprocess.run(cmd, cwd=PROJECT_ROOT)
    if result.returncode != 0:
        raise typer.Exit(result.returncode)


@app.command()
def upgrade(
    revision: str = typer.Option("head", "--revision", "-r", help="Target revision"),
) -> None:
    """
    Upgrade database to a revision.

    Examples:
        cli.py db upgrade
        cli.py db upgrade -r 0001
    """
    _check_alembic()
    console.print(f"[bold]Upgrading database to revision: {revision}[/bold]\n")
    _run_alembic(["upgrade", revision])
    console.print("\n[green]Upgrade completed[/green]")


@app.command()
def downgrade(
    revision: str = typer.Option(..., "--revision", "-r", help="Target revision"),
) -> None:
    """
    Downgrade database to a revision.

    Examples:
        cli.py db downgrade --revision base
    """
    _check_alembic()
    console.print(f"[bold]Downgrading database to revision: {revision}[/bold]\n")
    _run_alembic(["downgrade", revision])
    console.print("\n[green]Downgrade completed[/green]")


@app.command()
def current() -> None:
    """
    Show current database revision.

    Examples:
        cli.py db current
    """
    _check_alembic()
    console.print("[bold]Current database revision:[/bold]\n")
    _run_alembic(["current"])
