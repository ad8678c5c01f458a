"""
Tag Commands.
"""

import typer
from rich.console import Console
from rich.table import Table

from learning_journal.backend.core.utils import normalize_tag_name
from learning_journal.cli.client import run_client_call
from learning_journal.cli.output import entries_table
from learning_journal.client.grouping import group_by_tag

app = typer.Typer(help="Tag commands")
console = Console()


@app.command("list")
def list_tags() -> None:
    """
    List every tag alphabetically, including tags no entry uses anymore.

    Examples:
        cli.py tags list
    """
    tags = run_client_call(lambda client: client.list_tags())
    if not tags:
        console.print("[dim]No tags yet[/dim]")
        return
    console.print(" ".join(f"[magenta]#{tag.name}[/magenta]" for tag in tags))


@app.command()
def groups() -> None:
    """
    Show tags with their entry counts, most used first.

    Examples:
        cli.py tags groups
    """

    async def _fetch(client):
        return await client.list_entries(), await client.list_tags()

    entries, tags = run_client_call(_fetch)
    tag_groups = group_by_tag(entries, tags)
    if not tag_groups:
        console.print("[dim]No tagged entries yet[/dim]")
        return

    table = Table(title="Tags", show_header=True)
    table.add_column("Tag", style="magenta")
    table.add_column("Entries", justify="right")
    table.add_column("Latest", style="dim")
    for group in tag_groups:
        table.add_row(f"#{group.tag.name}", str(group.count), group.entries[0].title)
    console.print(table)


@app.command("entries")
def tag_entries(name: str = typer.Argument(..., help="Tag name")) -> None:
    """
    List the entries carrying a tag, newest first.

    Examples:
        cli.py tags entries python
    """
    wanted = normalize_tag_name(name)
    entries = run_client_call(lambda client: client.list_entries())
    tagged = [e for e in entries if any(tag.name == wanted for tag in e.tags)]
    if not tagged:
        console.print(f"[dim]No entries tagged #{wanted}[/dim]")
        return
    console.print(entries_table(tagged, title=f"#{wanted}"))
