"""
Health Check Commands.

Commands for checking backend health and status.
"""

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from learning_journal.cli.client import run_client_call

app = typer.Typer(help="Health check commands")
console = Console()


@app.command()
def status() -> None:
    """
    Check backend readiness, including the database (requires running server).

    Examples:
        cli.py health status
    """
    data = run_client_call(lambda client: client.readiness())

    table = Table(title="Health Status", show_header=True)
    table.add_column("Component", style="cyan")
    table.add_column("Status")
    table.add_column("Details")

    for component, check in data.get("checks", {}).items():
        check_status = check.get("status", "unknown")
        color = "green" if check_status == "healthy" else "red"

        details = []
        if "latency_ms" in check:
            details.append(f"latency: {check['latency_ms']}ms")
        if "error" in check:
            details.append(f"error: {check['error']}")

        table.add_row(
            component,
            f"[{color}]{check_status}[/{color}]",
            ", ".join(details) if details else "-",
        )

    console.print(table)


@app.command()
def ping() -> None:
    """
    Simple ping to check if backend is reachable.

    Examples:
        cli.py health ping
    """
    data = run_client_call(lambda client: client.health())
    status_text = data.get("status", "unknown")
    color = "green" if status_text == "healthy" else "yellow"
    console.print(Panel(f"[{color}]{status_text.upper()}[/{color}]", title="Backend Status"))
