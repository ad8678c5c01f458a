"""
Statistics Commands.

Streak figures and the month calendar, computed client-side from the
full entry list.
"""

import calendar
from datetime import date, datetime
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from learning_journal.cli.client import run_client_call
from learning_journal.cli.output import entries_table
from learning_journal.client.streak import StreakStats, compute_streak_stats

app = typer.Typer(help="Streak and activity statistics")
console = Console()


def _parse_month(value: str) -> tuple[int, int]:
    try:
        parsed = datetime.strptime(value, "%Y-%m")
    except ValueError:
        raise typer.BadParameter("expected YYYY-MM") from None
    return parsed.year, parsed.month


def _parse_day(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise typer.BadParameter("expected YYYY-MM-DD") from None


def month_calendar(stats: StreakStats, year: int, month: int, today: date) -> Table:
    """Monday-first month grid; active days green, today underlined."""
    table = Table(title=f"{calendar.month_name[month]} {year}", show_header=True)
    for name in ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"):
        table.add_column(name, justify="right")

    for week in calendar.Calendar(firstweekday=0).monthdatescalendar(year, month):
        cells = []
        for day in week:
            if day.month != month:
                cells.append("")
                continue
            style = "bold green" if stats.is_active(day) else "dim"
            if day == today:
                style += " underline"
            cells.append(f"[{style}]{day.day}[/{style}]")
        table.add_row(*cells)
    return table


@app.command()
def streak(
    month: Optional[str] = typer.Option(
        None, "--month", "-m", help="Month to draw as YYYY-MM (default: current month)"
    ),
) -> None:
    """
    Show current and longest streak plus a calendar of active days.

    Examples:
        cli.py stats streak
        cli.py stats streak --month 2024-02
    """
    today = date.today()
    year, month_number = _parse_month(month) if month else (today.year, today.month)

    entries = run_client_call(lambda client: client.list_entries())
    stats = compute_streak_stats(entries, today=today)

    summary = (
        f"Current streak: [bold]{stats.current_streak}[/bold] days\n"
        f"Longest streak: [bold]{stats.longest_streak}[/bold] days\n"
        f"Total entries:  {stats.total_entries}\n"
        f"Active days:    {stats.total_active_days}"
    )
    console.print(Panel(summary, title="Streak"))
    console.print(month_calendar(stats, year, month_number, today))


@app.command()
def day(value: str = typer.Argument(..., metavar="DATE", help="Day as YYYY-MM-DD")) -> None:
    """
    List the entries created on a given local day.

    Examples:
        cli.py stats day 2024-02-29
    """
    selected = _parse_day(value)
    entries = run_client_call(lambda client: client.list_entries())
    stats = compute_streak_stats(entries)

    on_day = stats.entries_on(selected)
    if not on_day:
        console.print(f"[dim]No entries on {selected.isoformat()}[/dim]")
        return
    console.print(entries_table(on_day, title=selected.strftime("%A, %B %d, %Y")))
