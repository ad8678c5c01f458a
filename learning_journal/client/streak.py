"""
Streak Calculator.

Pure functions over an already fetched entry list. An active day is a
local calendar day on which at least one entry was created. No I/O.

Usage:
    from learning_journal.client.streak import compute_streak_stats

    stats = compute_streak_stats(entries)
    print(stats.current_streak, stats.longest_streak)
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Any, Protocol


class HasCreatedAt(Protocol):
    created_at: datetime


def local_day(timestamp: datetime, tz: tzinfo | None = None) -> date:
    """
    Calendar day of a timestamp in `tz`.

    Naive timestamps are read as UTC. With tz=None the machine's local
    zone is used.
    """
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(tz).date()


def active_days(entries: Iterable[HasCreatedAt], tz: tzinfo | None = None) -> set[date]:
    """Set of local days on which at least one entry was created."""
    return {local_day(entry.created_at, tz) for entry in entries}


def current_streak(days: set[date], today: date) -> int:
    """
    Count consecutive active days walking back from `today`.

    If `today` has no entry yet the walk starts at yesterday, so a
    streak is not broken before the day is over.
    """
    cursor = today if today in days else today - timedelta(days=1)
    streak = 0
    while cursor in days:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def longest_streak(days: Iterable[date]) -> int:
    """Longest run of consecutive active days; 0 when there are none."""
    ordered = sorted(set(days))
    if not ordered:
        return 0

    longest = run = 1
    for previous, current in zip(ordered, ordered[1:]):
        if current - previous == timedelta(days=1):
            run += 1
            longest = max(longest, run)
        else:
            run = 1
    return longest


def group_by_day(
    entries: Iterable[HasCreatedAt],
    tz: tzinfo | None = None,
) -> dict[date, list[Any]]:
    """Entries keyed by local creation day, input order kept within a day."""
    grouped: dict[date, list[Any]] = {}
    for entry in entries:
        grouped.setdefault(local_day(entry.created_at, tz), []).append(entry)
    return grouped


@dataclass
class StreakStats:
    """Summary shown on the streak calendar."""

    current_streak: int
    longest_streak: int
    total_entries: int
    total_active_days: int
    entries_by_day: dict[date, list[Any]] = field(default_factory=dict)

    def entries_on(self, day: date) -> list[Any]:
        """Entries created on `day`, empty when the day is inactive."""
        return self.entries_by_day.get(day, [])

    def is_active(self, day: date) -> bool:
        return day in self.entries_by_day


def compute_streak_stats(
    entries: Iterable[HasCreatedAt],
    today: date | None = None,
    tz: tzinfo | None = None,
) -> StreakStats:
    """
    Compute every streak figure in one pass over the entries.

    Args:
        entries: Fetched entries, any order
        today: Reference day; defaults to the current day in `tz`
        tz: Zone used to bucket timestamps; defaults to the local zone

    Returns:
        StreakStats for the given entry list
    """
    entries = list(entries)
    if today is None:
        today = datetime.now(timezone.utc).astimezone(tz).date()

    by_day = group_by_day(entries, tz)
    days = set(by_day)

    return StreakStats(
        current_streak=current_streak(days, today),
        longest_streak=longest_streak(days),
        total_entries=len(entries),
        total_active_days=len(days),
        entries_by_day=by_day,
    )
