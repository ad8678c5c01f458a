"""
Core Utilities.

Shared utility functions used across the backend.
All modules should import utilities from this module.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """
    Return current UTC time as timezone-naive datetime.

    All datetime values in the application should be timezone-naive
    and assumed to be UTC. This ensures consistent behavior across
    the codebase and simplifies database storage.

    Returns:
        Current UTC time with tzinfo stripped
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def normalize_tag_name(name: str) -> str:
    """Canonical form of a tag name: surrounding whitespace removed, lowercased."""
    return name.strip().lower()


def normalize_tag_names(names: list[str]) -> list[str]:
    """
    Normalize a list of raw tag names.

    Empty results are dropped and duplicates collapse to their first
    occurrence, so ["React", " react ", "REACT", ""] becomes ["react"].
    """
    seen: dict[str, None] = {}
    for name in names:
        normalized = normalize_tag_name(name)
        if normalized:
            seen.setdefault(normalized, None)
    return list(seen)
