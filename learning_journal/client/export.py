"""
Journal Export and Import.

Builds the JSON backup document from fetched entries and replays a
backup through the API. The document layout:

    {
      "exportDate": "2024-03-01T09:30:00.000Z",
      "totalEntries": 2,
      "entries": [
        {"id": 1, "title": "...", "content": "...", "tags": ["python"],
         "createdAt": "...", "updatedAt": "..."}
      ]
    }
"""

import json
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any

from learning_journal.backend.core.logging import get_logger, log_with_source
from learning_journal.backend.schemas.entry import EntryResponse
from learning_journal.client.api import JournalClient

logger = get_logger(__name__)

BACKUP_FILENAME_TEMPLATE = "learning-journal-backup-{day}.json"


def _iso(timestamp: datetime) -> str:
    """ISO 8601 in UTC with millisecond precision and a Z suffix."""
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    utc = timestamp.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def build_export(
    entries: list[EntryResponse],
    exported_at: datetime | None = None,
) -> dict[str, Any]:
    """
    Build the backup document. Tags are flattened to their names.

    Args:
        entries: Entries as returned by the API, order kept
        exported_at: Export timestamp; defaults to now (UTC)
    """
    exported_at = exported_at or datetime.now(timezone.utc)
    return {
        "exportDate": _iso(exported_at),
        "totalEntries": len(entries),
        "entries": [
            {
                "id": entry.id,
                "title": entry.title,
                "content": entry.content,
                "tags": [tag.name for tag in entry.tags],
                "createdAt": _iso(entry.created_at),
                "updatedAt": _iso(entry.updated_at),
            }
            for entry in entries
        ],
    }


def backup_filename(day: date | None = None) -> str:
    """Default backup file name for `day` (today in UTC when omitted)."""
    day = day or datetime.now(timezone.utc).date()
    return BACKUP_FILENAME_TEMPLATE.format(day=day.isoformat())


def write_export(document: dict[str, Any], path: Path) -> Path:
    """Write the document as indented JSON and return the path."""
    path.write_text(json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8")
    log_with_source(
        logger,
        "cli",
        "info",
        "Export written",
        path=str(path),
        total_entries=document["totalEntries"],
    )
    return path


def read_export(path: Path) -> dict[str, Any]:
    """
    Load and sanity-check a backup document.

    Raises:
        ValueError: If the file is not a backup document
    """
    document = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(document, dict) or not isinstance(document.get("entries"), list):
        raise ValueError(f"{path} is not a learning journal backup")

    for index, record in enumerate(document["entries"]):
        problem = _record_problem(record)
        if problem:
            raise ValueError(f"{path}: entry {index + 1} {problem}")
    return document


def _record_problem(record: Any) -> str | None:
    if not isinstance(record, dict):
        return "is not an object"
    for key in ("title", "content"):
        if not isinstance(record.get(key), str) or not record[key]:
            return f"has no {key}"
    tags = record.get("tags", [])
    if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
        return "has malformed tags"
    return None


async def import_entries(client: JournalClient, document: dict[str, Any]) -> list[EntryResponse]:
    """
    Re-create every entry of a backup through the API.

    Entries get new ids and timestamps; titles, contents and tag sets
    are reproduced. Entries are replayed oldest first so the newest
    backup entry is again the newest after import.
    """
    records = list(reversed(document["entries"]))
    created = []
    for record in records:
        created.append(
            await client.create_entry(
                title=record["title"],
                content=record["content"],
                tags=list(record.get("tags", [])),
            )
        )

    log_with_source(logger, "cli", "info", "Import finished", created=len(created))
    return created
