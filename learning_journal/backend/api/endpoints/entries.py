"""
Entries API Endpoints.

REST API endpoints for journal entry management.
"""

from fastapi import APIRouter, Query, Response

from learning_journal.backend.core.dependencies import DbSession, EntryId
from learning_journal.backend.schemas.entry import (
    EntryCreate,
    EntryResponse,
    EntryUpdate,
)
from learning_journal.backend.services.entry import EntryService

router = APIRouter()


@router.get(
    "",
    response_model=list[EntryResponse],
    summary="List entries",
    description="Get every entry with its tags, most recently created first.",
)
async def list_entries(db: DbSession) -> list[EntryResponse]:
    """List all entries."""
    service = EntryService(db)
    entries = await service.list_entries()
    return [EntryResponse.model_validate(entry) for entry in entries]


@router.get(
    "/search",
    response_model=list[EntryResponse],
    summary="Search entries",
    description=(
        "Case-insensitive substring search over title, content and tag names."
    ),
)
async def search_entries(
    db: DbSession,
    q: str | None = Query(default=None, description="Search query"),
) -> list[EntryResponse]:
    """Search entries."""
    service = EntryService(db)
    entries = await service.search_entries(q)
    return [EntryResponse.model_validate(entry) for entry in entries]


@router.get(
    "/{entry_id}",
    response_model=EntryResponse,
    summary="Get an entry",
    description="Get a single entry with its tags.",
)
async def get_entry(entry_id: EntryId, db: DbSession) -> EntryResponse:
    """Get an entry by ID."""
    service = EntryService(db)
    entry = await service.get_entry(entry_id)
    return EntryResponse.model_validate(entry)


@router.post(
    "",
    response_model=EntryResponse,
    status_code=201,
    summary="Create an entry",
    description="Create an entry. Tag names are normalized and created on demand.",
)
async def create_entry(data: EntryCreate, db: DbSession) -> EntryResponse:
    """Create a new entry."""
    service = EntryService(db)
    entry = await service.create_entry(data)
    return EntryResponse.model_validate(entry)


@router.put(
    "/{entry_id}",
    response_model=EntryResponse,
    summary="Update an entry",
    description=(
        "Update an entry. Omitted fields are kept; a supplied tag list "
        "replaces the current tags."
    ),
)
async def update_entry(
    entry_id: EntryId,
    data: EntryUpdate,
    db: DbSession,
) -> EntryResponse:
    """Update an entry."""
    service = EntryService(db)
    entry = await service.update_entry(entry_id, data)
    return EntryResponse.model_validate(entry)


@router.delete(
    "/{entry_id}",
    status_code=204,
    response_class=Response,
    summary="Delete an entry",
    description="Permanently delete an entry. Its tags are kept.",
)
async def delete_entry(entry_id: EntryId, db: DbSession) -> None:
    """Delete an entry."""
    service = EntryService(db)
    await service.delete_entry(entry_id)
