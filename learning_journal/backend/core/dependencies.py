"""
FastAPI Dependencies.

Shared dependencies for request handling.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from learning_journal.backend.core.database import get_db_session
from learning_journal.backend.core.exceptions import ValidationError

# Type alias for database session dependency
DbSession = Annotated[AsyncSession, Depends(get_db_session)]


async def get_entry_id(entry_id: str) -> int:
    """
    Parse the {entry_id} path segment.

    Only plain decimal integers are accepted; anything else is a 400
    before the request reaches the database.
    """
    if not entry_id.isdecimal():
        raise ValidationError("Invalid entry ID", details={"entry_id": entry_id})
    return int(entry_id)


EntryId = Annotated[int, Depends(get_entry_id)]
