"""
Tags API Endpoints.
"""

from fastapi import APIRouter

from learning_journal.backend.core.dependencies import DbSession
from learning_journal.backend.schemas.entry import TagResponse
from learning_journal.backend.services.tag import TagService

router = APIRouter()


@router.get(
    "",
    response_model=list[TagResponse],
    summary="List tags",
    description="Get every tag, sorted by name.",
)
async def list_tags(db: DbSession) -> list[TagResponse]:
    """List all tags."""
    service = TagService(db)
    tags = await service.list_tags()
    return [TagResponse.model_validate(tag) for tag in tags]
