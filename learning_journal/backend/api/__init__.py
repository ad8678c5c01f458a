"""
API Router.

Aggregates all resource routers mounted under the configured API prefix.
"""

from fastapi import APIRouter

from learning_journal.backend.api.endpoints import entries, tags

router = APIRouter()

# Entry endpoints
router.include_router(entries.router, prefix="/entries", tags=["entries"])

# Tag endpoints
router.include_router(tags.router, prefix="/tags", tags=["tags"])
