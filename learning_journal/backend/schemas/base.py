"""
Base Schemas.

Shared response schemas. Successful responses return the resource
itself; failures use the ErrorResponse envelope below.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from learning_journal.backend.core.utils import utc_now


class CamelModel(BaseModel):
    """Base for resource schemas serialized with camelCase keys (createdAt, updatedAt)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ResponseMetadata(BaseModel):
    """Metadata included in error responses."""

    timestamp: datetime = Field(default_factory=utc_now)
    request_id: str | None = None


class ErrorDetail(BaseModel):
    """Error detail structure."""

    code: str
    message: str
    details: dict[str, Any] | None = None


class ErrorResponse(BaseModel):
    """Standard error response."""

    success: bool = False
    data: None = None
    error: ErrorDetail
    metadata: ResponseMetadata = Field(default_factory=ResponseMetadata)
