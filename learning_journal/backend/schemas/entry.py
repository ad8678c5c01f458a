"""
Entry Schemas.

Pydantic schemas for entry and tag API request/response validation.
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from learning_journal.backend.schemas.base import CamelModel

TITLE_MAX_LENGTH = 200
CONTENT_MAX_LENGTH = 5000


class EntryCreate(BaseModel):
    """Schema for creating a new entry."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=TITLE_MAX_LENGTH,
        description="Entry title",
        examples=["Learned about Python descriptors"],
    )
    content: str = Field(
        ...,
        min_length=1,
        max_length=CONTENT_MAX_LENGTH,
        description="Entry content",
        examples=["__get__ runs on attribute access through the class."],
    )
    tags: list[str] = Field(
        default_factory=list,
        description="Raw tag names; trimmed, lowercased and deduplicated on save",
        examples=[["python", "Internals"]],
    )


class EntryUpdate(BaseModel):
    """
    Schema for updating an existing entry.

    Omitted fields are left untouched. An omitted `tags` keeps the
    current tag set; an empty list clears it.
    """

    title: str | None = Field(
        default=None,
        min_length=1,
        max_length=TITLE_MAX_LENGTH,
        description="Entry title",
    )
    content: str | None = Field(
        default=None,
        min_length=1,
        max_length=CONTENT_MAX_LENGTH,
        description="Entry content",
    )
    tags: list[str] | None = Field(
        default=None,
        description="Replacement tag names",
    )

    @field_validator("title", "content", "tags")
    @classmethod
    def reject_explicit_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class TagResponse(CamelModel):
    """Schema for a tag in API responses."""

    id: int = Field(description="Tag identifier")
    name: str = Field(description="Normalized tag name")


class EntryResponse(CamelModel):
    """Schema for an entry with its tags in API responses."""

    id: int = Field(description="Entry identifier")
    title: str = Field(description="Entry title")
    content: str = Field(description="Entry content")
    created_at: datetime = Field(description="Creation timestamp (UTC)")
    updated_at: datetime = Field(description="Last update timestamp (UTC)")
    tags: list[TagResponse] = Field(default_factory=list, description="Attached tags")
