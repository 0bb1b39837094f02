"""
Notes module data models.

API-facing models serialize with camelCase keys (``tagIds``, ``createdAt``)
to match the browser frontend.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from shared.models import CamelModel

UNTITLED = "Untitled"


class TagSummary(CamelModel):
    """A tag as embedded in a note."""

    id: int
    name: str
    color: Optional[str] = None


class Note(CamelModel):
    """A note with its tags."""

    id: int = Field(..., description="Note ID")
    user_id: Optional[int] = Field(None, exclude=True, description="Owner ID, never serialized")
    title: str = Field(default=UNTITLED, description="Title, 'Untitled' when none was given")
    content: str = Field(..., description="Note body")
    tags: list[TagSummary] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class CreateNoteRequest(CamelModel):
    """
    Request to create a note.

    The owner always comes from the session; a ``userId`` in the body is ignored.
    """

    title: Optional[str] = Field(None, max_length=255)
    content: str = Field(..., min_length=1, description="Note body")
    tag_ids: Optional[list[int]] = Field(None, description="Tags to attach")


class UpdateNoteRequest(CamelModel):
    """
    Request to update a note.

    ``tag_ids`` semantics: omitted or null leaves the tags unchanged, a
    list (including an empty one) replaces the whole set.
    """

    title: Optional[str] = Field(None, max_length=255)
    content: str = Field(..., min_length=1, description="Note body")
    tag_ids: Optional[list[int]] = Field(None, description="Replacement tag set")


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    has_more: bool


class NoteListResponse(CamelModel):
    """One page of the current user's notes."""

    notes: list[Note]
    pagination: Pagination


class DeleteResponse(BaseModel):
    message: str
