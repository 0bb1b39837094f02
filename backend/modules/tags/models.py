"""
Tags module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from shared.models import CamelModel

# Hex colour such as #FF5733
HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class Tag(CamelModel):
    """A user-level tag."""

    id: int = Field(..., description="Tag ID")
    user_id: Optional[int] = Field(None, exclude=True, description="Owner ID, never serialized")
    name: str = Field(..., description="Tag name, unique per user")
    color: Optional[str] = Field(None, description="Hex colour")
    created_at: datetime
    updated_at: datetime


class TagWriteRequest(CamelModel):
    """Fields shared by tag create and update."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=100)
    color: Optional[str] = Field(None, pattern=HEX_COLOR_PATTERN)


class CreateTagRequest(TagWriteRequest):
    """
    Request to create a tag.

    The owner always comes from the session; a ``userId`` in the body is ignored.
    """

    pass


class UpdateTagRequest(TagWriteRequest):
    """Request to rename or recolour a tag."""

    pass


class DeleteResponse(BaseModel):
    message: str
