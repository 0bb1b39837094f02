"""
Tags module.

Handles user-level tags that can be attached to notes.

Public API:
- ITagService: Interface for tag operations
- Tag: A user's tag
- TagNotFoundError / TagAlreadyExistsError
"""

from .interfaces import ITagService
from .models import Tag, CreateTagRequest, UpdateTagRequest
from .exceptions import TagNotFoundError, TagAlreadyExistsError

__all__ = [
    "ITagService",
    "Tag",
    "CreateTagRequest",
    "UpdateTagRequest",
    "TagNotFoundError",
    "TagAlreadyExistsError",
]
