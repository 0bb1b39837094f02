"""
Notes module.

Handles note creation, editing, deletion, search and tag assignment.

Public API:
- INoteService: Interface for note operations
- Note: A note with its tags
- CreateNoteRequest / UpdateNoteRequest: Write requests
- NoteNotFoundError: Missing or foreign note
"""

from .interfaces import INoteService
from .models import (
    Note,
    TagSummary,
    CreateNoteRequest,
    UpdateNoteRequest,
    NoteListResponse,
    Pagination,
)
from .exceptions import NoteNotFoundError

__all__ = [
    # Interface
    "INoteService",
    # Models
    "Note",
    "TagSummary",
    "CreateNoteRequest",
    "UpdateNoteRequest",
    "NoteListResponse",
    "Pagination",
    # Exceptions
    "NoteNotFoundError",
]
