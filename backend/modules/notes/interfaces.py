"""
Notes module interface.

The API layer depends on INoteService for all note operations.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import (
    CreateNoteRequest,
    Note,
    NoteListResponse,
    UpdateNoteRequest,
)


@runtime_checkable
class INoteService(Protocol):
    """
    Interface for note operations.

    Every method takes the authenticated user's ID and only ever touches
    notes owned by that user.
    """

    async def create_note(self, user_id: int, request: CreateNoteRequest) -> Note:
        """
        Create a note owned by ``user_id``.

        Args:
            user_id: ID of the authenticated user
            request: Title, content and optional tag IDs

        Returns:
            The created note with its tags
        """
        ...

    async def get_note(self, note_id: int, user_id: int) -> Note:
        """
        Get one of the user's notes.

        Raises:
            NoteNotFoundError: If the note doesn't exist or isn't the user's
        """
        ...

    async def list_notes(
        self,
        user_id: int,
        page: int = 1,
        limit: int = 10,
        search: Optional[str] = None,
        tag_id: Optional[int] = None,
    ) -> NoteListResponse:
        """
        List the user's notes, most recently updated first.

        Args:
            user_id: User ID
            page: Page number (1-indexed)
            limit: Items per page
            search: Optional substring filter on title and content
            tag_id: Optional tag filter

        Returns:
            Paginated list of notes
        """
        ...

    async def update_note(
        self,
        note_id: int,
        user_id: int,
        request: UpdateNoteRequest,
    ) -> Note:
        """
        Update a note's title, content and (optionally) its full tag set.

        Raises:
            NoteNotFoundError: If the note doesn't exist or isn't the user's
        """
        ...

    async def delete_note(self, note_id: int, user_id: int) -> None:
        """
        Delete a note and its tag links.

        Raises:
            NoteNotFoundError: If the note doesn't exist or isn't the user's
        """
        ...
