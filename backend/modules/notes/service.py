"""
Notes service implementation.

Provides CRUD, search and tag filtering for notes, scoped to their owner.
"""

import logging
from typing import Optional

from .interfaces import INoteService
from .exceptions import NoteNotFoundError
from .models import (
    CreateNoteRequest,
    Note,
    NoteListResponse,
    Pagination,
    UpdateNoteRequest,
)
from .repository import NoteRepository

logger = logging.getLogger(__name__)


class NoteService(INoteService):
    """
    Note service with Supabase backend.

    Instance operations first resolve the note, then compare its owner with
    the caller. A missing note and someone else's note both raise
    NoteNotFoundError.
    """

    def __init__(self, repository: NoteRepository):
        self._repo = repository

    async def create_note(self, user_id: int, request: CreateNoteRequest) -> Note:
        """Create a note and attach any of the given tags the user owns."""
        note_id = self._repo.create_note(user_id, request.title, request.content)

        if request.tag_ids:
            self._repo.replace_tags(note_id, user_id, request.tag_ids)

        return self._get_owned_note(note_id, user_id)

    async def get_note(self, note_id: int, user_id: int) -> Note:
        return self._get_owned_note(note_id, user_id)

    async def list_notes(
        self,
        user_id: int,
        page: int = 1,
        limit: int = 10,
        search: Optional[str] = None,
        tag_id: Optional[int] = None,
    ) -> NoteListResponse:
        """List notes for a user with pagination and optional filters."""
        notes, total = self._repo.list_notes(
            user_id,
            page=page,
            limit=limit,
            search=search,
            tag_id=tag_id,
        )
        return self._page(notes, total, page, limit)

    async def update_note(
        self,
        note_id: int,
        user_id: int,
        request: UpdateNoteRequest,
    ) -> Note:
        """
        Update a note.

        When ``tag_ids`` is given the whole tag set is replaced, so an empty
        list removes every tag.
        """
        self._get_owned_note(note_id, user_id)

        self._repo.update_note(note_id, user_id, request.title, request.content)

        if request.tag_ids is not None:
            self._repo.replace_tags(note_id, user_id, request.tag_ids)

        return self._get_owned_note(note_id, user_id)

    async def delete_note(self, note_id: int, user_id: int) -> None:
        self._get_owned_note(note_id, user_id)
        self._repo.delete_note(note_id, user_id)
        logger.debug("Deleted note %s for user %s", note_id, user_id)

    def _get_owned_note(self, note_id: int, user_id: int) -> Note:
        note = self._repo.get_note_by_id(note_id)

        if note is None:
            raise NoteNotFoundError(note_id)

        if note.user_id != user_id:
            logger.debug("User %s asked for note %s owned by someone else", user_id, note_id)
            raise NoteNotFoundError(note_id)

        return note

    @staticmethod
    def _page(notes: list[Note], total: int, page: int, limit: int) -> NoteListResponse:
        offset = (page - 1) * limit
        return NoteListResponse(
            notes=notes,
            pagination=Pagination(
                page=page,
                limit=limit,
                total=total,
                has_more=(offset + limit) < total,
            ),
        )
