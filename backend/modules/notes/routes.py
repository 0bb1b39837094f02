"""
Note API endpoints.

Provides REST endpoints for note CRUD, search and tag filtering.
"""

from fastapi import APIRouter, Depends, Query
from typing import Optional

from api.middleware.auth import get_current_user
from api.dependencies import get_note_service
from shared.models import AuthenticatedUser

from .interfaces import INoteService
from .models import (
    CreateNoteRequest,
    DeleteResponse,
    Note,
    NoteListResponse,
    UpdateNoteRequest,
)

router = APIRouter()


@router.get("", response_model=NoteListResponse)
async def list_notes(
    page: int = Query(default=1, ge=1, description="Page number (1-indexed)"),
    limit: int = Query(default=10, ge=1, le=100, description="Items per page"),
    search: Optional[str] = Query(default=None, max_length=200, description="Search title and content"),
    tag_id: Optional[int] = Query(default=None, alias="tagId", description="Only notes with this tag"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: INoteService = Depends(get_note_service),
) -> NoteListResponse:
    """
    List the current user's notes.

    Returns paginated results, most recently updated first.
    """
    return await service.list_notes(user.id, page=page, limit=limit, search=search, tag_id=tag_id)


@router.post("", response_model=Note, status_code=201)
async def create_note(
    request: CreateNoteRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: INoteService = Depends(get_note_service),
) -> Note:
    """
    Create a note for the current user.
    """
    return await service.create_note(user.id, request)


@router.get("/{note_id}", response_model=Note)
async def get_note(
    note_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: INoteService = Depends(get_note_service),
) -> Note:
    """
    Get a specific note with its tags.
    """
    return await service.get_note(note_id, user.id)


@router.put("/{note_id}", response_model=Note)
async def update_note(
    note_id: int,
    request: UpdateNoteRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: INoteService = Depends(get_note_service),
) -> Note:
    """
    Update a note. Passing ``tagIds`` replaces the note's whole tag set.
    """
    return await service.update_note(note_id, user.id, request)


@router.delete("/{note_id}", response_model=DeleteResponse)
async def delete_note(
    note_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: INoteService = Depends(get_note_service),
) -> DeleteResponse:
    """
    Delete a note and its tag links.
    """
    await service.delete_note(note_id, user.id)
    return DeleteResponse(message="Note deleted successfully")
