"""
Note repository for database access.

Encapsulates all Supabase queries and data mapping for note-related tables:
- notes
- note_tags (through the replace_note_tags database function)
"""

from datetime import datetime, timezone
from typing import Optional, Any

from shared.repository import BaseRepository
from .models import Note, TagSummary, UNTITLED

# Notes with their tags embedded through the note_tags link table
NOTE_SELECT = "*, note_tags(tag:tags(id, name, color))"

# Inner-joined second embed of note_tags: filtering on it drops notes
# without the tag while leaving the note_tags embed above complete
TAG_FILTER_SELECT = NOTE_SELECT + ", tag_filter:note_tags!inner(tag_id)"

# LIKE wildcards (PostgREST also reads * as %) and the LIKE escape itself
_LIKE_ESCAPES = str.maketrans({"\\": "\\\\", "%": "\\%", "_": "\\_", "*": "\\*"})


def ilike_substring(term: str) -> str:
    """
    Quoted PostgREST operand matching ``term`` anywhere in a column.

    LIKE wildcards in ``term`` are escaped so they match literally, and the
    whole pattern is wrapped in double quotes so commas and parentheses
    stay part of the value inside an or=(...) filter.
    """
    pattern = "%" + term.translate(_LIKE_ESCAPES) + "%"
    quoted = pattern.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{quoted}"'


class NoteRepository(BaseRepository[Note]):
    """
    Repository for note data access.

    Writes and deletes are filtered by both note id and owner id. Reads by
    id are not: the service layer resolves the note, then checks ownership.
    """

    # -------------------------------------------------------------------------
    # Note CRUD operations
    # -------------------------------------------------------------------------

    def create_note(self, user_id: int, title: Optional[str], content: str) -> int:
        """
        Insert a note row.

        Returns:
            The new note's ID.
        """
        data = {
            "user_id": user_id,
            "title": title,
            "content": content,
        }
        result = self._db.table("notes").insert(data).execute()
        return int(result.data[0]["id"])

    def get_note_by_id(self, note_id: int) -> Optional[Note]:
        """Get a note with its tags, or None if no such row exists."""
        result = self._db.table("notes").select(NOTE_SELECT).eq("id", note_id).execute()
        if not result.data:
            return None
        return self._map_to_note(result.data[0])

    def list_notes(
        self,
        user_id: int,
        page: int = 1,
        limit: int = 10,
        search: Optional[str] = None,
        tag_id: Optional[int] = None,
    ) -> tuple[list[Note], int]:
        """
        List a user's notes, most recently updated first.

        Args:
            user_id: Owner whose notes are listed.
            page: Page number (1-indexed).
            limit: Items per page.
            search: Case-insensitive substring to match in title or content.
            tag_id: Only notes linked to this tag.

        Returns:
            The page of notes and the total number of matching notes.
        """
        offset = (page - 1) * limit

        select = NOTE_SELECT if tag_id is None else TAG_FILTER_SELECT
        query = self._db.table("notes").select(select, count="exact").eq("user_id", user_id)

        term = search.strip() if search else ""
        if term:
            pattern = ilike_substring(term)
            query = query.or_(f"title.ilike.{pattern},content.ilike.{pattern}")

        if tag_id is not None:
            query = query.eq("tag_filter.tag_id", tag_id)

        result = query.order("updated_at", desc=True).range(offset, offset + limit - 1).execute()

        notes = [self._map_to_note(n) for n in result.data]
        return notes, result.count or 0

    def update_note(
        self,
        note_id: int,
        user_id: int,
        title: Optional[str],
        content: str,
    ) -> None:
        """Overwrite a note's title and content and bump updated_at."""
        data = {
            "title": title,
            "content": content,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        (
            self._db.table("notes")
            .update(data)
            .eq("id", note_id)
            .eq("user_id", user_id)
            .execute()
        )

    def replace_tags(self, note_id: int, user_id: int, tag_ids: list[int]) -> None:
        """
        Replace a note's tag set in one transaction.

        The database function deletes every existing link, then links the
        given tags that belong to ``user_id``. An empty list clears all tags.
        """
        self._db.rpc("replace_note_tags", {
            "p_note_id": note_id,
            "p_user_id": user_id,
            "p_tag_ids": list(tag_ids),
        }).execute()

    def delete_note(self, note_id: int, user_id: int) -> None:
        """
        Delete a note.

        Note: Tag links are deleted via CASCADE.
        """
        self._db.table("notes").delete().eq("id", note_id).eq("user_id", user_id).execute()

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _map_to_note(self, data: dict[str, Any]) -> Note:
        """Map database row (with embedded note_tags) to Note model."""
        tags = [
            TagSummary(
                id=link["tag"]["id"],
                name=link["tag"]["name"],
                color=link["tag"].get("color"),
            )
            for link in data.get("note_tags") or []
            if link.get("tag")
        ]

        return Note(
            id=data["id"],
            user_id=data["user_id"],
            title=data.get("title") or UNTITLED,
            content=data["content"],
            tags=tags,
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
