"""
Dashboard repository: read-only aggregates over a user's notes and tags.
"""

from datetime import datetime
from typing import Optional

from modules.notes.models import Note
from modules.notes.repository import NOTE_SELECT, NoteRepository


class DashboardRepository(NoteRepository):
    """
    Counting and recent-note queries for the dashboard.

    Extends NoteRepository to reuse its row mapping. Counting queries use
    ``count="exact"`` and fetch only the id column.
    """

    def count_notes(self, user_id: int, created_since: Optional[datetime] = None) -> int:
        query = self._db.table("notes").select("id", count="exact").eq("user_id", user_id)
        if created_since is not None:
            query = query.gte("created_at", created_since.isoformat())
        return query.execute().count or 0

    def count_tags(self, user_id: int) -> int:
        result = self._db.table("tags").select("id", count="exact").eq("user_id", user_id).execute()
        return result.count or 0

    def get_recent_notes(self, user_id: int, limit: int) -> list[Note]:
        """The user's most recently updated notes, with tags."""
        result = (
            self._db.table("notes")
            .select(NOTE_SELECT)
            .eq("user_id", user_id)
            .order("updated_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [self._map_to_note(n) for n in result.data]
