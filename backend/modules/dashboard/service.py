"""
Dashboard service implementation.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from modules.notes.models import Note

from .interfaces import IDashboardService
from .models import (
    DashboardResponse,
    DashboardStats,
    PREVIEW_LENGTH,
    RECENT_NOTES_LIMIT,
    RECENT_WINDOW_DAYS,
)
from .repository import DashboardRepository


def preview(content: str, length: int = PREVIEW_LENGTH) -> str:
    """Cut content to ``length`` characters, marking the cut with '...'."""
    if len(content) > length:
        return content[:length] + "..."
    return content


class DashboardService(IDashboardService):
    """Builds the dashboard from a handful of scoped read queries."""

    def __init__(
        self,
        repository: DashboardRepository,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._repo = repository
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    async def get_dashboard(self, user_id: int) -> DashboardResponse:
        since = self._clock() - timedelta(days=RECENT_WINDOW_DAYS)

        stats = DashboardStats(
            total_notes=self._repo.count_notes(user_id),
            total_tags=self._repo.count_tags(user_id),
            recent_notes_count=self._repo.count_notes(user_id, created_since=since),
        )

        recent = [
            self._with_preview(note)
            for note in self._repo.get_recent_notes(user_id, RECENT_NOTES_LIMIT)
        ]

        return DashboardResponse(stats=stats, recent_notes=recent)

    @staticmethod
    def _with_preview(note: Note) -> Note:
        return note.model_copy(update={"content": preview(note.content)})
