"""
Dashboard module data models.
"""

from pydantic import Field

from shared.models import CamelModel
from modules.notes.models import Note

RECENT_NOTES_LIMIT = 5
RECENT_WINDOW_DAYS = 7
PREVIEW_LENGTH = 100


class DashboardStats(CamelModel):
    total_notes: int = Field(..., description="All of the user's notes")
    total_tags: int = Field(..., description="All of the user's tags")
    recent_notes_count: int = Field(..., description="Notes created in the last 7 days")


class DashboardResponse(CamelModel):
    """Counts plus the most recently updated notes with shortened content."""

    stats: DashboardStats
    recent_notes: list[Note]
