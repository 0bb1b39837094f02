"""
Dashboard module interface.
"""

from typing import Protocol, runtime_checkable

from .models import DashboardResponse


@runtime_checkable
class IDashboardService(Protocol):
    """Interface for the per-user dashboard summary."""

    async def get_dashboard(self, user_id: int) -> DashboardResponse:
        """
        Summarize a user's notes and tags.

        Returns:
            Note/tag totals, the count of notes created in the last 7 days,
            and the 5 most recently updated notes with content previews
        """
        ...
