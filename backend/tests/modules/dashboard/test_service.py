"""Tests for the dashboard service."""

import pytest
from unittest.mock import MagicMock
from datetime import datetime, timedelta, timezone

from modules.dashboard.service import DashboardService, preview
from modules.notes.models import Note

NOW = datetime(2024, 6, 15, 8, 0, tzinfo=timezone.utc)


def make_note(note_id: int, content: str) -> Note:
    return Note(id=note_id, user_id=1, title="t", content=content, created_at=NOW, updated_at=NOW)


class TestPreview:
    def test_short_content_unchanged(self):
        assert preview("hello") == "hello"

    def test_exactly_limit_unchanged(self):
        assert preview("x" * 100) == "x" * 100

    def test_long_content_truncated(self):
        assert preview("x" * 150) == "x" * 100 + "..."


class TestDashboardService:
    @pytest.mark.asyncio
    async def test_dashboard(self):
        repo = MagicMock()
        repo.count_notes.side_effect = lambda user_id, created_since=None: 2 if created_since else 12
        repo.count_tags.return_value = 4
        repo.get_recent_notes.return_value = [make_note(1, "y" * 120), make_note(2, "short")]
        service = DashboardService(repo, clock=lambda: NOW)

        dashboard = await service.get_dashboard(1)

        assert dashboard.stats.total_notes == 12
        assert dashboard.stats.total_tags == 4
        assert dashboard.stats.recent_notes_count == 2
        repo.count_notes.assert_any_call(1, created_since=NOW - timedelta(days=7))
        repo.get_recent_notes.assert_called_once_with(1, 5)
        assert dashboard.recent_notes[0].content == "y" * 100 + "..."
        assert dashboard.recent_notes[1].content == "short"

    @pytest.mark.asyncio
    async def test_serializes_camel_case(self):
        repo = MagicMock()
        repo.count_notes.return_value = 0
        repo.count_tags.return_value = 0
        repo.get_recent_notes.return_value = []
        service = DashboardService(repo, clock=lambda: NOW)

        data = (await service.get_dashboard(1)).model_dump(by_alias=True)

        assert data == {
            "stats": {"totalNotes": 0, "totalTags": 0, "recentNotesCount": 0},
            "recentNotes": [],
        }
