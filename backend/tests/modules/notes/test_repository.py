"""Tests for notes repository."""

import pytest
from unittest.mock import MagicMock
from datetime import datetime, timezone

from modules.notes.repository import NOTE_SELECT, TAG_FILTER_SELECT, NoteRepository, ilike_substring


def create_mock_note_data(
    note_id: int = 10,
    user_id: int = 1,
    title: str = "Groceries",
    tags: list = None,
) -> dict:
    """Helper to create a notes row with embedded tag links."""
    now = datetime.now(timezone.utc).isoformat()
    return {
        "id": note_id,
        "user_id": user_id,
        "title": title,
        "content": "Milk, eggs",
        "created_at": now,
        "updated_at": now,
        "note_tags": [{"tag": t} for t in (tags or [])],
    }


@pytest.fixture
def mock_db():
    return MagicMock()


@pytest.fixture
def repo(mock_db):
    return NoteRepository(mock_db)


class TestCreateNote:
    def test_returns_new_id(self, repo, mock_db):
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [{"id": 42}]

        assert repo.create_note(1, None, "body") == 42
        mock_db.table.return_value.insert.assert_called_once_with({
            "user_id": 1,
            "title": None,
            "content": "body",
        })


class TestGetNoteById:
    def test_maps_embedded_tags(self, repo, mock_db):
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = [
            create_mock_note_data(tags=[{"id": 1, "name": "Work", "color": "#FF0000"}])
        ]

        note = repo.get_note_by_id(10)

        mock_db.table.return_value.select.assert_called_once_with(NOTE_SELECT)
        assert note.tags[0].name == "Work"
        assert note.tags[0].color == "#FF0000"

    def test_missing_title_becomes_untitled(self, repo, mock_db):
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = [
            create_mock_note_data(title=None)
        ]

        assert repo.get_note_by_id(10).title == "Untitled"

    def test_not_found(self, repo, mock_db):
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = []
        assert repo.get_note_by_id(10) is None


class TestListNotes:
    def test_scopes_orders_and_pages(self, repo, mock_db):
        query = mock_db.table.return_value.select.return_value.eq.return_value
        result = query.order.return_value.range.return_value.execute.return_value
        result.data = [create_mock_note_data()]
        result.count = 11

        notes, total = repo.list_notes(1, page=2, limit=10)

        mock_db.table.return_value.select.assert_called_once_with(NOTE_SELECT, count="exact")
        mock_db.table.return_value.select.return_value.eq.assert_called_once_with("user_id", 1)
        query.order.assert_called_once_with("updated_at", desc=True)
        query.order.return_value.range.assert_called_once_with(10, 19)
        assert len(notes) == 1
        assert total == 11

    def test_search_filters_title_and_content(self, repo, mock_db):
        query = mock_db.table.return_value.select.return_value.eq.return_value

        repo.list_notes(1, search="milk")

        query.or_.assert_called_once_with('title.ilike."%milk%",content.ilike."%milk%"')

    def test_search_keeps_commas(self, repo, mock_db):
        query = mock_db.table.return_value.select.return_value.eq.return_value

        repo.list_notes(1, search="foo, bar")

        query.or_.assert_called_once_with('title.ilike."%foo, bar%",content.ilike."%foo, bar%"')

    def test_search_on_parenthesis_still_filters(self, repo, mock_db):
        query = mock_db.table.return_value.select.return_value.eq.return_value

        repo.list_notes(1, search="(")

        query.or_.assert_called_once_with('title.ilike."%(%",content.ilike."%(%"')

    def test_blank_search_is_ignored(self, repo, mock_db):
        query = mock_db.table.return_value.select.return_value.eq.return_value

        repo.list_notes(1, search="   ")

        query.or_.assert_not_called()


class TestIlikeSubstring:
    def test_plain_term(self):
        assert ilike_substring("milk") == '"%milk%"'

    def test_asterisk_matches_literally(self):
        assert ilike_substring("a*b") == r'"%a\\*b%"'

    def test_like_wildcards_match_literally(self):
        assert ilike_substring("50%_off") == r'"%50\\%\\_off%"'

    def test_quotes_and_backslashes_are_escaped(self):
        assert ilike_substring('say "hi"') == r'"%say \"hi\"%"'
        assert ilike_substring("C:\\temp") == r'"%C:\\\\temp%"'


class TestTagFilter:
    def test_joins_note_tags_and_filters_on_tag(self, repo, mock_db):
        query = mock_db.table.return_value.select.return_value.eq.return_value

        repo.list_notes(1, tag_id=3)

        mock_db.table.return_value.select.assert_called_once_with(TAG_FILTER_SELECT, count="exact")
        query.eq.assert_called_once_with("tag_filter.tag_id", 3)
        query.in_.assert_not_called()

    def test_tag_filter_keeps_full_tag_embed(self):
        assert TAG_FILTER_SELECT.startswith(NOTE_SELECT)
        assert "tag_filter:note_tags!inner(tag_id)" in TAG_FILTER_SELECT

    def test_no_tag_filter_by_default(self, repo, mock_db):
        query = mock_db.table.return_value.select.return_value.eq.return_value

        repo.list_notes(1)

        query.eq.assert_not_called()


class TestTags:
    def test_replace_tags_calls_database_function(self, repo, mock_db):
        repo.replace_tags(10, 1, [])

        mock_db.rpc.assert_called_once_with("replace_note_tags", {
            "p_note_id": 10,
            "p_user_id": 1,
            "p_tag_ids": [],
        })
        mock_db.rpc.return_value.execute.assert_called_once()


class TestWrites:
    def test_update_filters_by_owner(self, repo, mock_db):
        repo.update_note(10, 1, "t", "c")

        update = mock_db.table.return_value.update
        assert update.call_args.args[0]["title"] == "t"
        assert "updated_at" in update.call_args.args[0]
        update.return_value.eq.assert_called_once_with("id", 10)
        update.return_value.eq.return_value.eq.assert_called_once_with("user_id", 1)

    def test_delete_filters_by_owner(self, repo, mock_db):
        repo.delete_note(10, 1)

        delete = mock_db.table.return_value.delete
        delete.return_value.eq.assert_called_once_with("id", 10)
        delete.return_value.eq.return_value.eq.assert_called_once_with("user_id", 1)
