"""Tests for TagService."""

import pytest
from unittest.mock import MagicMock
from datetime import datetime, timezone

from modules.tags.exceptions import TagAlreadyExistsError, TagNotFoundError
from modules.tags.interfaces import ITagService
from modules.tags.models import CreateTagRequest, Tag, UpdateTagRequest
from modules.tags.service import TagService


def make_tag(tag_id: int = 3, user_id: int = 1, name: str = "Work") -> Tag:
    now = datetime.now(timezone.utc)
    return Tag(id=tag_id, user_id=user_id, name=name, color="#3366FF", created_at=now, updated_at=now)


@pytest.fixture
def repo() -> MagicMock:
    return MagicMock()


@pytest.fixture
def service(repo) -> TagService:
    return TagService(repo)


class TestTagService:
    def test_implements_interface(self, service):
        assert isinstance(service, ITagService)

    @pytest.mark.asyncio
    async def test_list_tags(self, service, repo):
        repo.list_tags.return_value = [make_tag(name="Home"), make_tag(name="Work")]

        tags = await service.list_tags(1)

        repo.list_tags.assert_called_once_with(1)
        assert [t.name for t in tags] == ["Home", "Work"]

    @pytest.mark.asyncio
    async def test_create_tag(self, service, repo):
        repo.create_tag.return_value = make_tag()

        tag = await service.create_tag(1, CreateTagRequest(name="  Work ", color="#3366FF"))

        repo.create_tag.assert_called_once_with(1, "Work", "#3366FF")
        assert tag.id == 3

    @pytest.mark.asyncio
    async def test_duplicate_name(self, service, repo):
        repo.create_tag.side_effect = TagAlreadyExistsError("Work")

        with pytest.raises(TagAlreadyExistsError):
            await service.create_tag(1, CreateTagRequest(name="Work"))

    @pytest.mark.asyncio
    async def test_foreign_tag_looks_missing(self, service, repo):
        repo.get_tag_by_id.return_value = make_tag(user_id=2)

        with pytest.raises(TagNotFoundError):
            await service.get_tag(3, 1)

    @pytest.mark.asyncio
    async def test_update_checks_owner_first(self, service, repo):
        repo.get_tag_by_id.return_value = make_tag(user_id=2)

        with pytest.raises(TagNotFoundError):
            await service.update_tag(3, 1, UpdateTagRequest(name="Renamed"))

        repo.update_tag.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_own_tag(self, service, repo):
        repo.get_tag_by_id.return_value = make_tag()
        repo.update_tag.return_value = make_tag(name="Renamed")

        tag = await service.update_tag(3, 1, UpdateTagRequest(name="Renamed"))

        repo.update_tag.assert_called_once_with(3, 1, "Renamed", None)
        assert tag.name == "Renamed"

    @pytest.mark.asyncio
    async def test_delete_missing_tag(self, service, repo):
        repo.get_tag_by_id.return_value = None

        with pytest.raises(TagNotFoundError):
            await service.delete_tag(3, 1)

        repo.delete_tag.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_own_tag(self, service, repo):
        repo.get_tag_by_id.return_value = make_tag()

        await service.delete_tag(3, 1)

        repo.delete_tag.assert_called_once_with(3, 1)


class TestTagSerialization:
    def test_owner_is_not_serialized(self):
        data = make_tag().model_dump(by_alias=True)

        assert "userId" not in data
        assert "user_id" not in data
        assert data["name"] == "Work"
