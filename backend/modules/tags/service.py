"""
Tags service implementation.
"""

import logging

from .interfaces import ITagService
from .exceptions import TagNotFoundError
from .models import CreateTagRequest, Tag, UpdateTagRequest
from .repository import TagRepository

logger = logging.getLogger(__name__)


class TagService(ITagService):
    """Tag service with Supabase backend."""

    def __init__(self, repository: TagRepository):
        self._repo = repository

    async def list_tags(self, user_id: int) -> list[Tag]:
        return self._repo.list_tags(user_id)

    async def create_tag(self, user_id: int, request: CreateTagRequest) -> Tag:
        tag = self._repo.create_tag(user_id, request.name, request.color)
        logger.debug("Created tag %s for user %s", tag.id, user_id)
        return tag

    async def get_tag(self, tag_id: int, user_id: int) -> Tag:
        return self._get_owned_tag(tag_id, user_id)

    async def update_tag(self, tag_id: int, user_id: int, request: UpdateTagRequest) -> Tag:
        self._get_owned_tag(tag_id, user_id)
        return self._repo.update_tag(tag_id, user_id, request.name, request.color)

    async def delete_tag(self, tag_id: int, user_id: int) -> None:
        self._get_owned_tag(tag_id, user_id)
        self._repo.delete_tag(tag_id, user_id)

    def _get_owned_tag(self, tag_id: int, user_id: int) -> Tag:
        """Resolve a tag and check its owner. Missing and foreign tags look the same."""
        tag = self._repo.get_tag_by_id(tag_id)

        if tag is None or tag.user_id != user_id:
            if tag is not None:
                logger.debug("User %s asked for tag %s owned by someone else", user_id, tag_id)
            raise TagNotFoundError(tag_id)

        return tag
