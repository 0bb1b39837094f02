"""
Tags module interface.
"""

from typing import Protocol, runtime_checkable

from .models import CreateTagRequest, Tag, UpdateTagRequest


@runtime_checkable
class ITagService(Protocol):
    """
    Interface for tag operations.

    Every method is scoped to the authenticated user's own tags.
    """

    async def list_tags(self, user_id: int) -> list[Tag]:
        """List the user's tags ordered by name."""
        ...

    async def create_tag(self, user_id: int, request: CreateTagRequest) -> Tag:
        """
        Create a tag owned by ``user_id``.

        Raises:
            TagAlreadyExistsError: If the user already has a tag with this name
        """
        ...

    async def get_tag(self, tag_id: int, user_id: int) -> Tag:
        """
        Get one of the user's tags.

        Raises:
            TagNotFoundError: If the tag doesn't exist or isn't the user's
        """
        ...

    async def update_tag(self, tag_id: int, user_id: int, request: UpdateTagRequest) -> Tag:
        """
        Rename or recolour a tag.

        Raises:
            TagNotFoundError: If the tag doesn't exist or isn't the user's
            TagAlreadyExistsError: If the new name is taken
        """
        ...

    async def delete_tag(self, tag_id: int, user_id: int) -> None:
        """
        Delete a tag and detach it from all notes.

        Raises:
            TagNotFoundError: If the tag doesn't exist or isn't the user's
        """
        ...
