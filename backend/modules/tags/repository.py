"""
Tag repository for database access.

Encapsulates all Supabase queries and data mapping for the tags table.
"""

from datetime import datetime, timezone
from typing import Optional, Any

from postgrest.exceptions import APIError

from shared.repository import BaseRepository
from .exceptions import TagAlreadyExistsError
from .models import Tag


class TagRepository(BaseRepository[Tag]):
    """
    Repository for tag data access.

    Name uniqueness per user is enforced by the ``tags_user_id_name_key``
    unique index; a violation is raised as TagAlreadyExistsError.
    """

    def list_tags(self, user_id: int) -> list[Tag]:
        """All of a user's tags ordered by name."""
        result = self._db.table("tags").select("*").eq("user_id", user_id).order("name").execute()
        return [self._map_to_tag(t) for t in result.data]

    def get_tag_by_id(self, tag_id: int) -> Optional[Tag]:
        result = self._db.table("tags").select("*").eq("id", tag_id).execute()
        if not result.data:
            return None
        return self._map_to_tag(result.data[0])

    def create_tag(self, user_id: int, name: str, color: Optional[str]) -> Tag:
        """
        Insert a tag.

        Raises:
            TagAlreadyExistsError: If the user already has a tag named ``name``.
        """
        data = {
            "user_id": user_id,
            "name": name,
            "color": color,
        }
        try:
            result = self._db.table("tags").insert(data).execute()
        except APIError as e:
            if self.is_unique_violation(e):
                raise TagAlreadyExistsError(name)
            raise
        return self._map_to_tag(result.data[0])

    def update_tag(
        self,
        tag_id: int,
        user_id: int,
        name: str,
        color: Optional[str],
    ) -> Tag:
        """
        Rename or recolour a tag.

        Raises:
            TagAlreadyExistsError: If the new name clashes with another of the user's tags.
        """
        data = {
            "name": name,
            "color": color,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        try:
            result = (
                self._db.table("tags")
                .update(data)
                .eq("id", tag_id)
                .eq("user_id", user_id)
                .execute()
            )
        except APIError as e:
            if self.is_unique_violation(e):
                raise TagAlreadyExistsError(name)
            raise
        return self._map_to_tag(result.data[0])

    def delete_tag(self, tag_id: int, user_id: int) -> None:
        """
        Delete a tag.

        Note: Links to notes are deleted via CASCADE.
        """
        self._db.table("tags").delete().eq("id", tag_id).eq("user_id", user_id).execute()

    def _map_to_tag(self, data: dict[str, Any]) -> Tag:
        """Map database row to Tag model."""
        return Tag(
            id=data["id"],
            user_id=data["user_id"],
            name=data["name"],
            color=data.get("color"),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
