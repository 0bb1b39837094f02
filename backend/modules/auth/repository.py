"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the users table.
"""

from typing import Optional, Any

from postgrest.exceptions import APIError

from shared.repository import BaseRepository
from .exceptions import EmailAlreadyRegisteredError
from .models import UserRecord


class UserRepository(BaseRepository[UserRecord]):
    """
    Repository for user data access.

    Emails are stored lowercased; the unique index on ``users.email`` is the
    only duplicate check.
    """

    def create_user(self, email: str, name: str, password_hash: str) -> UserRecord:
        """
        Insert a new user.

        Raises:
            EmailAlreadyRegisteredError: If the email is already taken.
        """
        data = {
            "email": email,
            "name": name,
            "password_hash": password_hash,
        }
        try:
            result = self._db.table("users").insert(data).execute()
        except APIError as e:
            if self.is_unique_violation(e):
                raise EmailAlreadyRegisteredError(email)
            raise
        return self._map_to_user(result.data[0])

    def get_by_id(self, user_id: int) -> Optional[UserRecord]:
        result = self._db.table("users").select("*").eq("id", user_id).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        result = self._db.table("users").select("*").eq("email", email).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def _map_to_user(self, data: dict[str, Any]) -> UserRecord:
        """Map database row to UserRecord model."""
        return UserRecord(
            id=data["id"],
            email=data["email"],
            name=data["name"],
            password_hash=data["password_hash"],
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
