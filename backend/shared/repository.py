"""
Repository base class.

Repositories own every Supabase query of their module and turn rows into
pydantic models; services never see the client or raw dicts.
"""

from typing import TypeVar, Generic
from postgrest.exceptions import APIError
from supabase import Client


T = TypeVar("T")

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


class BaseRepository(Generic[T]):
    """
    Holds the Supabase client as ``self._db``.

    Subclasses add their queries plus a ``_map_to_*`` helper per table and
    translate constraint errors into module exceptions, for example:

        try:
            result = self._db.table("tags").insert(data).execute()
        except APIError as e:
            if self.is_unique_violation(e):
                raise TagAlreadyExistsError(name)
            raise
    """

    def __init__(self, db: Client) -> None:
        self._db = db

    @staticmethod
    def is_unique_violation(error: APIError) -> bool:
        """Whether a PostgREST error was raised by a unique index."""
        return error.code == UNIQUE_VIOLATION
