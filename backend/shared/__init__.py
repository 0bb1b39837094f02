"""
Shared infrastructure for Notebox backend.

Settings, the Supabase client, the exception families the API maps to
status codes, the repository base class and logging setup. No note or
tag logic lives here.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    NoteboxError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    ConflictError,
    ConfigurationError,
)
from .models import AuthenticatedUser

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "NoteboxError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "ConflictError",
    "ConfigurationError",
    "AuthenticatedUser",
]
