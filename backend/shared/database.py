"""
Supabase client for the Notebox backend.

One service-role client is shared by every repository. Ownership is
checked in the services, so the client bypasses row level security.
"""

import logging
from typing import Optional
from supabase import create_client, Client

from .config import Settings, get_settings

logger = logging.getLogger(__name__)

_client: Optional[Client] = None


def get_supabase_client(settings: Optional[Settings] = None) -> Client:
    """
    Return the shared client, creating it from ``settings`` on first use.

    Raises:
        RuntimeError: If SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is unset
    """
    global _client

    if _client is None:
        settings = settings or get_settings()
        missing = [
            name
            for name, value in (
                ("SUPABASE_URL", settings.supabase_url),
                ("SUPABASE_SERVICE_ROLE_KEY", settings.supabase_service_role_key),
            )
            if not value
        ]
        if missing:
            raise RuntimeError(f"Supabase configuration missing. Set {', '.join(missing)}.")
        logger.info("Creating Supabase client for %s", settings.supabase_url)
        _client = create_client(settings.supabase_url, settings.supabase_service_role_key)

    return _client


def reset_client_cache() -> None:
    """Drop the shared client so the next call builds a new one."""
    global _client
    _client = None
