"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations from one explicitly
constructed Settings value.
"""

from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.auth.interfaces import IAuthService
    from modules.auth.tokens import TokenService
    from modules.notes.interfaces import INoteService
    from modules.tags.interfaces import ITagService
    from modules.dashboard.interfaces import IDashboardService


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. The token service is the exception that should
    be touched at startup (see api.app.create_app) so a missing secret
    fails the boot instead of the first request.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._db: "Client | None" = None
        self._token_service: "TokenService | None" = None
        self._auth_service: "IAuthService | None" = None
        self._note_service: "INoteService | None" = None
        self._tag_service: "ITagService | None" = None
        self._dashboard_service: "IDashboardService | None" = None

    @property
    def db(self) -> "Client":
        """Get the Supabase client."""
        if self._db is None:
            from shared.database import get_supabase_client
            self._db = get_supabase_client(self.settings)
        return self._db

    @property
    def tokens(self) -> "TokenService":
        """Get the token service, built from the configured secret."""
        if self._token_service is None:
            from modules.auth.tokens import TokenService
            self._token_service = TokenService.from_settings(self.settings)
        return self._token_service

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.repository import UserRepository
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                users=UserRepository(self.db),
                tokens=self.tokens,
                bcrypt_rounds=self.settings.bcrypt_rounds,
            )
        return self._auth_service

    @property
    def notes(self) -> "INoteService":
        """Get the note service instance."""
        if self._note_service is None:
            from modules.notes.repository import NoteRepository
            from modules.notes.service import NoteService
            self._note_service = NoteService(NoteRepository(self.db))
        return self._note_service

    @property
    def tags(self) -> "ITagService":
        """Get the tag service instance."""
        if self._tag_service is None:
            from modules.tags.repository import TagRepository
            from modules.tags.service import TagService
            self._tag_service = TagService(TagRepository(self.db))
        return self._tag_service

    @property
    def dashboard(self) -> "IDashboardService":
        """Get the dashboard service instance."""
        if self._dashboard_service is None:
            from modules.dashboard.repository import DashboardRepository
            from modules.dashboard.service import DashboardService
            self._dashboard_service = DashboardService(DashboardRepository(self.db))
        return self._dashboard_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._db = None
        self._token_service = None
        self._auth_service = None
        self._note_service = None
        self._tag_service = None
        self._dashboard_service = None


# Module-level container singleton
_container: Optional[ServiceContainer] = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer(get_settings())
    return _container


def configure_container(settings: Settings) -> ServiceContainer:
    """Replace the singleton container with one built from ``settings``."""
    global _container
    _container = ServiceContainer(settings)
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_app_settings() -> Settings:
    """FastAPI dependency for the container's settings."""
    return get_container().settings


def get_token_service() -> "TokenService":
    """FastAPI dependency for the token service."""
    return get_container().tokens


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_note_service() -> "INoteService":
    """FastAPI dependency for note service."""
    return get_container().notes


def get_tag_service() -> "ITagService":
    """FastAPI dependency for tag service."""
    return get_container().tags


def get_dashboard_service() -> "IDashboardService":
    """FastAPI dependency for dashboard service."""
    return get_container().dashboard
