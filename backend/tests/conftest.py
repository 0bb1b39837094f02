"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
The signing secret is set in the environment before anything imports
``api``, because building the app refuses to start without one.
"""

import os

TEST_JWT_SECRET = "test-secret-key-for-testing-only-0123456789"

os.environ["JWT_SECRET"] = TEST_JWT_SECRET
os.environ.setdefault("SUPABASE_URL", "")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "")

import pytest
from datetime import datetime, timezone, timedelta

from shared.config import get_settings
from shared.database import reset_client_cache
from modules.auth.tokens import TokenService
from api.dependencies import reset_container


def create_test_token(
    user_id: int = 1,
    email: str = "test@example.com",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a session token for authentication.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, the token expired an hour ago
        secret: Signing secret

    Returns:
        JWT token string
    """
    issued_at = datetime.now(timezone.utc)
    if expired:
        issued_at -= timedelta(hours=2)
    service = TokenService(secret, ttl=timedelta(hours=1), clock=lambda: issued_at)
    return service.issue(user_id, email).token


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached settings, clients and the service container around each test."""
    get_settings.cache_clear()
    reset_client_cache()
    reset_container()
    yield
    get_settings.cache_clear()
    reset_client_cache()
    reset_container()


@pytest.fixture
def test_user_id() -> int:
    """Provide a consistent test user ID."""
    return 1


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def token_service() -> TokenService:
    """A token service signing with the test secret."""
    return TokenService(TEST_JWT_SECRET, ttl=timedelta(hours=1))


@pytest.fixture
def auth_token(test_user_id: int, test_user_email: str) -> str:
    """Create a valid session token for testing."""
    return create_test_token(user_id=test_user_id, email=test_user_email)


@pytest.fixture
def auth_cookies(auth_token: str) -> dict[str, str]:
    """Cookies carrying a valid session token."""
    return {"auth-token": auth_token}


@pytest.fixture
def make_token():
    """Factory fixture wrapping create_test_token."""
    return create_test_token
