"""Tests for application startup."""

import pytest

from api.app import create_app
from api.dependencies import get_container
from shared.config import Settings
from shared.exceptions import ConfigurationError

SECRET = "startup-test-signing-secret-0123456789ab"


class TestCreateApp:
    def test_refuses_to_start_without_secret(self):
        with pytest.raises(ConfigurationError):
            create_app(Settings(_env_file=None, jwt_secret=""))

    def test_refuses_to_start_with_short_secret(self):
        with pytest.raises(ConfigurationError):
            create_app(Settings(_env_file=None, jwt_secret="changeme"))

    def test_container_uses_given_settings(self):
        settings = Settings(_env_file=None, jwt_secret=SECRET, token_ttl_hours=3)

        app = create_app(settings)

        assert app.state.settings is settings
        assert get_container().settings is settings

    def test_routes_registered(self):
        app = create_app(Settings(_env_file=None, jwt_secret=SECRET))
        paths = set(app.openapi()["paths"])

        for path in (
            "/api/health",
            "/api/ready",
            "/api/auth/login",
            "/api/auth/logout",
            "/api/auth/me",
            "/api/auth/register",
            "/api/notes",
            "/api/notes/{note_id}",
            "/api/tags",
            "/api/tags/{tag_id}",
            "/api/dashboard",
        ):
            assert path in paths
