"""Tests for shared/config.py."""

import os
import pytest
from unittest.mock import patch

from shared.config import MIN_JWT_SECRET_LENGTH, Settings, get_settings
from shared.exceptions import ConfigurationError


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        settings = Settings(_env_file=None)
        assert settings.app_name == "Notebox API"
        assert settings.debug is False
        assert settings.port == 8000
        assert settings.jwt_algorithm == "HS256"
        assert settings.token_ttl_hours == 168
        assert settings.auth_cookie_name == "auth-token"
        assert settings.bcrypt_rounds == 12

    def test_loads_from_env(self):
        with patch.dict(os.environ, {"DEBUG": "true", "PORT": "9000", "TOKEN_TTL_HOURS": "1"}):
            settings = Settings(_env_file=None)
            assert settings.debug is True
            assert settings.port == 9000
            assert settings.token_ttl_hours == 1

    def test_secret_is_not_printed(self):
        settings = Settings(_env_file=None, jwt_secret="x" * 40)
        assert "x" * 40 not in repr(settings)


class TestRequireJwtSecret:
    def test_returns_configured_secret(self):
        secret = "s" * MIN_JWT_SECRET_LENGTH
        assert Settings(_env_file=None, jwt_secret=secret).require_jwt_secret() == secret

    def test_empty_secret(self):
        with patch.dict(os.environ, {"JWT_SECRET": ""}):
            with pytest.raises(ConfigurationError, match="JWT_SECRET is not set"):
                Settings(_env_file=None).require_jwt_secret()

    def test_short_secret(self):
        with pytest.raises(ConfigurationError, match="at least"):
            Settings(_env_file=None, jwt_secret="s" * (MIN_JWT_SECRET_LENGTH - 1)).require_jwt_secret()


class TestGetSettings:
    def test_returns_cached_instance(self):
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        assert isinstance(get_settings(), Settings)
