"""
Centralized configuration for the Notebox backend.

All settings are loaded from environment variables with sensible defaults.
The one exception is the token signing secret: it has no usable default,
and the application refuses to start until JWT_SECRET is set.
"""

from functools import lru_cache
from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

# Minimum HS256 key length: the SHA-256 digest size in bytes
MIN_JWT_SECRET_LENGTH = 32


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Notebox API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings (the browser frontend sends the auth cookie)
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_db_url: str = ""  # direct Postgres URI, used by run_migrations.py

    # Session tokens
    jwt_secret: SecretStr = SecretStr("")
    jwt_algorithm: str = "HS256"
    token_ttl_hours: int = 24 * 7

    # Auth cookie
    auth_cookie_name: str = "auth-token"
    auth_cookie_secure: bool = False

    # Password hashing
    bcrypt_rounds: int = 12

    def require_jwt_secret(self) -> str:
        """
        Return the signing secret, refusing to run without a real one.

        Raises:
            ConfigurationError: If JWT_SECRET is unset or too short.
        """
        secret = self.jwt_secret.get_secret_value()
        if not secret:
            raise ConfigurationError(
                "JWT_SECRET is not set. Refusing to start without a signing secret.",
                details={"setting": "jwt_secret"},
            )
        if len(secret) < MIN_JWT_SECRET_LENGTH:
            raise ConfigurationError(
                f"JWT_SECRET must be at least {MIN_JWT_SECRET_LENGTH} characters long.",
                details={"setting": "jwt_secret"},
            )
        return secret


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
