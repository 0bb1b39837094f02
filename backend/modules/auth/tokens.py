"""
Session token issuing and verification.

Tokens are HS256 JWTs carrying ``sub`` (user id), ``email``, ``iat`` and
``exp``. Verification is pure: it checks structure, signature and expiry
against the configured secret and never touches the database.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.config import Settings
from shared.models import AuthenticatedUser

from .exceptions import (
    ExpiredTokenError,
    InvalidSignatureError,
    MalformedTokenError,
    MissingTokenError,
)
from .models import IssuedToken, TokenClaims

logger = logging.getLogger(__name__)

REQUIRED_CLAIMS = ["sub", "email", "exp", "iat"]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """
    Issues and verifies signed session tokens.

    Holds the signing secret for the life of the process. Construct it once
    at startup (see ``from_settings``) and share it across requests.
    """

    def __init__(
        self,
        secret: str,
        ttl: timedelta,
        algorithm: str = "HS256",
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if not secret:
            raise ValueError("TokenService requires a non-empty secret")
        self._secret = secret
        self._ttl = ttl
        self._algorithm = algorithm
        self._clock = clock or _utcnow

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        """Build the service from settings, failing if no secret is configured."""
        return cls(
            secret=settings.require_jwt_secret(),
            ttl=timedelta(hours=settings.token_ttl_hours),
            algorithm=settings.jwt_algorithm,
        )

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, user_id: int, email: str) -> IssuedToken:
        """
        Sign a token asserting ``{user_id, email}``.

        The signature covers every claim, so altering any of them
        invalidates the token.
        """
        now = self._clock()
        expires_at = now + self._ttl
        payload = {
            "sub": str(user_id),
            "email": email,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(payload, self._secret, algorithm=self._algorithm)
        return IssuedToken(token=token, expires_at=expires_at)

    def verify(self, token: Optional[str]) -> AuthenticatedUser:
        """
        Verify a token and return the identity it asserts.

        Raises:
            MissingTokenError: No token was supplied.
            MalformedTokenError: The token does not parse into the expected claims.
            InvalidSignatureError: The signature does not match under our secret.
            ExpiredTokenError: The token is past its ``exp``.
        """
        if not token:
            raise MissingTokenError()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": REQUIRED_CLAIMS, "verify_exp": False, "verify_iat": False},
            )
        except jwt.InvalidSignatureError:
            raise InvalidSignatureError()
        except jwt.InvalidTokenError as e:
            raise MalformedTokenError(f"Malformed authentication token: {e}")

        try:
            claims = TokenClaims(**payload)
        except PydanticValidationError:
            raise MalformedTokenError("Authentication token claims have unexpected types")

        # Expiry uses the injected clock, not PyJWT's
        if self._clock().timestamp() >= claims.exp:
            raise ExpiredTokenError()

        return AuthenticatedUser(id=claims.sub, email=claims.email)
