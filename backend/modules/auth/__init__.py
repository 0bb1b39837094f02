"""
Authentication module.

Handles password login, session token issuing/verification and profiles.

Public API:
- IAuthService: Interface for account and login operations
- TokenService: Stateless signed-token issuing and verification
- UserProfile: Public user profile
- Auth exceptions: MalformedTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import (
    IssuedToken,
    LoginRequest,
    LoginResult,
    RegisterRequest,
    TokenClaims,
    UserProfile,
)
from .exceptions import (
    TokenError,
    MissingTokenError,
    MalformedTokenError,
    InvalidSignatureError,
    ExpiredTokenError,
    UserNotFoundError,
    InvalidCredentialsError,
    EmailAlreadyRegisteredError,
)
from .tokens import TokenService

__all__ = [
    # Interface
    "IAuthService",
    "TokenService",
    # Models
    "IssuedToken",
    "LoginRequest",
    "LoginResult",
    "RegisterRequest",
    "TokenClaims",
    "UserProfile",
    # Exceptions
    "TokenError",
    "MissingTokenError",
    "MalformedTokenError",
    "InvalidSignatureError",
    "ExpiredTokenError",
    "UserNotFoundError",
    "InvalidCredentialsError",
    "EmailAlreadyRegisteredError",
]
