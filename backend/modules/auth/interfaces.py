"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable

from .models import LoginRequest, LoginResult, RegisterRequest, UserProfile


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for account and login operations.

    Per-request token verification is not part of this interface: it is
    handled synchronously by TokenService without any database access.
    """

    async def register(self, request: RegisterRequest) -> UserProfile:
        """
        Create an account with a bcrypt-hashed password.

        Raises:
            EmailAlreadyRegisteredError: If the email is already taken
        """
        ...

    async def login(self, request: LoginRequest) -> LoginResult:
        """
        Check credentials and issue a session token.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password
        """
        ...

    async def get_profile(self, user_id: int) -> UserProfile:
        """
        Load a fresh profile for a verified user id.

        Raises:
            UserNotFoundError: The user no longer exists
        """
        ...
