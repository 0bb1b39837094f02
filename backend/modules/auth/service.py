"""
Authentication service implementation.

Registers accounts, checks passwords at login and issues session tokens.
"""

import logging

from fastapi.concurrency import run_in_threadpool

from .interfaces import IAuthService
from .exceptions import InvalidCredentialsError, UserNotFoundError
from .models import LoginRequest, LoginResult, RegisterRequest, UserProfile
from .passwords import hash_password, verify_password
from .repository import UserRepository
from .tokens import TokenService

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Uses the users table for credentials and TokenService for signing.
    """

    def __init__(
        self,
        users: UserRepository,
        tokens: TokenService,
        bcrypt_rounds: int = 12,
    ):
        self._users = users
        self._tokens = tokens
        self._bcrypt_rounds = bcrypt_rounds

    async def register(self, request: RegisterRequest) -> UserProfile:
        """Create an account. Duplicate emails are rejected by the unique index."""
        email = normalize_email(request.email)
        password_hash = await run_in_threadpool(hash_password, request.password, rounds=self._bcrypt_rounds)
        record = self._users.create_user(
            email=email,
            name=request.name.strip(),
            password_hash=password_hash,
        )
        logger.info("Registered user %s", record.id)
        return UserProfile.from_record(record)

    async def login(self, request: LoginRequest) -> LoginResult:
        """
        Check credentials and issue a session token.

        Unknown emails and wrong passwords raise the same error.
        """
        record = self._users.get_by_email(normalize_email(request.email))
        if record is None or not await run_in_threadpool(verify_password, request.password, record.password_hash):
            logger.info("Failed login attempt")
            raise InvalidCredentialsError()

        issued = self._tokens.issue(record.id, record.email)
        logger.info("User %s logged in", record.id)
        return LoginResult(user=UserProfile.from_record(record), token=issued)

    async def get_profile(self, user_id: int) -> UserProfile:
        record = self._users.get_by_id(user_id)
        if record is None:
            raise UserNotFoundError(user_id)
        return UserProfile.from_record(record)
