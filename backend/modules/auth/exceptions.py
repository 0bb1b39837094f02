"""
Authentication module exceptions.

Token failures are kept distinct here so the reason can be logged, but the
API error handlers collapse every AuthenticationError into one 401 body.
"""

from shared.exceptions import AuthenticationError, ConflictError


class TokenError(AuthenticationError):
    """Base class for session tokens that cannot be trusted."""

    pass


class MissingTokenError(TokenError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class MalformedTokenError(TokenError):
    """Raised when a token cannot be parsed into the expected claims."""

    def __init__(self, message: str = "Malformed authentication token"):
        super().__init__(message, code="MALFORMED_TOKEN")


class InvalidSignatureError(TokenError):
    """Raised when a token's signature does not match its claims."""

    def __init__(self, message: str = "Authentication token signature mismatch"):
        super().__init__(message, code="INVALID_SIGNATURE")


class ExpiredTokenError(TokenError):
    """Raised when a token is past its expiry."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class UserNotFoundError(AuthenticationError):
    """Raised when a verified token names a user that no longer exists."""

    def __init__(self, user_id: int):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class InvalidCredentialsError(AuthenticationError):
    """Raised when login fails. Same message for unknown email and bad password."""

    def __init__(self):
        super().__init__("Invalid email or password", code="INVALID_CREDENTIALS")


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when registering an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(
            "An account with this email already exists",
            code="EMAIL_ALREADY_REGISTERED",
            details={"email": email},
        )
