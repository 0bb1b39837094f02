"""
Exception families for the Notebox backend.

Modules raise subclasses of these; api/errors.py turns each family into
one HTTP status. ``code`` is a stable machine-readable name used in logs.
"""

from typing import Optional, Any


class NoteboxError(Exception):
    """Root of every error the API knows how to answer."""

    default_code = "NOTEBOX_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = dict(details or {})

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code}: {self.message})"

    def to_dict(self) -> dict[str, Any]:
        """Structured form for log lines. Never sent to clients."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(NoteboxError):
    """The resource is missing or belongs to another user. Answered with 404."""

    default_code = "NOT_FOUND"


class ValidationError(NoteboxError):
    """Input the request models could not catch. Answered with 400."""

    default_code = "VALIDATION_FAILED"


class AuthenticationError(NoteboxError):
    """No trustworthy identity on the request. Answered with 401."""

    default_code = "UNAUTHENTICATED"


class ConflictError(NoteboxError):
    """A unique constraint rejected the write. Answered with 409."""

    default_code = "CONFLICT"


class ConfigurationError(NoteboxError):
    """The server is misconfigured and must not start."""

    default_code = "MISCONFIGURED"
