"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from pydantic import BaseModel, EmailStr, Field

from shared.models import CamelModel


class TokenClaims(BaseModel):
    """
    Decoded session token payload.

    ``sub`` carries the numeric user id as a string, as RFC 7519
    requires string subjects.
    """

    sub: int = Field(..., description="Subject (user ID)")
    email: str = Field(..., min_length=3, description="User's email")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")


class IssuedToken(BaseModel):
    """A freshly signed session token and when it stops being valid."""

    token: str
    expires_at: datetime

    model_config = {"frozen": True}


class UserRecord(BaseModel):
    """A row of the users table, including the password hash."""

    id: int
    email: str
    name: str
    password_hash: str
    created_at: datetime
    updated_at: datetime


class UserProfile(CamelModel):
    """Public view of a user. Never carries the password hash."""

    id: int = Field(..., description="User ID")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")
    created_at: datetime = Field(..., description="Account creation time")

    @classmethod
    def from_record(cls, record: UserRecord) -> "UserProfile":
        return cls(
            id=record.id,
            name=record.name,
            email=record.email,
            created_at=record.created_at,
        )


class RegisterRequest(BaseModel):
    """Request to create an account."""

    email: EmailStr = Field(..., description="Login email, unique per account")
    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    password: str = Field(..., min_length=8, max_length=128, description="Plaintext password")


class LoginRequest(BaseModel):
    """Email and password presented at login."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class UserResponse(BaseModel):
    """Envelope used by register, login and /me."""

    user: UserProfile


class LogoutResponse(BaseModel):
    message: str = "Logged out"


class LoginResult(BaseModel):
    """What the login flow hands back to the route: the profile and its token."""

    user: UserProfile
    token: IssuedToken
