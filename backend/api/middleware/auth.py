"""
Cookie authentication for route handlers.

Reads the ``auth-token`` cookie and verifies it with the TokenService.
Every failure (no cookie, malformed, bad signature, expired) becomes the
same UnauthenticatedError; only the log line records which one it was.
"""

import logging
from typing import Optional
from fastapi import Depends, Request

from shared.config import Settings
from shared.exceptions import AuthenticationError
from shared.models import AuthenticatedUser
from modules.auth.exceptions import TokenError
from modules.auth.tokens import TokenService

from ..dependencies import get_app_settings, get_token_service

logger = logging.getLogger(__name__)


class UnauthenticatedError(AuthenticationError):
    """The request carries no usable identity."""

    def __init__(self, reason: str = "UNAUTHENTICATED"):
        super().__init__("Unauthorized", code="UNAUTHENTICATED", details={"reason": reason})


def read_auth_cookie(request: Request, settings: Settings) -> Optional[str]:
    """Return the raw session token from the request cookies, if any."""
    return request.cookies.get(settings.auth_cookie_name) or None


def resolve_user(token: Optional[str], tokens: TokenService) -> AuthenticatedUser:
    """
    Verify a token and return its identity.

    Raises:
        UnauthenticatedError: For any missing or rejected token
    """
    try:
        return tokens.verify(token)
    except TokenError as e:
        logger.info("Rejected session token: %s", e.code)
        raise UnauthenticatedError(reason=e.code)


async def get_current_user(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    tokens: TokenService = Depends(get_token_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    return resolve_user(read_auth_cookie(request, settings), tokens)

