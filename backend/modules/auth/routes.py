"""
Auth API endpoints.

Registration, cookie-based login/logout and the current user's profile.
"""

import logging
from fastapi import APIRouter, Depends, Response

from api.middleware.auth import UnauthenticatedError, get_current_user
from api.dependencies import get_app_settings, get_auth_service
from shared.config import Settings
from shared.models import AuthenticatedUser

from .exceptions import UserNotFoundError
from .interfaces import IAuthService
from .models import (
    LoginRequest,
    LogoutResponse,
    RegisterRequest,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=UserResponse, status_code=201)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> UserResponse:
    """
    Create an account.

    Returns 409 if the email is already registered. Does not log in.
    """
    user = await service.register(request)
    return UserResponse(user=user)


@router.post("/login", response_model=UserResponse)
async def login(
    request: LoginRequest,
    response: Response,
    service: IAuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_app_settings),
) -> UserResponse:
    """
    Check credentials and set the HTTP-only session cookie.
    """
    result = await service.login(request)
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=result.token.token,
        max_age=settings.token_ttl_hours * 3600,
        path="/",
        httponly=True,
        secure=settings.auth_cookie_secure,
        samesite="lax",
    )
    return UserResponse(user=result.user)


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    settings: Settings = Depends(get_app_settings),
) -> LogoutResponse:
    """
    Clear the session cookie.

    Tokens are stateless, so this only tells the browser to drop it.
    """
    response.delete_cookie(
        key=settings.auth_cookie_name,
        path="/",
        httponly=True,
        secure=settings.auth_cookie_secure,
        samesite="lax",
    )
    return LogoutResponse()


@router.get("/me", response_model=UserResponse)
async def get_me(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> UserResponse:
    """
    Get the current user's profile, freshly loaded from the database.

    A valid token for a user that no longer exists is treated as unauthenticated.
    """
    try:
        profile = await service.get_profile(user.id)
    except UserNotFoundError:
        logger.info("Token for deleted user %s", user.id)
        raise UnauthenticatedError(reason="USER_NOT_FOUND")
    return UserResponse(user=profile)
