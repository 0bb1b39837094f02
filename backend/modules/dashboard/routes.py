"""
Dashboard API endpoint.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_dashboard_service
from shared.models import AuthenticatedUser

from .interfaces import IDashboardService
from .models import DashboardResponse

router = APIRouter()


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IDashboardService = Depends(get_dashboard_service),
) -> DashboardResponse:
    """
    Get note/tag totals and the most recently updated notes.
    """
    return await service.get_dashboard(user.id)
