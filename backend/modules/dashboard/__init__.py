"""
Dashboard module.

Summarizes a user's notes and tags for the landing page.
"""

from .interfaces import IDashboardService
from .models import DashboardResponse, DashboardStats

__all__ = [
    "IDashboardService",
    "DashboardResponse",
    "DashboardStats",
]
