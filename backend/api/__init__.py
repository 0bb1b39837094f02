"""
Notebox API package.

Provides the FastAPI application for the Notebox notes service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
