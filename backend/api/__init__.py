"""
ProfileDesk API package.

Provides the FastAPI application for the ProfileDesk profile sharing service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
