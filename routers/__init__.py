"""API Routers package

This package contains all API route handlers.
Routers are organized by feature domain.
"""

from . import dashboard_router

__all__ = [
    "dashboard_router",
]
