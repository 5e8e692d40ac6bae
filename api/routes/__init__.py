"""
API Routes Package

This package contains all the route modules organized by functionality.
"""

from api.routes.recommend import router as recommend_router
from api.routes.system import router as system_router

__all__ = [
    "recommend_router",
    "system_router",
]
