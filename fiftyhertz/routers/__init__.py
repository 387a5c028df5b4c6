"""
API Routers
"""
from .auth import router as auth_router
from .reference import router as reference_router

__all__ = ["auth_router", "reference_router"]
