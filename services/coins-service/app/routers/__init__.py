"""
API routers for coins service endpoints.
"""

from . import combinations_router, health_router

__all__ = ["combinations_router", "health_router"]
