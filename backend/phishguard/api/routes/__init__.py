"""
PhishGuard API Routes

All API route modules.
"""

from fastapi import APIRouter

from .analyze import router as analyze_router
from .health import router as health_router
from .lists import router as lists_router
from .reports import router as reports_router
from .threat_data import router as threat_data_router


def get_api_router() -> APIRouter:
    """Create and return the main API router."""
    api_router = APIRouter(prefix="/api/v1")

    api_router.include_router(analyze_router)
    api_router.include_router(health_router)
    api_router.include_router(lists_router)
    api_router.include_router(reports_router)
    api_router.include_router(threat_data_router)

    return api_router


__all__ = [
    'get_api_router',
    'analyze_router',
    'health_router',
    'lists_router',
    'reports_router',
    'threat_data_router',
]
