"""
PhishGuard Threat Data API Routes
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends

from phishguard.api.dependencies import get_threat_cache

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/threat-data", tags=["threat-data"])


@router.get("")
async def threat_data_status(
    cache = Depends(get_threat_cache),
) -> Dict[str, Any]:
    """Counts, age and refresh state of the threat database."""
    return cache.status()


@router.post("/refresh")
async def refresh_threat_data(
    cache = Depends(get_threat_cache),
) -> Dict[str, Any]:
    """
    Force a refresh from the configured feed.

    A failed refresh keeps the current database and reports the error.
    """
    refreshed = await cache.refresh(force=True)
    return {"refreshed": refreshed, **cache.status()}
