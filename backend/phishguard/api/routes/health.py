"""
PhishGuard Health API Routes

Health check and status endpoints.
"""

import logging

from fastapi import APIRouter, Depends

from phishguard.api.dependencies import get_engine
from phishguard.utils.constants import APP_VERSION
from phishguard.utils.helpers import utc_now

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check():
    """
    Basic health check endpoint.

    Returns:
        Health status
    """
    return {
        "status": "healthy",
        "timestamp": utc_now().isoformat(),
        "service": "phishguard-api",
        "version": APP_VERSION,
    }


@router.get("/ready")
async def readiness_check(
    engine = Depends(get_engine),
):
    """
    Readiness check - verifies the engine and threat database.

    A stale or empty threat database is a warning, not a failure: the
    engine keeps analyzing with what it has.
    """
    checks = {}
    all_ready = True

    try:
        checks["detection_engine"] = {
            "status": "ready",
            "rules_loaded": len(engine.rules),
        }
    except Exception as e:
        checks["detection_engine"] = {"status": "error", "error": str(e)}
        all_ready = False

    status = engine.threat_cache.status()
    checks["threat_data"] = {
        "status": "ready" if status["loaded"] and not status["stale"] else "warning",
        **status,
    }

    return {
        "ready": all_ready,
        "timestamp": utc_now().isoformat(),
        "checks": checks,
    }
