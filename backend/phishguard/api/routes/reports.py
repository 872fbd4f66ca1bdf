"""
PhishGuard Reports API Routes

User phishing reports and activity statistics.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from phishguard.api.dependencies import get_activity_store, get_list_store, get_threat_cache
from phishguard.models.activity import ActivityStatistics, PhishingReport, PhishingReportRequest
from phishguard.models.lists import ListType
from phishguard.utils.exceptions import InvalidURLError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["reports"])


@router.post("/report", response_model=PhishingReport, status_code=201)
async def report_phishing(
    request: PhishingReportRequest,
    store = Depends(get_activity_store),
):
    """Record a site the user believes is phishing."""
    try:
        return await store.add_phishing_report(request.url, request.details)
    except InvalidURLError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.get("/statistics", response_model=ActivityStatistics)
async def get_statistics(
    store = Depends(get_activity_store),
    list_store = Depends(get_list_store),
    threat_cache = Depends(get_threat_cache),
):
    """Counts of blocked sites, reports, scans and whitelisted domains."""
    whitelist = await list_store.get_domains(ListType.WHITELIST)
    snapshot = threat_cache.snapshot
    return await store.get_statistics(
        whitelist_count=len(whitelist),
        last_update=snapshot.last_updated if snapshot else None,
    )
