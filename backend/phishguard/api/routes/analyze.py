"""
PhishGuard Analyze API

URL risk analysis endpoints.
"""

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from phishguard.api.dependencies import get_activity_store, get_engine, get_settings
from phishguard.models.detection import AnalysisResult, NavigationAction, RiskLevel
from phishguard.services.detection.actions import recommend_action

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analyze", tags=["analyze"])


class AnalyzeRequest(BaseModel):
    """URL analysis request."""
    url: str = Field(..., max_length=8192, description="Address to analyze")


class AnalyzeResponse(AnalysisResult):
    """Analysis result with the recommended navigation action."""
    action: NavigationAction


class PrescreenResponse(BaseModel):
    """Quick verdict."""
    url: str
    risk_level: RiskLevel


@router.post("", response_model=AnalyzeResponse)
async def analyze(
    request: AnalyzeRequest,
    engine = Depends(get_engine),
    settings = Depends(get_settings),
    activity = Depends(get_activity_store),
):
    """
    Full risk analysis of a URL.

    Malformed URLs are not an error: they return ``unknown`` and are not
    recorded in the scan history.
    """
    result = await engine.analyze(request.url)
    action = recommend_action(
        result.risk_level,
        block_suspicious=settings.block_suspicious,
        show_warnings=settings.show_warnings,
    )

    if result.risk_level != RiskLevel.UNKNOWN:
        details = "; ".join(result.explanations) or None
        await activity.add_scan(request.url, result.risk_level, details)
        if action == NavigationAction.BLOCK:
            reason = details or f"{result.risk_level.value} risk"
            await activity.add_blocked_site(request.url, reason)

    return AnalyzeResponse(**result.model_dump(), action=action)


@router.post("/prescreen", response_model=PrescreenResponse)
async def prescreen(
    request: AnalyzeRequest,
    engine = Depends(get_engine),
):
    """Hostname-only verdict for use before navigation."""
    risk_level = await engine.prescreen(request.url)
    return PrescreenResponse(url=request.url, risk_level=risk_level)
