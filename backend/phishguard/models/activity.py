"""
PhishGuard Activity Models

Records of blocked navigations, user phishing reports and scan history.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .detection import RiskLevel


class BlockedSite(BaseModel):
    """A navigation stopped because of its verdict."""
    model_config = ConfigDict(frozen=True)

    url: str
    domain: str
    reason: str
    timestamp: datetime


class PhishingReport(BaseModel):
    """A site reported as phishing by the user."""
    model_config = ConfigDict(frozen=True)

    url: str
    domain: str
    details: Optional[str] = None
    timestamp: datetime
    # Set once the report has been forwarded to an external service
    reported: bool = False


class ScanRecord(BaseModel):
    """One full analysis."""
    model_config = ConfigDict(frozen=True)

    url: str
    domain: str
    risk_level: RiskLevel
    details: Optional[str] = None
    timestamp: datetime


class PhishingReportRequest(BaseModel):
    """Request body for reporting a site."""
    url: str = Field(..., min_length=1, max_length=8192, description="Address being reported")
    details: Optional[str] = Field(default=None, max_length=4096)


class ActivityStatistics(BaseModel):
    """Counts of recorded activity."""
    blocked_count: int = 0
    reports_count: int = 0
    scans_count: int = 0
    whitelist_count: int = 0
    last_update: Optional[datetime] = Field(
        default=None,
        description="When the threat database was last updated",
    )
