"""
PhishGuard Activity Storage

Blocked sites, user phishing reports and scan history. Each record list is
capped; once full, the oldest entry is dropped for every new one.
"""

import logging
from collections import deque
from datetime import datetime, timedelta
from typing import Callable, Deque, List, Optional

from phishguard.models.activity import (
    ActivityStatistics,
    BlockedSite,
    PhishingReport,
    ScanRecord,
)
from phishguard.models.detection import RiskLevel
from phishguard.utils.constants import (
    BLOCKED_SITES_LIMIT,
    BLOCKED_SITES_RETENTION_DAYS,
    PHISHING_REPORTS_LIMIT,
    SCAN_HISTORY_LIMIT,
    SCAN_HISTORY_RETENTION_DAYS,
)
from phishguard.utils.exceptions import InvalidURLError
from phishguard.utils.helpers import parse_url, utc_now

logger = logging.getLogger(__name__)


class ActivityStore:
    """Interface for activity storage."""

    async def add_blocked_site(self, url: str, reason: str) -> BlockedSite:
        """Record a blocked navigation."""
        raise NotImplementedError

    async def add_phishing_report(self, url: str, details: Optional[str] = None) -> PhishingReport:
        """Record a user report. The URL must have a host."""
        raise NotImplementedError

    async def add_scan(
        self,
        url: str,
        risk_level: RiskLevel,
        details: Optional[str] = None,
    ) -> Optional[ScanRecord]:
        """Record an analysis. Returns None when scan history is disabled."""
        raise NotImplementedError

    async def get_blocked_sites(self) -> List[BlockedSite]:
        raise NotImplementedError

    async def get_phishing_reports(self) -> List[PhishingReport]:
        raise NotImplementedError

    async def get_scan_history(self) -> List[ScanRecord]:
        raise NotImplementedError

    async def get_statistics(
        self,
        whitelist_count: int = 0,
        last_update: Optional[datetime] = None,
    ) -> ActivityStatistics:
        """Record counts, with figures owned by other collaborators passed in."""
        return ActivityStatistics(
            blocked_count=len(await self.get_blocked_sites()),
            reports_count=len(await self.get_phishing_reports()),
            scans_count=len(await self.get_scan_history()),
            whitelist_count=whitelist_count,
            last_update=last_update,
        )

    async def cleanup_old_data(self, now: Optional[datetime] = None) -> int:
        """Drop expired records. Returns the number removed."""
        raise NotImplementedError


class InMemoryActivityStore(ActivityStore):
    """In-memory activity records, oldest first."""

    def __init__(
        self,
        statistics_enabled: bool = True,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.statistics_enabled = statistics_enabled
        self._clock = clock
        self._blocked: Deque[BlockedSite] = deque(maxlen=BLOCKED_SITES_LIMIT)
        self._reports: Deque[PhishingReport] = deque(maxlen=PHISHING_REPORTS_LIMIT)
        self._scans: Deque[ScanRecord] = deque(maxlen=SCAN_HISTORY_LIMIT)

    async def add_blocked_site(self, url: str, reason: str) -> BlockedSite:
        site = BlockedSite(
            url=url,
            domain=parse_url(url).hostname,
            reason=reason,
            timestamp=self._clock(),
        )
        self._blocked.append(site)
        logger.info(f"Blocked site recorded: {url}")
        return site

    async def add_phishing_report(self, url: str, details: Optional[str] = None) -> PhishingReport:
        domain = parse_url(url).hostname
        if not domain:
            raise InvalidURLError(f"URL has no host: {url}")

        report = PhishingReport(
            url=url,
            domain=domain,
            details=details,
            timestamp=self._clock(),
        )
        self._reports.append(report)
        logger.info(f"Phishing report recorded: {url}")
        return report

    async def add_scan(
        self,
        url: str,
        risk_level: RiskLevel,
        details: Optional[str] = None,
    ) -> Optional[ScanRecord]:
        if not self.statistics_enabled:
            return None

        record = ScanRecord(
            url=url,
            domain=parse_url(url).hostname,
            risk_level=risk_level,
            details=details,
            timestamp=self._clock(),
        )
        self._scans.append(record)
        return record

    async def get_blocked_sites(self) -> List[BlockedSite]:
        return list(self._blocked)

    async def get_phishing_reports(self) -> List[PhishingReport]:
        return list(self._reports)

    async def get_scan_history(self) -> List[ScanRecord]:
        return list(self._scans)

    async def cleanup_old_data(self, now: Optional[datetime] = None) -> int:
        """
        Drop scan history older than 30 days and blocked sites older than 90.

        Reports are kept until pushed out by newer ones.
        """
        now = now or self._clock()
        scan_cutoff = now - timedelta(days=SCAN_HISTORY_RETENTION_DAYS)
        blocked_cutoff = now - timedelta(days=BLOCKED_SITES_RETENTION_DAYS)

        scans = [r for r in self._scans if r.timestamp > scan_cutoff]
        blocked = [s for s in self._blocked if s.timestamp > blocked_cutoff]
        removed = (len(self._scans) - len(scans)) + (len(self._blocked) - len(blocked))

        if removed:
            self._scans = deque(scans, maxlen=SCAN_HISTORY_LIMIT)
            self._blocked = deque(blocked, maxlen=BLOCKED_SITES_LIMIT)
            logger.info(f"Removed {removed} expired activity records")
        return removed
