"""
PhishGuard Threat Snapshot Cache

Process-wide holder of the current ThreatSnapshot.

Readers take the reference once per analysis and keep using it; a refresh
builds a complete new snapshot and swaps the reference in a single
assignment, so a reader never observes a partially updated database.
"""

import asyncio
import logging
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, Optional

from phishguard.models.threat import ThreatSnapshot
from phishguard.utils.constants import THREAT_DB_MAX_AGE_SECONDS
from phishguard.utils.helpers import utc_now

from .feeds import ThreatFeed

logger = logging.getLogger(__name__)


class ThreatSnapshotCache:
    """
    Load-on-demand cache with timestamp based invalidation.

    A snapshot counts as fresh while either its own timestamp or the last
    successful fetch is within max age, so a feed that serves old data is
    not fetched again on every read.

    A failed refresh keeps the previous snapshot. When nothing was ever
    loaded an empty snapshot dated at the epoch is installed, so the next
    read tries the feed again.
    """

    def __init__(
        self,
        feed: ThreatFeed,
        max_age_seconds: int = THREAT_DB_MAX_AGE_SECONDS,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.feed = feed
        self.max_age = timedelta(seconds=max_age_seconds)
        self._clock = clock
        self._snapshot: Optional[ThreatSnapshot] = None
        self._fetched_at: Optional[datetime] = None
        self._lock: Optional[asyncio.Lock] = None
        self._lock_loop: Optional[asyncio.AbstractEventLoop] = None
        self.last_refresh_error: Optional[str] = None
        self.last_refresh_attempt: Optional[datetime] = None

    @property
    def snapshot(self) -> Optional[ThreatSnapshot]:
        """Current snapshot without triggering a refresh."""
        return self._snapshot

    def is_stale(self, now: Optional[datetime] = None) -> bool:
        snapshot = self._snapshot
        if snapshot is None:
            return True
        now = now or self._clock()
        if not snapshot.is_stale(now, self.max_age):
            return False
        return self._fetched_at is None or now - self._fetched_at > self.max_age

    def replace(self, snapshot: ThreatSnapshot) -> None:
        """Install a snapshot pushed by the host."""
        self._snapshot = snapshot
        self._fetched_at = None
        self.last_refresh_error = None

    def _get_lock(self) -> asyncio.Lock:
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
        return self._lock

    async def get_snapshot(self) -> ThreatSnapshot:
        """
        Return the current snapshot, refreshing it first when stale.

        Never raises; the result is always a usable snapshot.
        """
        if self.is_stale():
            await self.refresh(force=False)
        return self._snapshot or ThreatSnapshot.empty()

    async def refresh(self, force: bool = True) -> bool:
        """
        Fetch a new snapshot from the feed.

        Args:
            force: Refresh even if the current snapshot is fresh

        Returns:
            True if a new snapshot was installed
        """
        async with self._get_lock():
            # Another caller may have refreshed while we waited
            if not force and not self.is_stale():
                return False

            self.last_refresh_attempt = self._clock()
            try:
                snapshot = await self.feed.fetch()
            except Exception as e:
                self.last_refresh_error = str(e)
                if self._snapshot is None:
                    logger.warning(f"Threat feed '{self.feed.name}' unavailable, using empty database: {e}")
                    self._snapshot = ThreatSnapshot.empty()
                else:
                    logger.warning(f"Threat feed '{self.feed.name}' refresh failed, keeping last snapshot: {e}")
                return False

            self._snapshot = snapshot
            self.last_refresh_error = None
            self._fetched_at = self.last_refresh_attempt
            logger.info(
                f"Threat database refreshed from '{self.feed.name}' "
                f"(updated {snapshot.last_updated.isoformat()})"
            )
            return True

    def status(self) -> Dict[str, Any]:
        """Summary of the cached database for health endpoints."""
        snapshot = self._snapshot
        return {
            "feed": self.feed.name,
            "loaded": snapshot is not None,
            "phishing_domains": len(snapshot.phishing_domains) if snapshot else 0,
            "suspicious_patterns": len(snapshot.suspicious_patterns) if snapshot else 0,
            "url_shorteners": len(snapshot.url_shorteners) if snapshot else 0,
            "last_updated": snapshot.last_updated.isoformat() if snapshot else None,
            "last_fetched": self._fetched_at.isoformat() if self._fetched_at else None,
            "stale": self.is_stale(),
            "last_refresh_error": self.last_refresh_error,
        }
