"""
PhishGuard Threat Intelligence Tests

Tests for threat snapshots, feeds and the snapshot cache.
"""

import asyncio
import json
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from phishguard.models.threat import EPOCH, ThreatSnapshot
from phishguard.services.threat_intel.cache import ThreatSnapshotCache
from phishguard.services.threat_intel.feeds import (
    JsonFileThreatFeed,
    StaticThreatFeed,
    ThreatFeed,
    build_threat_feed,
    snapshot_from_dict,
)
from phishguard.utils.constants import DEFAULT_PHISHING_DOMAINS
from phishguard.utils.exceptions import ThreatFeedError

from conftest import FIXED_NOW, fixed_clock, make_snapshot


class MutableClock:
    """Clock that tests can move forward."""

    def __init__(self, now: datetime = FIXED_NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


class FailingFeed(ThreatFeed):
    name = "failing"

    def __init__(self):
        self.calls = 0

    async def fetch(self) -> ThreatSnapshot:
        self.calls += 1
        raise ThreatFeedError("feed unreachable")


class CountingFeed(ThreatFeed):
    name = "counting"

    def __init__(self, clock=fixed_clock):
        self.calls = 0
        self._clock = clock

    async def fetch(self) -> ThreatSnapshot:
        self.calls += 1
        return make_snapshot(phishing_domains=[f"evil{self.calls}.com"], last_updated=self._clock())


class TestThreatSnapshot:
    """Tests for the snapshot model."""

    def test_empty_is_always_stale(self):
        snapshot = ThreatSnapshot.empty()
        assert snapshot.last_updated == EPOCH
        assert not snapshot.phishing_domains
        assert snapshot.is_stale(FIXED_NOW, timedelta(hours=1))

    def test_domains_normalized(self):
        snapshot = ThreatSnapshot(phishing_domains=[" Evil.COM ", "", "evil.com"])
        assert snapshot.phishing_domains == frozenset({"evil.com"})

    def test_patterns_compiled(self):
        snapshot = ThreatSnapshot(suspicious_patterns=[r"\d+\.tk$"])
        assert snapshot.suspicious_patterns[0].search("123.tk")

    def test_invalid_pattern_rejected(self):
        with pytest.raises(ValidationError):
            ThreatSnapshot(suspicious_patterns=["("])

    def test_naive_timestamp_is_utc(self):
        snapshot = ThreatSnapshot(last_updated=datetime(2025, 1, 1))
        assert snapshot.last_updated.tzinfo is not None

    def test_staleness_boundary(self):
        snapshot = make_snapshot()
        max_age = timedelta(seconds=3600)
        assert not snapshot.is_stale(FIXED_NOW + timedelta(seconds=3600), max_age)
        assert snapshot.is_stale(FIXED_NOW + timedelta(seconds=3601), max_age)

    def test_immutable(self):
        snapshot = make_snapshot()
        with pytest.raises(ValidationError):
            snapshot.phishing_domains = frozenset({"evil.com"})


class TestSnapshotFromDict:
    """Tests for feed document parsing."""

    def test_camel_case_with_epoch_millis(self):
        snapshot = snapshot_from_dict({
            "phishingDomains": ["Evil.com"],
            "suspiciousPatterns": [r"login\d+"],
            "urlShorteners": ["bit.ly"],
            "lastUpdated": 1717243200000,
        }, default_updated=FIXED_NOW)

        assert snapshot.phishing_domains == frozenset({"evil.com"})
        assert len(snapshot.suspicious_patterns) == 1
        assert snapshot.url_shorteners == frozenset({"bit.ly"})
        assert snapshot.last_updated == datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)

    def test_snake_case_with_iso_timestamp(self):
        snapshot = snapshot_from_dict({
            "phishing_domains": ["evil.com"],
            "last_updated": "2025-06-01T12:00:00+00:00",
        }, default_updated=EPOCH)

        assert snapshot.last_updated == FIXED_NOW
        assert snapshot.url_shorteners == frozenset()

    def test_missing_timestamp_uses_default(self):
        snapshot = snapshot_from_dict({"phishingDomains": []}, default_updated=FIXED_NOW)
        assert snapshot.last_updated == FIXED_NOW

    def test_not_an_object(self):
        with pytest.raises(ThreatFeedError):
            snapshot_from_dict(["evil.com"], default_updated=FIXED_NOW)

    def test_invalid_document(self):
        with pytest.raises(ThreatFeedError):
            snapshot_from_dict({"phishingDomains": "evil.com"}, default_updated=FIXED_NOW)
        with pytest.raises(ThreatFeedError):
            snapshot_from_dict({"suspiciousPatterns": ["("]}, default_updated=FIXED_NOW)


class TestThreatFeeds:
    """Tests for feed implementations."""

    def test_static_feed(self):
        snapshot = asyncio.run(StaticThreatFeed(clock=fixed_clock).fetch())
        assert snapshot.phishing_domains == frozenset(DEFAULT_PHISHING_DOMAINS)
        assert len(snapshot.suspicious_patterns) == 3
        assert "bit.ly" in snapshot.url_shorteners
        assert snapshot.last_updated == FIXED_NOW

    def test_json_file_feed(self, tmp_path):
        path = tmp_path / "threats.json"
        path.write_text(json.dumps({
            "phishingDomains": ["evil.com", "phish.net"],
            "urlShorteners": ["short.ly"],
            "lastUpdated": "2025-06-01T12:00:00Z",
        }))

        snapshot = asyncio.run(JsonFileThreatFeed(path).fetch())
        assert snapshot.phishing_domains == frozenset({"evil.com", "phish.net"})
        assert snapshot.url_shorteners == frozenset({"short.ly"})
        assert snapshot.last_updated == FIXED_NOW

    def test_json_file_missing(self, tmp_path):
        feed = JsonFileThreatFeed(tmp_path / "missing.json")
        with pytest.raises(ThreatFeedError):
            asyncio.run(feed.fetch())

    def test_json_file_malformed(self, tmp_path):
        path = tmp_path / "threats.json"
        path.write_text("{not json")
        with pytest.raises(ThreatFeedError):
            asyncio.run(JsonFileThreatFeed(path).fetch())

    def test_build_threat_feed(self, tmp_path):
        assert isinstance(build_threat_feed(None), StaticThreatFeed)
        assert isinstance(build_threat_feed(str(tmp_path / "t.json")), JsonFileThreatFeed)


class TestThreatSnapshotCache:
    """Tests for the snapshot cache."""

    def test_loads_on_first_read(self):
        feed = CountingFeed()
        cache = ThreatSnapshotCache(feed, clock=fixed_clock)
        assert cache.snapshot is None
        assert cache.is_stale()

        snapshot = asyncio.run(cache.get_snapshot())
        assert snapshot.phishing_domains == frozenset({"evil1.com"})
        assert not cache.is_stale()

    def test_fresh_snapshot_not_refetched(self):
        feed = CountingFeed()
        cache = ThreatSnapshotCache(feed, clock=fixed_clock)

        async def run():
            await cache.get_snapshot()
            await cache.get_snapshot()
            return await cache.refresh(force=False)

        assert asyncio.run(run()) is False
        assert feed.calls == 1

    def test_stale_snapshot_refreshed(self):
        clock = MutableClock()
        feed = CountingFeed(clock=clock)
        cache = ThreatSnapshotCache(feed, max_age_seconds=3600, clock=clock)

        asyncio.run(cache.get_snapshot())
        clock.now = FIXED_NOW + timedelta(seconds=3601)
        assert cache.is_stale()

        snapshot = asyncio.run(cache.get_snapshot())
        assert snapshot.phishing_domains == frozenset({"evil2.com"})
        assert feed.calls == 2

    def test_concurrent_reads_fetch_once(self):
        feed = CountingFeed()
        cache = ThreatSnapshotCache(feed, clock=fixed_clock)

        async def run():
            return await asyncio.gather(*(cache.get_snapshot() for _ in range(5)))

        snapshots = asyncio.run(run())
        assert feed.calls == 1
        assert all(s is snapshots[0] for s in snapshots)

    def test_failure_without_snapshot_installs_empty(self):
        feed = FailingFeed()
        cache = ThreatSnapshotCache(feed, clock=fixed_clock)

        snapshot = asyncio.run(cache.get_snapshot())
        assert snapshot.phishing_domains == frozenset()
        assert snapshot.last_updated == EPOCH
        assert cache.last_refresh_error == "feed unreachable"
        # An empty snapshot is stale, so the next read retries the feed
        assert cache.is_stale()
        asyncio.run(cache.get_snapshot())
        assert feed.calls == 2

    def test_failure_keeps_previous_snapshot(self):
        cache = ThreatSnapshotCache(FailingFeed(), clock=fixed_clock)
        previous = make_snapshot(
            phishing_domains=["evil.com"],
            last_updated=FIXED_NOW - timedelta(days=1),
        )
        cache.replace(previous)

        assert asyncio.run(cache.refresh()) is False
        assert cache.snapshot is previous
        assert asyncio.run(cache.get_snapshot()) is previous

    def test_replace(self):
        cache = ThreatSnapshotCache(FailingFeed(), clock=fixed_clock)
        snapshot = make_snapshot(url_shorteners=["s.ly"])
        cache.replace(snapshot)
        assert cache.snapshot is snapshot
        assert not cache.is_stale()

    def test_status(self):
        cache = ThreatSnapshotCache(StaticThreatFeed(clock=fixed_clock), clock=fixed_clock)
        status = cache.status()
        assert status["loaded"] is False
        assert status["stale"] is True

        assert asyncio.run(cache.refresh()) is True
        status = cache.status()
        assert status["feed"] == "static"
        assert status["loaded"] is True
        assert status["phishing_domains"] == len(DEFAULT_PHISHING_DOMAINS)
        assert status["suspicious_patterns"] == 3
        assert status["stale"] is False
        assert status["last_refresh_error"] is None

    def test_old_feed_data_fetched_once_per_max_age(self):
        """A feed that serves old data is not fetched again until max age passes."""
        clock = MutableClock()
        feed = CountingFeed(clock=lambda: FIXED_NOW - timedelta(days=30))
        cache = ThreatSnapshotCache(feed, max_age_seconds=3600, clock=clock)

        async def read_twice():
            await cache.get_snapshot()
            await cache.get_snapshot()

        asyncio.run(read_twice())
        assert feed.calls == 1
        assert not cache.is_stale()
        assert cache.status()["last_fetched"] == FIXED_NOW.isoformat()

        clock.now = FIXED_NOW + timedelta(seconds=3601)
        asyncio.run(read_twice())
        assert feed.calls == 2
