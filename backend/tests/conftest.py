"""
PhishGuard Test Configuration

Pytest fixtures and configuration.
"""

from datetime import datetime, timezone

import pytest

from phishguard.models.threat import ThreatSnapshot
from phishguard.services.detection.engine import PhishingEngine
from phishguard.services.storage.domain_lists import InMemoryDomainListStore
from phishguard.services.threat_intel.cache import ThreatSnapshotCache
from phishguard.services.threat_intel.feeds import StaticThreatFeed
from phishguard.utils.constants import (
    DEFAULT_PHISHING_DOMAINS,
    DEFAULT_SUSPICIOUS_PATTERNS,
    DEFAULT_URL_SHORTENERS,
)

FIXED_NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


def fixed_clock() -> datetime:
    return FIXED_NOW


def make_snapshot(**kwargs) -> ThreatSnapshot:
    """Snapshot dated at FIXED_NOW so it is never stale in tests."""
    defaults = {
        'phishing_domains': [],
        'suspicious_patterns': [],
        'url_shorteners': [],
        'last_updated': FIXED_NOW,
    }
    defaults.update(kwargs)
    return ThreatSnapshot(**defaults)


def make_engine(snapshot=None, whitelist=None, blacklist=None, rules=None) -> PhishingEngine:
    """Engine with a pre-loaded cache and a fixed clock."""
    cache = ThreatSnapshotCache(StaticThreatFeed(clock=fixed_clock), clock=fixed_clock)
    cache.replace(snapshot if snapshot is not None else make_snapshot())
    store = InMemoryDomainListStore(whitelist=whitelist, blacklist=blacklist)
    return PhishingEngine(threat_cache=cache, list_store=store, rules=rules, clock=fixed_clock)


@pytest.fixture
def empty_snapshot():
    return make_snapshot()


@pytest.fixture
def default_snapshot():
    return make_snapshot(
        phishing_domains=DEFAULT_PHISHING_DOMAINS,
        suspicious_patterns=DEFAULT_SUSPICIOUS_PATTERNS,
        url_shorteners=DEFAULT_URL_SHORTENERS,
    )
