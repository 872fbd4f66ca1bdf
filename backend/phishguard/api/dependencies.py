"""
PhishGuard API Dependencies

FastAPI dependency injection for settings, engine and stores.
"""

import logging
from typing import Optional

from phishguard.config import Settings, get_settings
from phishguard.services.detection.engine import (
    PhishingEngine,
    get_phishing_engine,
    init_phishing_engine,
)
from phishguard.services.storage.activity import ActivityStore, InMemoryActivityStore
from phishguard.services.storage.domain_lists import DomainListStore, InMemoryDomainListStore
from phishguard.services.threat_intel.cache import ThreatSnapshotCache
from phishguard.services.threat_intel.feeds import build_threat_feed

logger = logging.getLogger(__name__)

# Global store instance
_activity_store: Optional[ActivityStore] = None


def init_services(settings: Optional[Settings] = None) -> PhishingEngine:
    """
    Build the engine and its collaborators from settings.

    Returns:
        The engine singleton
    """
    settings = settings or get_settings()

    feed = build_threat_feed(settings.threat_feed_path)
    threat_cache = ThreatSnapshotCache(
        feed,
        max_age_seconds=settings.threat_db_max_age_seconds,
    )
    list_store = InMemoryDomainListStore(
        whitelist=settings.whitelisted_domains,
        blacklist=settings.custom_blacklist,
    )

    engine = init_phishing_engine(threat_cache=threat_cache, list_store=list_store)
    init_activity_store(settings)
    logger.info(
        f"Detection engine initialized with {len(engine.rules)} rules "
        f"(feed: {feed.name}, whitelist: {len(settings.whitelisted_domains)}, "
        f"blacklist: {len(settings.custom_blacklist)})"
    )
    return engine


def init_activity_store(settings: Optional[Settings] = None) -> ActivityStore:
    """Initialize the activity store."""
    global _activity_store
    settings = settings or get_settings()
    _activity_store = InMemoryActivityStore(statistics_enabled=settings.statistics_enabled)
    return _activity_store


def get_activity_store() -> ActivityStore:
    """Get the activity store, creating it on first use."""
    global _activity_store
    if _activity_store is None:
        _activity_store = InMemoryActivityStore(statistics_enabled=get_settings().statistics_enabled)
    return _activity_store


def get_engine() -> PhishingEngine:
    """Get the engine singleton."""
    return get_phishing_engine()


def get_list_store() -> DomainListStore:
    """Get the domain list store used by the engine."""
    return get_phishing_engine().list_store


def get_threat_cache() -> ThreatSnapshotCache:
    """Get the threat snapshot cache used by the engine."""
    return get_phishing_engine().threat_cache


__all__ = [
    'get_settings',
    'init_services',
    'init_activity_store',
    'get_activity_store',
    'get_engine',
    'get_list_store',
    'get_threat_cache',
]
