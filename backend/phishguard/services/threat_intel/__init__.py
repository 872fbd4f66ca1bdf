"""
PhishGuard Threat Intelligence Module

Threat feeds and the process-wide snapshot cache.
"""

from .feeds import (
    ThreatFeed,
    StaticThreatFeed,
    JsonFileThreatFeed,
    snapshot_from_dict,
    build_threat_feed,
)

from .cache import ThreatSnapshotCache

__all__ = [
    'ThreatFeed',
    'StaticThreatFeed',
    'JsonFileThreatFeed',
    'snapshot_from_dict',
    'build_threat_feed',
    'ThreatSnapshotCache',
]
