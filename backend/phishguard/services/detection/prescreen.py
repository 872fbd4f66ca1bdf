"""
PhishGuard Navigation Prescreen

Cheap verdict used before a navigation commits, ahead of the full analysis.
"""

import logging
import re

from phishguard.models.detection import RiskLevel
from phishguard.models.threat import ThreatSnapshot
from phishguard.models.url import ParsedUrl
from phishguard.utils.constants import (
    IPV4_HOST_REGEX,
    PRESCREEN_BRAND_LURES,
    PRESCREEN_MAX_LABELS,
    PRESCREEN_SUSPICIOUS_TLDS,
)

logger = logging.getLogger(__name__)

BRAND_LURE_REGEXES = [re.compile(p) for p in PRESCREEN_BRAND_LURES]


def prescreen_url(url: ParsedUrl, snapshot: ThreatSnapshot) -> RiskLevel:
    """
    Classify a URL from its hostname alone.

    IP hosts and brand lures are high, deep subdomain nesting and free
    TLDs are medium, everything else is safe.
    """
    hostname = url.hostname

    if IPV4_HOST_REGEX.match(hostname):
        return RiskLevel.HIGH

    for regex in BRAND_LURE_REGEXES:
        if regex.search(hostname):
            return RiskLevel.HIGH

    for pattern in snapshot.suspicious_patterns:
        try:
            if pattern.search(hostname):
                return RiskLevel.HIGH
        except Exception as e:
            logger.warning(f"Skipping threat pattern {pattern.pattern!r}: {e}")

    if len(hostname.split('.')) > PRESCREEN_MAX_LABELS:
        return RiskLevel.MEDIUM

    if any(hostname.endswith(tld) for tld in PRESCREEN_SUSPICIOUS_TLDS):
        return RiskLevel.MEDIUM

    return RiskLevel.SAFE
