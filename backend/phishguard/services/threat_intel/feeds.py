"""
PhishGuard Threat Feeds

Sources that produce ThreatSnapshot values. The engine never calls these
directly; the snapshot cache does, and treats any failure as "keep the last
known data".
"""

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from phishguard.models.threat import ThreatSnapshot
from phishguard.utils.constants import (
    DEFAULT_PHISHING_DOMAINS,
    DEFAULT_SUSPICIOUS_PATTERNS,
    DEFAULT_URL_SHORTENERS,
)
from phishguard.utils.exceptions import ThreatFeedError
from phishguard.utils.helpers import from_epoch_millis, utc_now

logger = logging.getLogger(__name__)


class ThreatFeed(ABC):
    """Interface for threat database sources."""

    name: str = "feed"

    @abstractmethod
    async def fetch(self) -> ThreatSnapshot:
        """
        Produce a fresh snapshot.

        Raises:
            ThreatFeedError: if no snapshot could be produced
        """


class StaticThreatFeed(ThreatFeed):
    """Built-in baseline database, stamped with the fetch time."""

    name = "static"

    def __init__(self, clock: Callable[[], datetime] = utc_now):
        self._clock = clock

    async def fetch(self) -> ThreatSnapshot:
        return ThreatSnapshot(
            phishing_domains=DEFAULT_PHISHING_DOMAINS,
            suspicious_patterns=DEFAULT_SUSPICIOUS_PATTERNS,
            url_shorteners=DEFAULT_URL_SHORTENERS,
            last_updated=self._clock(),
        )


def snapshot_from_dict(data: Dict[str, Any], default_updated: datetime) -> ThreatSnapshot:
    """
    Build a snapshot from a feed document.

    Accepts camelCase (``phishingDomains``) or snake_case keys. ``lastUpdated``
    may be epoch milliseconds or an ISO-8601 string.

    Raises:
        ThreatFeedError: if the document is not a valid snapshot
    """
    if not isinstance(data, dict):
        raise ThreatFeedError("Threat feed document must be an object")

    def pick(camel: str, snake: str):
        if camel in data:
            return data[camel]
        return data.get(snake)

    last_updated: Union[datetime, str, None] = pick('lastUpdated', 'last_updated')
    if isinstance(last_updated, (int, float)) and not isinstance(last_updated, bool):
        last_updated = from_epoch_millis(last_updated)
    elif not last_updated:
        last_updated = default_updated

    try:
        return ThreatSnapshot(
            phishing_domains=pick('phishingDomains', 'phishing_domains') or [],
            suspicious_patterns=pick('suspiciousPatterns', 'suspicious_patterns') or [],
            url_shorteners=pick('urlShorteners', 'url_shorteners') or [],
            last_updated=last_updated,
        )
    except PydanticValidationError as e:
        raise ThreatFeedError(f"Invalid threat feed document: {e.error_count()} error(s)")


class JsonFileThreatFeed(ThreatFeed):
    """Threat database exported to a JSON file by the host."""

    name = "json_file"

    def __init__(self, path: Union[str, Path], clock: Callable[[], datetime] = utc_now):
        self.path = Path(path)
        self._clock = clock

    def _read(self) -> Dict[str, Any]:
        try:
            with self.path.open('r', encoding='utf-8') as f:
                return json.load(f)
        except FileNotFoundError:
            raise ThreatFeedError(f"Threat feed file not found: {self.path}")
        except (OSError, json.JSONDecodeError) as e:
            raise ThreatFeedError(f"Could not read threat feed {self.path}: {e}")

    async def fetch(self) -> ThreatSnapshot:
        data = await asyncio.to_thread(self._read)
        snapshot = snapshot_from_dict(data, default_updated=self._clock())
        logger.info(
            f"Loaded threat feed {self.path}: {len(snapshot.phishing_domains)} domains, "
            f"{len(snapshot.suspicious_patterns)} patterns, {len(snapshot.url_shorteners)} shorteners"
        )
        return snapshot


def build_threat_feed(path: Optional[str] = None) -> ThreatFeed:
    """File feed when a path is configured, otherwise the built-in database."""
    if path:
        return JsonFileThreatFeed(path)
    return StaticThreatFeed()
