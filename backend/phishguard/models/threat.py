"""
PhishGuard Threat Intelligence Data Models

Immutable point-in-time copy of the threat database.
"""

from datetime import datetime, timedelta, timezone
from re import Pattern
from typing import FrozenSet, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class ThreatSnapshot(BaseModel):
    """
    Threat database snapshot.

    Replaced wholesale on refresh, never mutated in place.
    """
    model_config = ConfigDict(frozen=True)

    phishing_domains: FrozenSet[str] = Field(default_factory=frozenset)
    suspicious_patterns: Tuple[Pattern, ...] = Field(default_factory=tuple)
    url_shorteners: FrozenSet[str] = Field(default_factory=frozenset)
    last_updated: datetime = Field(default=EPOCH, description="When the data was collected")

    @field_validator('phishing_domains', 'url_shorteners', mode='before')
    @classmethod
    def normalize_domains(cls, value):
        if value is None:
            return frozenset()
        if not isinstance(value, (list, tuple, set, frozenset)):
            raise ValueError("expected a list of domains")
        return frozenset(
            d.strip().lower() for d in value
            if isinstance(d, str) and d.strip()
        )

    @field_validator('last_updated')
    @classmethod
    def ensure_timezone(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @classmethod
    def empty(cls) -> "ThreatSnapshot":
        """Snapshot with no data, dated at the epoch so it is always stale."""
        return cls()

    def age(self, now: datetime) -> timedelta:
        return now - self.last_updated

    def is_stale(self, now: datetime, max_age: timedelta) -> bool:
        return self.age(now) > max_age
