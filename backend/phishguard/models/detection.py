"""
PhishGuard Detection Data Models

Pydantic models for detection engine results.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from phishguard.utils.constants import RISK_SCORE_MAX, RISK_SCORE_MIN


class RiskLevel(str, Enum):
    """
    Risk level classification.

    Ordered unknown < safe < low < medium < high. The order is used for
    comparison only.
    """
    UNKNOWN = "unknown"
    SAFE = "safe"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _RISK_LEVEL_ORDER.index(self)

    def __lt__(self, other):
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank >= other.rank


_RISK_LEVEL_ORDER = [
    RiskLevel.UNKNOWN,
    RiskLevel.SAFE,
    RiskLevel.LOW,
    RiskLevel.MEDIUM,
    RiskLevel.HIGH,
]


class CheckKind(str, Enum):
    """One tag per signal detector."""
    KNOWN_PHISHING = "known_phishing"
    SUSPICIOUS_PATTERNS = "suspicious_patterns"
    URL_SHORTENER = "url_shortener"
    DOMAIN_REPUTATION = "domain_reputation"
    SSL_STATUS = "ssl_status"
    URL_STRUCTURE = "url_structure"
    TYPOSQUATTING = "typosquatting"


class NavigationAction(str, Enum):
    """What the host should do with a navigation."""
    ALLOW = "allow"
    WARN = "warn"
    BLOCK = "block"


class CheckResult(BaseModel):
    """Outcome of a single detector invocation."""
    model_config = ConfigDict(frozen=True)

    kind: CheckKind = Field(..., description="Detector that produced the result")
    risk: int = Field(0, ge=RISK_SCORE_MIN, le=RISK_SCORE_MAX, description="Partial risk 0-100")
    details: Optional[str] = Field(None, description="Human-readable explanation")

    @field_validator('risk', mode='before')
    @classmethod
    def clamp_risk(cls, value):
        return max(RISK_SCORE_MIN, min(RISK_SCORE_MAX, int(value)))

    @classmethod
    def clean(cls, kind: CheckKind) -> "CheckResult":
        """Zero-risk result with no details."""
        return cls(kind=kind, risk=0, details=None)


class AnalysisResult(BaseModel):
    """Verdict for one analyzed address."""
    url: str = Field(..., description="Address as submitted")
    risk_level: RiskLevel = Field(..., description="Discrete risk level")
    explanations: List[str] = Field(default_factory=list, description="Non-empty detector details")
    score: Optional[float] = Field(None, ge=0.0, le=100.0, description="Aggregate score when detectors ran")
    checks: List[CheckResult] = Field(default_factory=list)
    whitelisted: bool = False
    blacklisted: bool = False
    analyzed_at: Optional[datetime] = None
