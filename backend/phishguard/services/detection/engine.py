"""
PhishGuard Detection Engine

Main detection engine that orchestrates all detection rules.
"""

import asyncio
import logging
from datetime import datetime
from typing import Callable, List, Optional

from phishguard.models.detection import AnalysisResult, CheckResult, RiskLevel
from phishguard.models.lists import ListType
from phishguard.models.threat import ThreatSnapshot
from phishguard.models.url import ParsedUrl
from phishguard.services.storage.domain_lists import DomainListStore, InMemoryDomainListStore
from phishguard.services.threat_intel.cache import ThreatSnapshotCache
from phishguard.services.threat_intel.feeds import StaticThreatFeed
from phishguard.utils.constants import BLACKLIST_EXPLANATION
from phishguard.utils.exceptions import DetectorError, InvalidURLError
from phishguard.utils.helpers import parse_url, truncate_string, utc_now

from .prescreen import prescreen_url
from .rules import DetectionRule, rule_registry
from .scorer import RiskScorer

logger = logging.getLogger(__name__)


class PhishingEngine:
    """
    Main detection engine.

    Pipeline per call: parse, refresh the threat snapshot if stale,
    whitelist short-circuit, blacklist short-circuit, run every detector,
    aggregate, classify. Calls are independent; the only shared state is the
    snapshot cache, and each call reads one snapshot for its whole duration.
    """

    def __init__(
        self,
        threat_cache: Optional[ThreatSnapshotCache] = None,
        list_store: Optional[DomainListStore] = None,
        rules: Optional[List[DetectionRule]] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize detection engine with all rules."""
        self.threat_cache = threat_cache or ThreatSnapshotCache(StaticThreatFeed())
        self.list_store = list_store or InMemoryDomainListStore()
        self.scorer = RiskScorer()
        self._clock = clock
        self._rules = rules  # Lazy load from the registry when None

    @property
    def rules(self) -> List[DetectionRule]:
        """Get all registered rules (lazy loaded)."""
        if self._rules is None:
            self._rules = rule_registry.get_all_rules()
        return self._rules

    def reload_rules(self):
        """Reload rules from registry."""
        self._rules = rule_registry.get_all_rules()

    async def analyze(self, url_text: str) -> AnalysisResult:
        """
        Analyze a web address.

        Never raises: unparseable input yields ``unknown`` with no
        explanations, every other failure is recovered locally.

        Args:
            url_text: Candidate address

        Returns:
            AnalysisResult with risk level and explanations
        """
        submitted = url_text if isinstance(url_text, str) else ""

        try:
            url = parse_url(url_text)
        except InvalidURLError as e:
            logger.warning(f"Cannot analyze URL: {e}")
            return AnalysisResult(url=submitted, risk_level=RiskLevel.UNKNOWN)

        try:
            return await self._analyze_parsed(submitted, url)
        except Exception as e:
            logger.error(f"URL analysis failed for {truncate_string(url.href)}: {e}", exc_info=True)
            return AnalysisResult(url=submitted, risk_level=RiskLevel.UNKNOWN)

    async def _analyze_parsed(self, submitted: str, url: ParsedUrl) -> AnalysisResult:
        snapshot = await self.threat_cache.get_snapshot()

        if await self._is_listed(ListType.WHITELIST, url.hostname):
            logger.info(f"Whitelisted host {url.hostname}")
            return AnalysisResult(
                url=submitted,
                risk_level=RiskLevel.SAFE,
                whitelisted=True,
                analyzed_at=self._clock(),
            )

        if await self._is_listed(ListType.BLACKLIST, url.hostname):
            logger.info(f"Blacklisted host {url.hostname}")
            return AnalysisResult(
                url=submitted,
                risk_level=RiskLevel.HIGH,
                explanations=[BLACKLIST_EXPLANATION],
                blacklisted=True,
                analyzed_at=self._clock(),
            )

        checks = await self.run_checks(url, snapshot)

        score = self.scorer.calculate_score(checks)
        risk_level = self.scorer.get_risk_level(score)
        explanations = self.scorer.collect_explanations(checks)

        logger.info(
            f"Analysis complete for {url.hostname}: score={score:.1f}, "
            f"level={risk_level.value}, signals={len(explanations)}"
        )

        return AnalysisResult(
            url=submitted,
            risk_level=risk_level,
            explanations=explanations,
            score=round(score, 2),
            checks=checks,
            analyzed_at=self._clock(),
        )

    async def run_checks(self, url: ParsedUrl, snapshot: ThreatSnapshot) -> List[CheckResult]:
        """
        Run every detector against one snapshot.

        A detector that fails contributes a zero-risk result instead.
        """
        rules = self.rules
        results = await asyncio.gather(
            *(self._run_rule(rule, url, snapshot) for rule in rules),
            return_exceptions=True,
        )

        checks: List[CheckResult] = []
        for rule, result in zip(rules, results):
            if not isinstance(result, CheckResult):
                logger.warning(f"Rule {rule.kind.value} failed: {result}")
                checks.append(CheckResult.clean(rule.kind))
                continue
            logger.debug(f"Rule {rule.kind.value}: risk={result.risk} details={result.details}")
            checks.append(result)

        return checks

    async def _run_rule(
        self,
        rule: DetectionRule,
        url: ParsedUrl,
        snapshot: ThreatSnapshot,
    ) -> CheckResult:
        """
        Run a single detection rule.

        Raises:
            DetectorError: if the rule raised
        """
        try:
            return rule.evaluate(url, snapshot)
        except Exception as e:
            logger.error(f"Error in rule {rule.kind.value}: {e}")
            raise DetectorError(f"{rule.kind.value}: {e}") from e

    async def _is_listed(self, list_type: ListType, hostname: str) -> bool:
        try:
            return await self.list_store.is_listed(list_type, hostname)
        except Exception as e:
            logger.error(f"{list_type.value} check failed: {e}")
            return False

    async def prescreen(self, url_text: str) -> RiskLevel:
        """
        Quick verdict from the hostname alone.

        Never raises; unparseable input is ``unknown``.
        """
        try:
            url = parse_url(url_text)
        except InvalidURLError:
            return RiskLevel.UNKNOWN

        try:
            snapshot = await self.threat_cache.get_snapshot()
            if await self._is_listed(ListType.WHITELIST, url.hostname):
                return RiskLevel.SAFE
            return prescreen_url(url, snapshot)
        except Exception as e:
            logger.error(f"Prescreen failed for {url.hostname}: {e}")
            return RiskLevel.UNKNOWN

    def get_rule_summary(self) -> dict:
        """Rule counts by category."""
        summary = {
            'total_rules': len(self.rules),
            'by_category': {},
        }
        for rule in self.rules:
            summary['by_category'][rule.category] = summary['by_category'].get(rule.category, 0) + 1
        return summary


# Singleton instance
_phishing_engine: Optional[PhishingEngine] = None


def init_phishing_engine(
    threat_cache: Optional[ThreatSnapshotCache] = None,
    list_store: Optional[DomainListStore] = None,
) -> PhishingEngine:
    """Create the engine singleton with host supplied collaborators."""
    global _phishing_engine
    _phishing_engine = PhishingEngine(threat_cache=threat_cache, list_store=list_store)
    return _phishing_engine


def get_phishing_engine() -> PhishingEngine:
    """Get the detection engine singleton."""
    global _phishing_engine
    if _phishing_engine is None:
        _phishing_engine = PhishingEngine()
    return _phishing_engine


async def analyze_url(url_text: str) -> AnalysisResult:
    """Analyze a URL with the engine singleton."""
    return await get_phishing_engine().analyze(url_text)
