"""
PhishGuard Detection Rule Base

Base class and registry for the signal detectors.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Type

from phishguard.models.detection import CheckKind, CheckResult
from phishguard.models.threat import ThreatSnapshot
from phishguard.models.url import ParsedUrl
from phishguard.utils.helpers import join_details

logger = logging.getLogger(__name__)


class DetectionRule(ABC):
    """
    Base class for signal detectors.

    A detector is stateless: ``evaluate`` reads the parsed URL and the
    threat snapshot and returns exactly one CheckResult without side effects.
    """

    kind: CheckKind
    name: str = ""
    description: str = ""
    category: str = ""

    @abstractmethod
    def evaluate(self, url: ParsedUrl, snapshot: ThreatSnapshot) -> CheckResult:
        """Run the detector."""

    def create_result(self, risk: int = 0, details: Optional[List[str]] = None) -> CheckResult:
        """
        Build the result for this detector.

        Contributions are summed by the caller; the risk is clamped once here.
        """
        return CheckResult(
            kind=self.kind,
            risk=risk,
            details=join_details(details or []),
        )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} kind={self.kind.value}>"


class RuleRegistry:
    """Registry of detector instances keyed by kind."""

    def __init__(self):
        self._rules: Dict[CheckKind, DetectionRule] = {}

    def register(self, rule_class: Type[DetectionRule]) -> DetectionRule:
        rule = rule_class()
        if rule.kind in self._rules:
            logger.debug(f"Replacing detector for {rule.kind.value}")
        self._rules[rule.kind] = rule
        return rule

    def get_all_rules(self) -> List[DetectionRule]:
        return list(self._rules.values())

    def get_rule(self, kind: CheckKind) -> Optional[DetectionRule]:
        return self._rules.get(kind)

    def get_rules_by_category(self, category: str) -> List[DetectionRule]:
        return [r for r in self._rules.values() if r.category == category]

    def __len__(self) -> int:
        return len(self._rules)


rule_registry = RuleRegistry()


def register_rule(rule_class: Type[DetectionRule]) -> Type[DetectionRule]:
    """Class decorator adding a detector to the global registry."""
    rule_registry.register(rule_class)
    return rule_class
