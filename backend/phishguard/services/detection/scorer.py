"""
PhishGuard Risk Scorer

Aggregates detector results and maps the score to a risk level.
"""

import logging
from typing import List, Sequence

from phishguard.models.detection import CheckResult, RiskLevel
from phishguard.utils.constants import (
    AVERAGE_RISK_WEIGHT,
    CRITICAL_ISSUE_BONUS,
    CRITICAL_RISK_THRESHOLD,
    MAX_RISK_WEIGHT,
    RISK_LEVEL_THRESHOLDS,
    RISK_SCORE_MAX,
    RISK_SCORE_MIN,
)

logger = logging.getLogger(__name__)


class RiskScorer:
    """
    Calculate risk scores and levels from detector results.

    The score blends the average risk (0.6) with the strongest single signal
    (0.4). When more than one detector is critical (>= 80) each critical
    result adds 10 points, capped at 100.
    """

    def __init__(self):
        self.max_score = RISK_SCORE_MAX

    def calculate_score(self, checks: Sequence[CheckResult]) -> float:
        """
        Calculate the aggregate risk score.

        Args:
            checks: Results from one analysis pass, in any order

        Returns:
            Risk score 0-100
        """
        if not checks:
            return 0.0

        average_risk = sum(check.risk for check in checks) / len(checks)
        max_risk = max(check.risk for check in checks)
        critical_issues = self.count_critical(checks)

        score = average_risk * AVERAGE_RISK_WEIGHT + max_risk * MAX_RISK_WEIGHT

        if critical_issues > 1:
            score = min(self.max_score, score + critical_issues * CRITICAL_ISSUE_BONUS)

        return float(max(RISK_SCORE_MIN, min(self.max_score, score)))

    def get_risk_level(self, score: float) -> RiskLevel:
        """
        Get risk level from numeric score.

        Lower bounds are inclusive: exactly 80 is high, exactly 50 medium,
        exactly 20 low.
        """
        for level_name, min_score in RISK_LEVEL_THRESHOLDS:
            if score >= min_score:
                return RiskLevel(level_name)

        return RiskLevel.SAFE

    def count_critical(self, checks: Sequence[CheckResult]) -> int:
        """Number of results at or above the critical threshold."""
        return sum(1 for c in checks if c.risk >= CRITICAL_RISK_THRESHOLD)

    def collect_explanations(self, checks: Sequence[CheckResult]) -> List[str]:
        """Non-empty detail strings in detector order."""
        return [check.details for check in checks if check.details]
