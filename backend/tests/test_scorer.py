"""
PhishGuard Risk Scorer Tests
"""

import pytest

from phishguard.models.detection import CheckKind, CheckResult, RiskLevel
from phishguard.services.detection.scorer import RiskScorer


def make_checks(*risks):
    """One result per detector kind, zero for kinds not given."""
    kinds = list(CheckKind)
    padded = list(risks) + [0] * (len(kinds) - len(risks))
    return [CheckResult(kind=kind, risk=risk) for kind, risk in zip(kinds, padded)]


class TestCheckResult:
    """Tests for detector result validation."""

    def test_risk_clamped(self):
        assert CheckResult(kind=CheckKind.URL_STRUCTURE, risk=130).risk == 100
        assert CheckResult(kind=CheckKind.URL_STRUCTURE, risk=-5).risk == 0

    def test_clean(self):
        result = CheckResult.clean(CheckKind.SSL_STATUS)
        assert result.risk == 0
        assert result.details is None


class TestCalculateScore:
    """Tests for score aggregation."""

    def setup_method(self):
        self.scorer = RiskScorer()

    def test_no_checks(self):
        assert self.scorer.calculate_score([]) == 0.0

    def test_all_clean(self):
        assert self.scorer.calculate_score(make_checks()) == 0.0

    def test_single_critical(self):
        """One critical signal gets no bonus."""
        score = self.scorer.calculate_score(make_checks(100))
        assert score == pytest.approx(100 / 7 * 0.6 + 40)
        assert self.scorer.get_risk_level(score) == RiskLevel.LOW

    def test_critical_bonus(self):
        """Each critical result adds 10 once more than one is critical."""
        score = self.scorer.calculate_score(make_checks(80, 80))
        assert score == pytest.approx(160 / 7 * 0.6 + 32 + 20)
        assert self.scorer.get_risk_level(score) == RiskLevel.MEDIUM

    def test_capped_at_100(self):
        assert self.scorer.calculate_score(make_checks(*[100] * 7)) == 100.0

    def test_order_independent(self):
        checks = make_checks(10, 90, 40, 0, 85, 20, 60)
        assert self.scorer.calculate_score(checks) == pytest.approx(
            self.scorer.calculate_score(list(reversed(checks)))
        )

    def test_monotonic(self):
        """Raising any single risk never lowers the score."""
        base = [10, 20, 30, 40, 50, 60, 70]
        for index in range(len(base)):
            previous = self.scorer.calculate_score(make_checks(*base))
            for risk in range(base[index], 101, 5):
                raised = list(base)
                raised[index] = risk
                score = self.scorer.calculate_score(make_checks(*raised))
                assert score >= previous
                previous = score

    def test_count_critical(self):
        assert self.scorer.count_critical(make_checks(80, 79, 100)) == 2

    def test_bonus_follows_count_critical(self):
        """The bonus scales with the number of critical results."""
        checks = make_checks(100, 100, 100)
        assert self.scorer.count_critical(checks) == 3
        assert self.scorer.calculate_score(checks) == pytest.approx(300 / 7 * 0.6 + 40 + 30)

    def test_collect_explanations(self):
        checks = [
            CheckResult(kind=CheckKind.KNOWN_PHISHING, risk=100, details="first"),
            CheckResult(kind=CheckKind.URL_SHORTENER, risk=0),
            CheckResult(kind=CheckKind.SSL_STATUS, risk=40, details="second"),
        ]
        assert self.scorer.collect_explanations(checks) == ["first", "second"]


class TestRiskLevel:
    """Tests for classification thresholds."""

    @pytest.mark.parametrize("score,expected", [
        (100, RiskLevel.HIGH),
        (80, RiskLevel.HIGH),
        (79.99, RiskLevel.MEDIUM),
        (50, RiskLevel.MEDIUM),
        (49.99, RiskLevel.LOW),
        (20, RiskLevel.LOW),
        (19.99, RiskLevel.SAFE),
        (0, RiskLevel.SAFE),
    ])
    def test_inclusive_thresholds(self, score, expected):
        assert RiskScorer().get_risk_level(score) == expected

    def test_level_ordering(self):
        assert RiskLevel.UNKNOWN < RiskLevel.SAFE < RiskLevel.LOW < RiskLevel.MEDIUM < RiskLevel.HIGH
        assert max([RiskLevel.LOW, RiskLevel.HIGH, RiskLevel.SAFE]) == RiskLevel.HIGH
