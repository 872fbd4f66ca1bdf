"""
PhishGuard Lookalike Domain Detection Rules

Rules for detecting brand impersonation through typosquatting and
look-alike character substitution.
"""

from phishguard.models.detection import CheckKind, CheckResult
from phishguard.models.threat import ThreatSnapshot
from phishguard.models.url import ParsedUrl
from phishguard.utils.constants import (
    LEGITIMATE_DOMAINS,
    TYPOSQUAT_RISK,
    TYPOSQUAT_SIMILARITY_THRESHOLD,
)
from phishguard.utils.helpers import strip_www

from ..similarity import is_character_substitution, normalized_similarity
from .base import DetectionRule, register_rule


@register_rule
class TyposquattingRule(DetectionRule):
    """
    Detect domains imitating well-known brands.

    For each legitimate domain in order: a similar but not identical hostname
    scores 80, otherwise a look-alike substitution scores 85. The first hit
    ends the scan. A leading 'www.' is ignored so the brand's own site is
    compared as identical.
    """

    kind = CheckKind.TYPOSQUATTING
    name = "Typosquatting"
    description = "Domain closely resembles a well-known legitimate domain"
    category = "lookalike"

    def evaluate(self, url: ParsedUrl, snapshot: ThreatSnapshot) -> CheckResult:
        hostname = strip_www(url.hostname)
        if not hostname:
            return self.create_result()

        for legit in LEGITIMATE_DOMAINS:
            similarity = normalized_similarity(hostname, legit)

            if TYPOSQUAT_SIMILARITY_THRESHOLD < similarity < 1.0:
                return self.create_result(
                    TYPOSQUAT_RISK['similar'],
                    [f"Possible typosquatting of {legit}"],
                )

            if is_character_substitution(hostname, legit):
                return self.create_result(
                    TYPOSQUAT_RISK['substitution'],
                    [f"Character substitution attack targeting {legit}"],
                )

        return self.create_result()
