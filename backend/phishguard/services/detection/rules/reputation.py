"""
PhishGuard Reputation Detection Rules

Rules driven by the threat database and by simple domain reputation
heuristics (registration markers, generated names, homograph characters).
"""

from phishguard.models.detection import CheckKind, CheckResult
from phishguard.models.threat import ThreatSnapshot
from phishguard.models.url import ParsedUrl
from phishguard.utils.constants import (
    COMMON_WORDS,
    DGA_HOST_REGEX,
    HOMOGRAPH_CHAR_REGEXES,
    KNOWN_PHISHING_RISK,
    KNOWN_PHISHING_SIMILARITY_THRESHOLD,
    NEW_DOMAIN_MARKERS,
    REPUTATION_RISK,
    URL_SHORTENER_RISK,
)

from ..similarity import normalized_similarity
from .base import DetectionRule, register_rule


def is_common_word(word: str) -> bool:
    return word.lower() in COMMON_WORDS


def contains_homograph_characters(hostname: str) -> bool:
    """True if the hostname has Cyrillic or extended Latin characters."""
    return any(regex.search(hostname) for regex in HOMOGRAPH_CHAR_REGEXES)


@register_rule
class KnownPhishingDomainRule(DetectionRule):
    """Match the hostname against the threat database."""

    kind = CheckKind.KNOWN_PHISHING
    name = "Known Phishing Domain"
    description = "Domain matches, contains, or closely resembles a known phishing site"
    category = "threat_intel"

    def evaluate(self, url: ParsedUrl, snapshot: ThreatSnapshot) -> CheckResult:
        hostname = url.hostname

        for domain in snapshot.phishing_domains:
            if (
                hostname == domain
                or domain in hostname
                or normalized_similarity(hostname, domain) > KNOWN_PHISHING_SIMILARITY_THRESHOLD
            ):
                return self.create_result(
                    KNOWN_PHISHING_RISK,
                    ["Domain matches known phishing site"],
                )

        return self.create_result()


@register_rule
class UrlShortenerRule(DetectionRule):
    """Flag link shortening services, which hide the real destination."""

    kind = CheckKind.URL_SHORTENER
    name = "URL Shortener"
    description = "Hostname is a known URL shortening service"
    category = "threat_intel"

    def evaluate(self, url: ParsedUrl, snapshot: ThreatSnapshot) -> CheckResult:
        if url.hostname in snapshot.url_shorteners:
            return self.create_result(
                URL_SHORTENER_RISK,
                ["URL shortener detected (potential redirect)"],
            )
        return self.create_result()


@register_rule
class DomainReputationRule(DetectionRule):
    """
    Estimate domain reputation without WHOIS.

    Contributions:
    - registration-year or 'temp'/'new' markers suggest a fresh domain
    - a single long letters-only label under .com looks machine generated
    - Cyrillic / Latin Extended characters indicate a homograph attack
    """

    kind = CheckKind.DOMAIN_REPUTATION
    name = "Domain Reputation"
    description = "Domain looks newly registered, generated, or uses homograph characters"
    category = "reputation"

    def evaluate(self, url: ParsedUrl, snapshot: ThreatSnapshot) -> CheckResult:
        hostname = url.hostname
        risk = 0
        details = []

        if any(marker in hostname for marker in NEW_DOMAIN_MARKERS):
            risk += REPUTATION_RISK['new_domain']
            details.append("Potentially recently registered domain")

        if DGA_HOST_REGEX.match(hostname) and not is_common_word(hostname.split('.')[0]):
            risk += REPUTATION_RISK['dga']
            details.append("Domain appears to be algorithmically generated")

        if contains_homograph_characters(hostname):
            risk += REPUTATION_RISK['homograph']
            details.append("Domain contains suspicious unicode characters")

        return self.create_result(risk, details)
