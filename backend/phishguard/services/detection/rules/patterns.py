"""
PhishGuard Suspicious Pattern Rules

Lexical red flags in the hostname and URL text.
"""

from phishguard.models.detection import CheckKind, CheckResult
from phishguard.models.threat import ThreatSnapshot
from phishguard.models.url import ParsedUrl
from phishguard.utils.constants import (
    IPV4_HOST_REGEX,
    LOGIN_PATH_MARKERS,
    MAX_HOSTNAME_LENGTH,
    MAX_HYPHEN_COUNT,
    MAX_SUBDOMAIN_COUNT,
    PATTERN_RISK,
    REDIRECT_QUERY_MARKERS,
    SUSPICIOUS_KEYWORDS,
    SUSPICIOUS_TLDS,
)

from .base import DetectionRule, register_rule


@register_rule
class SuspiciousPatternsRule(DetectionRule):
    """
    Accumulate lexical indicators.

    Every matching indicator adds its weight; the total is clamped to 100
    only after all indicators have been summed.
    """

    kind = CheckKind.SUSPICIOUS_PATTERNS
    name = "Suspicious URL Patterns"
    description = "Hostname or URL text shows common phishing patterns"
    category = "patterns"

    def evaluate(self, url: ParsedUrl, snapshot: ThreatSnapshot) -> CheckResult:
        hostname = url.hostname
        full_url = url.href.lower()
        risk = 0
        details = []

        if IPV4_HOST_REGEX.match(hostname):
            risk += PATTERN_RISK['ip_address']
            details.append("Using IP address instead of domain name")

        subdomain_count = len(hostname.split('.')) - 2
        if subdomain_count > MAX_SUBDOMAIN_COUNT:
            risk += PATTERN_RISK['excessive_subdomains']
            details.append("Excessive number of subdomains")

        if any(hostname.endswith(tld) for tld in SUSPICIOUS_TLDS):
            risk += PATTERN_RISK['suspicious_tld']
            details.append("Using suspicious top-level domain")

        if len(hostname) > MAX_HOSTNAME_LENGTH:
            risk += PATTERN_RISK['long_hostname']
            details.append("Unusually long domain name")

        if hostname.count('-') > MAX_HYPHEN_COUNT:
            risk += PATTERN_RISK['excessive_hyphens']
            details.append("Excessive hyphens in domain name")

        found_keywords = [kw for kw in SUSPICIOUS_KEYWORDS if kw in full_url]
        if found_keywords:
            risk += len(found_keywords) * PATTERN_RISK['keyword']
            details.append(f"Contains suspicious keywords: {', '.join(found_keywords)}")

        if any(marker in url.path for marker in LOGIN_PATH_MARKERS):
            if any(marker in url.query for marker in REDIRECT_QUERY_MARKERS):
                risk += PATTERN_RISK['login_redirect']
                details.append("Login page with redirect parameters")

        return self.create_result(risk, details)
