"""
PhishGuard URL Structure Rules

Rules looking at the shape of the URL itself: encoding, length, parameter
names, embedded schemes and transport.
"""

from phishguard.models.detection import CheckKind, CheckResult
from phishguard.models.threat import ThreatSnapshot
from phishguard.models.url import ParsedUrl
from phishguard.utils.constants import (
    DANGEROUS_SCHEME_MARKERS,
    ENCRYPTED_SCHEMES,
    INSECURE_HOST_MARKER,
    MAX_PERCENT_ENCODED,
    MAX_URL_LENGTH,
    PERCENT_ENCODING_REGEX,
    SENSITIVE_PARAM_MARKERS,
    SSL_RISK,
    STRUCTURE_RISK,
    UNENCRYPTED_SCHEMES,
)

from .base import DetectionRule, register_rule


@register_rule
class UrlStructureRule(DetectionRule):
    """Detect obfuscated or credential-carrying URLs."""

    kind = CheckKind.URL_STRUCTURE
    name = "URL Structure"
    description = "URL is heavily encoded, very long, carries secrets, or embeds a script scheme"
    category = "structure"

    def evaluate(self, url: ParsedUrl, snapshot: ThreatSnapshot) -> CheckResult:
        href = url.href
        risk = 0
        details = []

        encoded_count = len(PERCENT_ENCODING_REGEX.findall(href))
        if encoded_count > MAX_PERCENT_ENCODED:
            risk += STRUCTURE_RISK['percent_encoding']
            details.append("Excessive URL encoding detected")

        if len(href) > MAX_URL_LENGTH:
            risk += STRUCTURE_RISK['long_url']
            details.append("Unusually long URL")

        for param in url.query_param_names:
            param = param.lower()
            if any(marker in param for marker in SENSITIVE_PARAM_MARKERS):
                risk += STRUCTURE_RISK['sensitive_param']
                details.append("URL contains sensitive parameter names")
                break

        if any(marker in href for marker in DANGEROUS_SCHEME_MARKERS):
            risk += STRUCTURE_RISK['dangerous_scheme']
            details.append("URL contains potentially malicious scheme")

        return self.create_result(risk, details)


@register_rule
class SSLStatusRule(DetectionRule):
    """
    Infer transport security from the scheme.

    No certificate is inspected; an https URL is trusted at face value.
    """

    kind = CheckKind.SSL_STATUS
    name = "SSL Status"
    description = "Site is served without encryption"
    category = "structure"

    def evaluate(self, url: ParsedUrl, snapshot: ThreatSnapshot) -> CheckResult:
        risk = 0
        details = []

        if url.scheme in UNENCRYPTED_SCHEMES:
            risk += SSL_RISK['unencrypted']
            details.append("Website does not use HTTPS encryption")

        if url.scheme in ENCRYPTED_SCHEMES and INSECURE_HOST_MARKER in url.hostname:
            risk += SSL_RISK['mixed_content']
            details.append("Potential mixed content concerns")

        return self.create_result(risk, details)
