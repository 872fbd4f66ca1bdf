"""
PhishGuard Helper Functions

Utility functions used throughout the application.
"""

import re
from datetime import datetime, timezone
from typing import Iterable, List, Optional
from urllib.parse import quote, urlsplit, urlunsplit

from phishguard.models.url import ParsedUrl

from .constants import DETAIL_SEPARATOR, HOST_REQUIRED_SCHEMES
from .exceptions import InvalidURLError


# ============================================================================
# Timestamps
# ============================================================================

def utc_now() -> datetime:
    """Get current UTC timestamp."""
    return datetime.now(timezone.utc)


def from_epoch_millis(value: float) -> datetime:
    """Convert a JavaScript style millisecond timestamp to UTC datetime."""
    return datetime.fromtimestamp(value / 1000.0, tz=timezone.utc)


# ============================================================================
# URL Parsing
# ============================================================================

SCHEME_REGEX = re.compile(r'^[a-zA-Z][a-zA-Z0-9+.\-]*:')

# Characters that can never appear in a hostname
FORBIDDEN_HOST_CHARS = set(' \t\r\n#%/<>?@[\\]^|"`{}')

# Printable ASCII left as is when percent-encoding each component, matching
# the WHATWG URL percent-encode sets. Existing escapes are kept.
PATH_SAFE_CHARS = "!$%&'()*+,/:;=@[\\]^|~"
QUERY_SAFE_CHARS = "!$%&()*+,/:;=?@[\\]^`{|}~"
FRAGMENT_SAFE_CHARS = "!#$%&'()*+,/:;=?@[\\]^{|}~"
# Paths of non-hierarchical schemes such as javascript: only escape non-ASCII
OPAQUE_PATH_SAFE_CHARS = PATH_SAFE_CHARS + " \"#<>?`{}"


def parse_url(raw_url: str) -> ParsedUrl:
    """
    Parse and normalize a candidate web address.

    Scheme and hostname are lower-cased, a missing path on a hierarchical
    scheme becomes '/'. Internationalized hostnames are kept in Unicode.
    Path, query and fragment are percent-encoded the way a browser
    serializes them, so non-ASCII text and spaces appear as %XX octets.

    Args:
        raw_url: Address text as typed or navigated to

    Returns:
        ParsedUrl

    Raises:
        InvalidURLError: if the text is not an absolute URL
    """
    if not raw_url or not isinstance(raw_url, str):
        raise InvalidURLError("URL is empty")

    text = raw_url.strip()
    if not SCHEME_REGEX.match(text):
        raise InvalidURLError(f"URL has no scheme: {text[:100]}")

    try:
        parts = urlsplit(text)
        hostname = parts.hostname or ''
        port = parts.port
    except ValueError as e:
        raise InvalidURLError(f"Malformed URL: {e}")

    scheme = parts.scheme.lower()

    if scheme in HOST_REQUIRED_SCHEMES and not hostname:
        raise InvalidURLError(f"URL has no host: {text[:100]}")

    if ':' in hostname:
        # Only bracketed IPv6 literals may contain ':'
        if '[' not in parts.netloc:
            raise InvalidURLError(f"Invalid host: {hostname}")
    elif any(ch in FORBIDDEN_HOST_CHARS for ch in hostname):
        raise InvalidURLError(f"Invalid host: {hostname}")

    netloc = ''
    if parts.netloc:
        userinfo, _, _ = parts.netloc.rpartition('@')
        host_text = f"[{hostname}]" if ':' in hostname else hostname
        netloc = f"{userinfo}@{host_text}" if userinfo else host_text
        if port is not None:
            netloc += f":{port}"

    if scheme in HOST_REQUIRED_SCHEMES or parts.netloc:
        path = quote(parts.path, safe=PATH_SAFE_CHARS)
    else:
        path = quote(parts.path, safe=OPAQUE_PATH_SAFE_CHARS)
    query = quote(parts.query, safe=QUERY_SAFE_CHARS)
    fragment = quote(parts.fragment, safe=FRAGMENT_SAFE_CHARS)

    if not path and scheme in HOST_REQUIRED_SCHEMES:
        path = '/'

    href = urlunsplit((scheme, netloc, path, query, fragment))

    return ParsedUrl(
        scheme=scheme,
        hostname=hostname,
        path=path,
        query=query,
        href=href,
    )


def try_parse_url(raw_url: str) -> Optional[ParsedUrl]:
    """Parse a URL, returning None instead of raising."""
    try:
        return parse_url(raw_url)
    except InvalidURLError:
        return None


# ============================================================================
# Domain Matching
# ============================================================================

def normalize_domain(domain: str) -> str:
    """Lower-case a domain and strip whitespace and a trailing dot."""
    return domain.strip().lower().rstrip('.')


def matches_domain_list(hostname: str, domains: Iterable[str]) -> bool:
    """
    Check a hostname against a list of domains.

    A hostname matches when it equals a listed domain or is one of its
    subdomains.
    """
    if not hostname:
        return False
    hostname = hostname.lower()
    for domain in domains:
        if hostname == domain or hostname.endswith(f".{domain}"):
            return True
    return False


def strip_www(hostname: str) -> str:
    """Remove a single leading 'www.' label."""
    return hostname[4:] if hostname.startswith('www.') else hostname


# ============================================================================
# Text Helpers
# ============================================================================

def join_details(details: List[str]) -> Optional[str]:
    """Join detector explanations, None when there are none."""
    return DETAIL_SEPARATOR.join(details) if details else None


def truncate_string(s: str, max_length: int = 100, suffix: str = "...") -> str:
    """Truncate string to max length with suffix."""
    if not s or len(s) <= max_length:
        return s
    return s[:max_length - len(suffix)] + suffix
