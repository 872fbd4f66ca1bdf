"""
PhishGuard Input Validators

Functions for validating user inputs and data.
"""

import re

from .exceptions import InvalidDomainError
from .helpers import normalize_domain


# ============================================================================
# Regular Expression Patterns
# ============================================================================

# Domain pattern
DOMAIN_REGEX = re.compile(
    r'^(?:[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?\.)+[a-zA-Z0-9-]{2,}$',
    re.IGNORECASE
)

# Single label host such as 'localhost' or an intranet name
HOST_LABEL_REGEX = re.compile(r'^[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?$')

# IPv4 pattern
IPV4_REGEX = re.compile(
    r'^(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}'
    r'(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)$'
)


# ============================================================================
# Domain Validation
# ============================================================================

def validate_domain(domain: str) -> bool:
    """
    Validate domain name format.

    Accepts fully qualified names (including internationalized ones),
    single-label hosts and IPv4 literals.

    Args:
        domain: Domain name to validate

    Returns:
        True if valid format
    """
    if not domain or not isinstance(domain, str):
        return False

    domain = normalize_domain(domain)

    if len(domain) > 253:
        return False

    if IPV4_REGEX.match(domain):
        return True

    try:
        ascii_domain = domain.encode('idna').decode('ascii')
    except UnicodeError:
        return False

    return bool(DOMAIN_REGEX.match(ascii_domain) or HOST_LABEL_REGEX.match(ascii_domain))


def clean_domain(domain: str) -> str:
    """
    Normalize a domain for storage in a list.

    Raises:
        InvalidDomainError: if the domain is not valid
    """
    if not validate_domain(domain):
        raise InvalidDomainError(f"Invalid domain: {domain!r}")
    return normalize_domain(domain)
