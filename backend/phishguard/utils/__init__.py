"""
PhishGuard Utilities Package
============================

Common utilities, constants, and helper functions used throughout the application.
"""

from phishguard.utils.constants import (
    APP_NAME,
    APP_VERSION,
    APP_DESCRIPTION,
    RISK_LEVEL_THRESHOLDS,
    THREAT_DB_MAX_AGE_SECONDS,
)

from phishguard.utils.exceptions import (
    PhishGuardBaseException,
    ValidationError,
    InvalidURLError,
    InvalidDomainError,
    ThreatIntelError,
    ThreatFeedError,
    DetectionError,
    DetectorError,
)

from phishguard.utils.helpers import (
    utc_now,
    parse_url,
    try_parse_url,
    normalize_domain,
    matches_domain_list,
    join_details,
    truncate_string,
)

from phishguard.utils.validators import (
    validate_domain,
    clean_domain,
)

__all__ = [
    # Constants
    'APP_NAME',
    'APP_VERSION',
    'APP_DESCRIPTION',
    'RISK_LEVEL_THRESHOLDS',
    'THREAT_DB_MAX_AGE_SECONDS',
    # Exceptions
    'PhishGuardBaseException',
    'ValidationError',
    'InvalidURLError',
    'InvalidDomainError',
    'ThreatIntelError',
    'ThreatFeedError',
    'DetectionError',
    'DetectorError',
    # Helpers
    'utc_now',
    'parse_url',
    'try_parse_url',
    'normalize_domain',
    'matches_domain_list',
    'join_details',
    'truncate_string',
    # Validators
    'validate_domain',
    'clean_domain',
]
