"""
PhishGuard Constants - Central location for ALL constant values.
"""

import re
from typing import Dict, List, Tuple

# APPLICATION INFO
APP_NAME: str = "PhishGuard"
APP_VERSION: str = "1.0.0"
APP_DESCRIPTION: str = "Heuristic phishing risk scoring for web addresses"

# RISK SCORING
RISK_SCORE_MIN: int = 0
RISK_SCORE_MAX: int = 100

# Inclusive lower bounds, checked highest first
RISK_LEVEL_THRESHOLDS: List[Tuple[str, int]] = [
    ("high", 80),
    ("medium", 50),
    ("low", 20),
]

CRITICAL_RISK_THRESHOLD: int = 80
CRITICAL_ISSUE_BONUS: int = 10
AVERAGE_RISK_WEIGHT: float = 0.6
MAX_RISK_WEIGHT: float = 0.4

# THREAT DATABASE
THREAT_DB_MAX_AGE_SECONDS: int = 3600
THREAT_FEED_REFRESH_INTERVAL_SECONDS: int = 6 * 3600

DEFAULT_PHISHING_DOMAINS: List[str] = [
    "paypal-secure.com",
    "amazon-security.com",
    "google-verification.com",
    "microsoft-security.net",
    "apple-support.com",
    "facebook-security.org",
]

DEFAULT_SUSPICIOUS_PATTERNS: List[str] = [
    r"\b\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}\b",
    r"(?i)[a-z0-9]+-[a-z0-9]+-[a-z0-9]+\.(tk|ml|cf|ga)$",
    r"(?i)[a-z]{20,}\.(com|net|org)$",
]

DEFAULT_URL_SHORTENERS: List[str] = [
    "bit.ly", "tinyurl.com", "t.co", "goo.gl", "ow.ly",
    "is.gd", "buff.ly", "adf.ly", "short.link",
]

# ACTIVITY RECORDS
# Oldest entries are dropped once a record list reaches its limit
BLOCKED_SITES_LIMIT: int = 500
PHISHING_REPORTS_LIMIT: int = 200
SCAN_HISTORY_LIMIT: int = 1000
SCAN_HISTORY_RETENTION_DAYS: int = 30
BLOCKED_SITES_RETENTION_DAYS: int = 90

# URL PARSING
HOST_REQUIRED_SCHEMES: List[str] = ["http", "https", "ftp", "ws", "wss"]
ENCRYPTED_SCHEMES: List[str] = ["https"]
UNENCRYPTED_SCHEMES: List[str] = ["http"]

# SUSPICIOUS PATTERNS DETECTOR
IPV4_HOST_REGEX = re.compile(r"^[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}$")
MAX_SUBDOMAIN_COUNT: int = 3
MAX_HOSTNAME_LENGTH: int = 50
MAX_HYPHEN_COUNT: int = 3

SUSPICIOUS_TLDS: List[str] = [".tk", ".ml", ".cf", ".ga", ".pw", ".cc"]

SUSPICIOUS_KEYWORDS: List[str] = [
    "secure", "verify", "update", "confirm", "urgent",
    "suspended", "locked", "expired", "billing",
]

LOGIN_PATH_MARKERS: List[str] = ["signin", "login"]
REDIRECT_QUERY_MARKERS: List[str] = ["redirect", "return"]

PATTERN_RISK: Dict[str, int] = {
    "ip_address": 80,
    "excessive_subdomains": 40,
    "suspicious_tld": 60,
    "long_hostname": 30,
    "excessive_hyphens": 50,
    "keyword": 15,
    "login_redirect": 40,
}

# DOMAIN REPUTATION DETECTOR
NEW_DOMAIN_MARKERS: List[str] = ["temp", "new", "2024", "2025"]

DGA_HOST_REGEX = re.compile(r"^[a-z]{8,}\.com$", re.IGNORECASE)

COMMON_WORDS: List[str] = [
    "about", "other", "which", "their", "would", "there", "could", "first",
    "after", "these", "where", "being", "every", "great", "might", "shall",
    "still", "those", "while", "should", "never", "before", "another", "through",
]

# Cyrillic, Latin Extended-A, Latin Extended Additional
HOMOGRAPH_CHAR_REGEXES = [
    re.compile("[\u0400-\u04FF]"),
    re.compile("[\u0100-\u017F]"),
    re.compile("[\u1E00-\u1EFF]"),
]

REPUTATION_RISK: Dict[str, int] = {
    "new_domain": 25,
    "dga": 60,
    "homograph": 70,
}

# URL STRUCTURE DETECTOR
PERCENT_ENCODING_REGEX = re.compile(r"%[0-9a-f]{2}", re.IGNORECASE)
MAX_PERCENT_ENCODED: int = 5
MAX_URL_LENGTH: int = 200

SENSITIVE_PARAM_MARKERS: List[str] = ["password", "pwd", "pass", "key", "token", "auth"]
DANGEROUS_SCHEME_MARKERS: List[str] = ["data:", "javascript:"]

STRUCTURE_RISK: Dict[str, int] = {
    "percent_encoding": 30,
    "long_url": 25,
    "sensitive_param": 40,
    "dangerous_scheme": 90,
}

# PROTOCOL (SSL STATUS) DETECTOR
INSECURE_HOST_MARKER: str = "insecure"

SSL_RISK: Dict[str, int] = {
    "unencrypted": 40,
    "mixed_content": 20,
}

# TYPOSQUATTING DETECTOR
LEGITIMATE_DOMAINS: List[str] = [
    "google.com", "facebook.com", "amazon.com", "paypal.com",
    "microsoft.com", "apple.com", "twitter.com", "instagram.com",
    "linkedin.com", "netflix.com", "ebay.com", "youtube.com",
]

# Applied in this order to the legitimate domain
CHARACTER_SUBSTITUTIONS: Dict[str, str] = {
    "o": "0",
    "i": "1",
    "l": "1",
    "e": "3",
    "a": "@",
    "s": "$",
    "g": "9",
}

TYPOSQUAT_SIMILARITY_THRESHOLD: float = 0.7
SUBSTITUTION_SIMILARITY_THRESHOLD: float = 0.8
KNOWN_PHISHING_SIMILARITY_THRESHOLD: float = 0.8

TYPOSQUAT_RISK: Dict[str, int] = {
    "similar": 80,
    "substitution": 85,
}

KNOWN_PHISHING_RISK: int = 100
URL_SHORTENER_RISK: int = 30

# PRESCREEN
PRESCREEN_BRAND_LURES: List[str] = [
    r"(?i)paypal.*secure",
    r"(?i)amazon.*security",
    r"(?i)google.*verification",
    r"(?i)microsoft.*security",
    r"(?i)apple.*support",
    r"(?i)facebook.*security",
]
PRESCREEN_MAX_LABELS: int = 4
PRESCREEN_SUSPICIOUS_TLDS: List[str] = [".tk", ".ml", ".cf", ".ga"]

# EXPLANATIONS
DETAIL_SEPARATOR: str = "; "
BLACKLIST_EXPLANATION: str = "Domain is on the custom blacklist"
