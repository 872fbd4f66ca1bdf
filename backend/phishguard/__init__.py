"""
PhishGuard

Heuristic phishing risk scoring for web addresses.
"""

from phishguard.utils.constants import APP_VERSION

__version__ = APP_VERSION
