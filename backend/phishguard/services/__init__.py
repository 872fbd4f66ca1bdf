"""
PhishGuard Services Package

Business logic modules for URL risk analysis:
- detection: Signal detectors, scorer and engine
- threat_intel: Threat feeds and snapshot cache
- storage: Whitelist / blacklist stores
"""

# Services are imported explicitly when needed to avoid circular imports
# Example: from phishguard.services.detection import get_phishing_engine

__all__ = [
    'detection',
    'threat_intel',
    'storage',
]
