"""
PhishGuard Custom Exceptions

Centralized exception classes for error handling.
"""


class PhishGuardBaseException(Exception):
    """Base exception for all PhishGuard errors."""
    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


# ============================================================================
# Validation Exceptions
# ============================================================================

class ValidationError(PhishGuardBaseException):
    """Input validation failed."""
    pass


class InvalidURLError(ValidationError):
    """URL format is invalid."""
    pass


class InvalidDomainError(ValidationError):
    """Domain format is invalid."""
    pass


# ============================================================================
# Threat Intelligence Exceptions
# ============================================================================

class ThreatIntelError(PhishGuardBaseException):
    """Error with threat intelligence data."""
    pass


class ThreatFeedError(ThreatIntelError):
    """Threat feed could not produce a snapshot."""
    pass


# ============================================================================
# Detection Exceptions
# ============================================================================

class DetectionError(PhishGuardBaseException):
    """Error during threat detection."""
    pass


class DetectorError(DetectionError):
    """Error executing a signal detector."""
    pass
