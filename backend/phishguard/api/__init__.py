"""
PhishGuard API Package
"""
