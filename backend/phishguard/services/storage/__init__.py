"""
PhishGuard Storage Module
"""

from .activity import ActivityStore, InMemoryActivityStore
from .domain_lists import DomainListStore, InMemoryDomainListStore

__all__ = [
    'ActivityStore',
    'InMemoryActivityStore',
    'DomainListStore',
    'InMemoryDomainListStore',
]
