"""
PhishGuard Domain List Storage

Whitelist and blacklist stores. The host owns persistence; the engine only
needs read access through ``is_listed``.
"""

import logging
from typing import Dict, Iterable, List, Optional

from phishguard.models.lists import ListType
from phishguard.utils.helpers import matches_domain_list, normalize_domain
from phishguard.utils.validators import clean_domain

logger = logging.getLogger(__name__)


class DomainListStore:
    """Interface for domain list storage."""

    async def get_domains(self, list_type: ListType) -> List[str]:
        """Get all domains in a list."""
        raise NotImplementedError

    async def add_domain(self, list_type: ListType, domain: str) -> bool:
        """Add a domain. Returns False if it was already present."""
        raise NotImplementedError

    async def remove_domain(self, list_type: ListType, domain: str) -> bool:
        """Remove a domain. Returns False if it was not present."""
        raise NotImplementedError

    async def is_listed(self, list_type: ListType, hostname: str) -> bool:
        """Check a hostname (exact or subdomain) against a list."""
        domains = await self.get_domains(list_type)
        return matches_domain_list(hostname, domains)


class InMemoryDomainListStore(DomainListStore):
    """In-memory, order preserving domain lists."""

    def __init__(
        self,
        whitelist: Optional[Iterable[str]] = None,
        blacklist: Optional[Iterable[str]] = None,
    ):
        self._lists: Dict[ListType, List[str]] = {
            ListType.WHITELIST: [],
            ListType.BLACKLIST: [],
        }
        for domain in whitelist or []:
            self._add(ListType.WHITELIST, domain)
        for domain in blacklist or []:
            self._add(ListType.BLACKLIST, domain)

    def _add(self, list_type: ListType, domain: str) -> bool:
        domain = clean_domain(domain)
        entries = self._lists[list_type]
        if domain in entries:
            return False
        entries.append(domain)
        return True

    async def get_domains(self, list_type: ListType) -> List[str]:
        return list(self._lists[list_type])

    async def add_domain(self, list_type: ListType, domain: str) -> bool:
        added = self._add(list_type, domain)
        if added:
            logger.info(f"Added to {list_type.value}: {domain}")
        return added

    async def remove_domain(self, list_type: ListType, domain: str) -> bool:
        domain = normalize_domain(domain)
        entries = self._lists[list_type]
        if domain not in entries:
            return False
        entries.remove(domain)
        logger.info(f"Removed from {list_type.value}: {domain}")
        return True
