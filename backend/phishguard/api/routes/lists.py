"""
PhishGuard Domain List API Routes

Whitelist and blacklist management.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from phishguard.api.dependencies import get_list_store
from phishguard.models.lists import DomainListEntry, DomainListResponse, ListType
from phishguard.utils.exceptions import InvalidDomainError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/lists", tags=["lists"])


@router.get("/{list_type}", response_model=DomainListResponse)
async def get_list(
    list_type: ListType,
    store = Depends(get_list_store),
):
    """Get the domains in a list."""
    domains = await store.get_domains(list_type)
    return DomainListResponse(list_type=list_type, domains=domains)


@router.post("/{list_type}", response_model=DomainListResponse, status_code=201)
async def add_to_list(
    list_type: ListType,
    entry: DomainListEntry,
    store = Depends(get_list_store),
):
    """Add a domain to a list. Adding an existing domain is a no-op."""
    try:
        await store.add_domain(list_type, entry.domain)
    except InvalidDomainError as e:
        raise HTTPException(status_code=400, detail=e.message)

    domains = await store.get_domains(list_type)
    return DomainListResponse(list_type=list_type, domains=domains)


@router.delete("/{list_type}/{domain}", response_model=DomainListResponse)
async def remove_from_list(
    list_type: ListType,
    domain: str,
    store = Depends(get_list_store),
):
    """Remove a domain from a list."""
    removed = await store.remove_domain(list_type, domain)
    if not removed:
        raise HTTPException(status_code=404, detail=f"{domain} is not in the {list_type.value}")

    domains = await store.get_domains(list_type)
    return DomainListResponse(list_type=list_type, domains=domains)
