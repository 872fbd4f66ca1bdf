"""
PhishGuard Domain List Models
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class ListType(str, Enum):
    """User managed domain lists."""
    WHITELIST = "whitelist"
    BLACKLIST = "blacklist"


class DomainListEntry(BaseModel):
    """Request body for adding a domain."""
    domain: str = Field(..., min_length=1, max_length=253, description="Domain to add")


class DomainListResponse(BaseModel):
    """Current contents of a domain list."""
    list_type: ListType
    domains: List[str] = Field(default_factory=list)
