"""
PhishGuard URL Data Models

Parsed representation of a candidate web address.
"""

from typing import List
from urllib.parse import parse_qsl

from pydantic import BaseModel, ConfigDict, Field


class ParsedUrl(BaseModel):
    """
    Normalized web address.

    Built only by ``parse_url``; malformed input never produces one.
    """
    model_config = ConfigDict(frozen=True)

    scheme: str = Field(..., description="Lower-cased scheme without ':'")
    hostname: str = Field("", description="Lower-cased hostname")
    path: str = Field("", description="Path component")
    query: str = Field("", description="Query string without leading '?'")
    href: str = Field(..., description="Full normalized URL text")

    @property
    def labels(self) -> List[str]:
        """Dot separated hostname labels."""
        return self.hostname.split('.')

    @property
    def query_param_names(self) -> List[str]:
        """Query parameter names in order of appearance."""
        return [name for name, _ in parse_qsl(self.query, keep_blank_values=True)]
