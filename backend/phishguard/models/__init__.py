"""
PhishGuard Data Models Package

Pydantic models for data validation and serialization.
"""

from .url import *
from .threat import *
from .detection import *
from .lists import *
from .activity import *
