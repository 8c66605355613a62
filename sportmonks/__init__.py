"""
Sportmonks API SDK

A lightweight Python SDK for the Sportmonks v3 football API. Builds
authenticated requests, encodes includes and filters, and decodes responses
into typed models alongside pagination, rate limit and subscription details.
"""

__version__ = "0.1.0"

from .client import SportmonksClient
from .config import Settings
from .errors import (
    APIError,
    BadStatusError,
    DecodeError,
    RateLimitError,
    RequestBuildError,
    SportmonksError,
)
from .http import SportmonksHTTP

__all__ = [
    "Settings",
    "SportmonksHTTP",
    "SportmonksClient",
    "SportmonksError",
    "APIError",
    "RateLimitError",
    "BadStatusError",
    "DecodeError",
    "RequestBuildError",
]
