"""
Exceptions raised by the Sportmonks API SDK.

Transport failures (connection errors, DNS failures, timeouts) are not
wrapped: they surface as the original ``httpx`` exceptions.
"""

from typing import Optional

from .models.common import ErrorBody, RateLimitErrorBody


class SportmonksError(Exception):
    """Base class for all SDK errors."""


class RequestBuildError(SportmonksError):
    """The request URL could not be constructed."""


class DecodeError(SportmonksError):
    """A response body was not valid JSON or did not match the expected shape."""


class APIError(SportmonksError):
    """The API answered with a non-200 status code."""

    def __init__(self, status_code: int, body: ErrorBody):
        self.status_code = status_code
        self.body = body
        super().__init__(self._format())

    @property
    def message(self) -> Optional[str]:
        return self.body.message

    def _format(self) -> str:
        if self.body.message:
            return f"HTTP {self.status_code}: {self.body.message}"
        return f"HTTP {self.status_code}"


class RateLimitError(APIError):
    """The API signalled throttling (HTTP 429)."""

    body: RateLimitErrorBody

    def __init__(self, body: RateLimitErrorBody):
        super().__init__(429, body)

    @property
    def resets_in_seconds(self) -> Optional[int]:
        """Seconds until the quota resets, when the body reports it."""
        if self.body.rate_limit is None:
            return None
        return self.body.rate_limit.resets_in_seconds


class BadStatusError(APIError):
    """Any non-200 status other than 429."""
