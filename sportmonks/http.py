"""
HTTP client for the Sportmonks API.

Every endpoint method funnels through ``SportmonksHTTP.get_resource``: build
the request, attach the API token, send it, classify the status code and
decode the response envelope. Nothing is retried.
"""

import logging
from typing import Any, Optional, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

from .config import Settings
from .errors import BadStatusError, DecodeError, RateLimitError, RequestBuildError
from .models.common import ErrorBody, RateLimitErrorBody

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

TimeoutTypes = Union[float, httpx.Timeout, None]


def format_includes(includes: Optional[list[str]]) -> str:
    """Join include directives into the ``include`` parameter value."""
    return ";".join(includes or [])


def format_filters(query: dict[str, str], filters: Optional[dict[str, list[int]]]) -> None:
    """
    Write each filter into ``query`` as a comma-joined list of integers.

    ``{"leagues": [8, 82]}`` becomes ``leagues=8,82``. A key with an empty list
    is kept with an empty value. Existing keys are overwritten.
    """
    for key, values in (filters or {}).items():
        query[key] = ",".join(str(value) for value in values)


def build_query(
    includes: Optional[list[str]], filters: Optional[dict[str, list[int]]] = None
) -> dict[str, str]:
    """Build the query parameters shared by all endpoint methods."""
    query = {"include": format_includes(includes)}
    format_filters(query, filters)
    return query


def parse_json_response(content: Union[bytes, str], model: type[M]) -> M:
    """Decode a JSON body into ``model``, raising DecodeError on any mismatch."""
    try:
        return model.model_validate_json(content)
    except ValidationError as e:
        raise DecodeError(f"Invalid {model.__name__} response: {e}") from e


def check_status_code(response: httpx.Response) -> None:
    """Raise the matching API error for any non-200 response."""
    if response.status_code == 429:
        body = parse_json_response(response.content, RateLimitErrorBody)
        logger.warning("Rate limited on %s: %s", response.request.url.path, body.message)
        raise RateLimitError(body)

    if response.status_code != 200:
        body = parse_json_response(response.content, ErrorBody)
        raise BadStatusError(response.status_code, body)


class SportmonksHTTP:
    """HTTP request builder and sender for the Sportmonks API."""

    def __init__(self, settings: Settings, client: Optional[httpx.Client] = None):
        self.settings = settings
        self.base_url = settings.base_url
        self.key = settings.api_token

        if client is None:
            client = httpx.Client(timeout=httpx.Timeout(settings.timeout))
        self.client = client

    def close(self) -> None:
        """Close the HTTP client."""
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def set_http_client(self, client: Optional[httpx.Client]) -> None:
        """Replace the underlying transport. ``None`` is ignored."""
        if client is not None:
            self.client = client

    def set_base_url(self, url: str) -> None:
        """Override the base URL requests are sent to."""
        self.base_url = url

    def _get_headers(self) -> dict[str, str]:
        return {
            "User-Agent": self.settings.user_agent,
            "Accept": "application/json",
        }

    def get_resource(
        self,
        path: str,
        query: dict[str, Any],
        envelope_type: type[M],
        timeout: TimeoutTypes = None,
    ) -> M:
        """
        Fetch ``path`` and decode the body into ``envelope_type``.

        Args:
            path: Resource path relative to the base URL
            query: Query parameters; ``api_token`` is always set to the
                configured key, replacing any value passed here
            envelope_type: Model the whole response body is decoded into
            timeout: Per-call timeout, overriding the client default

        Returns:
            The decoded envelope

        Raises:
            RequestBuildError: The URL could not be built
            RateLimitError: The API answered 429
            BadStatusError: The API answered any other non-200 status
            DecodeError: A body did not match the expected shape
            httpx.TransportError: Network failure or timeout, unwrapped
        """
        params = dict(query)
        params["api_token"] = self.key

        extra: dict[str, Any] = {}
        if timeout is not None:
            extra["timeout"] = timeout

        try:
            request = self.client.build_request(
                "GET",
                f"{self.base_url}{path}",
                params=params,
                headers=self._get_headers(),
                **extra,
            )
        except httpx.InvalidURL as e:
            raise RequestBuildError(f"Invalid request URL for {path}: {e}") from e

        logger.debug("GET %s", path)
        response = self.client.send(request)
        try:
            logger.debug("GET %s -> %d", path, response.status_code)
            check_status_code(response)
            return parse_json_response(response.content, envelope_type)
        finally:
            response.close()
