"""
Fixture endpoints for the Sportmonks API.
"""

from datetime import date
from typing import Optional

from ..http import SportmonksHTTP, TimeoutTypes, build_query
from ..models.common import CollectionEnvelope, ResourceEnvelope, ResponseDetails
from ..models.fixture import Fixture

FIXTURES_URI = "/football/fixtures"
FIXTURES_DATE_URI = "/football/fixtures/date"
FIXTURES_BETWEEN_URI = "/football/fixtures/between"
FIXTURES_MULTI_URI = "/football/fixtures/multi"
HEAD_TO_HEAD_URI = "/football/fixtures/head-to-head"

DATE_FORMAT = "%Y-%m-%d"


def format_date(value: date) -> str:
    """Format a date (or datetime) as a ``YYYY-MM-DD`` path segment."""
    return value.strftime(DATE_FORMAT)


class FixturesAPI:
    """API wrapper for fixture endpoints."""

    def __init__(self, http_client: SportmonksHTTP):
        self.http = http_client

    def get_fixture(
        self,
        fixture_id: int,
        includes: Optional[list[str]] = None,
        filters: Optional[dict[str, list[int]]] = None,
        timeout: TimeoutTypes = None,
    ) -> tuple[Optional[Fixture], ResponseDetails]:
        """
        Get a single fixture by ID.

        Args:
            fixture_id: Fixture ID
            includes: Relations to populate (e.g. ['participants', 'scores'])
            filters: Filters, mapping filter name to integer values
            timeout: Per-call timeout in seconds

        Returns:
            The fixture (None if the API returned no data) and response details
        """

        path = f"{FIXTURES_URI}/{fixture_id}"

        response = self.http.get_resource(
            path, build_query(includes, filters), ResourceEnvelope[Fixture], timeout
        )

        return response.data, response.details()

    def get_fixtures_by_ids(
        self,
        ids: list[int],
        includes: Optional[list[str]] = None,
        filters: Optional[dict[str, list[int]]] = None,
        timeout: TimeoutTypes = None,
    ) -> tuple[list[Fixture], ResponseDetails]:
        """Get several fixtures by their IDs in a single request."""

        path = f"{FIXTURES_MULTI_URI}/{','.join(str(i) for i in ids)}"

        return self._get_fixtures(path, includes, filters, timeout)

    def get_fixtures_by_date(
        self,
        day: date,
        includes: Optional[list[str]] = None,
        filters: Optional[dict[str, list[int]]] = None,
        timeout: TimeoutTypes = None,
    ) -> tuple[list[Fixture], ResponseDetails]:
        """Get all fixtures played on a given date."""

        path = f"{FIXTURES_DATE_URI}/{format_date(day)}"

        return self._get_fixtures(path, includes, filters, timeout)

    def get_fixtures_between(
        self,
        start: date,
        end: date,
        includes: Optional[list[str]] = None,
        filters: Optional[dict[str, list[int]]] = None,
        timeout: TimeoutTypes = None,
    ) -> tuple[list[Fixture], ResponseDetails]:
        """Get all fixtures between two dates, inclusive."""

        path = f"{FIXTURES_BETWEEN_URI}/{format_date(start)}/{format_date(end)}"

        return self._get_fixtures(path, includes, filters, timeout)

    def get_fixtures_between_for_team(
        self,
        start: date,
        end: date,
        team_id: int,
        includes: Optional[list[str]] = None,
        filters: Optional[dict[str, list[int]]] = None,
        timeout: TimeoutTypes = None,
    ) -> tuple[list[Fixture], ResponseDetails]:
        """Get a team's fixtures between two dates, inclusive."""

        path = (
            f"{FIXTURES_BETWEEN_URI}/{format_date(start)}/{format_date(end)}/{team_id}"
        )

        return self._get_fixtures(path, includes, filters, timeout)

    def get_head_to_head(
        self,
        team_one_id: int,
        team_two_id: int,
        includes: Optional[list[str]] = None,
        timeout: TimeoutTypes = None,
    ) -> tuple[list[Fixture], ResponseDetails]:
        """
        Get the fixtures played between two teams.

        This endpoint takes no filters.
        """

        path = f"{HEAD_TO_HEAD_URI}/{team_one_id}/{team_two_id}"

        return self._get_fixtures(path, includes, None, timeout)

    def _get_fixtures(
        self,
        path: str,
        includes: Optional[list[str]],
        filters: Optional[dict[str, list[int]]],
        timeout: TimeoutTypes,
    ) -> tuple[list[Fixture], ResponseDetails]:
        response = self.http.get_resource(
            path, build_query(includes, filters), CollectionEnvelope[Fixture], timeout
        )

        return response.data, response.details()
