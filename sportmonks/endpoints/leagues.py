"""
League endpoints for the Sportmonks API.
"""

from typing import Optional

from ..http import SportmonksHTTP, TimeoutTypes, build_query
from ..models.common import CollectionEnvelope, ResourceEnvelope, ResponseDetails
from ..models.league import League

LEAGUES_URI = "/football/leagues"


class LeaguesAPI:
    """API wrapper for league endpoints."""

    def __init__(self, http_client: SportmonksHTTP):
        self.http = http_client

    def get_league(
        self,
        league_id: int,
        includes: Optional[list[str]] = None,
        filters: Optional[dict[str, list[int]]] = None,
        timeout: TimeoutTypes = None,
    ) -> tuple[Optional[League], ResponseDetails]:
        """
        Get a single league by ID.

        Args:
            league_id: League ID
            includes: Relations to populate
            filters: Filters, mapping filter name to integer values
            timeout: Per-call timeout in seconds

        Returns:
            The league and response details
        """

        response = self.http.get_resource(
            f"{LEAGUES_URI}/{league_id}",
            build_query(includes, filters),
            ResourceEnvelope[League],
            timeout,
        )

        return response.data, response.details()

    def get_leagues(
        self,
        includes: Optional[list[str]] = None,
        filters: Optional[dict[str, list[int]]] = None,
        timeout: TimeoutTypes = None,
    ) -> tuple[list[League], ResponseDetails]:
        """Get one page of all leagues available to the subscription."""

        response = self.http.get_resource(
            LEAGUES_URI,
            build_query(includes, filters),
            CollectionEnvelope[League],
            timeout,
        )

        return response.data, response.details()
