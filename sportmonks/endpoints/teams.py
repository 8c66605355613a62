"""
Team endpoints for the Sportmonks API.
"""

from typing import Optional

from ..http import SportmonksHTTP, TimeoutTypes, build_query
from ..models.common import CollectionEnvelope, ResourceEnvelope, ResponseDetails
from ..models.team import Team

TEAMS_URI = "/football/teams"
TEAMS_SEASON_URI = "/football/teams/seasons"


class TeamsAPI:
    """API wrapper for team endpoints."""

    def __init__(self, http_client: SportmonksHTTP):
        self.http = http_client

    def get_team(
        self,
        team_id: int,
        includes: Optional[list[str]] = None,
        filters: Optional[dict[str, list[int]]] = None,
        timeout: TimeoutTypes = None,
    ) -> tuple[Optional[Team], ResponseDetails]:
        """Get a single team by ID."""

        response = self.http.get_resource(
            f"{TEAMS_URI}/{team_id}",
            build_query(includes, filters),
            ResourceEnvelope[Team],
            timeout,
        )

        return response.data, response.details()

    def get_teams_by_season(
        self,
        season_id: int,
        includes: Optional[list[str]] = None,
        filters: Optional[dict[str, list[int]]] = None,
        timeout: TimeoutTypes = None,
    ) -> tuple[list[Team], ResponseDetails]:
        """
        Get the teams taking part in a season.

        Args:
            season_id: Season ID
            includes: Relations to populate
            filters: Filters, mapping filter name to integer values
            timeout: Per-call timeout in seconds

        Returns:
            List of teams and response details
        """

        response = self.http.get_resource(
            f"{TEAMS_SEASON_URI}/{season_id}",
            build_query(includes, filters),
            CollectionEnvelope[Team],
            timeout,
        )

        return response.data, response.details()
