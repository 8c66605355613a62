"""
Season endpoints for the Sportmonks API.
"""

from typing import Optional

from ..http import SportmonksHTTP, TimeoutTypes, build_query
from ..models.common import CollectionEnvelope, ResourceEnvelope, ResponseDetails
from ..models.season import Season

SEASONS_URI = "/football/seasons"


class SeasonsAPI:
    """API wrapper for season endpoints."""

    def __init__(self, http_client: SportmonksHTTP):
        self.http = http_client

    def get_season(
        self,
        season_id: int,
        includes: Optional[list[str]] = None,
        filters: Optional[dict[str, list[int]]] = None,
        timeout: TimeoutTypes = None,
    ) -> tuple[Optional[Season], ResponseDetails]:
        """Get a single season by ID."""

        response = self.http.get_resource(
            f"{SEASONS_URI}/{season_id}",
            build_query(includes, filters),
            ResourceEnvelope[Season],
            timeout,
        )

        return response.data, response.details()

    def get_seasons(
        self,
        includes: Optional[list[str]] = None,
        filters: Optional[dict[str, list[int]]] = None,
        timeout: TimeoutTypes = None,
    ) -> tuple[list[Season], ResponseDetails]:
        """Get one page of all seasons available to the subscription."""

        response = self.http.get_resource(
            SEASONS_URI,
            build_query(includes, filters),
            CollectionEnvelope[Season],
            timeout,
        )

        return response.data, response.details()
