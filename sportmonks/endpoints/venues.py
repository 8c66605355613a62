"""
Venue endpoints for the Sportmonks API.
"""

from typing import Optional

from ..http import SportmonksHTTP, TimeoutTypes, build_query
from ..models.common import CollectionEnvelope, ResourceEnvelope, ResponseDetails
from ..models.venue import Venue

VENUES_URI = "/football/venues"
VENUES_SEASON_URI = "/football/venues/seasons"


class VenuesAPI:
    """API wrapper for venue endpoints."""

    def __init__(self, http_client: SportmonksHTTP):
        self.http = http_client

    def get_venue(
        self,
        venue_id: int,
        includes: Optional[list[str]] = None,
        filters: Optional[dict[str, list[int]]] = None,
        timeout: TimeoutTypes = None,
    ) -> tuple[Optional[Venue], ResponseDetails]:
        """Get a single venue by ID."""

        response = self.http.get_resource(
            f"{VENUES_URI}/{venue_id}",
            build_query(includes, filters),
            ResourceEnvelope[Venue],
            timeout,
        )

        return response.data, response.details()

    def get_venues_by_season(
        self,
        season_id: int,
        includes: Optional[list[str]] = None,
        filters: Optional[dict[str, list[int]]] = None,
        timeout: TimeoutTypes = None,
    ) -> tuple[list[Venue], ResponseDetails]:
        """Get the venues used in a season."""

        response = self.http.get_resource(
            f"{VENUES_SEASON_URI}/{season_id}",
            build_query(includes, filters),
            CollectionEnvelope[Venue],
            timeout,
        )

        return response.data, response.details()
