"""
Main client for the Sportmonks API SDK.
"""

from typing import Optional

import httpx

from .config import Settings
from .endpoints.fixtures import FixturesAPI
from .endpoints.leagues import LeaguesAPI
from .endpoints.seasons import SeasonsAPI
from .endpoints.teams import TeamsAPI
from .endpoints.venues import VenuesAPI
from .http import SportmonksHTTP


class SportmonksClient:
    """
    Main client for the Sportmonks API.

    Provides access to all API endpoints through a unified interface.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        """
        Initialize the Sportmonks API client.

        Args:
            settings: Configuration settings (will load from environment if not provided)
            http_client: Transport to send requests with (a default client is created if not provided)
        """

        if settings is None:
            settings = Settings()

        self.settings = settings
        self.http = SportmonksHTTP(settings, http_client)

        # These will be initialized when needed
        self._fixtures: Optional[FixturesAPI] = None
        self._leagues: Optional[LeaguesAPI] = None
        self._teams: Optional[TeamsAPI] = None
        self._seasons: Optional[SeasonsAPI] = None
        self._venues: Optional[VenuesAPI] = None

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - cleanup resources."""
        self.close()

    def close(self) -> None:
        """Close HTTP connections."""
        self.http.close()

    def set_base_url(self, url: str) -> None:
        """Override the base URL requests are sent to."""
        self.http.set_base_url(url)

    def set_http_client(self, client: Optional[httpx.Client]) -> None:
        """Replace the underlying transport. ``None`` is ignored."""
        self.http.set_http_client(client)

    @property
    def fixtures(self) -> FixturesAPI:
        """Access fixture endpoints."""
        if self._fixtures is None:
            self._fixtures = FixturesAPI(self.http)
        return self._fixtures

    @property
    def leagues(self) -> LeaguesAPI:
        """Access league endpoints."""
        if self._leagues is None:
            self._leagues = LeaguesAPI(self.http)
        return self._leagues

    @property
    def teams(self) -> TeamsAPI:
        """Access team endpoints."""
        if self._teams is None:
            self._teams = TeamsAPI(self.http)
        return self._teams

    @property
    def seasons(self) -> SeasonsAPI:
        """Access season endpoints."""
        if self._seasons is None:
            self._seasons = SeasonsAPI(self.http)
        return self._seasons

    @property
    def venues(self) -> VenuesAPI:
        """Access venue endpoints."""
        if self._venues is None:
            self._venues = VenuesAPI(self.http)
        return self._venues
