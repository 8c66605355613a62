"""
Team and coach models for the Sportmonks API.
"""

from typing import Optional

from pydantic import Field

from .common import SportmonksResource


class ParticipantMeta(SportmonksResource):
    """Fixture-specific data attached to a team listed as a participant."""

    location: Optional[str] = Field(None, description="'home' or 'away'")
    winner: Optional[bool] = Field(None, description="Whether the team won")
    position: Optional[int] = Field(None, description="League position")


class Team(SportmonksResource):
    """A football team."""

    id: int = Field(description="Team ID")
    sport_id: Optional[int] = Field(None, description="Sport ID")
    country_id: Optional[int] = Field(None, description="Country ID")
    venue_id: Optional[int] = Field(None, description="Home venue ID")
    gender: Optional[str] = Field(None)
    name: Optional[str] = Field(None, description="Team name")
    short_code: Optional[str] = Field(None, description="Three letter code")
    image_path: Optional[str] = Field(None, description="Logo URL")
    founded: Optional[int] = Field(None, description="Year founded")
    type: Optional[str] = Field(None, description="Team type (domestic, national)")
    placeholder: bool = Field(False)
    last_played_at: Optional[str] = Field(None)
    # Only present when the team is included as a fixture participant
    meta: Optional[ParticipantMeta] = Field(None)


class Coach(SportmonksResource):
    """A team coach."""

    id: int = Field(description="Coach ID")
    player_id: Optional[int] = Field(None)
    sport_id: Optional[int] = Field(None, description="Sport ID")
    country_id: Optional[int] = Field(None)
    nationality_id: Optional[int] = Field(None)
    city_id: Optional[int] = Field(None)
    common_name: Optional[str] = Field(None)
    firstname: Optional[str] = Field(None)
    lastname: Optional[str] = Field(None)
    name: Optional[str] = Field(None, description="Full name")
    display_name: Optional[str] = Field(None)
    image_path: Optional[str] = Field(None)
    height: Optional[int] = Field(None)
    weight: Optional[int] = Field(None)
    date_of_birth: Optional[str] = Field(None)
    gender: Optional[str] = Field(None)
