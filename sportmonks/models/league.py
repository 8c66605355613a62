"""
League models for the Sportmonks API.
"""

from typing import Optional

from pydantic import Field

from .common import SportmonksResource


class League(SportmonksResource):
    """A football league or cup competition."""

    id: int = Field(description="League ID")
    sport_id: Optional[int] = Field(None, description="Sport ID")
    country_id: Optional[int] = Field(None, description="Country ID")
    name: Optional[str] = Field(None, description="League name")
    active: Optional[bool] = Field(None, description="Whether the league is active")
    short_code: Optional[str] = Field(None, description="Short code")
    image_path: Optional[str] = Field(None, description="Logo URL")
    type: Optional[str] = Field(None, description="League type")
    sub_type: Optional[str] = Field(None, description="League sub type")
    last_played_at: Optional[str] = Field(None, description="Last played fixture date")
    category: Optional[int] = Field(None, description="League category")
    has_jerseys: Optional[bool] = Field(None, description="Jersey data available")
