"""
Venue models for the Sportmonks API.
"""

from typing import Optional, Union

from pydantic import Field

from .common import SportmonksResource


class Venue(SportmonksResource):
    """A stadium or ground."""

    id: int = Field(description="Venue ID")
    country_id: Optional[int] = Field(None, description="Country ID")
    city_id: Optional[int] = Field(None, description="City ID")
    name: Optional[str] = Field(None, description="Venue name")
    address: Optional[str] = Field(None, description="Street address")
    zipcode: Optional[str] = Field(None, description="Postal code")
    # The API sends coordinates as strings for some venues and numbers for others
    latitude: Optional[Union[str, float]] = Field(None)
    longitude: Optional[Union[str, float]] = Field(None)
    capacity: Optional[int] = Field(None, description="Seating capacity")
    image_path: Optional[str] = Field(None, description="Image URL")
    city_name: Optional[str] = Field(None, description="City name")
    surface: Optional[str] = Field(None, description="Pitch surface")
    national_team: Optional[bool] = Field(None)
