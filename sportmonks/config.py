"""
Configuration management for the Sportmonks API SDK.
"""

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

# Load environment variables from .env file
load_dotenv()

DEFAULT_BASE_URL = "https://api.sportmonks.com/v3"


class Settings(BaseSettings):
    """Configuration settings for the Sportmonks API SDK."""

    api_token: str = Field(description="Sportmonks API token")

    base_url: str = Field(
        default=DEFAULT_BASE_URL, description="Base URL for API requests"
    )

    timeout: float = Field(
        default=20.0, description="Default request timeout in seconds"
    )

    user_agent: str = Field(
        default="sportmonks-py/0.1",
        description="User agent string for API requests",
    )

    class Config:
        env_prefix = "SPORTMONKS_"
        case_sensitive = False
