"""
Season, stage and round models for the Sportmonks API.
"""

from typing import Optional

from pydantic import Field

from .common import SportmonksResource


class Season(SportmonksResource):
    """A season of a league."""

    id: int = Field(description="Season ID")
    sport_id: Optional[int] = Field(None, description="Sport ID")
    league_id: Optional[int] = Field(None, description="League ID")
    tie_breaker_rule_id: Optional[int] = Field(None, description="Tie breaker rule")
    name: Optional[str] = Field(None, description="Season name (e.g. '2023/2024')")
    finished: bool = Field(False, description="Whether the season has finished")
    pending: bool = Field(False, description="Whether the season is pending")
    is_current: bool = Field(False, description="Whether this is the current season")
    starting_at: Optional[str] = Field(None, description="Start date")
    ending_at: Optional[str] = Field(None, description="End date")
    standings_recalculated_at: Optional[str] = Field(
        None, description="Last standings recalculation"
    )
    games_in_current_week: Optional[bool] = Field(
        None, description="Fixtures scheduled this week"
    )


class Stage(SportmonksResource):
    """A stage within a season (regular season, group stage, ...)."""

    id: int = Field(description="Stage ID")
    sport_id: Optional[int] = Field(None, description="Sport ID")
    league_id: Optional[int] = Field(None, description="League ID")
    season_id: Optional[int] = Field(None, description="Season ID")
    type_id: Optional[int] = Field(None, description="Stage type")
    name: Optional[str] = Field(None, description="Stage name")
    sort_order: Optional[int] = Field(None, description="Sort order")
    finished: bool = Field(False, description="Whether the stage has finished")
    is_current: bool = Field(False, description="Whether the stage is current")
    starting_at: Optional[str] = Field(None, description="Start date")
    ending_at: Optional[str] = Field(None, description="End date")
    games_in_current_week: Optional[bool] = Field(None)
    tie_breaker_rule_id: Optional[int] = Field(None)


class Round(SportmonksResource):
    """A round (matchday) within a stage."""

    id: int = Field(description="Round ID")
    sport_id: Optional[int] = Field(None, description="Sport ID")
    league_id: Optional[int] = Field(None, description="League ID")
    season_id: Optional[int] = Field(None, description="Season ID")
    stage_id: Optional[int] = Field(None, description="Stage ID")
    name: Optional[str] = Field(None, description="Round name")
    finished: bool = Field(False)
    is_current: bool = Field(False)
    starting_at: Optional[str] = Field(None, description="Start date")
    ending_at: Optional[str] = Field(None, description="End date")
    games_in_current_week: Optional[bool] = Field(None)
