"""
Fixture models for the Sportmonks API.

Relations on ``Fixture`` are only populated when they were asked for through
the include list. A relation that was not requested is ``None``; one that was
requested but has no entries is an empty list.
"""

from typing import Optional, Union

from pydantic import Field

from .common import SportmonksResource
from .league import League
from .season import Round, Season, Stage
from .team import Coach, Team
from .venue import Venue


class FixtureState(SportmonksResource):
    """Current state of a fixture (not started, in play, finished, ...)."""

    id: int = Field(description="State ID")
    state: Optional[str] = Field(None, description="State code (e.g. 'FT')")
    name: Optional[str] = Field(None, description="State name")
    short_name: Optional[str] = Field(None)
    developer_name: Optional[str] = Field(None)


class Temperature(SportmonksResource):
    day: Optional[float] = None
    morning: Optional[float] = None
    evening: Optional[float] = None
    night: Optional[float] = None


class Wind(SportmonksResource):
    speed: Optional[float] = None
    direction: Optional[float] = None


class WeatherReport(SportmonksResource):
    """Weather forecast or observation for a fixture."""

    id: int = Field(description="Report ID")
    fixture_id: Optional[int] = Field(None, description="Fixture ID")
    venue_id: Optional[int] = Field(None)
    temperature: Optional[Temperature] = Field(None)
    feels_like: Optional[Temperature] = Field(None)
    wind: Optional[Wind] = Field(None)
    humidity: Optional[Union[str, float]] = Field(None)
    pressure: Optional[Union[str, float]] = Field(None)
    clouds: Optional[Union[str, float]] = Field(None)
    description: Optional[str] = Field(None)
    icon: Optional[str] = Field(None)
    type: Optional[str] = Field(None, description="'forecast' or 'current'")
    metric: Optional[str] = Field(None)


class LineupPlayer(SportmonksResource):
    """A player listed in a fixture lineup."""

    id: int = Field(description="Lineup entry ID")
    sport_id: Optional[int] = Field(None)
    fixture_id: Optional[int] = Field(None, description="Fixture ID")
    player_id: Optional[int] = Field(None, description="Player ID")
    team_id: Optional[int] = Field(None, description="Team ID")
    position_id: Optional[int] = Field(None)
    formation_field: Optional[str] = Field(None)
    type_id: Optional[int] = Field(None, description="Starter or bench")
    formation_position: Optional[int] = Field(None)
    player_name: Optional[str] = Field(None, description="Player name")
    jersey_number: Optional[int] = Field(None)


class FixtureEvent(SportmonksResource):
    """An event in a fixture (goal, card, substitution, ...)."""

    id: int = Field(description="Event ID")
    fixture_id: Optional[int] = Field(None, description="Fixture ID")
    period_id: Optional[int] = Field(None)
    participant_id: Optional[int] = Field(None)
    type_id: Optional[int] = Field(None, description="Event type ID")
    section: Optional[str] = Field(None)
    player_id: Optional[int] = Field(None)
    related_player_id: Optional[int] = Field(None)
    player_name: Optional[str] = Field(None)
    related_player_name: Optional[str] = Field(None)
    result: Optional[str] = Field(None, description="Score after the event")
    info: Optional[str] = Field(None)
    addition: Optional[str] = Field(None)
    minute: Optional[int] = Field(None)
    extra_minute: Optional[int] = Field(None)
    injured: Optional[bool] = Field(None)
    on_bench: Optional[bool] = Field(None)
    coach_id: Optional[int] = Field(None)
    sub_type_id: Optional[int] = Field(None)


class StatValue(SportmonksResource):
    value: Optional[Union[int, float, str]] = None


class FixtureStat(SportmonksResource):
    """A team statistic for a fixture."""

    id: int = Field(description="Statistic ID")
    fixture_id: Optional[int] = Field(None, description="Fixture ID")
    type_id: Optional[int] = Field(None, description="Statistic type ID")
    participant_id: Optional[int] = Field(None, description="Team ID")
    data: StatValue = Field(default_factory=StatValue)
    location: Optional[str] = Field(None, description="'home' or 'away'")


class ScoreValue(SportmonksResource):
    goals: int = 0
    participant: Optional[str] = None


class Score(SportmonksResource):
    """A score line for one participant at one point of a fixture."""

    id: int = Field(description="Score ID")
    fixture_id: Optional[int] = Field(None, description="Fixture ID")
    type_id: Optional[int] = Field(None, description="Score type ID (e.g. 1ST_HALF, CURRENT)")
    participant_id: Optional[int] = Field(None, description="Team ID")
    score: ScoreValue = Field(default_factory=ScoreValue)
    description: Optional[str] = Field(None)


class Formation(SportmonksResource):
    """The formation a team lined up in."""

    id: int = Field(description="Formation ID")
    fixture_id: Optional[int] = Field(None, description="Fixture ID")
    participant_id: Optional[int] = Field(None, description="Team ID")
    formation: Optional[str] = Field(None, description="Formation (e.g. '4-3-3')")
    location: Optional[str] = Field(None)


class Fixture(SportmonksResource):
    """A football fixture."""

    id: int = Field(description="Fixture ID")
    sport_id: Optional[int] = Field(None, description="Sport ID")
    league_id: Optional[int] = Field(None, description="League ID")
    season_id: Optional[int] = Field(None, description="Season ID")
    stage_id: Optional[int] = Field(None, description="Stage ID")
    group_id: Optional[int] = Field(None)
    aggregate_id: Optional[int] = Field(None)
    round_id: Optional[int] = Field(None, description="Round ID")
    state_id: Optional[int] = Field(None, description="State ID")
    venue_id: Optional[int] = Field(None)
    name: Optional[str] = Field(None, description="Fixture name (e.g. 'Celtic vs Rangers')")
    starting_at: Optional[str] = Field(None, description="Kick-off (UTC)")
    result_info: Optional[str] = Field(None)
    leg: Optional[str] = Field(None, description="Leg (e.g. '1/1')")
    details: Optional[str] = Field(None)
    length: Optional[int] = Field(None, description="Length in minutes")
    placeholder: bool = Field(False)
    has_odds: bool = Field(False)
    has_premium_odds: bool = Field(False)
    starting_at_timestamp: Optional[int] = Field(None)

    # Relations
    round: Optional[Round] = Field(None)
    stage: Optional[Stage] = Field(None)
    league: Optional[League] = Field(None)
    season: Optional[Season] = Field(None)
    coaches: Optional[list[Coach]] = Field(None)
    venue: Optional[Venue] = Field(None)
    state: Optional[FixtureState] = Field(None)
    weather_report: Optional[WeatherReport] = Field(None, alias="weatherReport")
    lineups: Optional[list[LineupPlayer]] = Field(None)
    events: Optional[list[FixtureEvent]] = Field(None)
    statistics: Optional[list[FixtureStat]] = Field(None)
    scores: Optional[list[Score]] = Field(None)
    formations: Optional[list[Formation]] = Field(None)
    participants: Optional[list[Team]] = Field(None)

    @property
    def home_team(self) -> Optional[Team]:
        """Home participant, when participants were included."""
        return self._participant("home")

    @property
    def away_team(self) -> Optional[Team]:
        """Away participant, when participants were included."""
        return self._participant("away")

    def _participant(self, location: str) -> Optional[Team]:
        for team in self.participants or []:
            if team.meta is not None and team.meta.location == location:
                return team
        return None
