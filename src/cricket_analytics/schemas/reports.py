"""Result rows produced by the analytical reports."""

import datetime as dt
from typing import Optional
from pydantic import BaseModel, Field


class SeasonWinLeader(BaseModel):
    """Team with the most wins in a season."""

    team_name: str
    total_wins: int = Field(..., ge=1)


class RunScorer(BaseModel):
    """Batsman ranked by all-time runs."""

    player_name: str
    total_runs: int
    rank: int = Field(..., ge=1)


class HighWicketMatch(BaseModel):
    """Match whose deliveries produced many wickets."""

    match_id: int
    date: Optional[dt.date] = None
    total_wickets: int


class AverageRunsLeader(BaseModel):
    """Player with the best per-match run average in a season."""

    player_name: str
    total_runs: int
    matches: int = Field(..., ge=1)
    average_runs: float


class VenueWickets(BaseModel):
    """Venue and match holding the single-match wicket record."""

    venue: Optional[str] = None
    match_id: int
    total_wickets: int


class MostTeamsPlayer(BaseModel):
    """Player credited to the most distinct teams."""

    player_name: str
    team_count: int = Field(..., ge=1)


class EverySeasonTeam(BaseModel):
    """Team that took part in every season of the dataset."""

    team_name: str
    season_count: int = Field(..., ge=1)


class StrikeRateLeader(BaseModel):
    """Batsman ranked by strike rate in a season."""

    player_name: str
    balls_faced: int
    total_runs: int
    strike_rate: float
    rank: int = Field(..., ge=1)
