"""Pydantic schemas for data validation and report rows."""

from .teams import TeamCreate
from .players import PlayerCreate
from .matches import MatchCreate
from .deliveries import DeliveryCreate
from .reports import (
    SeasonWinLeader,
    RunScorer,
    HighWicketMatch,
    AverageRunsLeader,
    VenueWickets,
    MostTeamsPlayer,
    EverySeasonTeam,
    StrikeRateLeader,
)

__all__ = [
    "TeamCreate",
    "PlayerCreate",
    "MatchCreate",
    "DeliveryCreate",
    "SeasonWinLeader",
    "RunScorer",
    "HighWicketMatch",
    "AverageRunsLeader",
    "VenueWickets",
    "MostTeamsPlayer",
    "EverySeasonTeam",
    "StrikeRateLeader",
]
