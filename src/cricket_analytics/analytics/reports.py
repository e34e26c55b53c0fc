"""Analytical reports over the matches, teams, players and deliveries tables.

Each report is a pure read: SQL does the grouping and aggregation, and
ranking is applied to the aggregated rows with :func:`dense_rank`.
"""

from __future__ import annotations

from typing import Callable, Dict, List, NamedTuple, Tuple

from loguru import logger
from sqlalchemy import case, distinct, func, select, union
from sqlalchemy.orm import Session

from ..models import Delivery, Match, Player, Team
from ..schemas.reports import (
    AverageRunsLeader,
    EverySeasonTeam,
    HighWicketMatch,
    MostTeamsPlayer,
    RunScorer,
    SeasonWinLeader,
    StrikeRateLeader,
    VenueWickets,
)
from .ranking import top_ranked

# 0/1 per delivery; summed to count wickets
WICKET_FLAG = case((Delivery.is_wicket.is_(True), 1), else_=0)


def season_win_leaders(session: Session, season: int) -> List[SeasonWinLeader]:
    """Teams with the most wins in ``season``; all tied leaders are returned."""
    rows = session.execute(
        select(Team.id, Team.name, func.count(Match.id).label("total_wins"))
        .select_from(Match)
        .join(Team, Team.id == Match.winner_team_id)
        .where(Match.season == season, Match.winner_team_id.is_not(None))
        .group_by(Team.id, Team.name)
        .order_by(Team.name)
    ).all()

    wins = {(team_id, name): int(total) for team_id, name, total in rows}
    leaders = top_ranked(wins, max_rank=1)
    logger.debug(f"season_win_leaders season={season} teams_with_wins={len(wins)} leaders={len(leaders)}")
    return [
        SeasonWinLeader(team_name=name, total_wins=entry.value)
        for (_, name), entry in leaders.items()
    ]


def top_run_scorers(session: Session, max_rank: int = 3) -> List[RunScorer]:
    """All-time run scorers with dense rank up to ``max_rank``."""
    rows = session.execute(
        select(Player.id, Player.name, func.sum(Delivery.runs_scored).label("total_runs"))
        .select_from(Delivery)
        .join(Player, Player.id == Delivery.batsman_id)
        .group_by(Player.id, Player.name)
        .order_by(Player.name)
    ).all()

    runs = {(player_id, name): int(total or 0) for player_id, name, total in rows}
    return [
        RunScorer(player_name=name, total_runs=entry.value, rank=entry.rank)
        for (_, name), entry in top_ranked(runs, max_rank=max_rank).items()
    ]


def high_wicket_matches(session: Session, threshold: int = 10) -> List[HighWicketMatch]:
    """Matches with strictly more than ``threshold`` wickets."""
    total_wickets = func.sum(WICKET_FLAG).label("total_wickets")
    rows = session.execute(
        select(Match.id, Match.date, total_wickets)
        .select_from(Delivery)
        .join(Match, Match.id == Delivery.match_id)
        .group_by(Match.id, Match.date)
        .having(func.sum(WICKET_FLAG) > threshold)
        .order_by(Match.id)
    ).all()
    return [
        HighWicketMatch(match_id=match_id, date=match_date, total_wickets=int(wickets))
        for match_id, match_date, wickets in rows
    ]


def highest_average_runs(session: Session, season: int) -> List[AverageRunsLeader]:
    """The single player with the best runs-per-match average in ``season``.

    The average is total runs over distinct matches batted in, using real
    division. Ties for first go to the lowest name, then lowest player id.
    """
    per_match = (
        select(
            Delivery.batsman_id.label("player_id"),
            Delivery.match_id.label("match_id"),
            func.sum(Delivery.runs_scored).label("match_runs"),
        )
        .select_from(Delivery)
        .join(Match, Match.id == Delivery.match_id)
        .where(Match.season == season)
        .group_by(Delivery.batsman_id, Delivery.match_id)
        .subquery()
    )
    rows = session.execute(
        select(
            Player.id,
            Player.name,
            func.sum(per_match.c.match_runs).label("total_runs"),
            func.count(per_match.c.match_id).label("matches"),
        )
        .select_from(per_match)
        .join(Player, Player.id == per_match.c.player_id)
        .group_by(Player.id, Player.name)
    ).all()
    if not rows:
        return []

    def sort_key(row) -> Tuple[float, str, int]:
        player_id, name, total, matches = row
        return (-(int(total) / int(matches)), name, player_id)

    _, name, total, matches = min(rows, key=sort_key)
    return [
        AverageRunsLeader(
            player_name=name,
            total_runs=int(total),
            matches=int(matches),
            average_runs=int(total) / int(matches),
        )
    ]


def most_wickets_venue(session: Session) -> List[VenueWickets]:
    """(venue, match) pairs holding the highest single-match wicket count."""
    rows = session.execute(
        select(Match.venue, Match.id, func.sum(WICKET_FLAG).label("total_wickets"))
        .select_from(Delivery)
        .join(Match, Match.id == Delivery.match_id)
        .group_by(Match.venue, Match.id)
        .order_by(Match.id)
    ).all()

    wickets = {(venue, match_id): int(total) for venue, match_id, total in rows}
    return [
        VenueWickets(venue=venue, match_id=match_id, total_wickets=entry.value)
        for (venue, match_id), entry in top_ranked(wickets, max_rank=1).items()
    ]


def most_teams_player(session: Session) -> List[MostTeamsPlayer]:
    """Players credited to the largest number of distinct teams.

    A bowler is credited to the match's team1 and a batsman to its team2.
    This follows the side the delivery was recorded under, not the
    ``players.team_id`` roster column.
    """
    appearances = union(
        select(Delivery.bowler_id.label("player_id"), Match.team1_id.label("team_id"))
        .select_from(Delivery)
        .join(Match, Match.id == Delivery.match_id),
        select(Delivery.batsman_id.label("player_id"), Match.team2_id.label("team_id"))
        .select_from(Delivery)
        .join(Match, Match.id == Delivery.match_id),
    ).subquery()
    rows = session.execute(
        select(Player.id, Player.name, func.count(distinct(appearances.c.team_id)).label("team_count"))
        .select_from(appearances)
        .join(Player, Player.id == appearances.c.player_id)
        .group_by(Player.id, Player.name)
        .order_by(Player.name)
    ).all()

    counts = {(player_id, name): int(total) for player_id, name, total in rows}
    return [
        MostTeamsPlayer(player_name=name, team_count=entry.value)
        for (_, name), entry in top_ranked(counts, max_rank=1).items()
    ]


def teams_in_every_season(session: Session, team1_only: bool = False) -> List[EverySeasonTeam]:
    """Teams that appear in every season present in the matches table.

    Both sides of a match count as an appearance. ``team1_only`` credits
    only the team1 side.
    """
    total_seasons = session.execute(select(func.count(distinct(Match.season)))).scalar() or 0
    if total_seasons == 0:
        return []

    team1_seasons = select(Match.team1_id.label("team_id"), Match.season.label("season"))
    if team1_only:
        pairs = team1_seasons.subquery()
    else:
        pairs = union(
            team1_seasons,
            select(Match.team2_id.label("team_id"), Match.season.label("season")),
        ).subquery()

    season_count = func.count(distinct(pairs.c.season))
    rows = session.execute(
        select(Team.name, season_count.label("season_count"))
        .select_from(pairs)
        .join(Team, Team.id == pairs.c.team_id)
        .group_by(Team.id, Team.name)
        .having(season_count == total_seasons)
        .order_by(Team.name)
    ).all()
    return [EverySeasonTeam(team_name=name, season_count=int(count)) for name, count in rows]


def top_strike_rates(
    session: Session,
    season: int,
    min_balls: int = 100,
    max_rank: int = 5,
) -> List[StrikeRateLeader]:
    """Batsmen with the best strike rate in ``season``, having faced at least ``min_balls``."""
    balls_faced = func.count(Delivery.id)
    rows = session.execute(
        select(
            Player.id,
            Player.name,
            balls_faced.label("balls_faced"),
            func.sum(Delivery.runs_scored).label("total_runs"),
        )
        .select_from(Delivery)
        .join(Match, Match.id == Delivery.match_id)
        .join(Player, Player.id == Delivery.batsman_id)
        .where(Match.season == season)
        .group_by(Player.id, Player.name)
        .having(balls_faced >= min_balls)
        .order_by(Player.name)
    ).all()

    totals = {(player_id, name): (int(balls), int(runs or 0)) for player_id, name, balls, runs in rows}
    strike_rates = {key: (runs / balls) * 100 for key, (balls, runs) in totals.items()}
    return [
        StrikeRateLeader(
            player_name=name,
            balls_faced=totals[(player_id, name)][0],
            total_runs=totals[(player_id, name)][1],
            strike_rate=entry.value,
            rank=entry.rank,
        )
        for (player_id, name), entry in top_ranked(strike_rates, max_rank=max_rank).items()
    ]


class ReportDefinition(NamedTuple):
    name: str
    handler: Callable
    description: str
    params: Tuple[str, ...]


REPORTS: Dict[str, ReportDefinition] = {
    definition.name: definition
    for definition in (
        ReportDefinition("season-win-leaders", season_win_leaders,
                         "Teams with the most wins in a season", ("season",)),
        ReportDefinition("top-run-scorers", top_run_scorers,
                         "All-time top run scorers (dense rank)", ("max_rank",)),
        ReportDefinition("high-wicket-matches", high_wicket_matches,
                         "Matches with more wickets than the threshold", ("threshold",)),
        ReportDefinition("highest-average-runs", highest_average_runs,
                         "Best runs-per-match average in a season", ("season",)),
        ReportDefinition("most-wickets-venue", most_wickets_venue,
                         "Venue and match with the most wickets in one match", ()),
        ReportDefinition("most-teams-player", most_teams_player,
                         "Player credited to the most teams", ()),
        ReportDefinition("teams-in-every-season", teams_in_every_season,
                         "Teams present in every season", ("team1_only",)),
        ReportDefinition("top-strike-rates", top_strike_rates,
                         "Best strike rates in a season (minimum balls faced)",
                         ("season", "min_balls", "max_rank")),
    )
}
