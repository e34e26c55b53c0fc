"""Referential integrity checks for the four input tables.

The report queries use inner joins, so a dangling reference would silently
drop rows. These checks find such rows up front so the engine can fail fast.
"""

from __future__ import annotations

from typing import List, NamedTuple, Tuple

from loguru import logger
from sqlalchemy import and_, func, or_, select
from sqlalchemy.orm import Session, aliased

from ..exceptions import InvalidReferenceError
from ..models import Delivery, Match, Player, Team

SAMPLE_SIZE = 5


class IntegrityIssue(NamedTuple):
    check: str
    count: int
    description: str
    sample_ids: Tuple[int, ...]


def _dangling(session: Session, model, fk_column, target, description: str, check: str):
    target_alias = aliased(target)
    query = (
        select(model.id)
        .select_from(model)
        .outerjoin(target_alias, target_alias.id == fk_column)
        .where(target_alias.id.is_(None))
        .order_by(model.id)
    )
    return _collect(session, query, check, description)


def _collect(session: Session, query, check: str, description: str):
    count = session.execute(select(func.count()).select_from(query.subquery())).scalar() or 0
    if not count:
        return None
    sample = tuple(session.execute(query.limit(SAMPLE_SIZE)).scalars())
    return IntegrityIssue(check, int(count), description, sample)


class IntegrityChecker:
    """Runs referential checks against a session."""

    def __init__(self, session: Session):
        self.session = session

    def run(self) -> List[IntegrityIssue]:
        """Run every check and return the failing ones."""
        s = self.session
        results = [
            _dangling(s, Player, Player.team_id, Team,
                      "Players whose team_id has no team", "players_missing_team"),
            _dangling(s, Match, Match.team1_id, Team,
                      "Matches whose team1_id has no team", "matches_missing_team1"),
            _dangling(s, Match, Match.team2_id, Team,
                      "Matches whose team2_id has no team", "matches_missing_team2"),
            _collect(
                s,
                select(Match.id)
                .where(
                    and_(
                        Match.winner_team_id.is_not(None),
                        Match.winner_team_id != Match.team1_id,
                        Match.winner_team_id != Match.team2_id,
                    )
                )
                .order_by(Match.id),
                "matches_winner_not_participant",
                "Matches whose winner is neither team1 nor team2",
            ),
            _dangling(s, Delivery, Delivery.match_id, Match,
                      "Deliveries whose match_id has no match", "deliveries_missing_match"),
            _dangling(s, Delivery, Delivery.bowler_id, Player,
                      "Deliveries whose bowler_id has no player", "deliveries_missing_bowler"),
            _dangling(s, Delivery, Delivery.batsman_id, Player,
                      "Deliveries whose batsman_id has no player", "deliveries_missing_batsman"),
            _collect(
                s,
                select(Delivery.id)
                .where(or_(Delivery.runs_scored < 0, Delivery.inning < 1))
                .order_by(Delivery.id),
                "deliveries_invalid_values",
                "Deliveries with negative runs or inning below 1",
            ),
        ]
        issues = [issue for issue in results if issue is not None]
        for issue in issues:
            logger.warning(f"integrity check failed: {issue.check} count={issue.count} sample={list(issue.sample_ids)}")
        return issues

    def verify(self) -> None:
        """Raise InvalidReferenceError if any check fails."""
        issues = self.run()
        if issues:
            raise InvalidReferenceError(issues)
        logger.debug("integrity checks passed")
