"""Analytics engine: one entry point for all reports over a session."""

from __future__ import annotations

import inspect
from typing import Any, Dict, List, Optional

from loguru import logger
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ..config import ReportSettings, get_settings
from ..exceptions import UnknownReportError
from ..qa.integrity import IntegrityChecker
from . import reports
from .reports import REPORTS


class AnalyticsEngine:
    """Computes the analytical reports against a database session.

    Referential integrity is verified once on construction unless
    ``verify_integrity`` is false; a dangling reference raises
    :class:`~cricket_analytics.exceptions.InvalidReferenceError`.
    """

    def __init__(
        self,
        session: Session,
        settings: Optional[ReportSettings] = None,
        verify_integrity: Optional[bool] = None,
    ):
        self.session = session
        self.settings = settings or get_settings().reports
        if verify_integrity is None:
            verify_integrity = self.settings.verify_integrity
        if verify_integrity:
            IntegrityChecker(session).verify()

    def season_win_leaders(self, season: Optional[int] = None):
        return reports.season_win_leaders(self.session, self._season(season))

    def top_run_scorers(self, max_rank: Optional[int] = None):
        if max_rank is None:
            max_rank = self.settings.top_run_scorers_rank
        return reports.top_run_scorers(self.session, max_rank)

    def high_wicket_matches(self, threshold: Optional[int] = None):
        if threshold is None:
            threshold = self.settings.high_wicket_threshold
        return reports.high_wicket_matches(self.session, threshold)

    def highest_average_runs(self, season: Optional[int] = None):
        return reports.highest_average_runs(self.session, self._season(season))

    def most_wickets_venue(self):
        return reports.most_wickets_venue(self.session)

    def most_teams_player(self):
        return reports.most_teams_player(self.session)

    def teams_in_every_season(self, team1_only: bool = False):
        return reports.teams_in_every_season(self.session, team1_only=team1_only)

    def top_strike_rates(
        self,
        season: Optional[int] = None,
        min_balls: Optional[int] = None,
        max_rank: Optional[int] = None,
    ):
        return reports.top_strike_rates(
            self.session,
            self._season(season),
            min_balls=self.settings.min_balls_faced if min_balls is None else min_balls,
            max_rank=self.settings.top_strike_rate_rank if max_rank is None else max_rank,
        )

    def run_report(self, name: str, **params: Any) -> List[BaseModel]:
        """Run a report by its registered name.

        Parameters the report does not accept are ignored, so one set of
        options can be passed to any report.
        """
        if name not in REPORTS:
            raise UnknownReportError(name, sorted(REPORTS))
        method = getattr(self, REPORTS[name].handler.__name__)
        accepted = inspect.signature(method).parameters
        kwargs = {key: value for key, value in params.items() if key in accepted and value is not None}
        logger.info(f"running report {name} params={kwargs}")
        rows = method(**kwargs)
        logger.info(f"report {name} returned {len(rows)} row(s)")
        return rows

    def run_all(self, **params: Any) -> Dict[str, List[BaseModel]]:
        """Run every registered report with shared parameters."""
        return {name: self.run_report(name, **params) for name in REPORTS}

    def _season(self, season: Optional[int]) -> int:
        return self.settings.default_season if season is None else season
