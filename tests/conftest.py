"""Shared pytest fixtures.

Provides an in-memory SQLite database and a small two-season dataset whose
report results are worked out by hand in the tests.
"""

from datetime import date
from typing import Dict, List

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from cricket_analytics.config import ReportSettings
from cricket_analytics.etl import DatasetLoader
from cricket_analytics.models import Base

ALPHA, BRAVO, CHARLIE, DELTA = 1, 2, 3, 4
ANA, BEN, CAL, DEV = 1, 2, 3, 4


class DeliveryBuilder:
    """Builds delivery rows with sequential ids."""

    def __init__(self):
        self.rows: List[Dict] = []

    def add(self, match_id, batsman_id, bowler_id, runs, wickets=0, inning=1):
        # the last `wickets` balls of the spell are dismissals
        for i, run in enumerate(runs):
            self.rows.append({
                "id": len(self.rows) + 1,
                "match_id": match_id,
                "inning": inning,
                "batsman_id": batsman_id,
                "bowler_id": bowler_id,
                "runs_scored": run,
                "is_wicket": i >= len(runs) - wickets,
            })
        return self


def build_dataset() -> Dict[str, List[Dict]]:
    teams = [
        {"id": ALPHA, "name": "Alpha", "city": "Mumbai"},
        {"id": BRAVO, "name": "Bravo", "city": "Chennai"},
        {"id": CHARLIE, "name": "Charlie", "city": "Delhi"},
        {"id": DELTA, "name": "Delta", "city": "Kolkata"},
    ]
    players = [
        {"id": ANA, "name": "Ana", "team_id": ALPHA, "role": "Batsman"},
        {"id": BEN, "name": "Ben", "team_id": BRAVO, "role": "Bowler"},
        {"id": CAL, "name": "Cal", "team_id": CHARLIE, "role": "All-rounder"},
        {"id": DEV, "name": "Dev", "team_id": ALPHA, "role": "Bowler"},
    ]
    matches = [
        {"id": 1, "season": 2020, "team1_id": ALPHA, "team2_id": BRAVO, "winner_team_id": ALPHA,
         "venue": "Wankhede", "date": date(2020, 9, 19)},
        {"id": 2, "season": 2020, "team1_id": BRAVO, "team2_id": CHARLIE, "winner_team_id": CHARLIE,
         "venue": "Chepauk", "date": date(2020, 9, 20)},
        {"id": 3, "season": 2021, "team1_id": ALPHA, "team2_id": BRAVO, "winner_team_id": ALPHA,
         "venue": "Wankhede", "date": date(2021, 4, 9)},
        {"id": 4, "season": 2021, "team1_id": ALPHA, "team2_id": BRAVO, "winner_team_id": BRAVO,
         "venue": "Eden Gardens", "date": date(2021, 4, 10)},
        {"id": 5, "season": 2021, "team1_id": ALPHA, "team2_id": BRAVO, "winner_team_id": ALPHA,
         "venue": "Chepauk", "date": date(2021, 4, 11)},
        {"id": 6, "season": 2021, "team1_id": CHARLIE, "team2_id": ALPHA, "winner_team_id": None,
         "venue": "Eden Gardens", "date": date(2021, 4, 12)},
        {"id": 7, "season": 2021, "team1_id": DELTA, "team2_id": CHARLIE, "winner_team_id": DELTA,
         "venue": "Eden Gardens", "date": date(2021, 4, 13)},
    ]
    deliveries = (
        DeliveryBuilder()
        # 2020
        .add(1, ANA, BEN, [4, 6, 1, 0], wickets=1)
        .add(1, BEN, DEV, [1, 1, 0], wickets=1)
        .add(1, CAL, DEV, [1])
        .add(2, CAL, BEN, [6, 6, 6])
        .add(2, ANA, CAL, [2, 2], wickets=1)
        # 2021
        .add(3, ANA, BEN, [1] * 20, wickets=1)
        .add(4, BEN, DEV, [2] * 10 + [6] * 2, wickets=3)
        .add(4, ANA, BEN, [4] * 5)
        .add(5, DEV, BEN, [0] * 11, wickets=11)
        .add(6, CAL, DEV, [1] * 12, wickets=10)
        .rows
    )
    return {"teams": teams, "players": players, "matches": matches, "deliveries": deliveries}


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    session = sessionmaker(bind=engine)()
    yield session
    session.close()


@pytest.fixture
def dataset():
    return build_dataset()


@pytest.fixture
def seeded_session(session, dataset):
    DatasetLoader(session).load_rows(**dataset)
    session.commit()
    return session


@pytest.fixture
def report_settings():
    return ReportSettings(
        default_season=2021,
        min_balls_faced=10,
        top_run_scorers_rank=3,
        top_strike_rate_rank=5,
        high_wicket_threshold=10,
        verify_integrity=True,
    )
