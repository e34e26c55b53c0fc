import csv
from datetime import date

import pytest
from sqlalchemy import func, select

from cricket_analytics.etl import DatasetLoader, read_csv_rows
from cricket_analytics.exceptions import DataValidationError
from cricket_analytics.models import Delivery, Match, Player, Team


def _write_csv(path, header, rows):
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(header)
        writer.writerows(rows)


@pytest.fixture
def csv_dir(tmp_path):
    _write_csv(tmp_path / "teams.csv", ["id", "name", "city"], [[1, "Alpha", "Mumbai"], [2, "Bravo", ""]])
    _write_csv(tmp_path / "players.csv", ["id", "name", "team_id", "role"],
               [[1, "Ana", 1, " Batsman "], [2, "Ben", 2, ""]])
    _write_csv(tmp_path / "matches.csv", ["id", "season", "team1_id", "team2_id", "winner_team_id", "venue", "date"],
               [[1, 2021, 1, 2, 1, "Wankhede", "2021-04-09"], [2, 2021, 2, 1, "", "Eden", "2021-04-10"]])
    _write_csv(tmp_path / "deliveries.csv",
               ["id", "match_id", "inning", "bowler_id", "batsman_id", "runs_scored", "is_wicket"],
               [[1, 1, 1, 2, 1, 4, "0"], [2, 1, 1, 2, 1, 0, "yes"], [3, 2, 2, 1, 2, 6, "false"]])
    return tmp_path


def test_load_rows_counts(session, dataset):
    stats = DatasetLoader(session, batch_size=7).load_rows(**dataset)

    assert stats == {"teams": 4, "players": 4, "matches": 7, "deliveries": len(dataset["deliveries"])}
    assert session.execute(select(func.count(Delivery.id))).scalar() == len(dataset["deliveries"])


def test_load_csv_directory(session, csv_dir):
    stats = DatasetLoader(session).load_csv_directory(csv_dir)

    assert stats == {"teams": 2, "players": 2, "matches": 2, "deliveries": 3}
    assert session.get(Team, 2).city is None
    assert session.get(Player, 1).role == "batsman"
    match = session.get(Match, 2)
    assert match.winner_team_id is None
    assert match.date == date(2021, 4, 10)
    assert [d.is_wicket for d in session.scalars(select(Delivery).order_by(Delivery.id))] == [False, True, False]


def test_read_csv_rows_drops_empty_cells(csv_dir):
    rows = read_csv_rows(csv_dir / "matches.csv")

    assert "winner_team_id" not in rows[1]
    assert rows[0]["venue"] == "Wankhede"


def test_missing_csv_file(session, csv_dir):
    (csv_dir / "deliveries.csv").unlink()

    with pytest.raises(FileNotFoundError, match="deliveries.csv"):
        DatasetLoader(session).load_csv_directory(csv_dir)


def test_winner_must_be_a_participant(session, dataset):
    dataset["matches"][2]["winner_team_id"] = 4

    with pytest.raises(DataValidationError) as exc_info:
        DatasetLoader(session).load_rows(**dataset)

    assert exc_info.value.table == "matches"
    assert exc_info.value.row_number == 3
    # nothing is written when any table fails validation
    assert session.execute(select(func.count(Team.id))).scalar() == 0


def test_negative_runs_rejected(session, dataset):
    dataset["deliveries"][0]["runs_scored"] = -1

    with pytest.raises(DataValidationError, match="deliveries"):
        DatasetLoader(session).load_rows(**dataset)


def test_same_team_on_both_sides_rejected(session, dataset):
    dataset["matches"][0]["team2_id"] = dataset["matches"][0]["team1_id"]
    dataset["matches"][0]["winner_team_id"] = None

    with pytest.raises(DataValidationError, match="must be different"):
        DatasetLoader(session).load_rows(**dataset)


def test_schemas_export_load_and_report_rows_only():
    from cricket_analytics import schemas

    loaded = {name for name in schemas.__all__ if name.endswith("Create")}
    assert loaded == {"TeamCreate", "PlayerCreate", "MatchCreate", "DeliveryCreate"}
    assert not [name for name in schemas.__all__ if name.endswith("Response")]
