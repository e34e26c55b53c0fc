import json

import pytest
from typer.testing import CliRunner

from cricket_analytics.cli.main import app

from conftest import build_dataset

runner = CliRunner()

HEADERS = {
    "teams": ["id", "name", "city"],
    "players": ["id", "name", "team_id", "role"],
    "matches": ["id", "season", "team1_id", "team2_id", "winner_team_id", "venue", "date"],
    "deliveries": ["id", "match_id", "inning", "bowler_id", "batsman_id", "runs_scored", "is_wicket"],
}


@pytest.fixture
def dataset_dir(tmp_path):
    directory = tmp_path / "dataset"
    directory.mkdir()
    for table, rows in build_dataset().items():
        lines = [",".join(HEADERS[table])]
        for row in rows:
            values = []
            for column in HEADERS[table]:
                value = row.get(column)
                if value is None:
                    value = ""
                elif isinstance(value, bool):
                    value = int(value)
                values.append(str(value))
            lines.append(",".join(values))
        (directory / f"{table}.csv").write_text("\n".join(lines) + "\n", encoding="utf-8")
    return directory


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'cli.db'}"


def _invoke(db_url, *args):
    return runner.invoke(app, ["--database-url", db_url, *args])


def test_load_check_and_report(dataset_dir, db_url, tmp_path):
    result = _invoke(db_url, "load", str(dataset_dir))
    assert result.exit_code == 0, result.output

    result = _invoke(db_url, "check")
    assert result.exit_code == 0
    assert "No integrity issues" in result.output

    result = _invoke(db_url, "report", "season-win-leaders", "--season", "2021")
    assert result.exit_code == 0
    assert "Alpha" in result.output

    output = tmp_path / "out" / "all.json"
    result = _invoke(db_url, "run-all", "--season", "2021", "--min-balls", "10", "--output", str(output))
    assert result.exit_code == 0
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["season-win-leaders"] == [{"team_name": "Alpha", "total_wins": 2}]
    assert payload["high-wicket-matches"] == [{"match_id": 5, "date": "2021-04-11", "total_wickets": 11}]
    assert [row["player_name"] for row in payload["top-strike-rates"]] == ["Ben", "Ana", "Cal", "Dev"]


def test_unknown_report_exits_with_error(dataset_dir, db_url):
    assert _invoke(db_url, "load", str(dataset_dir)).exit_code == 0

    result = _invoke(db_url, "report", "no-such-report")

    assert result.exit_code == 1
    assert "Unknown report" in result.output


def test_load_missing_directory(db_url, tmp_path):
    result = _invoke(db_url, "load", str(tmp_path / "missing"))

    assert result.exit_code == 1
    assert "Load failed" in result.output


def test_reports_lists_names(db_url):
    result = _invoke(db_url, "reports")

    assert result.exit_code == 0
    assert "season-win-leaders" in result.output


def test_run_all_passes_report_options(dataset_dir, db_url, tmp_path):
    assert _invoke(db_url, "load", str(dataset_dir)).exit_code == 0
    output = tmp_path / "options.json"

    result = _invoke(
        db_url, "run-all", "--season", "2020", "--min-balls", "0", "--max-rank", "1",
        "--threshold", "2", "--team1-only", "--output", str(output),
    )

    assert result.exit_code == 0, result.output
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert [row["player_name"] for row in payload["top-strike-rates"]] == ["Cal"]
    assert [row["player_name"] for row in payload["top-run-scorers"]] == ["Ana"]
    assert [row["match_id"] for row in payload["high-wicket-matches"]] == [4, 5, 6]
    assert [row["team_name"] for row in payload["teams-in-every-season"]] == ["Alpha"]


def test_report_zero_max_rank_exits_with_error(dataset_dir, db_url):
    assert _invoke(db_url, "load", str(dataset_dir)).exit_code == 0

    result = _invoke(db_url, "report", "top-run-scorers", "--max-rank", "0")

    assert result.exit_code == 1
    assert "max_rank" in result.output
