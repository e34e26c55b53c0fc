"""Bulk loading of the four input tables from CSV files or Python rows."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Type

from loguru import logger
from pydantic import BaseModel, ValidationError
from sqlalchemy import insert
from sqlalchemy.orm import Session

from ..exceptions import DataValidationError
from ..models import Delivery, Match, Player, Team
from ..schemas import DeliveryCreate, MatchCreate, PlayerCreate, TeamCreate

# Load order follows foreign keys: teams <- players, matches <- deliveries
TABLES = (
    ("teams", Team, TeamCreate),
    ("players", Player, PlayerCreate),
    ("matches", Match, MatchCreate),
    ("deliveries", Delivery, DeliveryCreate),
)


def _clean_csv_row(row: Dict[str, Optional[str]]) -> Dict[str, str]:
    """Strip whitespace and drop empty cells so schema defaults apply."""
    cleaned = {}
    for key, value in row.items():
        if key is None or value is None:
            continue
        value = value.strip()
        if value:
            cleaned[key.strip()] = value
    return cleaned


def read_csv_rows(path: Path) -> List[Dict[str, str]]:
    """Read a CSV file with a header row into a list of cleaned dicts."""
    with open(path, "r", encoding="utf-8", newline="") as f:
        return [_clean_csv_row(row) for row in csv.DictReader(f)]


class DatasetLoader:
    """Validates rows with pydantic schemas and bulk inserts them."""

    def __init__(self, session: Session, batch_size: int = 1000):
        self.session = session
        self.batch_size = batch_size

    def load_rows(
        self,
        teams: Iterable[Dict[str, Any]] = (),
        players: Iterable[Dict[str, Any]] = (),
        matches: Iterable[Dict[str, Any]] = (),
        deliveries: Iterable[Dict[str, Any]] = (),
    ) -> Dict[str, int]:
        """Validate and insert all rows; returns inserted counts per table.

        Every table is validated before anything is written, so an invalid
        row leaves the database untouched.
        """
        sources = {"teams": teams, "players": players, "matches": matches, "deliveries": deliveries}
        validated = {
            table: self._validate(table, schema, sources[table])
            for table, _, schema in TABLES
        }

        stats: Dict[str, int] = {}
        for table, model, _ in TABLES:
            stats[table] = self._insert(model, validated[table])
        self.session.flush()
        logger.info(f"Dataset loaded: {stats}")
        return stats

    def load_csv_directory(self, directory: Path | str) -> Dict[str, int]:
        """Load ``teams.csv``, ``players.csv``, ``matches.csv`` and ``deliveries.csv``."""
        directory = Path(directory)
        if not directory.is_dir():
            raise FileNotFoundError(f"Dataset directory not found: {directory}")

        rows = {}
        for table, _, _ in TABLES:
            path = directory / f"{table}.csv"
            if not path.exists():
                raise FileNotFoundError(f"Missing dataset file: {path}")
            rows[table] = read_csv_rows(path)
            logger.debug(f"read {len(rows[table])} rows from {path}")
        return self.load_rows(**rows)

    def _validate(self, table: str, schema: Type[BaseModel], rows: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
        records = []
        for row_number, row in enumerate(rows, start=1):
            try:
                records.append(schema.model_validate(row).model_dump())
            except ValidationError as e:
                raise DataValidationError(table, row_number, e) from e
        logger.debug(f"validated {len(records)} {table} rows")
        return records

    def _insert(self, model, records: List[Dict[str, Any]]) -> int:
        for start in range(0, len(records), self.batch_size):
            batch = records[start:start + self.batch_size]
            self.session.execute(insert(model), batch)
        return len(records)
