"""Main CLI interface for the cricket analytics engine."""

import json
import sys
from pathlib import Path
from typing import Dict, List, Optional

import typer
from loguru import logger
from pydantic import BaseModel
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from sqlalchemy.exc import SQLAlchemyError

from ..analytics import AnalyticsEngine, REPORTS
from ..config import get_settings
from ..database import configure_engine, create_tables, drop_tables, get_session
from ..etl import DatasetLoader
from ..exceptions import AnalyticsError
from ..qa import IntegrityChecker

# Initialize rich consoles; logs go to stderr
console = Console()
err_console = Console(stderr=True)


def setup_logging(level: str = "INFO", log_file: Optional[str] = None):
    """Route loguru output through rich, plus an optional log file."""
    logger.remove()
    logger.add(
        RichHandler(console=err_console, show_time=True, show_path=False),
        level=level.upper(),
        format="{message}",
    )
    if log_file:
        logger.add(
            log_file,
            level=level.upper(),
            format="{time:YYYY-MM-DD HH:mm:ss} - {name} - {level} - {message}",
        )


app = typer.Typer(
    name="cricket-analytics",
    help="Cricket Analytics - reports over matches, teams, players and deliveries",
    no_args_is_help=True
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Log file path"),
    database_url: Optional[str] = typer.Option(None, "--database-url", help="SQLAlchemy database URL"),
):
    """Cricket Analytics - reports over matches, teams, players and deliveries."""
    settings = get_settings()
    log_level = "DEBUG" if verbose else settings.logging.level
    setup_logging(log_level, log_file or settings.logging.file)
    configure_engine(database_url)


def _render(title: str, rows: List[BaseModel]) -> None:
    if not rows:
        console.print(f"[yellow]{title}: no rows[/yellow]")
        return
    columns = list(type(rows[0]).model_fields)
    table = Table(title=title)
    for column in columns:
        table.add_column(column, style="cyan" if column.endswith("name") else None,
                         justify="left" if column.endswith(("name", "venue")) else "right")
    for row in rows:
        values = []
        for column in columns:
            value = getattr(row, column)
            values.append(f"{value:.2f}" if isinstance(value, float) else str(value))
        table.add_row(*values)
    console.print(table)


def _dump(results: Dict[str, List[BaseModel]]) -> str:
    return json.dumps(
        {name: [row.model_dump(mode="json") for row in rows] for name, rows in results.items()},
        indent=2,
    )


@app.command("setup-db")
def setup_db(force: bool = typer.Option(False, "--force", help="Force recreation of tables")):
    """Initialize database schema."""
    console.print("[bold]Setting up database schema...[/bold]")
    try:
        if force:
            console.print("Dropping existing tables...")
            drop_tables()
        create_tables()
        console.print("[green]✅ Database schema initialized successfully![/green]")
    except Exception as e:
        console.print(f"[red]❌ Database setup failed: {escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.command("load")
def load(
    directory: Path = typer.Argument(..., help="Directory holding teams/players/matches/deliveries CSV files"),
    batch_size: int = typer.Option(1000, "--batch-size", help="Rows per insert batch"),
):
    """Load the four dataset CSV files into the database."""
    try:
        create_tables()
        with get_session() as session:
            stats = DatasetLoader(session, batch_size=batch_size).load_csv_directory(directory)
    except (AnalyticsError, FileNotFoundError, SQLAlchemyError) as e:
        console.print(f"[red]❌ Load failed: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    table = Table(title="Rows Loaded")
    table.add_column("Table", style="cyan")
    table.add_column("Rows", style="green", justify="right")
    for name, count in stats.items():
        table.add_row(name, str(count))
    console.print(table)


@app.command("check")
def check():
    """Run referential integrity checks on the loaded dataset."""
    try:
        with get_session() as session:
            issues = IntegrityChecker(session).run()
    except SQLAlchemyError as e:
        console.print(f"[red]❌ Integrity check failed: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if not issues:
        console.print("[green]✅ No integrity issues found![/green]")
        return

    table = Table(title="Integrity Check Results")
    table.add_column("Check Name", style="cyan", no_wrap=True)
    table.add_column("Issue Count", style="red", justify="right")
    table.add_column("Sample IDs", style="yellow")
    table.add_column("Description", style="white")
    for issue in issues:
        table.add_row(issue.check, str(issue.count), ", ".join(map(str, issue.sample_ids)), issue.description)
    console.print(table)
    raise typer.Exit(1)


@app.command("reports")
def list_reports():
    """List the available reports."""
    table = Table(title="Available Reports")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Parameters", style="magenta")
    table.add_column("Description", style="white")
    for definition in REPORTS.values():
        table.add_row(definition.name, ", ".join(definition.params) or "-", definition.description)
    console.print(table)


@app.command("report")
def report(
    name: str = typer.Argument(..., help="Report name (see 'reports')"),
    season: Optional[int] = typer.Option(None, "--season", "-s", help="Season year"),
    min_balls: Optional[int] = typer.Option(None, "--min-balls", help="Minimum balls faced"),
    max_rank: Optional[int] = typer.Option(None, "--max-rank", help="Highest dense rank to include"),
    threshold: Optional[int] = typer.Option(None, "--threshold", help="Wicket threshold (exclusive)"),
    team1_only: bool = typer.Option(False, "--team1-only", help="Credit only team1 appearances"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
):
    """Run a single report."""
    try:
        with get_session() as session:
            rows = AnalyticsEngine(session).run_report(
                name,
                season=season,
                min_balls=min_balls,
                max_rank=max_rank,
                threshold=threshold,
                team1_only=team1_only,
            )
    except (AnalyticsError, SQLAlchemyError, ValueError) as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if as_json:
        sys.stdout.write(_dump({name: rows}) + "\n")
    else:
        _render(name, rows)


@app.command("run-all")
def run_all(
    season: Optional[int] = typer.Option(None, "--season", "-s", help="Season year"),
    min_balls: Optional[int] = typer.Option(None, "--min-balls", help="Minimum balls faced"),
    max_rank: Optional[int] = typer.Option(
        None, "--max-rank", help="Highest dense rank for both top-run-scorers and top-strike-rates"
    ),
    threshold: Optional[int] = typer.Option(None, "--threshold", help="Wicket threshold (exclusive)"),
    team1_only: bool = typer.Option(False, "--team1-only", help="Credit only team1 appearances"),
    output_file: Optional[Path] = typer.Option(None, "--output", "-o", help="Save results as JSON"),
):
    """Run every report and display the results."""
    try:
        with get_session() as session:
            results = AnalyticsEngine(session).run_all(
                season=season,
                min_balls=min_balls,
                max_rank=max_rank,
                threshold=threshold,
                team1_only=team1_only,
            )
    except (AnalyticsError, SQLAlchemyError, ValueError) as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(1)

    for name, rows in results.items():
        _render(name, rows)

    if output_file:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(_dump(results), encoding="utf-8")
        console.print(f"[green]Results saved to {output_file}[/green]")


if __name__ == "__main__":
    app()
