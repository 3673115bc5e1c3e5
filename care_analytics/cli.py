"""
Command-line entry point.

Usage:
    care-analytics analyze candidate rows.json
    care-analytics analyze customer rows.json --pretty
    care-analytics fetch call --location pittsburgh

The report is printed to stdout as JSON; the rejected-row count goes to stderr.
"""
import json
from pathlib import Path
from typing import Optional

import typer

from care_analytics.config import get_config
from care_analytics.exceptions import SourceError
from care_analytics.log import setup_logging
from care_analytics.normalization import NormalizationResult, RecordKind, normalize_records
from care_analytics.report import build_report
from care_analytics.sources import RecordsApiClient, RecruitmentKind, fetch_records

app = typer.Typer(add_completion=False, help="Recruitment and customer-service analytics reports.")


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override LOG_LEVEL"),
):
    """Configure logging from the environment before any command runs."""
    config = get_config()
    setup_logging(log_level or config.logging.level, config.logging.log_file)


def _emit(result: NormalizationResult, pretty: bool) -> None:
    report = build_report(result.kind, result.records, get_config().analytics)
    typer.echo(json.dumps(report, indent=2 if pretty else None))
    typer.echo(f"Rejected {len(result.rejected)} of {result.total_rows} row(s)", err=True)


@app.command()
def analyze(
    kind: RecordKind = typer.Argument(..., help="Dataset kind of the rows"),
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON file holding an array of raw rows"),
    pretty: bool = typer.Option(False, "--pretty", help="Indent the JSON output"),
):
    """Build the report for a JSON file of raw rows."""
    try:
        rows = json.loads(path.read_text(encoding="utf-8"))
    except ValueError as e:
        typer.echo(f"ERROR: {path} is not valid JSON: {e}", err=True)
        raise typer.Exit(1)

    if not isinstance(rows, list):
        typer.echo(f"ERROR: {path} must contain a JSON array of rows", err=True)
        raise typer.Exit(1)

    _emit(normalize_records(kind, rows), pretty)


@app.command()
def fetch(
    kind: RecruitmentKind = typer.Argument(..., help="Recruitment feed to fetch"),
    location: Optional[str] = typer.Option(None, "--location", "-l", help="baltimore or pittsburgh"),
    api_url: Optional[str] = typer.Option(None, "--api-url", help="Override RECORDS_API_URL"),
    pretty: bool = typer.Option(False, "--pretty", help="Indent the JSON output"),
):
    """Fetch a recruitment feed from the records API and build its report."""
    source_config = get_config().source
    base_url = api_url or source_config.api_url
    if not base_url:
        typer.echo("ERROR: RECORDS_API_URL is not set (or pass --api-url)", err=True)
        raise typer.Exit(1)

    client = RecordsApiClient(base_url, timeout=source_config.timeout_seconds)
    try:
        result = fetch_records(client, location or source_config.default_location, kind)
    except (SourceError, ValueError) as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    _emit(result, pretty)


if __name__ == "__main__":
    app()
