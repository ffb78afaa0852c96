"""CLI interface using Typer."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from disaster_watch import __version__
from disaster_watch.aggregator import fetch_all_disasters
from disaster_watch.config import DisasterWatchConfig, OutputFormat
from disaster_watch.exporters import export_csv, export_geojson, export_json
from disaster_watch.filters import active_alerts, filter_events
from disaster_watch.geo import format_coordinates, parse_lat_lon
from disaster_watch.impact import total_affected
from disaster_watch.models import CATEGORIES, DisasterEvent, Severity, WatchPreferences
from disaster_watch.stats import compute_stats
from disaster_watch.store import FileStore, load_preferences, save_preferences

Exporter = Callable[[list[DisasterEvent], Path], Path]

EXPORTERS: dict[str, Exporter] = {
    "json": export_json,
    "geojson": export_geojson,
    "csv": export_csv,
}

SEVERITY_STYLES: dict[str, str] = {
    "critical": "[red]critical[/red]",
    "high": "[dark_orange]high[/dark_orange]",
    "medium": "[yellow]medium[/yellow]",
    "low": "[green]low[/green]",
}

PREFS_NAMESPACE = "user"

app = typer.Typer(
    name="disaster-watch",
    help="Live natural-disaster events from USGS and NASA EONET.",
    add_completion=False,
)
prefs_app = typer.Typer(help="Manage saved watch preferences.")
app.add_typer(prefs_app, name="prefs")
console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"disaster-watch {__version__}")
        raise typer.Exit()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[logging.StreamHandler()],
    )


def _store(config: DisasterWatchConfig) -> FileStore:
    return FileStore(PREFS_NAMESPACE, root=config.store_dir)


def _aggregate(config: DisasterWatchConfig) -> list[DisasterEvent]:
    try:
        return asyncio.run(fetch_all_disasters(config))
    except Exception as exc:
        console.print(f"[red]Aggregation failed:[/red] {exc}")
        raise typer.Exit(code=1) from None


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Disaster Watch: live natural-disaster events from USGS and NASA EONET."""


@app.command()
def run(
    category: Annotated[
        str | None,
        typer.Option("--category", "-c", help="Only this category."),
    ] = None,
    severity: Annotated[
        Severity | None,
        typer.Option("--severity", "-s", help="Only this severity."),
    ] = None,
    min_severity: Annotated[
        Severity | None,
        typer.Option("--min-severity", help="Only this severity or worse."),
    ] = None,
    search: Annotated[
        str | None,
        typer.Option("--search", "-q", help="Text to match in place or title."),
    ] = None,
    near: Annotated[
        str | None,
        typer.Option("--near", help="Centre point as 'lat,lon' for --radius."),
    ] = None,
    radius: Annotated[
        float | None,
        typer.Option("--radius", help="Radius in km around --near."),
    ] = None,
    use_prefs: Annotated[
        bool,
        typer.Option("--use-prefs", help="Apply saved watch preferences."),
    ] = False,
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Output file path."),
    ] = Path("disasters.json"),
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format: json, geojson, csv."),
    ] = "json",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging."),
    ] = False,
) -> None:
    """Fetch, filter and export current disaster events."""
    _setup_logging(verbose)

    if category is not None and category != "all" and category not in CATEGORIES:
        console.print(f"[red]Unknown category:[/red] {category}")
        raise typer.Exit(code=2)

    centre = None
    if near is not None:
        try:
            centre = parse_lat_lon(near)
        except ValueError as exc:
            console.print(f"[red]Invalid --near:[/red] {exc}")
            raise typer.Exit(code=2) from None

    config = DisasterWatchConfig(output_file=output, output_format=output_format)

    prefs = load_preferences(_store(config)) if use_prefs else WatchPreferences()

    events = _aggregate(config)
    events = filter_events(
        events,
        category=category,
        severity=severity,
        min_severity=min_severity or prefs.min_severity,
        search=search,
        near=centre,
        radius_km=radius,
        categories=prefs.categories,
        locations=prefs.locations,
    )

    if not events:
        console.print("[yellow]No events matched.[/yellow]")
        raise typer.Exit()

    EXPORTERS[config.output_format](events, config.output_file)

    console.print()
    table = Table(title="Current Disaster Events")
    table.add_column("Date", style="dim")
    table.add_column("Category", style="bold")
    table.add_column("Severity")
    table.add_column("Mag", justify="right")
    table.add_column("Place")
    table.add_column("Coordinates", style="dim")
    table.add_column("Source", style="dim")

    for e in events:
        table.add_row(
            e.date,
            e.category,
            SEVERITY_STYLES[e.severity],
            "-" if e.magnitude is None else f"{e.magnitude:.1f}",
            e.place,
            format_coordinates(e.location.coordinates),
            e.source,
        )

    console.print(table)
    console.print(
        f"\n{config.output_format.upper()} written to [bold]{config.output_file}[/bold]"
    )
    console.print(f"Total events: {len(events)}")
    console.print(f"Active alerts (high/critical): {active_alerts(events)}")
    console.print(f"Estimated people affected: {total_affected(events):,}")


@app.command()
def stats(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging."),
    ] = False,
) -> None:
    """Print summary statistics for current events."""
    _setup_logging(verbose)
    summary = compute_stats(_aggregate(DisasterWatchConfig()))

    table = Table(title="Disaster Statistics")
    table.add_column("Metric", style="bold")
    table.add_column("Count", justify="right")
    table.add_row("Total events", str(summary.total_events))
    table.add_row("Critical", str(summary.critical_events))
    table.add_row("High", str(summary.high_events))
    table.add_row("Regions", str(summary.countries))
    for cat, n in sorted(summary.by_category.items(), key=lambda kv: (-kv[1], kv[0])):
        table.add_row(f"  {cat}", str(n))
    console.print(table)


@prefs_app.command("show")
def prefs_show() -> None:
    """Show saved preferences."""
    prefs = load_preferences(_store(DisasterWatchConfig()))
    console.print(f"Categories:   {', '.join(prefs.categories) or '-'}")
    console.print(f"Min severity: {prefs.min_severity or '-'}")
    console.print(f"Locations:    {', '.join(prefs.locations) or '-'}")


@prefs_app.command("set")
def prefs_set(
    categories: Annotated[
        str | None,
        typer.Option("--categories", help="Comma-separated categories."),
    ] = None,
    min_severity: Annotated[
        Severity | None,
        typer.Option("--min-severity", help="Minimum severity."),
    ] = None,
    locations: Annotated[
        str | None,
        typer.Option("--locations", help="Comma-separated place names."),
    ] = None,
) -> None:
    """Update saved preferences; omitted options keep their current value."""
    store = _store(DisasterWatchConfig())
    prefs = load_preferences(store)

    if categories is not None:
        parsed = [c.strip() for c in categories.split(",") if c.strip()]
        unknown = [c for c in parsed if c not in CATEGORIES]
        if unknown:
            console.print(f"[red]Unknown categories:[/red] {', '.join(unknown)}")
            raise typer.Exit(code=2)
        prefs.categories = parsed
    if min_severity is not None:
        prefs.min_severity = min_severity
    if locations is not None:
        prefs.locations = [loc.strip() for loc in locations.split(",") if loc.strip()]

    save_preferences(store, prefs)
    console.print("[green]Preferences saved.[/green]")


@prefs_app.command("clear")
def prefs_clear() -> None:
    """Delete saved preferences."""
    _store(DisasterWatchConfig()).clear()
    console.print("Preferences cleared.")
