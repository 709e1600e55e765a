"""Command-line interface for Tide Times."""

import asyncio
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from tidetimes.core.errors import LocationSearchError, TideTimesError

app = typer.Typer(
    name="tidetimes",
    help="Tide height predictions for a selected location",
    add_completion=False,
)
console = Console()

NO_LOCATION_MESSAGE = "Choose a location to view tide times (tidetimes search QUERY --select N)"


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
):
    """Tide Times."""
    logging.basicConfig(
        stream=sys.stdout,
        format="%(message)s",
        level=logging.DEBUG if verbose else logging.INFO,
        force=True,
    )


def _load_app():
    """Create the app and restore the saved location without fetching."""
    from tidetimes.app import TideTimesApp

    tide_app = TideTimesApp.create()
    tide_app.selected_location = tide_app.store.load()
    if tide_app.selected_location is None:
        console.print(f"[yellow]{NO_LOCATION_MESSAGE}[/yellow]")
        raise typer.Exit(code=1)
    return tide_app


def _load_tides(tide_app) -> None:
    with console.status("Loading tide data..."):
        asyncio.run(tide_app.load_tide_data(tide_app.selected_location))
    if tide_app.error_message:
        console.print(f"[red]Error:[/red] {tide_app.error_message}")
        raise typer.Exit(code=1)


def _fail(error: TideTimesError):
    console.print(f"[red]Error:[/red] {error}")
    raise typer.Exit(code=1)


@app.command()
def search(
    query: Annotated[str, typer.Argument(help="Place name or address")],
    select: Annotated[Optional[int], typer.Option(help="Save result N (1-based)")] = None,
):
    """Search for a location."""
    from tidetimes.core.config import get_settings
    from tidetimes.data.location import search_locations
    from tidetimes.data.store import LocationStore

    settings = get_settings()
    try:
        results = asyncio.run(search_locations(query, settings=settings.geocoding))
    except LocationSearchError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    if not results:
        console.print("No locations found.")
        return

    table = Table(title=f"Results for {query!r}")
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Latitude", justify="right")
    table.add_column("Longitude", justify="right")
    for i, location in enumerate(results, start=1):
        table.add_row(str(i), location.name, f"{location.latitude:.4f}", f"{location.longitude:.4f}")
    console.print(table)

    if select is not None:
        if not 1 <= select <= len(results):
            console.print(f"[red]No result {select}[/red]")
            raise typer.Exit(code=1)
        chosen = results[select - 1]
        path = LocationStore.create(settings.store).save(chosen)
        console.print(f"[green]Selected {chosen.name}[/green] (saved to {path})")


@app.command()
def location(
    clear: Annotated[bool, typer.Option(help="Forget the saved location")] = False,
):
    """Show the saved location."""
    from tidetimes.data.store import LocationStore

    store = LocationStore.create()
    if clear:
        store.clear()
        console.print("Saved location cleared.")
        return

    saved = store.load()
    if saved is None:
        console.print(f"[yellow]{NO_LOCATION_MESSAGE}[/yellow]")
        raise typer.Exit(code=1)

    console.print(Panel.fit(
        f"[bold]{saved.name}[/bold]\n"
        f"{saved.latitude:.4f}, {saved.longitude:.4f}"
    ))


@app.command()
def tides(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
):
    """Show tide heights around now for the saved location."""
    from tidetimes.chart.curve import format_height, format_time
    from tidetimes.chart.interpolate import current_height

    tide_app = _load_app()
    _load_tides(tide_app)

    samples = tide_app.samples
    now = datetime.now(timezone.utc)
    try:
        height = current_height(samples, now)
    except TideTimesError as e:
        _fail(e)

    if json_output:
        import json
        console.print(json.dumps(
            [s.model_dump(mode="json") for s in samples],
            indent=2,
        ))
        return

    tz = tide_app.timezone
    table = Table(title=f"Tides: {tide_app.selected_location.name}")
    table.add_column("Date")
    table.add_column("Time")
    table.add_column("Height", justify="right")
    table.add_column("Kind")
    for s in samples:
        color = "blue" if s.kind.value == "high" else "red"
        table.add_row(
            s.timestamp.astimezone(tz).strftime("%a %d %b"),
            format_time(s.timestamp, tz),
            format_height(s.height),
            f"[{color}]{s.kind.value}[/{color}]",
        )
    console.print(table)

    if height is not None:
        console.print(f"\n[bold]Now ({format_time(now, tz)}):[/bold] {format_height(height)}")
    else:
        console.print("\n[yellow]Current time is outside the predicted range.[/yellow]")


@app.command()
def chart(
    output: Annotated[Optional[Path], typer.Option(help="Output image file")] = None,
    width: Annotated[Optional[float], typer.Option(help="Chart width (px)")] = None,
    height: Annotated[Optional[float], typer.Option(help="Chart height (px)")] = None,
):
    """Plot the tide curve for the saved location."""
    from tidetimes.chart.mapping import Viewport
    from tidetimes.viz.plots import plot_tide_chart

    tide_app = _load_app()
    _load_tides(tide_app)

    cfg = tide_app.settings.chart
    viewport = Viewport(
        width=width or cfg.width,
        height=height or cfg.height,
        origin="bottom",
    )
    try:
        tide_chart = tide_app.chart(viewport)
    except TideTimesError as e:
        _fail(e)

    import matplotlib.pyplot as plt
    fig = plot_tide_chart(
        tide_chart,
        title=tide_app.selected_location.name,
        marker_radius=cfg.marker_radius,
        save_path=output,
    )

    if output is None:
        plt.show()
    else:
        console.print(f"[green]Chart saved to {output}[/green]")
    plt.close(fig)


@app.command()
def version():
    """Show version information."""
    from tidetimes import __version__
    console.print(f"tidetimes v{__version__}")


if __name__ == "__main__":
    app()
