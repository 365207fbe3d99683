"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from ..adapters.timezone_oracle import PendulumTimezoneOracle, zone_label
from ..config import AppConfig
from ..domain.exceptions import MissingInputError, OverlapFinderError
from ..domain.models import TimeRange, WorkWindow
from ..services.overlap_finder import OverlapFinderService, OverlapResult, WindowInput

app = typer.Typer(
    name="overlapfinder",
    help="Find shared working hours of two people in different timezones",
    add_completion=False
)

console = Console()

logger = logging.getLogger(__name__)

TIME_FORMAT = "HH:mm"


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _format_range(oracle: PendulumTimezoneOracle, time_range: TimeRange, zone: str) -> str:
    """Render a range on the wall clock of ``zone``."""
    start = oracle.to_local(time_range.start, zone).format(TIME_FORMAT)
    end = oracle.to_local(time_range.end, zone).format(TIME_FORMAT)
    return f"{start} - {end}"


def _window_column(window: WorkWindow) -> str:
    return f"{zone_label(window.timezone)} ({window.timezone})"


def _render_result(result: OverlapResult, oracle: PendulumTimezoneOracle) -> None:
    """Print the overlap and every slot table."""
    if not result.has_overlap:
        console.print("[yellow]No overlapping time available.[/yellow]")
        return

    first, second = result.first, result.second
    console.print(Panel.fit(
        f"[bold]{_window_column(first)}:[/bold] {_format_range(oracle, result.time_range, first.timezone)}\n"
        f"[bold]{_window_column(second)}:[/bold] {_format_range(oracle, result.time_range, second.timezone)}\n"
        f"[dim]{result.time_range.duration_minutes()} minutes of shared time[/dim]",
        title="Overlap"
    ))

    if not result.has_slots:
        console.print("[yellow]Overlap is too short for a 30-min slot.[/yellow]")
        return

    for duration, slots in result.slots.items():
        if not slots:
            continue

        table = Table(
            title=duration.title,
            show_header=True,
            header_style="bold cyan"
        )
        table.add_column(_window_column(first), style="bold yellow")
        table.add_column(_window_column(second), style="bold green")

        for slot in slots:
            table.add_row(
                _format_range(oracle, slot.time_range, first.timezone),
                _format_range(oracle, slot.time_range, second.timezone),
            )

        console.print()
        console.print(table)

    console.print()


@app.command()
def find(
    tz1: Annotated[Optional[str], typer.Option("--tz1", help="Timezone of person 1 (e.g. Europe/Stockholm)")] = None,
    start1: Annotated[Optional[str], typer.Option("--start1", help="Start of person 1's day (HH:MM)")] = None,
    end1: Annotated[Optional[str], typer.Option("--end1", help="End of person 1's day (HH:MM)")] = None,
    tz2: Annotated[Optional[str], typer.Option("--tz2", help="Timezone of person 2 (e.g. America/Chicago)")] = None,
    start2: Annotated[Optional[str], typer.Option("--start2", help="Start of person 2's day (HH:MM)")] = None,
    end2: Annotated[Optional[str], typer.Option("--end2", help="End of person 2's day (HH:MM)")] = None,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
):
    """
    Show today's overlap of two working windows and bookable slots.

    Examples:

        # Defaults from config (Stockholm and Chicago, 09:00-17:00)
        overlapfinder find

        # Override single fields
        overlapfinder find --tz2 Asia/Tokyo --start2 08:00 --end2 18:00

        # Night shift crossing midnight
        overlapfinder find --start1 22:00 --end1 02:00
    """
    try:
        config = AppConfig.load(config_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    _configure_logging("DEBUG" if verbose else config.log_level)

    person1, person2 = config.people
    first = WindowInput(
        timezone=tz1 if tz1 is not None else person1.timezone,
        start=start1 if start1 is not None else person1.start,
        end=end1 if end1 is not None else person1.end,
    )
    second = WindowInput(
        timezone=tz2 if tz2 is not None else person2.timezone,
        start=start2 if start2 is not None else person2.start,
        end=end2 if end2 is not None else person2.end,
    )

    oracle = PendulumTimezoneOracle()
    service = OverlapFinderService(oracle=oracle, durations=config.slot_durations)

    try:
        result = service.evaluate(first, second)
    except MissingInputError as e:
        console.print("[yellow]Please fill in all fields.[/yellow]")
        console.print(f"[dim]{e}[/dim]")
        raise typer.Exit(1)
    except OverlapFinderError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    logger.debug("Evaluated at %s", oracle.now().to_iso8601_string())

    console.print()
    _render_result(result, oracle)


@app.command()
def timezones(
    search: Annotated[Optional[str], typer.Option("--search", "-s", help="Only show zones containing this text")] = None,
):
    """
    List all selectable timezones.
    """
    names = PendulumTimezoneOracle.available_timezones()
    if search:
        needle = search.lower().replace(" ", "_")
        names = [name for name in names if needle in name.lower()]

    if not names:
        console.print("[yellow]No matching timezones found.[/yellow]")
        return

    table = Table(
        title="Timezones",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Identifier", style="bold yellow")
    table.add_column("Label", style="dim")

    for name in names:
        table.add_row(name, zone_label(name))

    console.print()
    console.print(table)
    console.print()


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]overlapfinder[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
