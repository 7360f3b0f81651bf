"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Annotated, List, Optional

import pendulum
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from ..config import AppConfig, get_default_config_path
from ..domain.exceptions import TeamslotError
from ..domain.models import InPeriodPreference, PeriodPreference
from ..domain.zones import zone_for_city
from ..services.meeting_scheduler import MeetingSchedulerService

app = typer.Typer(
    name="teamslot",
    help="Propose meeting times for teams spread across time zones",
    add_completion=False
)

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - [%(name)s] - %(message)s",
    )


def _load_config(config_file: Optional[Path]) -> AppConfig:
    config_path = config_file or get_default_config_path()
    return AppConfig.load_from_yaml(config_path)


def _parse_date(value: Optional[str]):
    """Parse a YYYY-MM-DD option; None means today (UTC)."""
    if value is None:
        return pendulum.today("UTC").date()
    try:
        return pendulum.from_format(value, "YYYY-MM-DD").date()
    except ValueError as e:
        console.print(f"[red]Error parsing date {value!r}: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def schedule(
    participants: Annotated[Optional[List[str]], typer.Argument(help="Team member names. Without names the whole team is invited.")] = None,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")] = None,
    duration: Annotated[Optional[int], typer.Option("--duration", "-d", help="Meeting duration in minutes")] = None,
    period: Annotated[Optional[PeriodPreference], typer.Option("--period", "-p", help="Target day of the meeting")] = None,
    in_period: Annotated[Optional[InPeriodPreference], typer.Option("--in-period", "-i", help="Earliest or latest possible start")] = None,
    on_date: Annotated[Optional[str], typer.Option("--date", help="Reference date 'today' (YYYY-MM-DD)")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
):
    """
    Propose a meeting start that fits everybody's workday.

    Examples:

        teamslot schedule

        teamslot schedule alice bob --duration 45 --period tomorrow

        teamslot schedule --in-period latest --date 2024-11-25
    """
    _configure_logging(verbose)

    try:
        config = _load_config(config_file)
        today = _parse_date(on_date)

        preferences = config.defaults.get_preferences(period=period, in_period=in_period)
        duration_minutes = duration if duration is not None else config.defaults.duration_minutes

        service = MeetingSchedulerService(config)
        slot = service.schedule(
            participants=participants or [],
            duration_minutes=duration_minutes,
            preferences=preferences,
            today=today,
        )
    except FileNotFoundError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)
    except (TeamslotError, ValidationError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    console.print()
    if slot is None:
        console.print(
            "[yellow]⚠ No common slot found.[/yellow]\n"
            "Try a shorter meeting or a different period."
        )
        raise typer.Exit(1)

    console.print(f"[bold green]✓ Proposed meeting:[/bold green] {slot.format_display()}\n")

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Name", style="bold yellow")
    table.add_column("City")
    table.add_column("Local start", style="green")

    for developer in slot.participants:
        table.add_row(
            developer.display_name(),
            developer.city or "-",
            slot.format_local(zone_for_city(developer.city)),
        )

    console.print(table)
    console.print()


@app.command()
def list_team(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="Path to config file"
    )
):
    """
    List all configured team members.
    """
    try:
        config = _load_config(config_file)
    except FileNotFoundError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)
    except (TeamslotError, ValidationError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    if not config.team:
        console.print("[yellow]No team members defined in the config file.[/yellow]")
        return

    table = Table(
        title="Configured team",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Name (Alias)", style="bold yellow")
    table.add_column("City")
    table.add_column("Time zone", style="dim")
    table.add_column("Workday start")

    for member in config.team:
        table.add_row(
            member.name,
            member.city or "-",
            member.get_timezone(),
            member.work_day_start
        )

    console.print()
    console.print(table)
    console.print()


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]teamslot[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
