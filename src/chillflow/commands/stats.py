"""Focus statistics commands."""

from datetime import date, datetime

import typer
from rich.prompt import Confirm

from chillflow.models.focus.analytics import slot_hours
from chillflow.services.focus_service import get_focus_service
from chillflow.utils import exit_codes
from chillflow.utils.ui.console import get_console
from chillflow.utils.ui.formatters import (
    build_heatmap_table,
    format_duration,
    format_success,
)

from .decorators import AppError, command_wrapper

console = get_console()
app = typer.Typer(help="Focus session statistics")


@app.command("week")
@command_wrapper
def show_week(
    offset: int = typer.Option(
        0, "--offset", help="Weeks relative to this one (-1 is last week)"
    ),
    output: str = typer.Option(None, "--output", "-o", help="Output format (json)"),
):
    """Show the weekly time-of-day heatmap."""
    stats = get_focus_service().stats.weekly_stats(offset, datetime.now())

    if output == "json":
        console.print_json(data=stats.to_dict())
        return

    console.print()
    console.print(build_heatmap_table(stats))
    console.print(
        f"\n[bold]Total focus this week:[/bold] {format_duration(stats.total_duration)}\n"
    )


@app.command("slot")
@command_wrapper
def show_slot(
    day: str = typer.Option(None, "--date", help="Day to inspect (YYYY-MM-DD)"),
    slot: int = typer.Option(..., "--slot", help="Time slot: 0 (00-08), 1 (08-16), 2 (16-24)"),
):
    """Show focus time for one day and 8-hour slot."""
    try:
        target = date.fromisoformat(day) if day else date.today()
        first_hour, last_hour = slot_hours(slot)
    except ValueError as e:
        raise AppError(str(e), exit_codes.ERROR_INVALID_ARGS) from e

    total = get_focus_service().stats.hourly_stats(target, slot)
    console.print(
        f"{target.isoformat()} {first_hour:02d}:00-{last_hour + 1:02d}:00: "
        f"[bold]{format_duration(total)}[/bold]"
    )


@app.command("clear")
@command_wrapper
def clear_history(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
):
    """Delete every recorded focus session."""
    if not yes and not Confirm.ask("Delete all focus history?", default=False):
        console.print("[dim]Cancelled[/dim]")
        return

    get_focus_service().clear_history()
    format_success("Focus history cleared")
