"""Output formatting utilities."""

from rich.table import Table

from chillflow.models.focus.analytics import DAY_LABELS, WeeklyStats

from .console import get_console

console = get_console()

SLOT_LABELS = ["00-08", "08-16", "16-24"]


def format_clock(seconds: float) -> str:
    """Zero-padded ``MM:SS`` for a countdown."""
    total = int(seconds)
    return f"{total // 60:02d}:{total % 60:02d}"


def format_duration(seconds: float) -> str:
    """Human readable duration such as ``1h 5m`` or ``25m``."""
    total = int(seconds)
    hours = total // 3600
    minutes = (total % 3600) // 60
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def heat_cell(seconds: float, peak: float) -> str:
    """Shade a heatmap cell relative to the busiest cell of the week."""
    if seconds <= 0:
        return "[dim]·[/dim]"
    ratio = seconds / peak if peak > 0 else 0
    if ratio >= 0.75:
        return "[bold green]▓▓▓[/bold green]"
    if ratio >= 0.5:
        return "[green]▓▓[/green]"
    if ratio >= 0.25:
        return "[green]▓[/green]"
    return "[dim green]░[/dim green]"


def build_heatmap_table(stats: WeeklyStats) -> Table:
    """Render a weekly heatmap as a table of days by time slot."""
    table = Table(title=f"Focus {stats.date_range}", show_header=True)
    table.add_column("Slot", style="cyan")
    for label in DAY_LABELS:
        table.add_column(label, justify="center")

    peak = max((cell for day in stats.heatmap for cell in day), default=0.0)
    for slot, slot_label in enumerate(SLOT_LABELS):
        row = [heat_cell(stats.heatmap[day][slot], peak) for day in range(7)]
        table.add_row(slot_label, *row)
    return table


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")
