"""Main entry point for ChillFlow."""

import typer

from chillflow import __version__
from chillflow.commands import config, stats, timer
from chillflow.utils.typer_helpers import SuggestingGroup
from chillflow.utils.ui.console import get_console

app = typer.Typer(
    name="chillflow",
    cls=SuggestingGroup,
    help="Focus cycle timer with weekly focus statistics",
    no_args_is_help=True,
)

console = get_console()

app.add_typer(timer.app, name="timer", help="Run the focus cycle timer")
app.add_typer(stats.app, name="stats", help="Focus session statistics")
app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]ChillFlow[/bold] version [cyan]{__version__}[/cyan]")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
