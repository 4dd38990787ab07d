"""Configuration management commands."""

import typer

from chillflow.services.config_service import get_config_service
from chillflow.utils import exit_codes
from chillflow.utils.ui.console import get_console
from chillflow.utils.ui.formatters import format_success

from .decorators import AppError, command_wrapper

console = get_console()
app = typer.Typer(help="Configuration management")


@app.command("show")
@command_wrapper
def show_config():
    """Show the full configuration."""
    console.print_json(get_config_service().config.model_dump_json())


@app.command("get")
@command_wrapper
def get_config(key: str = typer.Argument(..., help="Dotted key, e.g. cycle.focus_duration")):
    """Get a configuration value."""
    try:
        value = get_config_service().get(key)
    except KeyError as e:
        raise AppError(f"Unknown config key: {key}", exit_codes.ERROR_INVALID_ARGS) from e
    console.print(f"{key} = {value}")


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Dotted key, e.g. cycle.focus_duration"),
    value: str = typer.Argument(..., help="New value"),
):
    """Set a configuration value."""
    try:
        get_config_service().set(key, value)
    except KeyError as e:
        raise AppError(f"Unknown config key: {key}", exit_codes.ERROR_INVALID_ARGS) from e
    except ValueError as e:
        raise AppError(str(e), exit_codes.ERROR_INVALID_ARGS) from e
    format_success(f"Set {key} = {value}")


@app.command("reset")
@command_wrapper
def reset_config(
    key: str = typer.Argument(None, help="Key to reset (all keys if omitted)"),
):
    """Reset configuration to defaults."""
    try:
        get_config_service().reset(key)
    except KeyError as e:
        raise AppError(f"Unknown config key: {key}", exit_codes.ERROR_INVALID_ARGS) from e
    format_success(f"Reset {key or 'configuration'} to defaults")
