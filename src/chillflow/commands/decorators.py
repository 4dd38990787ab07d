"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from chillflow.models.focus.exceptions import (
    ChillFlowError,
    InvalidPhaseOperationError,
    StorageError,
)
from chillflow.utils import exit_codes
from chillflow.utils.logger import get_logger
from chillflow.utils.ui.formatters import format_error


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = exit_codes.ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def _exit_code_for(error: ChillFlowError) -> int:
    if isinstance(error, InvalidPhaseOperationError):
        return exit_codes.ERROR_INVALID_STATE
    if isinstance(error, StorageError):
        return exit_codes.ERROR_STORAGE
    return exit_codes.ERROR_GENERAL


def command_wrapper(func: Callable) -> Callable:
    """Log a command's lifetime and turn known errors into exit codes."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except AppError as e:
            elapsed = time.monotonic() - start
            logger.error("command failed: %s (%.3fs) - %s", cmd, elapsed, str(e))
            format_error(str(e))
            raise typer.Exit(code=e.exit_code) from e

        except ChillFlowError as e:
            elapsed = time.monotonic() - start
            logger.error("command failed: %s (%.3fs) - %s", cmd, elapsed, str(e))
            format_error(str(e))
            raise typer.Exit(code=_exit_code_for(e)) from e

        except typer.Exit:
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=exit_codes.ERROR_GENERAL) from e

    return wrapper
