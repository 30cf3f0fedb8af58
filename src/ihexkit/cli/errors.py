"""
Unified CLI Error Handling
==========================

Provides consistent error handling and exit codes for the ihex commands.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from ihexkit.errors import IntelHexError, OpenError, WriteError


class ExitCode(IntEnum):
    """Standard exit codes for CLI tools."""
    SUCCESS = 0
    BUILD_ERROR = 1      # Malformed record or unreadable/unwritable document
    INVALID_ARGS = 2     # Invalid arguments or missing files
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(
    error: Exception,
    verbose: bool = False,
    error_type: str | None = None
) -> NoReturn:
    """
    Unified exception handler for the CLI.

    Codec errors are printed with their full cause chain. Unexpected errors
    print a traceback in verbose mode.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors
        error_type: Optional prefix for the error message (e.g., "Conversion")

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    prefix = f"{error_type} error: " if error_type else "Error: "

    if isinstance(error, (OpenError, WriteError)) and not verbose:
        # The OSError text already says what went wrong with the path
        click.echo(f"{prefix}{error}: {error.cause}", err=True)
        sys.exit(ExitCode.BUILD_ERROR)

    elif isinstance(error, IntelHexError):
        click.echo(f"{prefix}{error.format_chain()}", err=True)
        sys.exit(ExitCode.BUILD_ERROR)

    elif isinstance(error, click.BadParameter):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, (FileNotFoundError, PermissionError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
