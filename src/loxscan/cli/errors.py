"""
Unified CLI Error Handling
==========================

Provides consistent error handling and exit codes for the loxscan CLI.
The data-error and software-error codes follow BSD sysexits.h.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click


class ExitCode(IntEnum):
    """Standard exit codes for CLI tools."""
    SUCCESS = 0
    INVALID_ARGS = 2     # Invalid arguments or missing files
    SCAN_ERROR = 65      # EX_DATAERR: the source has lexical errors
    INTERNAL_ERROR = 70  # EX_SOFTWARE: unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Unified exception handler for the CLI.

    Formats the error message appropriately, optionally prints traceback
    in verbose mode, and exits with the correct exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    from loxscan.errors import LoxError

    if isinstance(error, LoxError):
        # Scan errors already carry "[line N] Error:" formatting
        click.echo(str(error), err=True)
        sys.exit(ExitCode.SCAN_ERROR)

    elif isinstance(error, (FileNotFoundError, PermissionError, IsADirectoryError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, UnicodeDecodeError):
        click.echo(f"Error: source is not valid UTF-8 text: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
