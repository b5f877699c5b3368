"""
CLI Error Handling
==================

Maps exceptions to messages and exit codes for the stew3d command.

Copyright (c) 2026 stew3d Contributors
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from stew3d.errors import DisassemblyError, InputError, Stew3dError


class ExitCode(IntEnum):
    """Standard exit codes for the CLI."""
    SUCCESS = 0
    DISASSEMBLY_ERROR = 1  # Strict mode or unresolved-target policy abort
    INVALID_ARGS = 2       # Invalid arguments, unreadable or empty input
    INTERNAL_ERROR = 3     # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception and exit with the matching exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    if isinstance(error, DisassemblyError):
        # Message already carries the "error at 0xNN:" prefix
        click.echo(str(error), err=True)
        sys.exit(ExitCode.DISASSEMBLY_ERROR)

    elif isinstance(error, (InputError, click.BadParameter)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, (FileNotFoundError, PermissionError, IsADirectoryError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, Stew3dError):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.DISASSEMBLY_ERROR)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
