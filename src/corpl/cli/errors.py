# topmark:header:start
#
#   project      : Corpl
#   file         : errors.py
#   file_relpath : src/corpl/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The Corpl authors
#
# topmark:header:end

"""Exceptions for the Corpl CLI.

Engine errors (`corpl.core.errors`) are translated here into Click exceptions
that carry a sysexits-aligned exit code. Raising one of them is the only way the
CLI ends with a failure status.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from corpl.cli.exit_codes import ExitCode
from corpl.core.errors import (
    CommentUnresolvedError,
    ConfigError,
    CorplError,
    CorplIOError,
    FileOpenError,
)


class CorplCliError(click.ClickException):
    """Base class for all Corpl CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colour is applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(self.format_message())
                return
        super().show(file)


class CorplUsageError(CorplCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class CorplConfigError(CorplCliError):
    """Error for unreadable or malformed config files."""

    exit_code = ExitCode.CONFIG_ERROR


class CorplDataError(CorplCliError):
    """Error when a file's comment marker cannot be determined."""

    exit_code = ExitCode.DATA_ERROR


class CorplFileNotFoundError(CorplCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class CorplPermissionDeniedError(CorplCliError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class CorplIOCliError(CorplCliError):
    """Error for I/O failures while reading or rewriting files."""

    exit_code = ExitCode.IO_ERROR


def to_cli_error(error: CorplError, message: str | None = None) -> CorplCliError:
    """Translate an engine error into the matching CLI error.

    Args:
        error (CorplError): The engine error.
        message (str | None): Message to show instead of the error's own.

    Returns:
        CorplCliError: The CLI exception carrying the right exit code.
    """
    text = message if message is not None else error.message
    if isinstance(error, ConfigError):
        return CorplConfigError(text)
    if isinstance(error, CommentUnresolvedError):
        return CorplDataError(text)
    if isinstance(error, FileOpenError):
        if isinstance(error.cause, FileNotFoundError):
            return CorplFileNotFoundError(text)
        if isinstance(error.cause, PermissionError):
            return CorplPermissionDeniedError(text)
    if isinstance(error, CorplIOError):
        return CorplIOCliError(text)
    return CorplCliError(text)
