# topmark:header:start
#
#   project      : Corpl
#   file         : errors.py
#   file_relpath : src/corpl/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The Corpl authors
#
# topmark:header:end

"""Errors raised by the toggling engine.

Every failure is fatal for the file being processed, never for the process:
the engine raises, and only the CLI decides how to exit. Messages mirror the
wording users see on the command line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class CorplError(Exception):
    """Base class for all engine errors.

    Attributes:
        message (str): Human-readable message.
        path (Path | None): File being processed, if known.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        return self.message


class CommentUnresolvedError(CorplError):
    """The comment marker could not be determined (empty file or marker too long)."""


class CorplIOError(CorplError):
    """An I/O step failed for a file.

    Attributes:
        cause (OSError | None): The underlying OS error.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        cause: OSError | None = None,
    ) -> None:
        super().__init__(message, path=path)
        self.cause = cause


class FileOpenError(CorplIOError):
    """Opening the config file for reading and writing failed."""


class FileReadError(CorplIOError):
    """Reading the config file failed."""


class FileTruncateError(CorplIOError):
    """Setting the new file length failed."""


class FileSeekError(CorplIOError):
    """Seeking back to the start of the file failed."""


class FileWriteError(CorplIOError):
    """Writing the rewritten content failed."""


class ConfigError(CorplError):
    """A configuration file is unreadable or is not valid TOML."""
