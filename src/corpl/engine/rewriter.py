# topmark:header:start
#
#   project      : Corpl
#   file         : rewriter.py
#   file_relpath : src/corpl/engine/rewriter.py
#   license      : MIT
#   copyright    : (c) 2025 The Corpl authors
#
# topmark:header:end

"""In-place file I/O for the toggling engine.

Files are opened once for reading and writing, read fully, and rewritten
through the same handle: truncate to the new length, seek to the start, write.
This is not atomic; a crash mid-write can leave a partial file.

Each step maps its `OSError` to a dedicated `corpl.core.errors.CorplIOError`
subclass so callers can report which step failed.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

from corpl.config.logging import get_logger
from corpl.core.errors import (
    FileOpenError,
    FileReadError,
    FileSeekError,
    FileTruncateError,
    FileWriteError,
)

if TYPE_CHECKING:
    from pathlib import Path

    from corpl.config.logging import CorplLogger

logger: CorplLogger = get_logger(__name__)


def open_for_update(path: Path) -> IO[bytes]:
    """Open ``path`` for reading and writing in binary mode.

    Raises:
        FileOpenError: If the file is missing or not readable and writable.
    """
    try:
        return path.open("r+b")
    except OSError as exc:
        raise FileOpenError(
            "Failed to open config file. Check input path.", path=path, cause=exc
        ) from exc


def read_all(handle: IO[bytes], path: Path) -> bytes:
    """Read the whole file from the current position.

    Raises:
        FileReadError: On any read failure.
    """
    try:
        return handle.read()
    except OSError as exc:
        raise FileReadError("Failed to read file.", path=path, cause=exc) from exc


def rewrite(handle: IO[bytes], path: Path, content: bytes) -> int:
    """Replace the file's content with ``content`` through ``handle``.

    Args:
        handle (IO[bytes]): Handle opened by `open_for_update`.
        path (Path): File path, for error reporting.
        content (bytes): New content.

    Returns:
        int: Number of bytes written.

    Raises:
        FileTruncateError: If the file length cannot be set.
        FileSeekError: If the handle cannot seek back to the start.
        FileWriteError: If writing or flushing fails.
    """
    try:
        handle.truncate(len(content))
    except OSError as exc:
        raise FileTruncateError("Failed to set file length.", path=path, cause=exc) from exc
    try:
        handle.seek(0)
    except OSError as exc:
        raise FileSeekError("Failed to seek in file.", path=path, cause=exc) from exc
    try:
        handle.write(content)
        handle.flush()
    except OSError as exc:
        raise FileWriteError("Failed to write to file.", path=path, cause=exc) from exc
    logger.debug("Rewrote %d bytes to %s", len(content), path)
    return len(content)


def close(handle: IO[bytes], path: Path) -> None:
    """Close ``handle``, which may flush buffered writes.

    Raises:
        FileWriteError: If closing fails.
    """
    try:
        handle.close()
    except OSError as exc:
        raise FileWriteError("Failed to close file.", path=path, cause=exc) from exc
