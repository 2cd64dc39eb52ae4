# topmark:header:start
#
#   project      : Corpl
#   file         : comment.py
#   file_relpath : src/corpl/engine/comment.py
#   license      : MIT
#   copyright    : (c) 2025 The Corpl authors
#
# topmark:header:end

"""Comment style of the file being toggled.

Resolution order:
    1. A conventional marker (``#``, ``//``, ``;``) at the very start of the file.
       Banner runs (``##########``, ``;;``) count as the marker. A first token
       that repeats the marker's character and then carries other bytes
       (``;;config;;``) falls through to step 3.
    2. The caller-supplied opening marker.
    3. The first whitespace-delimited token of the first line, accepted with a
       warning unless it exceeds the configured maximum length.

The closing marker (block comments such as ``/* */``) can only come from the
caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from corpl.config.logging import get_logger
from corpl.core.diagnostics import DiagnosticLog
from corpl.core.errors import CommentUnresolvedError
from corpl.engine.lines import is_whitespace, iter_lines

if TYPE_CHECKING:
    from pathlib import Path

    from corpl.config.logging import CorplLogger

logger: CorplLogger = get_logger(__name__)

CONVENTIONAL_MARKERS: Final[tuple[bytes, ...]] = (b"#", b"//", b";")


@dataclass(frozen=True)
class CommentStyle:
    """Opening marker and optional closing marker of a comment."""

    open: bytes
    close: bytes | None = None

    def __post_init__(self) -> None:
        if not self.open:
            raise ValueError("comment marker must not be empty")
        if self.close == b"":
            object.__setattr__(self, "close", None)

    @property
    def prefix(self) -> bytes:
        """Marker plus the mandatory space that marks a line as commented out."""
        return self.open + b" "

    @classmethod
    def from_strings(cls, open_: str | None, close: str | None = None) -> CommentStyle | None:
        """Build a style from CLI/config strings, or None without an opening marker."""
        if not open_:
            return None
        return cls(open_.encode("utf-8"), close.encode("utf-8") if close else None)


def conventional_marker(data: bytes) -> bytes | None:
    """Return the conventional marker the data starts with, if any.

    A first token that repeats the marker's last character and then carries
    other bytes (``;;config;;``, ``##x``) is not conventional. Pure runs such as
    ``##########`` or ``///`` still resolve to the marker.
    """
    token = _first_token(data)
    for marker in CONVENTIONAL_MARKERS:
        if not token.startswith(marker):
            continue
        repeated = token[len(marker) : len(marker) + 1] == marker[-1:]
        if repeated and token.strip(marker) != b"":
            return None
        return marker
    return None


def _first_token(line: bytes) -> bytes:
    for pos, byte in enumerate(line):
        if is_whitespace(byte):
            return line[:pos]
    return line


def resolve_comment_style(
    data: bytes,
    override: CommentStyle | None = None,
    *,
    max_len: int | None = None,
    path: Path | None = None,
) -> tuple[CommentStyle, DiagnosticLog]:
    """Determine the comment style for ``data``.

    Args:
        data (bytes): Whole file content.
        override (CommentStyle | None): Caller-supplied markers.
        max_len (int | None): Longest marker accepted from the first line (None: unbounded).
        path (Path | None): File path, used in messages only.

    Returns:
        tuple[CommentStyle, DiagnosticLog]: The resolved style and any warnings.

    Raises:
        CommentUnresolvedError: If the file is empty, or the first-line token is
            empty or longer than ``max_len``.
    """
    diagnostics = DiagnosticLog()
    close = override.close if override else None

    marker = conventional_marker(data)
    if marker is not None:
        logger.debug("Conventional comment marker %r", marker)
        return CommentStyle(marker, close), diagnostics

    if override is not None:
        logger.debug("Using supplied comment marker %r", override.open)
        return override, diagnostics

    first_line = next(iter_lines(data), None)
    if first_line is None:
        raise CommentUnresolvedError(
            "File too short; could not determine comment character.", path=path
        )

    token = _first_token(first_line)
    if not token or (max_len is not None and len(token) > max_len):
        where = f" in {path}" if path is not None else ""
        raise CommentUnresolvedError(
            f"Failed to get comment string{where}; could not determine comment character. "
            "Please enter it, and only it, as the first line or supply the `-c` option "
            "with the comment string.",
            path=path,
        )

    diagnostics.add_warning(
        f"Continuing with uncommon comment: '{token.decode('utf-8', errors='replace')}'",
        line=1,
    )
    return CommentStyle(token, close), diagnostics
