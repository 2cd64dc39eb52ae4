# topmark:header:start
#
#   project      : Corpl
#   file         : lines.py
#   file_relpath : src/corpl/engine/lines.py
#   license      : MIT
#   copyright    : (c) 2025 The Corpl authors
#
# topmark:header:end

r"""Line scanning and whitespace helpers over raw bytes.

The engine never decodes file content: offsets are byte offsets and only ASCII
whitespace (space and ``\t\n\v\f\r``) is recognized. Any ASCII-compatible
encoding round-trips untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterator

LF: Final[bytes] = b"\n"
CRLF: Final[bytes] = b"\r\n"

_CR: Final[int] = 13
_LF: Final[int] = 10
_WHITESPACE: Final[frozenset[int]] = frozenset({32, 9, 10, 11, 12, 13})


def is_whitespace(byte: int) -> bool:
    """Return True for ASCII space and the control whitespace bytes 9..13."""
    return byte in _WHITESPACE


def detect_line_ending(data: bytes) -> bytes:
    r"""Return the terminator used for output, decided by the first one found.

    A ``\r`` seen first means CRLF, a ``\n`` means LF. Defaults to LF when the
    data holds no terminator at all.
    """
    for byte in data:
        if byte == _CR:
            return CRLF
        if byte == _LF:
            return LF
    return LF


def iter_lines(data: bytes) -> Iterator[bytes]:
    r"""Yield the lines of ``data`` without their terminators.

    ``\r\n``, ``\n`` and a lone ``\r`` all end a line. A terminator at the very
    end of the data does not open an extra empty line.
    """
    pos = 0
    size = len(data)
    while pos < size:
        end = pos
        while end < size and data[end] not in (_CR, _LF):
            end += 1
        yield data[pos:end]
        if end < size and data[end] == _CR and end + 1 < size and data[end + 1] == _LF:
            pos = end + 2
        else:
            pos = end + 1


def first_non_whitespace(line: bytes) -> int:
    """Return the offset of the first non-whitespace byte (0 for a blank line)."""
    for pos, byte in enumerate(line):
        if byte not in _WHITESPACE:
            return pos
    return 0


def last_non_whitespace(line: bytes) -> int:
    """Return the offset just past the last non-whitespace byte (0 for a blank line)."""
    for pos in range(len(line) - 1, -1, -1):
        if line[pos] not in _WHITESPACE:
            return pos + 1
    return 0


def trim(line: bytes) -> bytes:
    """Strip ASCII whitespace from both ends."""
    end = last_non_whitespace(line)
    if end == 0:
        return b""
    return line[first_non_whitespace(line) : end]
