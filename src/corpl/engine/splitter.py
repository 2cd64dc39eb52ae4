# topmark:header:start
#
#   project      : Corpl
#   file         : splitter.py
#   file_relpath : src/corpl/engine/splitter.py
#   license      : MIT
#   copyright    : (c) 2025 The Corpl authors
#
# topmark:header:end

"""Split sequences at every occurrence of a separator pattern.

A *matcher* looks at the unconsumed suffix of the input and answers either
``None`` (no separator starts here) or the number of elements the separator
occupies. `split` walks the input left to right, greedily consumes
non-overlapping matches, and lazily yields the slices between them. Separators
are never part of a yielded slice, and the slice after the last match is always
yielded (possibly empty), so joining the slices with the matched separators
gives back the input.

Bytes inputs are scanned through a `memoryview` so that handing the suffix to
the matcher does not copy; yielded slices have the type of the input.

Examples:
    >>> list(split(b"a && b && !c", b" && "))
    [b'a', b'b', b'!c']
    >>> list(split("k=v", literal("=")))
    ['k', 'v']
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import Any, TypeVar, Union, cast

S = TypeVar("S", bound="Sequence[Any]")

Matcher = Callable[[Sequence[Any]], Union[int, None]]
"""Given the unconsumed suffix, return ``None`` or the length of the match (>= 1)."""


def literal(separator: Sequence[Any]) -> Matcher:
    """Return a matcher for a fixed sub-sequence.

    Args:
        separator (Sequence[Any]): Non-empty separator (bytes, str, list, tuple...).

    Returns:
        Matcher: A matcher consuming ``len(separator)`` elements on a match.

    Raises:
        ValueError: If ``separator`` is empty.
    """
    size = len(separator)
    if size == 0:
        raise ValueError("separator must not be empty")
    raw: bytes | None = (
        bytes(separator) if isinstance(separator, (bytes, bytearray, memoryview)) else None
    )
    items: list[Any] = list(separator)

    def _match(suffix: Sequence[Any]) -> int | None:
        head = suffix[:size]
        if raw is not None and isinstance(head, memoryview):
            return size if head == raw else None
        return size if list(head) == items else None

    return _match


def marker_then_space(marker: bytes) -> Matcher:
    """Return a matcher for a comment marker followed by one mandatory space."""
    return literal(bytes(marker) + b" ")


def _as_matcher(pattern: Matcher | Sequence[Any]) -> Matcher:
    if callable(pattern):
        return cast("Matcher", pattern)
    return literal(pattern)


def split(data: S, pattern: Matcher | Sequence[Any]) -> Iterator[S]:
    """Lazily split ``data`` at each non-overlapping match of ``pattern``.

    Args:
        data (S): The sequence to split.
        pattern (Matcher | Sequence[Any]): A matcher, or a separator sequence
            (shorthand for `literal`).

    Yields:
        S: The slices between matches, in order; always at least one.

    Raises:
        ValueError: If the matcher reports a match length below 1.
    """
    matcher = _as_matcher(pattern)
    view: Sequence[Any] = memoryview(data) if isinstance(data, (bytes, bytearray)) else data
    size = len(data)
    start = 0
    pos = 0
    while pos < size:
        consumed = matcher(view[pos:])
        if consumed is None:
            pos += 1
            continue
        if consumed < 1:
            raise ValueError(f"matcher returned an invalid match length: {consumed}")
        yield cast("S", data[start:pos])
        pos += consumed
        start = pos
    yield cast("S", data[start:])


def last_after(data: S, pattern: Matcher | Sequence[Any]) -> S | None:
    """Return the slice following the last match of ``pattern``, or None without a match."""
    last: S | None = None
    for count, piece in enumerate(split(data, pattern)):
        if count:
            last = piece
    return last
