# topmark:header:start
#
#   project      : Corpl
#   file         : test_splitter.py
#   file_relpath : tests/engine/test_splitter.py
#   license      : MIT
#   copyright    : (c) 2025 The Corpl authors
#
# topmark:header:end

"""Tests for the generic pattern splitter."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from hypothesis import given
from hypothesis import strategies as st

from corpl.engine.splitter import last_after, literal, marker_then_space, split
from tests.conftest import parametrize

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import Any


def test_split_on_and_separator() -> None:
    """Splitting an option expression yields the conjuncts without separators."""
    assert list(split(b"a && b && !c", b" && ")) == [b"a", b"b", b"!c"]


@parametrize(
    "data, separator, expected",
    [
        (b"abc", b",", [b"abc"]),
        (b"", b",", [b""]),
        (b"a,", b",", [b"a", b""]),
        (b",a", b",", [b"", b"a"]),
        (b"a,,b", b",", [b"a", b"", b"b"]),
        (b"aaa", b"aa", [b"", b"a"]),
    ],
)
def test_split_edges(data: bytes, separator: bytes, expected: list[bytes]) -> None:
    """Empty pieces are kept and matches never overlap."""
    assert list(split(data, separator)) == expected


def test_split_other_sequence_types() -> None:
    """Any sliceable sequence can be split; pieces keep the input type."""
    assert list(split("k=v", literal("="))) == ["k", "v"]
    assert list(split([1, 0, 2, 0, 3], [0])) == [[1], [2], [3]]
    pieces = list(split(bytearray(b"x;y"), b";"))
    assert pieces == [bytearray(b"x"), bytearray(b"y")]
    assert all(isinstance(piece, bytearray) for piece in pieces)


def test_split_bytes_yields_bytes() -> None:
    """Bytes are scanned through a view but pieces are real bytes."""
    pieces = list(split(b"a b", b" "))
    assert all(isinstance(piece, bytes) for piece in pieces)


def test_split_custom_matcher_consumes_runs() -> None:
    """A closure matcher can consume a variable number of elements."""

    def spaces(suffix: Sequence[Any]) -> int | None:
        count = 0
        while count < len(suffix) and suffix[count] == ord(" "):
            count += 1
        return count or None

    assert list(split(b"a  b c", spaces)) == [b"a", b"b", b"c"]


def test_split_rejects_empty_match() -> None:
    """A matcher that consumes nothing is a programming error."""
    with pytest.raises(ValueError, match="invalid match length"):
        list(split(b"abc", lambda _suffix: 0))


def test_literal_rejects_empty_separator() -> None:
    """An empty separator would match everywhere."""
    with pytest.raises(ValueError):
        literal(b"")


def test_marker_then_space() -> None:
    """The marker only matches when followed by a space."""
    assert list(split(b"x // y //z", marker_then_space(b"//"))) == [b"x ", b"y //z"]


@parametrize(
    "line, expected",
    [
        (b"port = 1 # http", b"http"),
        (b"a # b # c", b"c"),
        (b"no marker", None),
        (b"trailing # ", b""),
    ],
)
def test_last_after(line: bytes, expected: bytes | None) -> None:
    """Only the slice after the last match is returned."""
    assert last_after(line, marker_then_space(b"#")) == expected


@given(
    data=st.binary(max_size=40).map(lambda raw: bytes(b"a& "[byte % 3] for byte in raw)),
    separator=st.sampled_from([b" && ", b"&", b"&&", b" "]),
)
def test_split_reconstructs_input(data: bytes, separator: bytes) -> None:
    """Joining the pieces with the separator restores the input exactly."""
    pieces = list(split(data, separator))
    assert separator.join(pieces) == data
    assert all(separator not in piece for piece in pieces)
