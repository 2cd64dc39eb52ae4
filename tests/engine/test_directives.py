# topmark:header:start
#
#   project      : Corpl
#   file         : test_directives.py
#   file_relpath : tests/engine/test_directives.py
#   license      : MIT
#   copyright    : (c) 2025 The Corpl authors
#
# topmark:header:end

"""Tests for directive recognition."""

from __future__ import annotations

from corpl.engine.comment import CommentStyle
from corpl.engine.directives import Directive, End, Option, Section, parse_directive
from tests.conftest import parametrize

HASH = CommentStyle(b"#")
BLOCK = CommentStyle(b"/*", b"*/")


@parametrize(
    "line, expected",
    [
        (b"# CORPL end", End()),
        (b"   # CORPL end  \t", End()),
        (b"# CORPL section port=", Section(b"port=")),
        (b"# CORPL section", Section(b"")),
        (b"  # CORPL section listen 80  ", Section(b"listen 80")),
        (b"# CORPL option a && !b", Option(b"a && !b")),
        (b"# CORPL option foo */", Option(b"foo */")),
    ],
)
def test_directives_with_line_comments(line: bytes, expected: Directive) -> None:
    assert parse_directive(line, HASH) == expected


@parametrize(
    "line",
    [
        b"port=80",
        b"# port=80",
        b"#CORPL end",
        b"# corpl end",
        b"# CORPL endx",
        b"# CORPL sections x",
        b"# CORPL bogus",
        b"# CORPL option",
        b"// CORPL end",
        b"",
    ],
)
def test_non_directives(line: bytes) -> None:
    """Ordinary lines and unknown verbs are not directives."""
    assert parse_directive(line, HASH) is None


@parametrize(
    "line, expected",
    [
        (b"/* CORPL option foo */", Option(b"foo")),
        (b"/* CORPL option foo && bar", Option(b"foo && bar")),
        (b"/* CORPL end */", End()),
        (b"/* CORPL end", End()),
    ],
)
def test_directives_with_block_comments(line: bytes, expected: Directive) -> None:
    """The closing marker is optional and stripped when present."""
    assert parse_directive(line, BLOCK) == expected
