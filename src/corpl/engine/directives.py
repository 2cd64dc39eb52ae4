# topmark:header:start
#
#   project      : Corpl
#   file         : directives.py
#   file_relpath : src/corpl/engine/directives.py
#   license      : MIT
#   copyright    : (c) 2025 The Corpl authors
#
# topmark:header:end

"""Recognize directive comment lines.

A directive is a comment line of the form::

    <open> CORPL section <text>
    <open> CORPL option <expr> [<close>]
    <open> CORPL end [<close>]

Surrounding whitespace is ignored. Lines that start like a directive but carry
an unknown verb are not directives.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Union

from corpl.engine.lines import trim

if TYPE_CHECKING:
    from corpl.engine.comment import CommentStyle

KEYWORD: Final[bytes] = b" CORPL "

_END: Final[bytes] = b"end"
_SECTION: Final[bytes] = b"section"
_OPTION: Final[bytes] = b"option "


@dataclass(frozen=True)
class End:
    """Leave the current segment."""


@dataclass(frozen=True)
class Section:
    """Enter a section; ``text`` is what an active line starts with instead of the marker."""

    text: bytes


@dataclass(frozen=True)
class Option:
    """Enter an option region governed by ``expression``."""

    expression: bytes


Directive = Union[End, Section, Option]


def parse_directive(line: bytes, style: CommentStyle) -> Directive | None:
    """Parse ``line`` as a directive, or return None for ordinary lines.

    Args:
        line (bytes): One line, without terminator.
        style (CommentStyle): The resolved comment style.

    Returns:
        Directive | None: The directive, or None if the line is not one.
    """
    trimmed = trim(line)
    lead = style.open + KEYWORD
    if len(trimmed) < len(lead) or not trimmed.startswith(lead):
        return None
    rest = trimmed[len(lead) :]

    if rest == _END or (style.close is not None and rest == _END + b" " + style.close):
        return End()

    if rest == _SECTION:
        return Section(b"")
    if rest.startswith(_SECTION + b" "):
        return Section(rest[len(_SECTION) + 1 :])

    if rest.startswith(_OPTION):
        expression = rest[len(_OPTION) :]
        if style.close is not None and expression.endswith(b" " + style.close):
            expression = expression[: -(len(style.close) + 1)]
        return Option(expression)

    return None
