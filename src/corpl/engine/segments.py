# topmark:header:start
#
#   project      : Corpl
#   file         : segments.py
#   file_relpath : src/corpl/engine/segments.py
#   license      : MIT
#   copyright    : (c) 2025 The Corpl authors
#
# topmark:header:end

"""Segment state and the per-line rewrite rules.

A segment is the scope opened by the last directive. Exactly one is active at a
time and every directive replaces it:

* `NoSegment`: outside any region, lines pass through.
* `SectionSegment`: each line selects itself through a trailing
  ``<open> <identifier>`` comment. Activating a line swaps its leading
  ``<open> `` for the section text; deactivating swaps the section text back.
* `OptionSegment`: the whole region follows one option expression; lines are
  commented out or uncommented as a block.

A line is *inactive* when, after leading whitespace, it starts with the
comment marker followed by a space.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from corpl.config.logging import get_logger
from corpl.core.diagnostics import DiagnosticLog
from corpl.engine.directives import End, Option, Section
from corpl.engine.lines import first_non_whitespace, last_non_whitespace, trim
from corpl.engine.options import Activation, evaluate
from corpl.engine.splitter import last_after, marker_then_space

if TYPE_CHECKING:
    from corpl.config.logging import CorplLogger
    from corpl.engine.comment import CommentStyle
    from corpl.engine.directives import Directive
    from corpl.engine.options import FeatureSets

logger: CorplLogger = get_logger(__name__)


@dataclass(frozen=True)
class NoSegment:
    """Outside any directive region."""


@dataclass(frozen=True)
class SectionSegment:
    """Inside a ``section`` region; ``text`` replaces the marker on active lines."""

    text: bytes


@dataclass(frozen=True)
class OptionSegment:
    """Inside an ``option`` region with a fixed activation."""

    activation: Activation


Segment = Union[NoSegment, SectionSegment, OptionSegment]


def enter(
    directive: Directive,
    style: CommentStyle,
    features: FeatureSets,
    diagnostics: DiagnosticLog,
    *,
    line_no: int | None = None,
) -> Segment:
    """Return the segment opened by ``directive``."""
    match directive:
        case End():
            return NoSegment()
        case Section(text=text):
            if not text:
                diagnostics.add_warning(
                    "Found a section with no replacement! If no lines have anything in "
                    "common, append the distinguishing text to each line manually.",
                    line=line_no,
                )
            if style.close is not None:
                diagnostics.add_warning(
                    "End comment is not compatible with sections for now; section ignored.",
                    line=line_no,
                )
                return NoSegment()
            return SectionSegment(text)
        case Option(expression=expression):
            return OptionSegment(evaluate(expression, features))
    raise TypeError(f"unknown directive: {directive!r}")


def is_inactive(line: bytes, style: CommentStyle) -> bool:
    """Return True if the line is commented out (marker + space after indentation)."""
    return line[first_non_whitespace(line) :].startswith(style.prefix)


def _section_identifier(line: bytes, style: CommentStyle) -> bytes | None:
    ident = last_after(line, marker_then_space(style.open))
    if ident is None:
        return None
    return ident[: last_non_whitespace(ident)]


def _rewrite_section(
    line: bytes,
    text: bytes,
    style: CommentStyle,
    features: FeatureSets,
    diagnostics: DiagnosticLog,
    line_no: int | None,
) -> bytes:
    ident = _section_identifier(line, style)
    activate = False if ident is None else features.status(ident)
    if activate is None:
        return line

    start = first_non_whitespace(line)
    currently_active = not is_inactive(line, style)
    if currently_active == activate:
        return line

    if activate:
        return line[:start] + text + line[start + len(style.prefix) :]

    if line[start:].startswith(text):
        return line[:start] + style.prefix + line[start + len(text) :]

    diagnostics.add_warning(
        "Common string of section not present! Ignoring line.",
        line=line_no,
    )
    return line


def _rewrite_option(line: bytes, activation: Activation, style: CommentStyle) -> bytes:
    start = first_non_whitespace(line)
    inactive = is_inactive(line, style)

    if activation is Activation.IGNORE:
        return line
    if activation is Activation.YES and not inactive:
        return line
    if activation is Activation.NO and inactive:
        return line

    if activation is Activation.NO:
        suffix = b" " + style.close if style.close is not None else b""
        return line[:start] + style.prefix + line[start:] + suffix

    body_start = start + len(style.prefix)
    if style.close is not None:
        end = last_non_whitespace(line)
        closing = b" " + style.close
        if end - len(closing) >= body_start and line[:end].endswith(closing):
            return line[:start] + line[body_start : end - len(closing)] + line[end:]
    return line[:start] + line[body_start:]


def rewrite_line(
    line: bytes,
    segment: Segment,
    style: CommentStyle,
    features: FeatureSets,
    diagnostics: DiagnosticLog,
    *,
    line_no: int | None = None,
) -> bytes:
    """Return ``line`` rewritten for the current segment.

    Args:
        line (bytes): A data line, without terminator.
        segment (Segment): The active segment.
        style (CommentStyle): The resolved comment style.
        features (FeatureSets): Identifier sets.
        diagnostics (DiagnosticLog): Collector for non-fatal warnings.
        line_no (int | None): 1-based line number for diagnostics.

    Returns:
        bytes: The (possibly unchanged) line.
    """
    if not trim(line):
        return line
    match segment:
        case SectionSegment(text=text) if style.close is None:
            return _rewrite_section(line, text, style, features, diagnostics, line_no)
        case OptionSegment(activation=activation):
            return _rewrite_option(line, activation, style)
    return line
