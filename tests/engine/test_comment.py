# topmark:header:start
#
#   project      : Corpl
#   file         : test_comment.py
#   file_relpath : tests/engine/test_comment.py
#   license      : MIT
#   copyright    : (c) 2025 The Corpl authors
#
# topmark:header:end

"""Tests for comment style resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from corpl.core.diagnostics import DiagnosticLevel
from corpl.core.errors import CommentUnresolvedError
from corpl.engine.comment import CommentStyle, conventional_marker, resolve_comment_style
from tests.conftest import parametrize


@parametrize(
    "data, marker",
    [
        (b"# hello\n", b"#"),
        (b"#!/bin/sh\n", b"#"),
        (b"// x\n", b"//"),
        (b"; ini\n", b";"),
        (b"#", b"#"),
        (b"##########\n", b"#"),
        (b"## app config\n", b"#"),
        (b";;\n", b";"),
        (b";; section\n", b";"),
        (b"/// doc\n", b"//"),
        (b"////////\r\n", b"//"),
    ],
)
def test_conventional_markers(data: bytes, marker: bytes) -> None:
    """Conventional markers, banner runs included, are accepted silently."""
    style, diagnostics = resolve_comment_style(data, max_len=4)
    assert style == CommentStyle(marker)
    assert len(diagnostics) == 0


@parametrize("data", [b";;config;;\n", b"##x\n", b"///doc\n", b"/* c */\n", b"  # x\n"])
def test_marker_followed_by_other_bytes_is_not_conventional(data: bytes) -> None:
    assert conventional_marker(data) is None


def test_repeated_marker_with_text_uses_first_token_with_warning() -> None:
    """A token such as ``##x`` is taken whole from the first line."""
    style, diagnostics = resolve_comment_style(b"##x header\nx\n", max_len=4)
    assert style.open == b"##x"
    assert diagnostics.has_warning()
    (warning,) = diagnostics
    assert warning.level is DiagnosticLevel.WARNING
    assert warning.line == 1
    assert "uncommon comment: '##x'" in warning.message


def test_long_first_token_is_rejected() -> None:
    """``;;config;;`` is longer than the bound and no marker was supplied."""
    with pytest.raises(CommentUnresolvedError, match="could not determine comment character"):
        resolve_comment_style(b";;config;;\nkey=1\n", max_len=4)


def test_long_first_token_without_bound() -> None:
    style, diagnostics = resolve_comment_style(b";;config;;\nkey=1\n", max_len=None)
    assert style.open == b";;config;;"
    assert diagnostics.has_warning()


def test_error_names_the_path() -> None:
    path = Path("settings.conf")
    with pytest.raises(CommentUnresolvedError) as excinfo:
        resolve_comment_style(b"verylongtoken\n", max_len=4, path=path)
    assert "in settings.conf" in excinfo.value.message
    assert excinfo.value.path == path


def test_empty_file_is_too_short() -> None:
    with pytest.raises(CommentUnresolvedError, match="File too short"):
        resolve_comment_style(b"", max_len=4)


def test_leading_whitespace_gives_no_token() -> None:
    with pytest.raises(CommentUnresolvedError):
        resolve_comment_style(b"  # indented\n", max_len=4)


def test_override_used_for_unconventional_files() -> None:
    """A supplied marker replaces first-line detection and its warning."""
    override = CommentStyle(b"--")
    style, diagnostics = resolve_comment_style(b"-- sql\nSELECT 1;\n", override, max_len=4)
    assert style is override
    assert len(diagnostics) == 0


def test_conventional_marker_wins_over_override() -> None:
    """The closing marker of the override is still carried over."""
    style, _ = resolve_comment_style(b"# x\n", CommentStyle(b"--", b"*/"), max_len=4)
    assert style == CommentStyle(b"#", b"*/")


def test_comment_style_values() -> None:
    assert CommentStyle(b"#").prefix == b"# "
    assert CommentStyle(b"#", b"").close is None
    assert CommentStyle.from_strings(None) is None
    assert CommentStyle.from_strings("") is None
    assert CommentStyle.from_strings("/*", "*/") == CommentStyle(b"/*", b"*/")
    with pytest.raises(ValueError):
        CommentStyle(b"")
