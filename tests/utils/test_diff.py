# topmark:header:start
#
#   project      : Corpl
#   file         : test_diff.py
#   file_relpath : tests/utils/test_diff.py
#   license      : MIT
#   copyright    : (c) 2025 The Corpl authors
#
# topmark:header:end

"""Tests for diff rendering."""

from __future__ import annotations

from corpl.utils.diff import render_patch, unified_diff


def test_unified_diff_lines() -> None:
    patch = unified_diff(b"# a\nx\n", b"# a\n# x\n", "app.conf")
    assert patch[0].startswith("--- app.conf (original)")
    assert "-x\n" in patch
    assert "+# x\n" in patch


def test_unified_diff_equal_content() -> None:
    assert unified_diff(b"same\n", b"same\n", "f") == []


def test_unified_diff_tolerates_undecodable_bytes() -> None:
    patch = unified_diff(b"\xff\n", b"x\n", "f")
    assert "+x\n" in patch


def test_render_patch() -> None:
    rendered = render_patch(["-old\r\n", "+new\n", "@@ -1 +1 @@\n"])
    lines = rendered.splitlines()
    assert len(lines) == 3
    assert "-old" in lines[0]
    assert "\\r" not in lines[0]
    assert "+new" in lines[1]


def test_render_patch_from_string() -> None:
    rendered = render_patch("-a\n+b\n")
    assert "-a" in rendered
    assert rendered.endswith("\n")
