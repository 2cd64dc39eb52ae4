# topmark:header:start
#
#   project      : Corpl
#   file         : diff.py
#   file_relpath : src/corpl/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 The Corpl authors
#
# topmark:header:end

"""Unified diffs between original and toggled file content.

Content is decoded with ``errors="replace"`` for display only; the engine itself
never decodes.
"""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from yachalk import chalk

from corpl.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = get_logger(__name__)


def unified_diff(original: bytes, updated: bytes, path: str) -> list[str]:
    """Return a unified diff between two file images.

    Args:
        original (bytes): Content before toggling.
        updated (bytes): Content after toggling.
        path (str): Path shown in the diff headers.

    Returns:
        list[str]: Diff lines with their line endings preserved (empty when equal).
    """
    before = original.decode("utf-8", errors="replace").splitlines(keepends=True)
    after = updated.decode("utf-8", errors="replace").splitlines(keepends=True)
    patch = list(
        difflib.unified_diff(before, after, fromfile=f"{path} (original)", tofile=f"{path}")
    )
    logger.debug("diff for %s: %d lines", path, len(patch))
    return patch


def render_patch(patch: Sequence[str] | str) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as **either** a list/sequence of lines **or** a single
            multiline string.

    Returns:
        The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = [line.rstrip("\r\n") for line in patch]

    def process_line(line: str) -> str:
        content = line.replace("\r", "\\r")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    return "".join(f"{process_line(line)}\n" for line in lines)
