# topmark:header:start
#
#   project      : Corpl
#   file         : keys.py
#   file_relpath : src/corpl/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 The Corpl authors
#
# topmark:header:end

"""Canonical TOML key names for Corpl configuration.

These keys are read from ``corpl.toml`` and from ``[tool.corpl]`` in
``pyproject.toml``. Renaming or removing a key is a breaking change; CLI option
names are declared separately in `corpl.cli.main`.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML file names, sections and keys used by Corpl configuration."""

    # Files
    FILE_CORPL: Final[str] = "corpl.toml"
    FILE_PYPROJECT: Final[str] = "pyproject.toml"

    # [tool.corpl] in pyproject.toml
    SECTION_TOOL: Final[str] = "tool"
    SECTION_CORPL: Final[str] = "corpl"

    # Comment markers
    KEY_COMMENT: Final[str] = "comment"
    KEY_CLOSING_COMMENT: Final[str] = "closing-comment"
    KEY_LONG_COMMENT: Final[str] = "long-comment"
    KEY_MAX_COMMENT_LENGTH: Final[str] = "max-comment-length"

    # Identifier selection
    KEY_ENABLE: Final[str] = "enable"
    KEY_DISABLE: Final[str] = "disable"
    KEY_KEEP: Final[str] = "keep"

    ALL_KEYS: Final[frozenset[str]] = frozenset(
        {
            KEY_COMMENT,
            KEY_CLOSING_COMMENT,
            KEY_LONG_COMMENT,
            KEY_MAX_COMMENT_LENGTH,
            KEY_ENABLE,
            KEY_DISABLE,
            KEY_KEEP,
        }
    )
