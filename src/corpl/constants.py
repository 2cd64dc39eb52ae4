# topmark:header:start
#
#   project      : Corpl
#   file         : constants.py
#   file_relpath : src/corpl/constants.py
#   license      : MIT
#   copyright    : (c) 2025 The Corpl authors
#
# topmark:header:end

"""Corpl constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    CORPL_VERSION: str = get_version("corpl")
except PackageNotFoundError:  # running from a source checkout
    CORPL_VERSION = "0.0.0"

# Longest comment marker accepted from a file's first line without --long-comment.
DEFAULT_MAX_COMMENT_LEN: Final[int] = 4
