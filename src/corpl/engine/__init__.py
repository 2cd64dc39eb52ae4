# topmark:header:start
#
#   project      : Corpl
#   file         : __init__.py
#   file_relpath : src/corpl/engine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Corpl authors
#
# topmark:header:end

"""The directive-driven toggling engine.

The engine works on raw bytes and never terminates the process: failures are
raised as `corpl.core.errors.CorplError` subclasses and warnings are returned as
diagnostics.
"""

from __future__ import annotations

from corpl.engine.comment import CommentStyle, resolve_comment_style
from corpl.engine.options import Activation, FeatureSets, evaluate
from corpl.engine.processor import (
    BatchResult,
    FileResult,
    ToggleOutcome,
    ToggleRequest,
    process_file,
    process_files,
    toggle_bytes,
)
from corpl.engine.splitter import literal, marker_then_space, split

__all__ = [
    "Activation",
    "BatchResult",
    "CommentStyle",
    "FeatureSets",
    "FileResult",
    "ToggleOutcome",
    "ToggleRequest",
    "evaluate",
    "literal",
    "marker_then_space",
    "process_file",
    "process_files",
    "resolve_comment_style",
    "split",
    "toggle_bytes",
]
