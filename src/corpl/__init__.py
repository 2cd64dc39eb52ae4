# topmark:header:start
#
#   project      : Corpl
#   file         : __init__.py
#   file_relpath : src/corpl/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Corpl authors
#
# topmark:header:end

"""Corpl package.

Corpl toggles annotated regions of plain-text config files between active and
commented-out states, driven by ``CORPL`` directive comments and a set of
feature identifiers. It exposes a CLI and the `corpl.engine` API.
"""

from __future__ import annotations
