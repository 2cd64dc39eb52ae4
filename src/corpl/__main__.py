# topmark:header:start
#
#   project      : Corpl
#   file         : __main__.py
#   file_relpath : src/corpl/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 The Corpl authors
#
# topmark:header:end

"""Module entry point for running Corpl via ``python -m corpl``.

Delegates to :func:`corpl.cli.main.cli`, the single CLI entry point.
"""

from __future__ import annotations

from corpl.cli.main import cli

if __name__ == "__main__":
    cli()
