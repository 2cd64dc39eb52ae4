# topmark:header:start
#
#   project      : Corpl
#   file         : __init__.py
#   file_relpath : src/corpl/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Corpl authors
#
# topmark:header:end

"""Shared primitives: diagnostics and error types."""
