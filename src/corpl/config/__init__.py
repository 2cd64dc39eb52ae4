# topmark:header:start
#
#   project      : Corpl
#   file         : __init__.py
#   file_relpath : src/corpl/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Corpl authors
#
# topmark:header:end

"""Corpl configuration: TOML loading, layered merging and logging setup.

The engine imports `corpl.config.logging`, so this package does not import the
model eagerly; use `corpl.config.model` directly.
"""
