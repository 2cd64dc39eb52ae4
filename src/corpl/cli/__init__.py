# topmark:header:start
#
#   project      : Corpl
#   file         : __init__.py
#   file_relpath : src/corpl/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Corpl authors
#
# topmark:header:end

"""Click-based command-line interface for Corpl."""
