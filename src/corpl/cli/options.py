# topmark:header:start
#
#   project      : Corpl
#   file         : options.py
#   file_relpath : src/corpl/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 The Corpl authors
#
# topmark:header:end

"""Reusable CLI options and their resolution logic.

Verbosity controls *program output* (what the console prints); internal logging
is configured separately through ``CORPL_LOG_LEVEL``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, TypeVar

import click

from corpl.cli.errors import CorplUsageError
from corpl.config.logging import TRACE_LEVEL, get_logger

F = TypeVar("F", bound=Callable[..., object])

logger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output level from the ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` was passed.
        quiet_count: Number of times ``-q`` was passed.

    Returns:
        The level as a `logging` integer.

    Raises:
        CorplUsageError: If both verbose and quiet flags are used.

    Behavior:
        Three or more ``-v`` set TRACE, two set DEBUG, one sets INFO.
        One or more ``-q`` set ERROR (warnings are suppressed).
        Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise CorplUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO

    if quiet_count >= 1:  # -q
        return logging.ERROR

    return logging.WARNING


#: Click context settings shared by Corpl commands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def common_verbose_options(f: F) -> F:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress warnings; only errors are printed.",
    )(f)
    return f


def common_toggle_options(f: F) -> F:
    """Add the identifier and comment-marker options.

    ``--enable`` and ``--disable`` are repeatable and accept comma-separated
    lists; the values are split later, when the config is frozen.
    """
    f = click.option(
        "-e",
        "--enable",
        "enable",
        multiple=True,
        metavar="IDS",
        help="Comma-separated identifiers to enable (repeatable).",
    )(f)
    f = click.option(
        "-d",
        "--disable",
        "disable",
        multiple=True,
        metavar="IDS",
        help="Comma-separated identifiers to disable (repeatable). Implies --keep.",
    )(f)
    f = click.option(
        "-k",
        "--keep",
        "keep",
        is_flag=True,
        help="Keep the current state of identifiers that are neither enabled nor disabled.",
    )(f)
    f = click.option(
        "-c",
        "--comment",
        "comment",
        type=str,
        default=None,
        metavar="STR",
        help="Comment marker to use instead of detecting it from the first line.",
    )(f)
    f = click.option(
        "--closing-comment",
        "closing_comment",
        type=str,
        default=None,
        metavar="STR",
        help="Closing marker for block comments (e.g. '*/').",
    )(f)
    f = click.option(
        "-l",
        "--long-comment",
        "long_comment",
        is_flag=True,
        help="Accept detected comment markers of any length.",
    )(f)
    return f


def common_config_options(f: F) -> F:
    """Add ``--config`` and ``--no-config``."""
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        type=click.Path(path_type=Path, dir_okay=False),
        metavar="PATH",
        help="Additional config file to merge (repeatable, applied in order).",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Do not discover pyproject.toml or corpl.toml in the working directory.",
    )(f)
    return f
