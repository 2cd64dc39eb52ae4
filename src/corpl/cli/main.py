# topmark:header:start
#
#   project      : Corpl
#   file         : main.py
#   file_relpath : src/corpl/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 The Corpl authors
#
# topmark:header:end

"""The ``corpl`` command.

Key ideas:
- Shared state (verbosity, console) is initialized once and placed into ``ctx.obj``.
- Configuration is merged from defaults, config files and CLI flags, then frozen.
- Every file is processed even when an earlier one fails; the last failure
  decides the exit status.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from corpl.cli.console import ClickConsole
from corpl.cli.errors import CorplCliError, to_cli_error
from corpl.cli.exit_codes import ExitCode
from corpl.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_toggle_options,
    common_verbose_options,
    resolve_verbosity,
)
from corpl.config.logging import get_logger, resolve_env_log_level, setup_logging
from corpl.config.model import MutableConfig
from corpl.constants import CORPL_VERSION
from corpl.core.diagnostics import compute_diagnostic_stats
from corpl.core.errors import ConfigError
from corpl.engine.processor import process_files
from corpl.utils.diff import render_patch, unified_diff

if TYPE_CHECKING:
    from collections.abc import Iterable

    from corpl.config.model import Config
    from corpl.core.diagnostics import Diagnostic
    from corpl.engine.processor import BatchResult

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int, no_color: bool) -> None:
    """Initialize verbosity, logging and the console on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` is created if missing.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.obj = ctx.obj if isinstance(ctx.obj, dict) else {}

    # Console first, so usage errors below are rendered through it
    console = ClickConsole(enable_color=not no_color)
    ctx.obj["console"] = console
    ctx.color = not no_color

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured via env only
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)


def build_config(
    *,
    config_paths: Iterable[Path],
    no_config: bool,
    overrides: dict[str, object],
) -> Config:
    """Merge config files and CLI overrides into a frozen `Config`.

    Raises:
        CorplCliError: With ``CONFIG_ERROR`` if a config file is unreadable.
    """
    try:
        draft = MutableConfig.load_merged(
            extra_config_files=config_paths,
            no_config=no_config,
        )
    except ConfigError as exc:
        raise to_cli_error(exc) from exc
    return draft.apply_cli_args(overrides).freeze()


def _print_diagnostics(
    console: ClickConsole,
    diagnostics: Iterable[Diagnostic],
    *,
    where: str,
    level: int,
) -> None:
    if level > logging.WARNING:
        return
    for diag in diagnostics:
        console.warn(f"{where}: {diag.render()}")


def report_batch(
    console: ClickConsole,
    batch: BatchResult,
    *,
    level: int,
    dry_run: bool,
    show_diff: bool,
) -> None:
    """Print per-file diagnostics, diffs and status lines (not the failures).

    At ``-v`` a closing summary counts files, changes and warnings.
    """
    for result in batch.results:
        _print_diagnostics(console, result.diagnostics, where=str(result.path), level=level)
        if show_diff and result.changed:
            patch = unified_diff(result.outcome.original, result.outcome.output, str(result.path))
            console.print(render_patch(patch), nl=False)
        if level <= logging.INFO:
            if result.changed:
                status = "would change" if dry_run else "changed"
            else:
                status = "unchanged"
            console.print(f"{result.path}: {status}")

    if level <= logging.INFO:
        stats = compute_diagnostic_stats(
            diag for result in batch.results for diag in result.diagnostics
        )
        console.print(
            f"Summary: {len(batch.results)} processed, {len(batch.changed)} "
            f"{'would change' if dry_run else 'changed'}, {len(batch.failures)} failed, "
            f"{stats.n_warning} warning(s)"
        )


@click.command(
    context_settings=CONTEXT_SETTINGS,
    help=(
        "Toggle sections and options of configuration files in place.\n\n"
        "Regions are delimited by '<comment> CORPL section <text>', "
        "'<comment> CORPL option <expr>' and '<comment> CORPL end' lines."
    ),
)
@click.argument(
    "files",
    nargs=-1,
    required=True,
    metavar="CONFIG...",
    type=click.Path(path_type=Path, dir_okay=True),
)
@common_toggle_options
@common_config_options
@click.option(
    "--dry-run",
    "dry_run",
    is_flag=True,
    help="Compute the result without writing; exit 2 if a file would change.",
)
@click.option("--diff", "show_diff", is_flag=True, help="Print a unified diff of the changes.")
@click.option("--no-color", "no_color", is_flag=True, help="Disable colored output.")
@common_verbose_options
@click.version_option(CORPL_VERSION, "--version", prog_name="corpl")
@click.pass_context
def cli(
    ctx: click.Context,
    files: tuple[Path, ...],
    enable: tuple[str, ...],
    disable: tuple[str, ...],
    keep: bool,
    comment: str | None,
    closing_comment: str | None,
    long_comment: bool,
    config_paths: tuple[Path, ...],
    no_config: bool,
    dry_run: bool,
    show_diff: bool,
    no_color: bool,
    verbose: int,
    quiet: int,
) -> None:
    """Entry point for the Corpl CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ClickConsole = ctx.obj["console"]
    level: int = ctx.obj["verbosity_level"]

    config = build_config(
        config_paths=config_paths,
        no_config=no_config,
        overrides={
            "comment": comment,
            "closing_comment": closing_comment,
            "long_comment": long_comment,
            "keep": keep,
            "enable": list(enable),
            "disable": list(disable),
        },
    )
    _print_diagnostics(console, config.diagnostics, where="config", level=level)
    logger.debug("Effective config: %s", config)

    batch = process_files(files, config.to_request(), dry_run=dry_run)
    report_batch(console, batch, level=level, dry_run=dry_run, show_diff=show_diff)

    last_error = batch.last_error
    if last_error is not None:
        for failure in batch.failures[:-1]:
            console.error(f"{failure.message} Error when processing {failure.path}")
        error: CorplCliError = to_cli_error(
            last_error,
            f"{last_error.message} Error when processing {last_error.path}",
        )
        raise error

    if dry_run and batch.changed:
        ctx.exit(ExitCode.WOULD_CHANGE)


if __name__ == "__main__":
    cli()
