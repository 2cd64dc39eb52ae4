# topmark:header:start
#
#   project      : Corpl
#   file         : processor.py
#   file_relpath : src/corpl/engine/processor.py
#   license      : MIT
#   copyright    : (c) 2025 The Corpl authors
#
# topmark:header:end

"""Drive the toggling engine over whole buffers and files.

`toggle_bytes` is pure: it resolves the comment style, walks the lines through
the segment state machine and returns the rebuilt buffer. `process_file` adds
the in-place file I/O and `process_files` runs a batch, recording failures and
moving on to the next file.

Every emitted line, directive or data, ends with the line ending detected from
the original content, so mixed input comes out uniform.
"""

from __future__ import annotations

import contextlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from corpl.config.logging import get_logger
from corpl.core.errors import CorplError
from corpl.engine.comment import resolve_comment_style
from corpl.engine.directives import parse_directive
from corpl.engine.lines import detect_line_ending, iter_lines
from corpl.engine.options import FeatureSets
from corpl.engine.rewriter import close, open_for_update, read_all, rewrite
from corpl.engine.segments import NoSegment, enter, rewrite_line

if TYPE_CHECKING:
    from collections.abc import Iterable

    from corpl.config.logging import CorplLogger
    from corpl.core.diagnostics import Diagnostic
    from corpl.engine.comment import CommentStyle
    from corpl.engine.segments import Segment

logger: CorplLogger = get_logger(__name__)


@dataclass(frozen=True)
class ToggleRequest:
    """Everything the engine needs besides the file content.

    Attributes:
        features (FeatureSets): Enabled/disabled identifiers and the ``keep`` flag.
        comment (CommentStyle | None): Explicit comment markers, if any.
        max_comment_len (int | None): Longest marker accepted from a file's first
            line; None means unbounded.
    """

    features: FeatureSets = field(default_factory=FeatureSets)
    comment: CommentStyle | None = None
    max_comment_len: int | None = None


@dataclass(frozen=True)
class ToggleOutcome:
    """Result of toggling one in-memory buffer."""

    original: bytes
    output: bytes
    style: CommentStyle
    line_ending: bytes
    diagnostics: tuple[Diagnostic, ...]

    @property
    def changed(self) -> bool:
        """True if the output differs from the input."""
        return self.output != self.original


@dataclass(frozen=True)
class FileResult:
    """Result of processing one file."""

    path: Path
    outcome: ToggleOutcome
    written: bool
    bytes_written: int = 0

    @property
    def changed(self) -> bool:
        """True if the file content changed (or would change in a dry run)."""
        return self.outcome.changed

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Warnings collected while processing the file."""
        return self.outcome.diagnostics


@dataclass
class BatchResult:
    """Results of a multi-file run; failures do not stop the batch."""

    results: list[FileResult] = field(default_factory=lambda: [])
    failures: list[CorplError] = field(default_factory=lambda: [])

    @property
    def last_error(self) -> CorplError | None:
        """The final failure, which decides the overall outcome."""
        return self.failures[-1] if self.failures else None

    @property
    def changed(self) -> list[FileResult]:
        """Results for files whose content changed."""
        return [r for r in self.results if r.changed]


def toggle_bytes(
    data: bytes,
    request: ToggleRequest,
    *,
    path: Path | None = None,
) -> ToggleOutcome:
    """Toggle the directive regions of ``data``.

    Args:
        data (bytes): Whole file content.
        request (ToggleRequest): Identifiers, markers and limits.
        path (Path | None): Source path, used in messages only.

    Returns:
        ToggleOutcome: The rebuilt content and collected diagnostics.

    Raises:
        CommentUnresolvedError: If no comment marker can be determined.
    """
    data = bytes(data)
    style, diagnostics = resolve_comment_style(
        data,
        request.comment,
        max_len=request.max_comment_len,
        path=path,
    )
    line_ending = detect_line_ending(data)
    features = request.features
    logger.debug(
        "Toggling %s: comment=%r close=%r line_ending=%r",
        path or "<bytes>",
        style.open,
        style.close,
        line_ending,
    )

    segment: Segment = NoSegment()
    output = bytearray()
    for line_no, line in enumerate(iter_lines(data), start=1):
        directive = parse_directive(line, style)
        if directive is not None:
            segment = enter(directive, style, features, diagnostics, line_no=line_no)
            logger.trace("line %d: directive %r -> %r", line_no, directive, segment)
            output += line
        else:
            output += rewrite_line(line, segment, style, features, diagnostics, line_no=line_no)
        output += line_ending

    return ToggleOutcome(
        original=data,
        output=bytes(output),
        style=style,
        line_ending=line_ending,
        diagnostics=diagnostics.freeze(),
    )


def process_file(
    path: Path | str,
    request: ToggleRequest,
    *,
    dry_run: bool = False,
) -> FileResult:
    """Toggle a file in place.

    The file is opened for reading and writing, read fully, and (unless
    ``dry_run``) truncated and rewritten through the same handle.

    Args:
        path (Path | str): File to process; must exist and be readable and writable.
        request (ToggleRequest): Identifiers, markers and limits.
        dry_run (bool): Compute the result without writing.

    Returns:
        FileResult: The outcome for the file.

    Raises:
        CorplError: On any I/O failure or when the comment marker is unresolvable.
    """
    path = Path(path)
    handle = open_for_update(path)
    try:
        data = read_all(handle, path)
        try:
            outcome = toggle_bytes(data, request, path=path)
        except CorplError as exc:
            if exc.path is None:
                exc.path = path
            raise
        written = None if dry_run else rewrite(handle, path, outcome.output)
    except BaseException:
        # The first failure is the one reported
        with contextlib.suppress(OSError):
            handle.close()
        raise
    close(handle, path)

    if written is None:
        logger.info("Dry run: %s %s", path, "would change" if outcome.changed else "unchanged")
        return FileResult(path=path, outcome=outcome, written=False)
    logger.info("Processed %s (%s)", path, "changed" if outcome.changed else "unchanged")
    return FileResult(path=path, outcome=outcome, written=True, bytes_written=written)


def process_files(
    paths: Iterable[Path | str],
    request: ToggleRequest,
    *,
    dry_run: bool = False,
) -> BatchResult:
    """Process several files in order, continuing past failures.

    Args:
        paths (Iterable[Path | str]): Files to process.
        request (ToggleRequest): Identifiers, markers and limits shared by all files.
        dry_run (bool): Compute results without writing.

    Returns:
        BatchResult: Per-file results and the recorded failures.
    """
    batch = BatchResult()
    for raw in paths:
        path = Path(raw)
        try:
            batch.results.append(process_file(path, request, dry_run=dry_run))
        except CorplError as exc:
            logger.error("%s Error when processing %s", exc.message, path)
            batch.failures.append(exc)
    return batch

