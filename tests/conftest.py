# topmark:header:start
#
#   project      : Corpl
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The Corpl authors
#
# topmark:header:end

"""Pytest configuration for the Corpl test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, and provides small typed helpers shared by the test modules.

Notes:
    Tests should respect the immutable/mutable configuration split: build
    configs with `corpl.config.model.MutableConfig`, then ``freeze()`` them.
    Never mutate a frozen `Config`; build a new one instead.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from corpl.config import logging
from corpl.engine.comment import CommentStyle
from corpl.engine.options import FeatureSets
from corpl.engine.processor import ToggleRequest

if TYPE_CHECKING:
    from collections.abc import Iterable

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_corpl_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure Corpl's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to drop ``CORPL_LOG_LEVEL``.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_request(
    enabled: Iterable[bytes] = (),
    disabled: Iterable[bytes] = (),
    *,
    keep: bool = False,
    comment: CommentStyle | None = None,
    max_comment_len: int | None = 4,
) -> ToggleRequest:
    """Return a `ToggleRequest` for tests.

    Args:
        enabled (Iterable[bytes]): Identifiers to enable.
        disabled (Iterable[bytes]): Identifiers to disable.
        keep (bool): Keep the on-disk state of unknown identifiers.
        comment (CommentStyle | None): Explicit markers.
        max_comment_len (int | None): Longest detected marker (None: unbounded).

    Returns:
        ToggleRequest: The request.
    """
    return ToggleRequest(
        features=FeatureSets.of(enabled, disabled, keep=keep),
        comment=comment,
        max_comment_len=max_comment_len,
    )
