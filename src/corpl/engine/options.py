# topmark:header:start
#
#   project      : Corpl
#   file         : options.py
#   file_relpath : src/corpl/engine/options.py
#   license      : MIT
#   copyright    : (c) 2025 The Corpl authors
#
# topmark:header:end

"""Identifier status and option expression evaluation.

An option expression is an AND of identifiers, each optionally negated::

    ident1 && ident2 && !ident3

Identifiers the caller has no opinion on are skipped, so an expression can be
partially evaluated. If no identifier is known at all, the option is left
alone (`Activation.IGNORE`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Final

from corpl.config.logging import get_logger
from corpl.engine.splitter import literal, split

if TYPE_CHECKING:
    from collections.abc import Iterable

    from corpl.config.logging import CorplLogger

logger: CorplLogger = get_logger(__name__)

AND_SEPARATOR: Final[bytes] = b" && "
NEGATION: Final[bytes] = b"!"

_and = literal(AND_SEPARATOR)


class Activation(Enum):
    """Tri-state outcome of an option expression."""

    YES = "yes"
    NO = "no"
    IGNORE = "ignore"


@dataclass(frozen=True)
class FeatureSets:
    """Caller-supplied identifier sets.

    Attributes:
        enabled (frozenset[bytes]): Identifiers to activate.
        disabled (frozenset[bytes]): Identifiers to deactivate; only consulted with ``keep``.
        keep (bool): When True, identifiers in neither set keep their on-disk state.
            When False, they count as disabled.
    """

    enabled: frozenset[bytes] = field(default_factory=frozenset)
    disabled: frozenset[bytes] = field(default_factory=frozenset)
    keep: bool = False

    @classmethod
    def of(
        cls,
        enabled: Iterable[bytes] = (),
        disabled: Iterable[bytes] = (),
        *,
        keep: bool = False,
    ) -> FeatureSets:
        """Build feature sets from any iterables of identifiers."""
        return cls(frozenset(enabled), frozenset(disabled), keep)

    def status(self, ident: bytes) -> bool | None:
        """Return True (enabled), False (disabled) or None (unknown) for ``ident``.

        An explicit disable wins over an enable in ``keep`` mode.
        """
        ident = bytes(ident)
        if not self.keep:
            return ident in self.enabled
        if ident in self.disabled:
            return False
        if ident in self.enabled:
            return True
        return None


def evaluate(expression: bytes, features: FeatureSets) -> Activation:
    """Evaluate an option expression against ``features``.

    Args:
        expression (bytes): The ``&&``-joined identifiers.
        features (FeatureSets): Identifier sets to evaluate against.

    Returns:
        Activation: YES when every known conjunct holds, NO as soon as one fails,
        IGNORE when no identifier is known.
    """
    result = Activation.IGNORE
    for term in split(expression, _and):
        negated = term.startswith(NEGATION)
        ident = term[len(NEGATION) :] if negated else term
        enabled = features.status(ident)
        if enabled is None:
            logger.trace("option %r: unknown identifier %r skipped", expression, ident)
            continue
        if result is Activation.IGNORE:
            result = Activation.YES
        if negated == enabled:
            result = Activation.NO
            break
    logger.debug("option %r -> %s", expression, result.value)
    return result
