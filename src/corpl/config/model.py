# topmark:header:start
#
#   project      : Corpl
#   file         : model.py
#   file_relpath : src/corpl/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 The Corpl authors
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot handed to the engine.
    - `MutableConfig`: a mutable builder used while merging layers; it is frozen
      into `Config` once every layer is applied.

Merge order (lowest → highest precedence):
    1) Built-in defaults
    2) ``[tool.corpl]`` in ``pyproject.toml`` of the working directory
    3) ``corpl.toml`` of the working directory
    4) Extra config files passed via ``--config`` (in the order provided)
    5) CLI overrides

Scalar values follow last-set-wins; identifier lists follow last-non-empty-wins.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from corpl.config.io import (
    extract_corpl_table,
    get_bool_or_none,
    get_int_or_none,
    get_string_list,
    get_string_or_none,
    load_toml_dict,
    warn_unknown_keys,
)
from corpl.config.keys import Toml
from corpl.config.logging import get_logger
from corpl.constants import DEFAULT_MAX_COMMENT_LEN
from corpl.core.diagnostics import DiagnosticLog
from corpl.engine.comment import CommentStyle
from corpl.engine.options import FeatureSets
from corpl.engine.processor import ToggleRequest

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from corpl.config.io import TomlTable
    from corpl.config.logging import CorplLogger
    from corpl.core.diagnostics import Diagnostic

logger: CorplLogger = get_logger(__name__)

CLI_OVERRIDE_STR = "<CLI overrides>"


def split_identifiers(values: Iterable[str]) -> list[str]:
    """Split comma-separated identifier lists and trim each entry.

    Empty entries are dropped, order is preserved.

    Examples:
        >>> split_identifiers(["a, b", "c"])
        ['a', 'b', 'c']
    """
    out: list[str] = []
    for value in values:
        for part in value.split(","):
            part = part.strip()
            if part:
                out.append(part)
    return out


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        comment (str | None): Explicit opening comment marker.
        closing_comment (str | None): Explicit closing comment marker (block comments).
        long_comment (bool): Accept auto-detected markers of any length.
        max_comment_length (int): Longest auto-detected marker when ``long_comment`` is off.
        keep (bool): Keep the on-disk state of identifiers that are neither enabled
            nor disabled. Forced on when ``disable`` is non-empty.
        enable (tuple[str, ...]): Identifiers to enable.
        disable (tuple[str, ...]): Identifiers to disable explicitly.
        config_files (tuple[Path | str, ...]): Config sources that contributed.
        diagnostics (tuple[Diagnostic, ...]): Warnings collected while loading config.
    """

    comment: str | None
    closing_comment: str | None
    long_comment: bool
    max_comment_length: int
    keep: bool
    enable: tuple[str, ...]
    disable: tuple[str, ...]
    config_files: tuple[Path | str, ...]
    diagnostics: tuple[Diagnostic, ...]

    @property
    def comment_style(self) -> CommentStyle | None:
        """Explicit comment markers, or None to auto-detect."""
        return CommentStyle.from_strings(self.comment, self.closing_comment)

    @property
    def max_comment_len(self) -> int | None:
        """Bound for auto-detected markers; None when long comments are allowed."""
        return None if self.long_comment else self.max_comment_length

    def to_request(self) -> ToggleRequest:
        """Build the engine request (identifiers encoded as UTF-8)."""
        features = FeatureSets.of(
            (ident.encode("utf-8") for ident in self.enable),
            (ident.encode("utf-8") for ident in self.disable),
            keep=self.keep,
        )
        return ToggleRequest(
            features=features,
            comment=self.comment_style,
            max_comment_len=self.max_comment_len,
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used while merging layers.

    ``None`` means "not set by this layer" so that merging never loses
    information; `freeze` resolves the remaining ``None`` values to defaults.
    """

    comment: str | None = None
    closing_comment: str | None = None
    long_comment: bool | None = None
    max_comment_length: int | None = None
    keep: bool | None = None
    enable: list[str] = field(default_factory=lambda: [])
    disable: list[str] = field(default_factory=lambda: [])
    config_files: list[Path | str] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`.

        A non-empty ``disable`` list implies ``keep``: explicit disabling only
        makes sense when unknown identifiers are otherwise left alone.
        """
        enable = split_identifiers(self.enable)
        disable = split_identifiers(self.disable)
        return Config(
            comment=self.comment or None,
            closing_comment=self.closing_comment or None,
            long_comment=bool(self.long_comment),
            max_comment_length=(
                self.max_comment_length
                if self.max_comment_length is not None
                else DEFAULT_MAX_COMMENT_LEN
            ),
            keep=bool(self.keep) or bool(disable),
            enable=tuple(enable),
            disable=tuple(disable),
            config_files=tuple(self.config_files),
            diagnostics=self.diagnostics.freeze(),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the built-in defaults."""
        return cls(
            long_comment=False,
            max_comment_length=DEFAULT_MAX_COMMENT_LEN,
            keep=False,
        )

    @classmethod
    def from_toml_dict(cls, table: TomlTable, *, source: str = "<dict>") -> MutableConfig:
        """Build a layer from a Corpl TOML table.

        Args:
            table (TomlTable): The ``corpl.toml`` document or ``[tool.corpl]`` table.
            source (str): Name of the source, used in diagnostics.

        Returns:
            MutableConfig: A layer with only the keys present in ``table`` set.
        """
        diagnostics = DiagnosticLog()
        warn_unknown_keys(table, diagnostics, source)
        return cls(
            comment=get_string_or_none(table, Toml.KEY_COMMENT, diagnostics),
            closing_comment=get_string_or_none(table, Toml.KEY_CLOSING_COMMENT, diagnostics),
            long_comment=get_bool_or_none(table, Toml.KEY_LONG_COMMENT, diagnostics),
            max_comment_length=get_int_or_none(table, Toml.KEY_MAX_COMMENT_LENGTH, diagnostics),
            keep=get_bool_or_none(table, Toml.KEY_KEEP, diagnostics),
            enable=get_string_list(table, Toml.KEY_ENABLE, diagnostics),
            disable=get_string_list(table, Toml.KEY_DISABLE, diagnostics),
            diagnostics=diagnostics,
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a layer from ``corpl.toml`` or ``pyproject.toml``.

        Returns:
            MutableConfig | None: The layer, or None when a ``pyproject.toml``
            has no ``[tool.corpl]`` table.

        Raises:
            ConfigError: If the file cannot be read or parsed.
        """
        logger.debug("Loading config layer from %s", path)
        table = extract_corpl_table(path, load_toml_dict(path))
        if table is None:
            logger.debug("No [tool.corpl] table in %s", path)
            return None
        draft = cls.from_toml_dict(table, source=str(path))
        draft.config_files = [path]
        return draft

    @classmethod
    def discover_local_config_files(cls, anchor: Path) -> list[Path]:
        """Return config files in ``anchor``: ``pyproject.toml`` first, then ``corpl.toml``."""
        found: list[Path] = []
        for name in (Toml.FILE_PYPROJECT, Toml.FILE_CORPL):
            candidate = anchor / name
            if candidate.is_file():
                found.append(candidate)
        return found

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Merge defaults, discovered files and extra files into one draft.

        Args:
            anchor (Path | None): Directory searched for config files (CWD if None).
            extra_config_files (Iterable[Path] | None): Explicit files merged last.
            no_config (bool): Skip discovery (explicit files are still merged).

        Returns:
            MutableConfig: The merged draft, ready for CLI overrides.

        Raises:
            ConfigError: If a config file cannot be read or parsed.
        """
        draft = cls.from_defaults()
        layers: list[Path] = []
        if not no_config:
            layers.extend(cls.discover_local_config_files(anchor or Path.cwd()))
        layers.extend(Path(p) for p in extra_config_files or ())
        for path in layers:
            layer = cls.from_toml_file(path)
            if layer is not None:
                draft = draft.merge_with(layer)
        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        diagnostics = DiagnosticLog(items=list(self.diagnostics))
        diagnostics.extend(other.diagnostics)
        return MutableConfig(
            comment=other.comment if other.comment is not None else self.comment,
            closing_comment=(
                other.closing_comment
                if other.closing_comment is not None
                else self.closing_comment
            ),
            long_comment=(
                other.long_comment if other.long_comment is not None else self.long_comment
            ),
            max_comment_length=(
                other.max_comment_length
                if other.max_comment_length is not None
                else self.max_comment_length
            ),
            keep=other.keep if other.keep is not None else self.keep,
            enable=other.enable or self.enable,
            disable=other.disable or self.disable,
            config_files=self.config_files + other.config_files,
            diagnostics=diagnostics,
        )

    def apply_cli_args(self, args: Mapping[str, Any]) -> MutableConfig:
        """Apply CLI (or API) overrides in place.

        Only keys that are present and not None override the draft; flags that
        are off (``False``) do not reset values coming from config files.

        Args:
            args (Mapping[str, Any]): Parsed arguments keyed by config field name.

        Returns:
            MutableConfig: This draft, updated.
        """
        logger.debug("Applying CLI arguments to MutableConfig: %s", args)
        self.config_files.append(CLI_OVERRIDE_STR)

        for key in ("comment", "closing_comment"):
            value = args.get(key)
            if value is not None:
                setattr(self, key, value)
        for key in ("long_comment", "keep"):
            if args.get(key):
                setattr(self, key, True)
        for key in ("enable", "disable"):
            values = list(args.get(key) or ())
            if values:
                setattr(self, key, values)
        return self
