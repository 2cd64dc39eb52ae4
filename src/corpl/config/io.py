# topmark:header:start
#
#   project      : Corpl
#   file         : io.py
#   file_relpath : src/corpl/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 The Corpl authors
#
# topmark:header:end

"""Load TOML configuration files and read typed values from them.

Parsing is done with `tomlkit` and returned as plain `dict` structures. The
getters are *checked*: a value of the wrong shape is ignored and recorded as a
warning in a `DiagnosticLog`, so user mistakes are surfaced without changing
the defaults.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from corpl.config.keys import Toml
from corpl.config.logging import get_logger
from corpl.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from corpl.config.logging import CorplLogger
    from corpl.core.diagnostics import DiagnosticLog

logger: CorplLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``corpl.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}", path=path) from exc
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}", path=path) from exc
    data: Any = doc.unwrap()
    return cast("TomlTable", data) if isinstance(data, dict) else {}


def extract_corpl_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the Corpl table of a parsed file, or None if it has none.

    ``pyproject.toml`` holds it under ``[tool.corpl]``; ``corpl.toml`` is the table.
    """
    if path.name != Toml.FILE_PYPROJECT:
        return data
    tool: Any = data.get(Toml.SECTION_TOOL, {})
    if not isinstance(tool, dict):
        return None
    section: Any = cast("TomlTable", tool).get(Toml.SECTION_CORPL)
    if not isinstance(section, dict):
        return None
    return cast("TomlTable", section)


def _wrong_type(diagnostics: DiagnosticLog, key: str, expected: str, value: Any) -> None:
    diagnostics.add_warning(
        f"Ignoring config key '{key}': expected {expected}, got {type(value).__name__}"
    )


def get_string_or_none(table: TomlTable, key: str, diagnostics: DiagnosticLog) -> str | None:
    """Return a string value, or None when absent or not a string."""
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    _wrong_type(diagnostics, key, "a string", value)
    return None


def get_bool_or_none(table: TomlTable, key: str, diagnostics: DiagnosticLog) -> bool | None:
    """Return a boolean value, or None when absent or not a boolean."""
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    _wrong_type(diagnostics, key, "a boolean", value)
    return None


def get_int_or_none(table: TomlTable, key: str, diagnostics: DiagnosticLog) -> int | None:
    """Return a non-negative integer value, or None when absent or invalid."""
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value
    _wrong_type(diagnostics, key, "a non-negative integer", value)
    return None


def get_string_list(table: TomlTable, key: str, diagnostics: DiagnosticLog) -> list[str]:
    """Return a list of strings; a single string counts as a one-item list.

    Non-string items are dropped with a warning.
    """
    value: Any = table.get(key)
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        _wrong_type(diagnostics, key, "a list of strings", value)
        return []
    out: list[str] = []
    for item in cast("list[Any]", value):
        if isinstance(item, str):
            out.append(item)
        else:
            _wrong_type(diagnostics, f"{key}[]", "a string", item)
    return out


def warn_unknown_keys(table: TomlTable, diagnostics: DiagnosticLog, source: str) -> None:
    """Record a warning for every key Corpl does not know."""
    for key in sorted(set(table) - Toml.ALL_KEYS):
        diagnostics.add_warning(f"Unknown config key '{key}' in {source}")
