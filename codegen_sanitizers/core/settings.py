"""Load sanitizer settings from sanitizers.yml and the environment."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml

from codegen_sanitizers.core.types import SanitizerSettings
from codegen_sanitizers.dialects.registry import get_dialect

SETTINGS_FILE = "sanitizers.yml"
DIALECT_ENV = "CODEGEN_SANITIZERS_DIALECT"

_KNOWN_KEYS = {"dialect", "default_info"}


def load_settings(
    path: Optional[Path] = None,
    dialect: Optional[str] = None,
) -> SanitizerSettings:
    """Resolve sanitizer settings.

    The dialect is taken from, in order: the `dialect` argument, the
    CODEGEN_SANITIZERS_DIALECT environment variable, the settings file, and
    finally the "python" default. When `path` is None, sanitizers.yml in the
    working directory is read if it exists.

    Args:
        path: Explicit settings file. Must exist if given.
        dialect: Dialect override, usually from the command line.

    Returns:
        SanitizerSettings with a validated dialect name.

    Raises:
        FileNotFoundError: If `path` is given but does not exist.
        ValueError: If the file is not a mapping, has unknown keys or an empty
                   default_info.
        UnknownDialectError: If the resolved dialect is not registered.
    """
    data = _load_file(path)

    if not dialect:
        dialect = os.environ.get(DIALECT_ENV) or data.get("dialect") or "python"
    # Validates the name and normalizes its case.
    dialect = get_dialect(str(dialect)).name

    return SanitizerSettings(dialect=dialect, default_info=_default_info(data))


def load_default_info(path: Optional[Path] = None) -> str:
    """Return the info string for untagged code blocks.

    Documentation sanitization has no use for the dialect, so neither the
    file's `dialect` key nor CODEGEN_SANITIZERS_DIALECT is validated here.
    """
    return _default_info(_load_file(path))


def _load_file(path: Optional[Path]) -> dict:
    data: dict = {}
    if path is not None:
        if not path.exists():
            raise FileNotFoundError(f"{SETTINGS_FILE} not found at: {path}")
        data = _read(path)
    elif Path(SETTINGS_FILE).exists():
        data = _read(Path(SETTINGS_FILE))

    unknown = set(data) - _KNOWN_KEYS
    if unknown:
        raise ValueError(f"Unknown settings: {', '.join(sorted(unknown))}")
    return data


def _default_info(data: dict) -> str:
    default_info = data.get("default_info", "text")
    if not isinstance(default_info, str) or not default_info.strip():
        raise ValueError("default_info must be a non-empty string")
    return default_info.strip()


def _read(path: Path) -> dict:
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping")
    return data
