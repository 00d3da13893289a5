"""Lookup of identifier dialects by name."""

from __future__ import annotations

from codegen_sanitizers.core.errors import UnknownDialectError
from codegen_sanitizers.dialects.base import IdentifierDialect
from codegen_sanitizers.dialects.python import PythonDialect
from codegen_sanitizers.dialects.rust import RustDialect

DIALECTS: dict[str, IdentifierDialect] = {
    "python": PythonDialect(),
    "rust": RustDialect(),
}


def get_dialect(name: str) -> IdentifierDialect:
    """Return the dialect registered under `name`.

    Raises:
        UnknownDialectError: If no dialect has that name.
    """
    try:
        return DIALECTS[name.lower()]
    except KeyError:
        raise UnknownDialectError(name, sorted(DIALECTS)) from None
