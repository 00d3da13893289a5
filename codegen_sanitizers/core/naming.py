"""Turn schema-derived labels into identifiers for generated code."""

from __future__ import annotations

import logging
from typing import Iterable

from codegen_sanitizers.core.errors import EmptyNameError, NameCollisionError
from codegen_sanitizers.core.types import Identifier
from codegen_sanitizers.dialects.base import IdentifierDialect
from codegen_sanitizers.dialects.registry import get_dialect

logger = logging.getLogger(__name__)

# Names used by the generated code's own methods and fields.
RESERVED_NAMES = frozenset({"name", "operation", "builder"})


def _is_word_char(ch: str) -> bool:
    return ch != "_" and ("_" + ch).isidentifier()


def _starts_word(prev: str, ch: str, nxt: str) -> bool:
    if not ch.isupper():
        return False
    if prev.islower() or prev.isdigit():
        return True
    # End of an acronym: the "S" in "HTTPServer".
    return prev.isupper() and nxt.islower()


def to_snake_case(name: str) -> str:
    """
    Convert a label to snake_case.

    Words are split on lower-to-upper transitions, on the last capital of an
    acronym and on any character that cannot appear in an identifier
    (whitespace, `-`, `_`, `.`, punctuation). Empty words are dropped.

    Examples:
        >>> to_snake_case("HTTPServer")
        'http_server'
        >>> to_snake_case("pet-store.v2")
        'pet_store_v2'
    """
    words: list[str] = []
    current: list[str] = []

    for i, ch in enumerate(name):
        if not _is_word_char(ch):
            if current:
                words.append("".join(current))
                current = []
            continue
        if current:
            nxt = name[i + 1] if i + 1 < len(name) else ""
            if _starts_word(current[-1], ch, nxt):
                words.append("".join(current))
                current = []
        current.append(ch)

    if current:
        words.append("".join(current))

    return "_".join(w.lower() for w in words)


def sanitize_name(name: str, dialect: str | IdentifierDialect = "python") -> Identifier:
    """
    Sanitize a label into a collision-free identifier.

    Args:
        name: Arbitrary label, e.g. a schema field or operation name.
        dialect: Target language, by name or as a dialect object.

    Returns:
        Identifier: The sanitized name. Keywords of the target language are
            escaped with the dialect's syntax rather than rewritten.

    Raises:
        EmptyNameError: If `name` is empty or made only of separators.
        UnknownDialectError: If `dialect` names no registered dialect.

    Example:
        >>> str(sanitize_name("builder"))
        '_builder'
        >>> str(sanitize_name("type", "rust"))
        'r#type'
    """
    if not name:
        raise EmptyNameError(name)

    if isinstance(dialect, str):
        dialect = get_dialect(dialect)

    # Reserved-name and keyword checks must see the name the compiler binds.
    text = to_snake_case(dialect.normalize(dialect.unescape(name)))
    text = dialect.normalize(text).replace(".", "_")
    if not text:
        raise EmptyNameError(name)

    if text in RESERVED_NAMES or text[0].isnumeric():
        text = "_" + text

    if dialect.is_identifier(text):
        ident = Identifier(name=text, token=text, dialect=dialect.name)
    else:
        ident = Identifier(
            name=text, token=dialect.escape(text), dialect=dialect.name, escaped=True
        )

    logger.debug("Sanitized %r -> %s (%s)", name, ident.token, dialect.name)
    return ident


def sanitize_names(
    names: Iterable[str], dialect: str | IdentifierDialect = "python"
) -> list[Identifier]:
    """Sanitize a batch of labels that will share one namespace.

    Repeated labels are allowed and map to the same identifier.

    Raises:
        NameCollisionError: If two different labels yield the same token.
    """
    seen: dict[str, str] = {}
    out: list[Identifier] = []
    for name in names:
        ident = sanitize_name(name, dialect)
        first = seen.setdefault(ident.token, name)
        if first != name:
            raise NameCollisionError(ident.token, first, name)
        out.append(ident)
    return out
