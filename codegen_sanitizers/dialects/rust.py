"""Rust identifier dialect.

Rust identifiers follow Unicode XID rules (like Python's) with two twists:
- a lone `_` is not an identifier
- keywords can be used through raw identifiers (`r#type`), except for the
  path keywords `self`, `Self`, `super` and `crate`, which get a trailing
  underscore instead
"""

from __future__ import annotations

import unicodedata

# Strict and reserved keywords, 2021 edition plus `gen` (2024).
RUST_KEYWORDS = frozenset(
    {
        "as", "async", "await", "break", "const", "continue", "crate", "dyn",
        "else", "enum", "extern", "false", "fn", "for", "if", "impl", "in",
        "let", "loop", "match", "mod", "move", "mut", "pub", "ref", "return",
        "self", "Self", "static", "struct", "super", "trait", "true", "type",
        "unsafe", "use", "where", "while",
        "abstract", "become", "box", "do", "final", "gen", "macro", "override",
        "priv", "try", "typeof", "unsized", "virtual", "yield",
    }
)

NON_RAW_KEYWORDS = frozenset({"self", "Self", "super", "crate"})

RAW_PREFIX = "r#"


class RustDialect:
    """Rust target language."""

    name = "rust"

    def is_identifier(self, text: str) -> bool:
        return text.isidentifier() and text != "_" and text not in RUST_KEYWORDS

    def escape(self, text: str) -> str:
        if text in NON_RAW_KEYWORDS:
            return text + "_"
        if not text.isidentifier():
            return "_" + text
        return RAW_PREFIX + text

    def unescape(self, text: str) -> str:
        if text.startswith(RAW_PREFIX):
            return text[len(RAW_PREFIX):]
        return text

    def normalize(self, text: str) -> str:
        # rustc compares identifiers after NFC normalization.
        return unicodedata.normalize("NFC", text)
