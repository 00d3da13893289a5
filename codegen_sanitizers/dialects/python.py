"""Python identifier dialect.

Python has no raw-identifier syntax. Keywords are escaped with a trailing
underscore (`class_`), as PEP 8 recommends.
"""

from __future__ import annotations

import keyword
import unicodedata


class PythonDialect:
    """Python 3 target language."""

    name = "python"

    def is_identifier(self, text: str) -> bool:
        return text.isidentifier() and not keyword.iskeyword(text)

    def escape(self, text: str) -> str:
        if keyword.iskeyword(text):
            return text + "_"
        # Starts with a character that may only continue an identifier.
        return "_" + text

    def unescape(self, text: str) -> str:
        # A trailing underscore is already dropped by snake_case splitting.
        return text

    def normalize(self, text: str) -> str:
        # The parser folds identifiers to NFKC: "ｎａｍｅ" binds `name`.
        return unicodedata.normalize("NFKC", text)
