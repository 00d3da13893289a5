"""Dialect protocol for target-language identifier rules."""

from __future__ import annotations

from typing import Protocol


class IdentifierDialect(Protocol):
    """Identifier grammar and escape syntax of one target language."""

    name: str

    def is_identifier(self, text: str) -> bool:
        ...

    def escape(self, text: str) -> str:
        ...

    def unescape(self, text: str) -> str:
        ...

    def normalize(self, text: str) -> str:
        ...
