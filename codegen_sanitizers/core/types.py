"""Core types shared by the sanitizers, settings and CLI."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Identifier:
    """A sanitized name, ready to be emitted into generated code.

    `name` is the unescaped text and never equals a reserved generator name.
    `token` is what must be written to source; it differs from `name` only
    when the dialect had to escape a keyword.
    """

    name: str
    token: str
    dialect: str
    escaped: bool = False

    def __str__(self) -> str:
        return self.token


@dataclass(frozen=True)
class SanitizerSettings:
    """Options resolved from sanitizers.yml and the environment."""

    dialect: str = "python"
    default_info: str = "text"
