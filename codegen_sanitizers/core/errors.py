"""Error taxonomy for name and documentation sanitization."""

from __future__ import annotations


class SanitizerError(ValueError):
    """Base class for every error raised by the sanitizers."""


class EmptyNameError(SanitizerError):
    """A label had no characters left to build an identifier from."""

    def __init__(self, name: str) -> None:
        self.name = name
        if name:
            msg = f"Name {name!r} contains no identifier characters"
        else:
            msg = "Name must not be empty"
        super().__init__(msg)


class NameCollisionError(SanitizerError):
    """Two distinct labels sanitize to the same identifier."""

    def __init__(self, token: str, first: str, second: str) -> None:
        self.token = token
        self.first = first
        self.second = second
        super().__init__(f"Names {first!r} and {second!r} both sanitize to '{token}'")


class UnknownDialectError(SanitizerError):
    """No identifier dialect is registered under the requested name."""

    def __init__(self, dialect: str, known: list[str]) -> None:
        self.dialect = dialect
        super().__init__(
            f"Unknown dialect '{dialect}'. Expected one of: {', '.join(known)}"
        )


class DocumentationError(SanitizerError):
    """Base class for failures of documentation sanitization."""

    def __init__(self, message: str, source: str | bytes) -> None:
        self.source = source
        super().__init__(message)


class FormatError(DocumentationError):
    """The Markdown tree could not be rendered back to text."""


class EncodingError(DocumentationError):
    """Input or rendered documentation is not valid UTF-8."""
