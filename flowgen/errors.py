"""Exceptions raised while generating Flow types."""

from __future__ import annotations


class GeneratorError(Exception):
    """Base exception for generation errors."""

    def __init__(self, message: str, source: str | None = None) -> None:
        self.source = source
        full_message = f"{message}" if not source else f"[{source}] {message}"
        super().__init__(full_message)


class DocumentLoadError(GeneratorError):
    """Raised when the input document cannot be read or parsed."""


class NoDefinitionsError(GeneratorError):
    """Raised when a document has neither `definitions` nor `components.schemas`."""

    def __init__(self, source: str | None = None) -> None:
        super().__init__("There is no definition", source)


class UnresolvedReferenceError(GeneratorError):
    """Raised when a $ref pointer does not name a schema definition."""

    def __init__(self, ref: str, definition: str | None = None) -> None:
        self.ref = ref
        self.definition = definition
        super().__init__(f"Cannot resolve reference '{ref}'", definition)


class DuplicateTitleError(GeneratorError):
    """Raised when two schema names sanitize to the same type title."""

    def __init__(self, title: str, names: list[str]) -> None:
        self.title = title
        self.names = names
        joined = ", ".join(f"'{n}'" for n in names)
        super().__init__(f"Definitions {joined} all map to type '{title}'")


class FormatterError(GeneratorError):
    """Raised when the external formatter rejects generated text."""


class OutputWriteError(GeneratorError):
    """Raised when a generated file or the output directory cannot be written.

    `title` is None when the output directory itself could not be created.
    """

    def __init__(self, path: str, title: str | None, reason: str) -> None:
        self.path = path
        self.title = title
        if title is None:
            message = f"Failed to create output directory: {reason}"
        else:
            message = f"Failed to write type '{title}': {reason}"
        super().__init__(message, path)
