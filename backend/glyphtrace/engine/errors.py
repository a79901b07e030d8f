"""Exceptions raised by the conversion engine."""

from __future__ import annotations


class GlyphTraceError(Exception):
    """Base class for every error the engine raises on bad input."""


class ParseError(GlyphTraceError, ValueError):
    """Diagram text cannot be turned into a grid."""

    def __init__(self, message: str, column: int | None = None, row: int | None = None) -> None:
        if column is not None and row is not None:
            message = f"{message} at column {column}, row {row}"
        super().__init__(message)
        self.column = column
        self.row = row


class LabelError(GlyphTraceError, ValueError):
    """A trailing ``[identifier]: {...}`` definition is malformed."""

    def __init__(self, message: str, identifier: str | None = None) -> None:
        if identifier is not None:
            message = f"[{identifier}]: {message}"
        super().__init__(message)
        self.identifier = identifier
