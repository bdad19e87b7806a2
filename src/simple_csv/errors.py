"""Errors raised by the CSV scanners."""

from __future__ import annotations


class MalformedInputError(ValueError):
    """Raised when a quoted region is still open at the end of the scanned text.

    Attributes:
        offset: Index in the scanned text of the quote that opened the region.
    """

    def __init__(self, offset: int, message: str | None = None) -> None:
        self.offset = offset
        super().__init__(message or f"unterminated quoted region starting at offset {offset}")
