"""
Error types raised by the parsing engine.

Only the format-dispatch and decode boundaries fail hard. Missing fields are
never errors; extractors return empty values instead.
"""

from __future__ import annotations


class CVParseError(Exception):
    """Base class for every failure reported by cvparse."""


class UnsupportedFormat(CVParseError):
    """The declared MIME type has no registered decoder."""

    def __init__(self, mime_type: str):
        self.mime_type = mime_type
        super().__init__(f"Unsupported file type: {mime_type}")


class DecodeFailure(CVParseError):
    """The decoder for a supported type could not read the document."""

    def __init__(self, mime_type: str, message: str):
        self.mime_type = mime_type
        self.message = message
        super().__init__(f"Failed to decode {mime_type} document: {message}")


class ParseFailure(CVParseError):
    """Unexpected error while normalizing, segmenting or extracting."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Failed to parse CV: {message}")
