"""
Plain text decoder.
"""

from __future__ import annotations

from .base import DocumentDecoder


def decode_text_bytes(content: bytes) -> str:
    # utf-8-sig drops a leading BOM; undecodable bytes become U+FFFD
    return content.decode("utf-8-sig", errors="replace")


class PlainTextDecoder(DocumentDecoder):
    """Reads UTF-8 text files."""

    def decode(self, content: bytes) -> str:
        return decode_text_bytes(content)
