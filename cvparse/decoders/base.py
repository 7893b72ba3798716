"""
Base interface for document decoders.

A decoder turns the raw bytes of one document format into a single flat
text blob. Decoders are registered per MIME type.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class DocumentDecoder(ABC):
    """
    Abstract base class for document decoders.

    Implementations must be reentrant: one instance may be used from
    several threads at once.
    """

    @abstractmethod
    def decode(self, content: bytes) -> str:
        """
        Convert document bytes into text.

        Args:
            content: Raw bytes of the document (never empty)

        Returns:
            The document text, pages/paragraphs separated by newlines

        Raises:
            Exception: For malformed or corrupt input
        """
        ...
