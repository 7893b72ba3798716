"""
Document decoders, one per supported MIME type.

The built-in decoders are registered on import.
"""

from ..vocabulary import MIME_DOC, MIME_DOCX, MIME_PDF, MIME_TEXT
from .base import DocumentDecoder
from .decoder_registry import (
    get_decoder,
    is_supported,
    list_decoders,
    normalize_mime_type,
    register_decoder,
    unregister_decoder,
)
from .pdf_decoder import PdfDecoder
from .text_decoder import PlainTextDecoder
from .word_decoder import WordDecoder

register_decoder(MIME_PDF, PdfDecoder)
register_decoder(MIME_TEXT, PlainTextDecoder)
register_decoder(MIME_DOC, WordDecoder)
register_decoder(MIME_DOCX, WordDecoder)

__all__ = [
    "DocumentDecoder",
    "PdfDecoder",
    "PlainTextDecoder",
    "WordDecoder",
    "get_decoder",
    "is_supported",
    "list_decoders",
    "normalize_mime_type",
    "register_decoder",
    "unregister_decoder",
]
