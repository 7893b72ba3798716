"""
PDF decoder.

- concatenates page text in document order
- strips `(cid:N)` glyph artifacts left by fonts without a unicode map
"""

from __future__ import annotations

import io
import re

import pdfplumber

from ..logging_utils import LOG
from .base import DocumentDecoder

_CID_RE = re.compile(r"\(cid:\d+\)")


class PdfDecoder(DocumentDecoder):
    """Extracts text from PDF documents with pdfplumber."""

    def decode(self, content: bytes) -> str:
        with pdfplumber.open(io.BytesIO(content)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
        LOG.debug("PDF decoded: %d page(s)", len(pages))
        return _CID_RE.sub("", "\n".join(pages))
