"""
Word document decoder (.docx, and .doc as best effort).

The OOXML body is read with lxml. Anything that is not a readable OOXML
package (legacy binary .doc, truncated upload) degrades to a raw text read
instead of failing.
"""

from __future__ import annotations

from ..logging_utils import LOG
from .base import DocumentDecoder
from .docx_utils import iter_paragraph_texts
from .text_decoder import decode_text_bytes


class WordDecoder(DocumentDecoder):
    """Extracts raw paragraph text from Word documents, falling back to plain text."""

    def decode(self, content: bytes) -> str:
        try:
            return "\n".join(iter_paragraph_texts(content))
        except Exception as e:
            LOG.warning("Word text extraction failed (%s: %s), using raw text fallback",
                        type(e).__name__, e)
            return decode_text_bytes(content)
