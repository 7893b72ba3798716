"""
Text normalization applied to decoded documents before segmentation.
"""

from __future__ import annotations

import re
from typing import List

_MULTI_SPACE_RE = re.compile(r"  +")


def normalize(text: str) -> str:
    """
    Canonical line-oriented form of a decoded document:
    - CRLF and bare CR become LF
    - tabs become single spaces
    - runs of two or more spaces collapse to one
    - the whole blob is trimmed
    """
    text = (text or "").replace("\r\n", "\n").replace("\r", "\n")
    text = text.replace("\t", " ")
    text = _MULTI_SPACE_RE.sub(" ", text)
    return text.strip()


def split_lines(text: str) -> List[str]:
    """Stripped, non-empty lines of normalized text."""
    return [ln.strip() for ln in text.split("\n") if ln.strip()]
