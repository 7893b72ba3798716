"""
Professional summary.
"""

from __future__ import annotations

import re

from ..logging_utils import LOG, preview
from ..segmenter import SegmentedDocument
from ..vocabulary import FALLBACK_SUMMARY, LABEL_SUMMARY

MAX_SUMMARY_LINES = 10
MIN_SUMMARY_LINE_LENGTH = 20

_NUMERIC_LINE_RE = re.compile(r"^[\d\-\s]+$")


def extract_summary(doc: SegmentedDocument) -> str:
    """
    Up to ten content lines of the first summary section, joined by spaces.

    Lines of 20 characters or fewer and lines made only of digits, dashes
    and spaces are skipped. Without a summary section the fixed fallback
    sentence is returned, so the summary is never empty.
    """
    collected = []
    for lines in doc.lines_for(LABEL_SUMMARY):
        for line in lines:
            if len(collected) >= MAX_SUMMARY_LINES:
                break
            if len(line) > MIN_SUMMARY_LINE_LENGTH and not _NUMERIC_LINE_RE.match(line):
                collected.append(line)
        break

    summary = " ".join(collected)
    if not summary:
        LOG.debug("No summary section content, using fallback sentence")
        return FALLBACK_SUMMARY
    LOG.debug("Summary: %s", preview(summary))
    return summary
