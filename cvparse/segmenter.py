"""
Section segmentation.

Header lines are recognized against the vocabulary in ``vocabulary`` and the
document is cut once into labeled, half-open line ranges. Every extractor
reads the same ranges; none re-scans the document for its own headers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .logging_utils import LOG
from .shared import is_bullet
from .vocabulary import (
    GENERIC_SECTION_HEADERS,
    LABEL_PERSONAL,
    LABEL_UNKNOWN,
    SECTION_HEADERS,
)


@dataclass(frozen=True)
class SectionRange:
    label: str
    start_line: int  # first content line
    end_line: int    # exclusive
    header: str = ""


@dataclass(frozen=True)
class SegmentedDocument:
    """Normalized text, its lines and the section ranges over them."""
    text: str
    lines: Tuple[str, ...]
    sections: Tuple[SectionRange, ...]

    def ranges_for(self, label: str) -> List[SectionRange]:
        return [s for s in self.sections if s.label == label]

    def lines_for(self, label: str) -> Iterator[List[str]]:
        """
        Yield the content lines of each section with this label, in document order.

        Ranges split only by a repeated header of the same label are yielded
        as one section, without the repeated header line.
        """
        block: List[str] = []
        prev: Optional[SectionRange] = None
        for section in self.sections:
            contiguous = (
                prev is not None
                and prev.label == label
                and section.label == label
                and section.start_line == prev.end_line + 1
            )
            if prev is not None and prev.label == label and not contiguous:
                yield block
                block = []
            if section.label == label:
                block.extend(self.lines[section.start_line:section.end_line])
            prev = section
        if prev is not None and prev.label == label:
            yield block


def _vocabulary() -> Iterator[Tuple[str, str]]:
    for label, synonyms in SECTION_HEADERS.items():
        for synonym in synonyms:
            yield label, synonym
    for synonym in GENERIC_SECTION_HEADERS:
        yield LABEL_UNKNOWN, synonym


def _normalize_header(line: str) -> str:
    return line.strip().lower().rstrip(" .:;")


def is_section_header(line: str) -> bool:
    """True if the line equals or contains any known header synonym (case-insensitive)."""
    low = _normalize_header(line)
    if not low:
        return False
    return any(low == h or h in low for _, h in _vocabulary())


def header_label(line: str) -> Optional[str]:
    """
    Section label for a header line, or None if it is not a header.

    An exact synonym match wins; otherwise the longest contained synonym,
    ties going to the earlier table entry.
    """
    low = _normalize_header(line)
    if not low:
        return None

    best: Optional[Tuple[int, str]] = None
    for label, synonym in _vocabulary():
        if low == synonym:
            return label
        if synonym in low and (best is None or len(synonym) > best[0]):
            best = (len(synonym), label)
    return best[1] if best else None


def segment(lines: List[str]) -> List[SectionRange]:
    """
    Partition lines into labeled ranges in one pass.

    - lines before the first header form the "personal" range
    - a header with the same label as the open range continues it
    - bullet lines are content, never headers
    """
    ranges: List[SectionRange] = []
    label = LABEL_PERSONAL
    header = ""
    start = 0

    def close(end: int) -> None:
        if label != LABEL_PERSONAL or end > start:
            ranges.append(SectionRange(label=label, start_line=start, end_line=end, header=header))

    for i, line in enumerate(lines):
        if is_bullet(line):
            continue
        new_label = header_label(line)
        if new_label is None:
            continue
        if new_label == label:
            # Repeated header: drop the line from the content by closing and reopening
            close(i)
            start = i + 1
            continue
        close(i)
        label, header, start = new_label, line, i + 1
        LOG.debug("Section %r starts at line %d (%r)", label, i, line)

    close(len(lines))
    return ranges


def segment_document(text: str, lines: List[str]) -> SegmentedDocument:
    return SegmentedDocument(text=text, lines=tuple(lines), sections=tuple(segment(lines)))
