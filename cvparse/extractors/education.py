"""
Education history.

Within each education section a degree line opens a new entry; the lines
that follow fill in institution, years, GPA and achievements until the
next degree line or the end of the section.
"""

from __future__ import annotations

import re
from typing import List

from ..logging_utils import LOG
from ..segmenter import SegmentedDocument
from ..shared import EducationBuilder, EducationEntry, EntryTracker
from ..vocabulary import DEGREE_KEYWORDS, INSTITUTION_KEYWORDS, LABEL_EDUCATION
from .common import YEAR_RE, achievement_text

DEGREE_RE = re.compile(r"\b(?:" + "|".join(DEGREE_KEYWORDS) + r")\b", re.IGNORECASE)
INSTITUTION_RE = re.compile(r"\b(?:" + "|".join(INSTITUTION_KEYWORDS) + r")\b", re.IGNORECASE)

# "... in Computer Science", "... of Arts, 2019": capitalized words (joined by
# "and"/"&") after a lowercase in/of, ending at at/from, a comma, a bracket,
# a dash, a year or the end of the line.
FIELD_OF_STUDY_RE = re.compile(
    r"\b(?:in|of)\s+"
    r"([A-Z][A-Za-z&]*(?:\s+(?:(?:and|&)\s+)?[A-Z][A-Za-z&]*)*)"
    r"(?=\s+(?:at|from)\b|\s*[,(|\-–—]|\s+\d{4}|\s*$)"
)
GRADUATED_RE = re.compile(r"graduated:\s*(\d{4})", re.IGNORECASE)
GPA_RE = re.compile(r"\bgpa:?\s*(\d+\.?\d*)\b", re.IGNORECASE)


def _apply_line(edu: EducationBuilder, line: str, is_degree_line: bool) -> None:
    if INSTITUTION_RE.search(line) and not is_degree_line:
        edu.institution = line

    m = GRADUATED_RE.search(line)
    if m:
        edu.end_year = m.group(1)
    else:
        years = YEAR_RE.findall(line)
        if len(years) >= 2:
            edu.start_year, edu.end_year = years[0], years[1]
        elif len(years) == 1:
            edu.end_year = years[0]

    m = GPA_RE.search(line)
    if m:
        edu.gpa = m.group(1)


def _parse_section(lines: List[str]) -> List[EducationEntry]:
    tracker: EntryTracker[EducationBuilder] = EntryTracker()

    for line in lines:
        is_degree_line = bool(DEGREE_RE.search(line))
        if is_degree_line:
            edu = tracker.begin(EducationBuilder(degree=line))
            m = FIELD_OF_STUDY_RE.search(line)
            if m:
                edu.field_of_study = m.group(1)

        if not tracker.building:
            continue

        edu = tracker.builder
        achieved = achievement_text(line)
        if achieved is not None:
            edu.achievements.append(achieved)
            continue
        _apply_line(edu, line, is_degree_line)

    tracker.flush()
    return tracker.entries


def extract_education(doc: SegmentedDocument) -> List[EducationEntry]:
    entries: List[EducationEntry] = []
    for lines in doc.lines_for(LABEL_EDUCATION):
        entries.extend(_parse_section(lines))
    LOG.debug("Education entries: %d", len(entries))
    return entries
