"""
Work experience.

A "<Title> <Month|Year|Present> ..." line opens a new entry; the first plain
line after it names the company and bullet lines become responsibilities.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

from ..logging_utils import LOG
from ..segmenter import SegmentedDocument
from ..shared import EntryTracker, WorkExperienceBuilder, WorkExperienceEntry, is_bullet, strip_bullet
from ..vocabulary import CURRENT_MARKERS, LABEL_EXPERIENCE
from .common import MONTH_NAME, YEAR_RE, achievement_text

PRESENT = "Present"

JOB_LINE_RE = re.compile(
    r"^([A-Z][a-zA-Z\s&/]+?)\s+"
    rf"(?i:{MONTH_NAME}\b|\d{{4}}\b|Present\b)"
)

CURRENT_RE = re.compile(r"\b(?:" + "|".join(CURRENT_MARKERS) + r")\b", re.IGNORECASE)

DATE_RANGE_RE = re.compile(
    rf"({MONTH_NAME})\.?\s*(\d{{4}})\s*[-–—]\s*"
    rf"(Present|Current|Now|({MONTH_NAME})\.?\s*(\d{{4}}))",
    re.IGNORECASE,
)

MIN_RESPONSIBILITY_LENGTH = 10
MAX_COMPANY_LENGTH = 100


@dataclass(frozen=True)
class DateRange:
    start: str = ""
    end: str = ""
    is_current: bool = False


def extract_dates(text: str) -> DateRange:
    """
    Date range of a job line.

    Tries "Mon YYYY - Mon YYYY|Present" first, then any two years on the
    line. A range still running ends with "Present". Mixed forms such as
    "Jan 2020 - 2022" only match the two-year fallback.
    """
    is_current = bool(CURRENT_RE.search(text))

    m = DATE_RANGE_RE.search(text)
    if m:
        start = f"{m.group(1)} {m.group(2)}"
        if is_current:
            end = PRESENT
        elif m.group(5):
            end = f"{m.group(4)} {m.group(5)}"
        else:
            end = m.group(3)
        return DateRange(start, end, is_current)

    years = YEAR_RE.findall(text)
    if len(years) >= 2:
        return DateRange(years[0], PRESENT if is_current else years[1], is_current)

    return DateRange()


def _parse_section(lines: List[str]) -> List[WorkExperienceEntry]:
    tracker: EntryTracker[WorkExperienceBuilder] = EntryTracker()

    for line in lines:
        m = JOB_LINE_RE.match(line)
        if m:
            dates = extract_dates(line)
            tracker.begin(WorkExperienceBuilder(
                position=m.group(1).strip(),
                start_date=dates.start,
                end_date=dates.end,
                is_current=dates.is_current,
            ))
            continue

        if not tracker.building:
            continue
        work = tracker.builder

        achieved = achievement_text(line)
        if achieved is not None:
            work.achievements.append(achieved)
            continue

        if is_bullet(line):
            item = strip_bullet(line)
            if len(item) > MIN_RESPONSIBILITY_LENGTH:
                work.responsibilities.append(item)
            continue

        if not work.company and not work.responsibilities and 2 < len(line) < MAX_COMPANY_LENGTH:
            work.company = line

    tracker.flush()
    return tracker.entries


def extract_work_experience(doc: SegmentedDocument) -> List[WorkExperienceEntry]:
    entries: List[WorkExperienceEntry] = []
    for lines in doc.lines_for(LABEL_EXPERIENCE):
        entries.extend(_parse_section(lines))
    LOG.debug("Work experience entries: %d", len(entries))
    return entries
