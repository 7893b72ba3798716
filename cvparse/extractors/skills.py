"""
Skills.

Skills are stateless list items: "Category: a, b, c" lines give skills in
that category, bare separated lists go under "Other".
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from ..logging_utils import LOG
from ..segmenter import SegmentedDocument
from ..shared import SkillEntry, SkillLevel
from ..vocabulary import LABEL_SKILLS

DEFAULT_CATEGORY = "Other"
MIN_SKILL_LENGTH = 2
MAX_SKILL_LENGTH = 49

CATEGORY_LINE_RE = re.compile(r"^([^:]+):\s*(.+)$")
CATEGORY_ITEM_SPLIT_RE = re.compile(r"[,;|•·]")
PLAIN_ITEM_SPLIT_RE = re.compile(r"[,;•·]")
PLAIN_LIST_MARKERS = (",", ";", "•", "·")
PAREN_SPLIT_RE = re.compile(r"[()]")

# "Python (Expert)", "Go - Advanced", "SQL: beginner"
LEVEL_SUFFIX_RE = re.compile(
    r"^(.*?)\s*(?:\(|\[|-|–|:)\s*(beginner|intermediate|advanced|expert)\s*[)\]]?$",
    re.IGNORECASE,
)


def _split_level(item: str) -> Tuple[str, Optional[SkillLevel]]:
    m = LEVEL_SUFFIX_RE.match(item.strip())
    if m and m.group(1).strip():
        return m.group(1).strip(), SkillLevel(m.group(2).capitalize())
    return item, None


def _skills_from(items_text: str, splitter: re.Pattern, category: str) -> List[SkillEntry]:
    skills: List[SkillEntry] = []
    for item in splitter.split(items_text):
        item, level = _split_level(item)
        # brackets also separate names: "Cloud (AWS" -> "Cloud", "AWS"
        for name in PAREN_SPLIT_RE.split(item):
            name = name.strip()
            if MIN_SKILL_LENGTH <= len(name) <= MAX_SKILL_LENGTH:
                skills.append(SkillEntry(
                    name=name,
                    level=level or SkillLevel.Intermediate,
                    category=category,
                ))
    return skills


def _parse_line(line: str) -> List[SkillEntry]:
    m = CATEGORY_LINE_RE.match(line)
    if m:
        return _skills_from(m.group(2), CATEGORY_ITEM_SPLIT_RE, m.group(1).strip())
    if any(marker in line for marker in PLAIN_LIST_MARKERS):
        return _skills_from(line, PLAIN_ITEM_SPLIT_RE, DEFAULT_CATEGORY)
    return []


def extract_skills(doc: SegmentedDocument) -> List[SkillEntry]:
    skills: List[SkillEntry] = []
    for lines in doc.lines_for(LABEL_SKILLS):
        for line in lines:
            skills.extend(_parse_line(line))
    LOG.debug("Skills: %d", len(skills))
    return skills
