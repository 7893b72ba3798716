"""
Projects.

Project sections are recognized by the segmenter but not extracted yet;
the record always carries an empty project list.
"""

from __future__ import annotations

from typing import List

from ..segmenter import SegmentedDocument
from ..shared import ProjectEntry


def extract_projects(doc: SegmentedDocument) -> List[ProjectEntry]:
    return []
