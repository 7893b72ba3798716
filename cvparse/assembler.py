"""
Assemble extractor outputs into one CVRecord.
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Sequence, TypeVar

from .shared import (
    CertificationEntry,
    CVRecord,
    EducationEntry,
    PersonalInfo,
    ProjectEntry,
    SkillEntry,
    WorkExperienceEntry,
    make_entry_id,
)

T = TypeVar("T", EducationEntry, WorkExperienceEntry, CertificationEntry, ProjectEntry)

ID_PREFIXES = {
    EducationEntry: "edu",
    WorkExperienceEntry: "work",
    CertificationEntry: "cert",
    ProjectEntry: "proj",
}


def with_ids(entries: Sequence[T]) -> List[T]:
    """Copies of the entries carrying their deterministic identifiers."""
    out: List[T] = []
    for i, entry in enumerate(entries):
        prefix = ID_PREFIXES[type(entry)]
        out.append(replace(entry, id=make_entry_id(prefix, i, entry)))
    return out


def assemble(
    personal_info: PersonalInfo,
    summary: str,
    education: Sequence[EducationEntry] = (),
    work_experience: Sequence[WorkExperienceEntry] = (),
    skills: Sequence[SkillEntry] = (),
    certifications: Sequence[CertificationEntry] = (),
    projects: Sequence[ProjectEntry] = (),
) -> CVRecord:
    return CVRecord(
        personal_info=replace(personal_info, professional_summary=summary),
        education=with_ids(education),
        work_experience=with_ids(work_experience),
        skills=list(skills),
        certifications=with_ids(certifications),
        projects=with_ids(projects),
    )
