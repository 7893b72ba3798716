"""
Shared models and text utilities.

Defines the immutable records produced by a parse (personal info, education,
work experience, skills, certifications, projects and the assembled CVRecord)
together with the small helpers the extractors share.
"""

from __future__ import annotations

import hashlib
import re
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, TypeVar

from .vocabulary import BULLET_GLYPHS

# ------------------------- Models -------------------------

class SkillLevel(str, Enum):
    Beginner = "Beginner"
    Intermediate = "Intermediate"
    Advanced = "Advanced"
    Expert = "Expert"


@dataclass(frozen=True)
class PersonalInfo:
    full_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    linkedin_url: str = ""
    github_url: str = ""
    website_url: str = ""
    professional_summary: str = ""


@dataclass(frozen=True)
class EducationEntry:
    degree: str
    institution: str = ""
    field_of_study: str = ""
    start_year: str = ""
    end_year: str = ""
    gpa: str = ""
    achievements: str = ""
    id: str = ""


@dataclass(frozen=True)
class WorkExperienceEntry:
    position: str
    company: str = ""
    start_date: str = ""
    end_date: str = ""
    is_current: bool = False
    responsibilities: str = ""
    achievements: str = ""
    id: str = ""


@dataclass(frozen=True)
class SkillEntry:
    name: str
    level: SkillLevel = SkillLevel.Intermediate
    category: str = "Other"


@dataclass(frozen=True)
class CertificationEntry:
    name: str
    issuer: str = ""
    date_issued: str = ""
    expiry_date: str = ""
    credential_id: str = ""
    id: str = ""


@dataclass(frozen=True)
class ProjectEntry:
    name: str
    description: str = ""
    technologies: str = ""
    start_date: str = ""
    end_date: str = ""
    github_link: str = ""
    demo_link: str = ""
    outcomes: str = ""
    id: str = ""


@dataclass(frozen=True)
class CVRecord:
    """
    Assembled output of one parse call.

    Every collection is always present (possibly empty).
    """
    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    education: List[EducationEntry] = field(default_factory=list)
    work_experience: List[WorkExperienceEntry] = field(default_factory=list)
    skills: List[SkillEntry] = field(default_factory=list)
    certifications: List[CertificationEntry] = field(default_factory=list)
    projects: List[ProjectEntry] = field(default_factory=list)

    def as_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        for skill in data["skills"]:
            skill["level"] = SkillLevel(skill["level"]).value
        return data


# ------------------------- Builders -------------------------

@dataclass
class EducationBuilder:
    degree: str = ""
    institution: str = ""
    field_of_study: str = ""
    start_year: str = ""
    end_year: str = ""
    gpa: str = ""
    achievements: List[str] = field(default_factory=list)

    def finalize(self) -> EducationEntry:
        return EducationEntry(
            degree=self.degree.strip(),
            institution=self.institution.strip(),
            field_of_study=self.field_of_study.strip(),
            start_year=self.start_year,
            end_year=self.end_year,
            gpa=self.gpa,
            achievements="\n".join(self.achievements),
        )


@dataclass
class WorkExperienceBuilder:
    position: str = ""
    company: str = ""
    start_date: str = ""
    end_date: str = ""
    is_current: bool = False
    responsibilities: List[str] = field(default_factory=list)
    achievements: List[str] = field(default_factory=list)

    def finalize(self) -> WorkExperienceEntry:
        return WorkExperienceEntry(
            position=self.position.strip(),
            company=self.company.strip(),
            start_date=self.start_date,
            end_date=self.end_date,
            is_current=self.is_current,
            responsibilities="\n".join(self.responsibilities),
            achievements="\n".join(self.achievements),
        )


class ScanState(Enum):
    NO_ENTRY = "no-entry"
    BUILDING = "building"


B = TypeVar("B", EducationBuilder, WorkExperienceBuilder)


class EntryTracker(Generic[B]):
    """
    Entry-in-progress for a line-scanning extractor.

    Either NO_ENTRY, or BUILDING with a builder. Starting a new entry or
    closing the section flushes the current builder into ``entries``.
    """

    def __init__(self) -> None:
        self.state = ScanState.NO_ENTRY
        self.builder: Optional[B] = None
        self.entries: List[Any] = []

    @property
    def building(self) -> bool:
        return self.state is ScanState.BUILDING

    def begin(self, builder: B) -> B:
        self.flush()
        self.state = ScanState.BUILDING
        self.builder = builder
        return builder

    def flush(self) -> None:
        if self.state is ScanState.BUILDING and self.builder is not None:
            self.entries.append(self.builder.finalize())
        self.state = ScanState.NO_ENTRY
        self.builder = None


# ------------------------- Text helpers -------------------------

_WS_RE = re.compile(r"\s+")
_BULLET_PREFIX_RE = re.compile(r"^[" + "".join(re.escape(g) for g in BULLET_GLYPHS) + r"]\s*")


def clean_text(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    return _WS_RE.sub(" ", text or "").strip()


def is_bullet(line: str) -> bool:
    return line.startswith(BULLET_GLYPHS)


def strip_bullet(line: str) -> str:
    return _BULLET_PREFIX_RE.sub("", line, count=1).strip()


def make_entry_id(prefix: str, index: int, entry: Any) -> str:
    """
    Deterministic identifier for a multi-valued entry.

    Returns:
        "edu_0_1a2b3c4d" style ids; same content and position give the same id.
    """
    payload = repr(sorted((k, v) for k, v in asdict(entry).items() if k != "id"))
    digest = hashlib.md5(payload.encode("utf-8")).hexdigest()[:8]
    return f"{prefix}_{index}_{digest}"
