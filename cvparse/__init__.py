# cvparse/__init__.py

from .errors import CVParseError, DecodeFailure, ParseFailure, UnsupportedFormat
from .pipeline import decode, guess_mime_type, parse, parse_bytes, parse_text
from .shared import (
    CertificationEntry,
    CVRecord,
    EducationEntry,
    PersonalInfo,
    ProjectEntry,
    SkillEntry,
    SkillLevel,
    WorkExperienceEntry,
)

__all__ = [
    "CVParseError",
    "DecodeFailure",
    "ParseFailure",
    "UnsupportedFormat",
    "decode",
    "guess_mime_type",
    "parse",
    "parse_bytes",
    "parse_text",
    "CertificationEntry",
    "CVRecord",
    "EducationEntry",
    "PersonalInfo",
    "ProjectEntry",
    "SkillEntry",
    "SkillLevel",
    "WorkExperienceEntry",
]
