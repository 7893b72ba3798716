"""
Field extractors.

Each extractor reads a SegmentedDocument and returns its field group:
best-effort, never raising for missing data.
"""

from .certifications import extract_certifications
from .education import extract_education
from .experience import DateRange, extract_dates, extract_work_experience
from .personal_info import extract_personal_info
from .projects import extract_projects
from .skills import extract_skills
from .summary import extract_summary

__all__ = [
    "DateRange",
    "extract_certifications",
    "extract_dates",
    "extract_education",
    "extract_personal_info",
    "extract_projects",
    "extract_skills",
    "extract_summary",
    "extract_work_experience",
]
