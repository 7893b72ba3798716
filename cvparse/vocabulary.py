"""
Controlled vocabularies used by the segmenter and the field extractors.

Everything here is plain data so tests can assert against the exact word
lists and callers can extend them without touching extractor logic.
"""

from __future__ import annotations

from typing import Dict, Tuple

# ------------------------- MIME types -------------------------

MIME_PDF = "application/pdf"
MIME_TEXT = "text/plain"
MIME_DOC = "application/msword"
MIME_DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

SUPPORTED_MIME_TYPES: Tuple[str, ...] = (MIME_PDF, MIME_TEXT, MIME_DOC, MIME_DOCX)

EXTENSION_MIME_TYPES: Dict[str, str] = {
    ".pdf": MIME_PDF,
    ".txt": MIME_TEXT,
    ".doc": MIME_DOC,
    ".docx": MIME_DOCX,
}

# ------------------------- Section headers -------------------------

LABEL_PERSONAL = "personal"
LABEL_SUMMARY = "summary"
LABEL_EDUCATION = "education"
LABEL_EXPERIENCE = "experience"
LABEL_SKILLS = "skills"
LABEL_CERTIFICATIONS = "certifications"
LABEL_PROJECTS = "projects"
LABEL_UNKNOWN = "unknown"

# Order matters only to break ties between equally long synonyms.
SECTION_HEADERS: Dict[str, Tuple[str, ...]] = {
    LABEL_SUMMARY: (
        "professional summary",
        "summary",
        "profile",
        "about me",
        "objective",
        "career objective",
        "professional profile",
    ),
    LABEL_EDUCATION: (
        "education",
        "academic background",
        "academic qualifications",
        "qualifications",
        "academic",
    ),
    LABEL_EXPERIENCE: (
        "professional experience",
        "work experience",
        "experience",
        "employment history",
        "employment",
        "career history",
        "work history",
    ),
    LABEL_SKILLS: (
        "skills",
        "core competencies",
        "technical skills",
        "competencies",
        "soft skills",
        "key skills",
    ),
    LABEL_CERTIFICATIONS: (
        "certifications",
        "certificates",
        "programs, training & certifications",
        "training",
        "professional development",
        "programs",
    ),
    LABEL_PROJECTS: (
        "projects",
        "portfolio",
    ),
}

# Recognized as section boundaries but not extracted.
GENERIC_SECTION_HEADERS: Tuple[str, ...] = (
    "personal values",
    "references",
    "referees",
    "testimonials",
)

# Document titles that are never a person's name.
DOCUMENT_TITLES: Tuple[str, ...] = ("curriculum vitae", "cv", "resume", "résumé")

# ------------------------- Field keywords -------------------------

DEGREE_KEYWORDS: Tuple[str, ...] = (
    "bachelor", "bachelors", "master", "masters", "phd", "doctorate",
    "bsc", "msc", "ba", "ma", "bba", "mba", "bcom", "bbit", "btech",
    "diploma", "certificate", "degree", "kcse",
)

INSTITUTION_KEYWORDS: Tuple[str, ...] = (
    "university", "college", "school", "institute", "academy", "polytechnic",
)

# Known place names matched verbatim; not a geocoder.
LOCATION_GAZETTEER: Tuple[str, ...] = (
    "Kenya", "Nairobi", "Mombasa", "Kisumu", "Eldoret",
    "Nakuru", "Thika", "Nyeri", "Machakos",
)

CURRENT_MARKERS: Tuple[str, ...] = ("present", "current", "ongoing", "now")

BULLET_GLYPHS: Tuple[str, ...] = ("•", "-", "*")

ACHIEVEMENT_LABELS: Tuple[str, ...] = ("achievements", "achievement", "awards", "honors", "honours")

FALLBACK_SUMMARY = "Professional seeking new opportunities"
