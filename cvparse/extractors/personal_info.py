"""
Personal/contact information.

Each field is looked up independently over the whole document; a field
that cannot be found is left empty and never blocks the others.
"""

from __future__ import annotations

import re
from typing import List, Optional

from ..logging_utils import LOG
from ..segmenter import SegmentedDocument, is_section_header
from ..shared import PersonalInfo, clean_text
from ..vocabulary import DOCUMENT_TITLES, LOCATION_GAZETTEER

NAME_SCAN_LINES = 10

UPPER_NAME_RE = re.compile(r"^[A-Z][A-Z\s]+[A-Z]$")
TITLE_NAME_RE = re.compile(r"^(?:[A-Z][a-z]+\s+){1,4}[A-Z][a-z]+$")

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")

# One alternation so the leftmost phone-looking token wins:
# regional (+country code or trunk 0), (NNN) NNN NNNN, NNN-NNN-NNNN
PHONE_RE = re.compile(
    r"(?:\+\d{1,3}|(?<!\d)0)\s*\d{3}\s*\d{3}\s*\d{3,4}"
    r"|\(\d{3}\)\s*\d{3}[-\s]?\d{4}"
    r"|(?<!\d)\d{3}[-\s]?\d{3}[-\s]?\d{4}(?!\d)"
)

GITHUB_RE = re.compile(r"github\.com/([A-Za-z0-9-]+)", re.IGNORECASE)
LINKEDIN_RE = re.compile(r"linkedin\.com/in/([A-Za-z0-9-]+)", re.IGNORECASE)
URL_RE = re.compile(r"(?:https?://|\bwww\.)[^\s,;|<>()\"']+", re.IGNORECASE)

LOCATION_RE = re.compile(
    r"\b(?:" + "|".join(re.escape(p) for p in LOCATION_GAZETTEER) + r")\b",
    re.IGNORECASE,
)


def _first(pattern: re.Pattern, text: str) -> Optional[re.Match]:
    return pattern.search(text)


def extract_name(lines: List[str]) -> str:
    """First upper-case or title-case name-looking line among the first lines."""
    for line in lines[:NAME_SCAN_LINES]:
        low = line.lower()
        if low in DOCUMENT_TITLES or is_section_header(line):
            continue
        if UPPER_NAME_RE.match(line) and 5 < len(line) < 60:
            return line
        if TITLE_NAME_RE.match(line) and "@" not in line and "+" not in line:
            return line
    return ""


def extract_email(text: str) -> str:
    m = _first(EMAIL_RE, text)
    return m.group(0) if m else ""


def extract_phone(text: str) -> str:
    m = _first(PHONE_RE, text)
    return clean_text(m.group(0)) if m else ""


def extract_github_url(text: str) -> str:
    m = _first(GITHUB_RE, text)
    return f"https://github.com/{m.group(1)}" if m else ""


def extract_linkedin_url(text: str) -> str:
    m = _first(LINKEDIN_RE, text)
    return f"https://linkedin.com/in/{m.group(1)}" if m else ""


def extract_website_url(text: str) -> str:
    """First URL that is not a LinkedIn or GitHub profile."""
    for m in URL_RE.finditer(text):
        url = m.group(0).rstrip(".,:;!?")
        low = url.lower()
        if "linkedin.com" in low or "github.com" in low:
            continue
        if not low.startswith(("http://", "https://")):
            url = "https://" + url
        return url
    return ""


def extract_location(text: str) -> str:
    m = _first(LOCATION_RE, text)
    return m.group(0) if m else ""


def extract_personal_info(doc: SegmentedDocument) -> PersonalInfo:
    """
    Contact details for the document.

    professional_summary is left empty; the summary extractor fills it in
    at assembly time.
    """
    info = PersonalInfo(
        full_name=extract_name(list(doc.lines)),
        email=extract_email(doc.text),
        phone=extract_phone(doc.text),
        address=extract_location(doc.text),
        linkedin_url=extract_linkedin_url(doc.text),
        github_url=extract_github_url(doc.text),
        website_url=extract_website_url(doc.text),
    )
    LOG.debug("Personal info: name=%r email=%r phone=%r address=%r",
              info.full_name, info.email, info.phone, info.address)
    return info
