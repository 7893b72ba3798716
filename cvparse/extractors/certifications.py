"""
Certifications.

One certification per bulleted line, or per long line without a colon.
Issuer, dates and credential id are picked out of the same line when
marked ("issued by", "date:", "expires", "credential id").
"""

from __future__ import annotations

import re
from typing import List, Optional

from ..logging_utils import LOG
from ..segmenter import SegmentedDocument
from ..shared import CertificationEntry, is_bullet, strip_bullet
from ..vocabulary import LABEL_CERTIFICATIONS
from .common import MONTH_NAME, YEAR_RE

MIN_PLAIN_LINE_LENGTH = 10
MIN_NAME_LENGTH = 6

ISSUER_RE = re.compile(r"\b(?:issued by|from|by)\b:?\s*([^,\n]+)", re.IGNORECASE)
DATE_RE = re.compile(r"\b(?:date|issued)\b:?\s*(\w+\s+\d{4}|\d{4})", re.IGNORECASE)
EXPIRY_RE = re.compile(
    r"\b(?:expires|expiry|expiration|valid until)\b:?\s*(\w+\s+\d{4}|\d{4})",
    re.IGNORECASE,
)
CREDENTIAL_RE = re.compile(r"\bcredential(?:\s+id)?\b\s*[:#]?\s*([A-Za-z0-9-]+)", re.IGNORECASE)
LOOSE_DATE_RE = re.compile(rf"\b{MONTH_NAME}\.?\s+\d{{4}}\b", re.IGNORECASE)

NAME_CUT_RE = re.compile(
    r"\b(?:issued by|from|by|date|issued|expires|expiry|expiration|valid until|credential)\b:?",
    re.IGNORECASE,
)


def _group(pattern: re.Pattern, text: str) -> str:
    m = pattern.search(text)
    return m.group(1).strip() if m else ""


def _loose_date(text: str) -> str:
    m = LOOSE_DATE_RE.search(text) or YEAR_RE.search(text)
    return m.group(0) if m else ""


def _parse_line(line: str) -> Optional[CertificationEntry]:
    if not (is_bullet(line) or (len(line) > MIN_PLAIN_LINE_LENGTH and ":" not in line)):
        return None

    text = strip_bullet(line)
    name = NAME_CUT_RE.split(text, maxsplit=1)[0].strip(" -–—|,;")
    if len(name) < MIN_NAME_LENGTH:
        return None

    expiry = _group(EXPIRY_RE, text)
    date_issued = _group(DATE_RE, text)
    if not date_issued:
        # first date on the line that is not the expiry
        rest = text.replace(expiry, "", 1) if expiry else text
        date_issued = _loose_date(rest[len(name):])

    return CertificationEntry(
        name=name,
        issuer=_group(ISSUER_RE, text),
        date_issued=date_issued,
        expiry_date=expiry,
        credential_id=_group(CREDENTIAL_RE, text),
    )


def extract_certifications(doc: SegmentedDocument) -> List[CertificationEntry]:
    certs: List[CertificationEntry] = []
    for lines in doc.lines_for(LABEL_CERTIFICATIONS):
        for line in lines:
            cert = _parse_line(line)
            if cert is not None:
                certs.append(cert)
    LOG.debug("Certifications: %d", len(certs))
    return certs
