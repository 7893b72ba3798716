"""
Parse entry points.

Dispatches to a decoder by MIME type, then runs
normalize -> segment -> extract -> assemble. Only the dispatch and decode
boundaries fail hard; anything unexpected after decoding is reported as a
ParseFailure.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from .assembler import assemble
from .decoders import get_decoder, normalize_mime_type
from .errors import DecodeFailure, ParseFailure, UnsupportedFormat
from .extractors import (
    extract_certifications,
    extract_education,
    extract_personal_info,
    extract_projects,
    extract_skills,
    extract_summary,
    extract_work_experience,
)
from .logging_utils import LOG, preview
from .normalizer import normalize, split_lines
from .segmenter import segment_document
from .shared import CVRecord
from .vocabulary import EXTENSION_MIME_TYPES


def guess_mime_type(path: Union[str, Path]) -> str:
    """MIME type for a supported file extension, or "" if unknown."""
    return EXTENSION_MIME_TYPES.get(Path(path).suffix.lower(), "")


def decode(content: bytes, mime_type: str) -> str:
    """
    Convert document bytes to text with the decoder registered for mime_type.

    Raises:
        UnsupportedFormat: no decoder for mime_type (nothing is decoded)
        DecodeFailure: the decoder raised on this input
    """
    decoder = get_decoder(mime_type)
    if decoder is None:
        raise UnsupportedFormat(mime_type)
    if not content:
        return ""
    try:
        text = decoder.decode(content)
    except Exception as e:
        LOG.error("Decoding %s failed: %s", normalize_mime_type(mime_type), e)
        raise DecodeFailure(normalize_mime_type(mime_type), str(e)) from e
    LOG.debug("Decoded %d bytes of %s into %d characters", len(content), mime_type, len(text))
    return text


def parse_text(text: str) -> CVRecord:
    """
    Extract a CVRecord from already decoded text.

    Raises:
        ParseFailure: an internal error in normalization or extraction
    """
    try:
        normalized = normalize(text)
        lines = split_lines(normalized)
        doc = segment_document(normalized, lines)
        LOG.debug("Segmented %d lines into %s", len(lines),
                  [(s.label, s.start_line, s.end_line) for s in doc.sections])

        record = assemble(
            personal_info=extract_personal_info(doc),
            summary=extract_summary(doc),
            education=extract_education(doc),
            work_experience=extract_work_experience(doc),
            skills=extract_skills(doc),
            certifications=extract_certifications(doc),
            projects=extract_projects(doc),
        )
    except Exception as e:
        LOG.exception("CV extraction failed on text starting %r", preview(text))
        raise ParseFailure(str(e)) from e

    LOG.info(
        "Parsed CV: name=%r education=%d work=%d skills=%d certifications=%d",
        record.personal_info.full_name,
        len(record.education),
        len(record.work_experience),
        len(record.skills),
        len(record.certifications),
    )
    return record


def parse_bytes(content: bytes, mime_type: str) -> CVRecord:
    return parse_text(decode(content, mime_type))


def parse(file_path: Union[str, Path], mime_type: str) -> CVRecord:
    """
    Parse a stored résumé document.

    Args:
        file_path: Location of the document
        mime_type: Declared MIME type (pdf, plain text, doc or docx)

    Returns:
        A fully formed CVRecord

    Raises:
        UnsupportedFormat: mime_type is not supported; the file is not read
        DecodeFailure: the document could not be decoded
        ParseFailure: an internal error during extraction
        FileNotFoundError: file_path does not exist
    """
    if get_decoder(mime_type) is None:
        raise UnsupportedFormat(mime_type)

    path = Path(file_path)
    LOG.debug("Parsing %s as %s", path, mime_type)
    return parse_bytes(path.read_bytes(), mime_type)
