import io
import sys
import zipfile
from pathlib import Path
from typing import Callable, List
from xml.sax.saxutils import escape

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cvparse.normalizer import normalize, split_lines  # noqa: E402
from cvparse.segmenter import SegmentedDocument, segment_document  # noqa: E402


W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"

SAMPLE_CV = """\
JANE DOE
Nairobi, Kenya
jane.doe@example.com | +254 712 345 678
linkedin.com/in/jane-doe | github.com/janedoe | https://janedoe.dev

PROFESSIONAL SUMMARY
Backend developer focused on payment systems and reliability.
Enjoys mentoring junior developers and writing clean code.

WORK EXPERIENCE
Senior Engineer Jan 2020 - Present
Acme Corp
• Led a team of five engineers
• Shipped three major releases

EDUCATION
Bachelor of Science in Computer Science
University of Nairobi
2016 - 2020

SKILLS
Programming: Python, Go, Rust

CERTIFICATIONS
• AWS Certified Solutions Architect - Issued by Amazon Web Services, Jan 2021
"""


def make_doc(text: str) -> SegmentedDocument:
    normalized = normalize(text)
    return segment_document(normalized, split_lines(normalized))


def build_docx_bytes(paragraphs: List[str]) -> bytes:
    """Minimal OOXML package with one w:p per paragraph."""
    body = "".join(
        f'<w:p><w:r><w:t xml:space="preserve">{escape(p)}</w:t></w:r></w:p>'
        for p in paragraphs
    )
    xml = (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f'<w:document xmlns:w="{W_NS}"><w:body>{body}</w:body></w:document>'
    )
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as z:
        z.writestr("[Content_Types].xml", "<Types/>")
        z.writestr("word/document.xml", xml)
    return buf.getvalue()


@pytest.fixture
def sample_cv_text() -> str:
    return SAMPLE_CV


@pytest.fixture
def make_docx(tmp_path: Path) -> Callable[[List[str], str], Path]:
    def _make(paragraphs: List[str], name: str = "cv.docx") -> Path:
        path = tmp_path / name
        path.write_bytes(build_docx_bytes(paragraphs))
        return path

    return _make
